import io

from trainlog.capitals import capitals_first, main, write_capitals_first


def test_capitals_first_splits_and_keeps_order():
    words = ["Ahoj", "svete", "Brno", "pes"]
    assert capitals_first(words) == (["Ahoj", "Brno"], ["svete", "pes"])


def test_capitals_first_non_ascii_is_not_capital():
    assert capitals_first(["Čau", "Zed"]) == (["Zed"], ["Čau"])


def test_capitals_first_digits_go_to_rest():
    assert capitals_first(["1abc"]) == ([], ["1abc"])


def test_capitals_first_keeps_every_word():
    words = ["a", "B", "c", "D", "e"]
    capitals, others = capitals_first(words)
    assert sorted(capitals + others) == sorted(words)


def test_write_capitals_first_layout():
    target = io.StringIO()
    write_capitals_first(io.StringIO("jedna Dva tri\nCtyri"), target)
    assert target.getvalue() == "Dva\nCtyri\n\n\njedna\ntri\n"


def test_write_capitals_first_splits_long_words():
    target = io.StringIO()
    long_word = "A" * 14 + "bc"
    write_capitals_first(io.StringIO(long_word), target)
    assert target.getvalue() == "A" * 14 + "\n\n\nbc\n"


def test_write_capitals_first_empty_input():
    target = io.StringIO()
    write_capitals_first(io.StringIO(""), target)
    assert target.getvalue() == "\n\n"


def test_main_writes_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "in.txt").write_text("mala Velka", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("in.txt\n"))
    assert main([]) == 0
    assert (tmp_path / "Hotovo.txt").read_text(encoding="utf-8") == "Velka\n\n\nmala\n"


def test_main_missing_input(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("nope.txt\n"))
    assert main([]) == -1
    assert "Neotevrel.." in capsys.readouterr().out