import io
import sys
from unittest import mock

import pytest

from trainlog.app import (
    MAX_TRACKED_ACTIVITIES,
    compute_statistics,
    clear_screen,
    format_statistics,
    help_text,
    main,
    menu_text,
    remove_interactive,
)
from trainlog.diary import Diary, TrainingUnit


def _diary(*units):
    diary = Diary()
    for unit in units:
        diary.add(TrainingUnit(*unit))
    return diary


def _reader(*words):
    items = iter(words)
    return lambda: next(items, None)


SAMPLE = (
    ("2024-10-12", "plavani", 100, 7),
    ("2024-10-13", "posilovna", 45, 9),
    ("2024-10-14", "plavani", 60, 9),
)


def test_statistics_totals_and_averages():
    stats = compute_statistics(_diary(*SAMPLE))
    assert stats.count == len(SAMPLE)
    assert stats.total_duration == sum(u[2] for u in SAMPLE)
    assert stats.total_intensity == sum(u[3] for u in SAMPLE)
    assert stats.average_duration == float(stats.total_duration // stats.count)
    assert stats.average_intensity == float(stats.total_intensity // stats.count)


def test_statistics_first_maximum_wins():
    stats = compute_statistics(_diary(*SAMPLE))
    assert stats.hardest == TrainingUnit(*SAMPLE[1])
    assert stats.longest == TrainingUnit(*SAMPLE[0])


def test_statistics_per_activity_in_first_seen_order():
    stats = compute_statistics(_diary(*SAMPLE))
    names = [entry.activity for entry in stats.activities]
    assert names == ["plavani", "posilovna"]
    swim = stats.activities[0]
    assert swim.count == 2
    assert swim.total_duration == 160
    assert swim.max_duration == 100


def test_statistics_track_at_most_ten_activities():
    units = [("2024-01-01", f"a{i}", 10, 5) for i in range(MAX_TRACKED_ACTIVITIES + 2)]
    stats = compute_statistics(_diary(*units))
    assert len(stats.activities) == MAX_TRACKED_ACTIVITIES
    assert stats.count == len(units)


def test_statistics_of_empty_diary_raise():
    with pytest.raises(ValueError):
        compute_statistics(Diary())


def test_format_statistics_contains_report_lines():
    text = format_statistics(compute_statistics(_diary(*SAMPLE)))
    assert text.startswith("\n--- STATISTIKY DENIKU ---\n")
    assert "Celkovy pocet treninku: 3\n" in text
    assert "Nejtezsi trenink: 2024-10-13 - posilovna (Narocnost: 9/10)" in text
    assert "Nejdelsi trenink: 2024-10-12 - plavani (Delka: 100 minut)" in text
    assert "plavani: 2 treninku\n" in text


def test_help_and_menu_texts():
    assert "Priklad platneho radku: 2024-10-12 plavani 100 7" in help_text()
    assert "*  [6] - ULOZ STAV DENIKU                   *" in menu_text()
    assert menu_text().startswith("\n")


def test_main_clears_screen_with_system_command(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("Y\n0\n"))
    with mock.patch("subprocess.run") as run:
        code = main([])
        before = run.call_count
        clear_screen()
    assert code == 0
    assert before >= 1
    assert run.call_count == before + 1
    assert run.call_args.args[0] in ("cls", "clear")
    assert "Konec programu." in capsys.readouterr().out


def test_remove_interactive_removes_named_unit():
    diary = _diary(*SAMPLE)
    out = io.StringIO()
    removed = remove_interactive(diary, "2024-10-12", _reader("plavani"), out)
    assert removed == TrainingUnit(*SAMPLE[0])
    assert len(diary) == len(SAMPLE) - 1
    assert "Jednotka byla uspesne odstranena." in out.getvalue()


def test_remove_interactive_retry_then_success():
    diary = _diary(*SAMPLE)
    out = io.StringIO()
    removed = remove_interactive(
        diary, "2024-10-13", _reader("sauna", "y", "posilovna"), out
    )
    assert removed == TrainingUnit(*SAMPLE[1])
    assert "Chyba: Aktivita 'sauna'" in out.getvalue()


def test_remove_interactive_cancel():
    diary = _diary(*SAMPLE)
    out = io.StringIO()
    assert remove_interactive(diary, "2024-10-13", _reader("sauna", "N"), out) is None
    assert len(diary) == len(SAMPLE)


def test_remove_interactive_bad_answer_reprompts():
    diary = _diary(*SAMPLE)
    out = io.StringIO()
    removed = remove_interactive(
        diary, "2024-10-13", _reader("sauna", "x", "posilovna"), out
    )
    assert removed == TrainingUnit(*SAMPLE[1])
    assert "Neplatna odpoved" in out.getvalue()


def test_remove_interactive_no_match_and_empty():
    out = io.StringIO()
    assert remove_interactive(_diary(*SAMPLE), "2000-01-01", _reader(), out) is None
    assert "nebyla nalezena zadna treninkova jednotka" in out.getvalue()
    out = io.StringIO()
    assert remove_interactive(Diary(), "2000-01-01", _reader(), out) is None
    assert "Denik je prazdny, nelze nic odstranit." in out.getvalue()


def _run(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    with mock.patch("subprocess.run"):
        return main([])


def test_main_empty_diary_then_quit(monkeypatch, capsys):
    code = _run(monkeypatch, "Y\n0\n")
    output = capsys.readouterr().out
    assert code == 0
    assert "Prazdny denik je k dispozici." in output
    assert "Konec programu." in output


def test_main_missing_file_fails(monkeypatch, capsys, tmp_path):
    monkeypatch.chdir(tmp_path)
    code = _run(monkeypatch, "N\nmissing.txt\n")
    output = capsys.readouterr().out
    assert code == 1
    assert "Soubor se nepodarilo otevrit.." in output
    assert "Soubor neobsahuje platna data" in output


def test_main_add_and_save(monkeypatch, capsys, tmp_path):
    monkeypatch.chdir(tmp_path)
    script = "Y\n3\n2024-10-12\nplavani\n100\n7\n\n\n6\nout.txt\n\n\n0\n"
    code = _run(monkeypatch, script)
    output = capsys.readouterr().out
    assert code == 0
    assert "Jednotka byla uspesne pridana do deniku" in output
    saved = (tmp_path / "out.txt").read_text(encoding="utf-8").splitlines()
    assert len(saved) == 1
    assert saved[0].split() == ["2024-10-12", "plavani", "100", "7"]


def test_main_loads_file_and_shows_statistics(monkeypatch, capsys, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "data.txt").write_text(
        "2024-10-12 plavani 100 7\n2024-10-13 posilovna 45 9\n", encoding="utf-8"
    )
    code = _run(monkeypatch, "N\ndata.txt\n5\n\n\n0\n")
    output = capsys.readouterr().out
    assert code == 0
    assert "Soubor byl nacten." in output
    assert "Celkovy pocet treninku: 2" in output


def test_main_rejects_invalid_choice_and_unit(monkeypatch, capsys):
    script = "Y\n9\n\n\n3\n2024-10-12\nbeh\n30\n5\n\n\n0\n"
    code = _run(monkeypatch, script)
    output = capsys.readouterr().out
    assert code == 0
    assert "Neplatna volba, prosim zadejte cislo mezi 0 a 6." in output
    assert "Neplatna aktivita: beh" in output
    assert "Neplatna treninkova jednotka! Zkuste to znovu." in output