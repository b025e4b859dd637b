"""Write words starting with a capital letter first, then the remaining words."""

from __future__ import annotations

import sys
from typing import IO, Iterable, Optional, Sequence

from trainlog.reverse import _Scanner

WORD_WIDTH = 14
NAME_WIDTH = 19
OUTPUT_NAME = "Hotovo.txt"


def _is_capitalised(word: str) -> bool:
    return bool(word) and "A" <= word[0] <= "Z"


def capitals_first(words: Iterable[str]) -> tuple[list[str], list[str]]:
    """Split words into those starting with A-Z and the rest, keeping order."""
    capitals: list[str] = []
    others: list[str] = []
    for word in words:
        (capitals if _is_capitalised(word) else others).append(word)
    return capitals, others


def write_capitals_first(source: IO[str], target: IO[str]) -> None:
    """Copy words from *source* to *target*, capitalised ones first.

    Words longer than fourteen characters are split into pieces of that size.
    """
    scanner = _Scanner(source.read())
    capitals, others = capitals_first(iter(lambda: scanner.word(WORD_WIDTH), None))
    for word in capitals:
        target.write(word + "\n")
    target.write("\n\n")
    for word in others:
        target.write(word + "\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask for an input file and write the reordered words to Hotovo.txt."""
    print("Zadej nazev souboru: ", end="")
    name = _Scanner(sys.stdin.readline()).word(NAME_WIDTH)
    try:
        if name is None:
            raise FileNotFoundError(name)
        source = open(name, encoding="utf-8")
    except OSError:
        print("Neotevrel..")
        return -1
    with source:
        try:
            target = open(OUTPUT_NAME, "w", encoding="utf-8")
        except OSError:
            print("Neotevrel..")
            return -1
        with target:
            write_capitals_first(source, target)
    return 0


if __name__ == "__main__":
    sys.exit(main())