"""Read an unknown number of decimal numbers and list them in reverse order."""

from __future__ import annotations

import math
import re
import struct
import sys
from typing import IO, Iterable, Optional, Sequence

DEFAULT_INPUT = "cviceni-pr5-02-data.txt"
BANNER = "YES!!!!!!!!!!"

_WHITESPACE = re.compile(r"\s*")
_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_NUMBER = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.ASCII | re.IGNORECASE,
)


def _single(value: float) -> float:
    """Round *value* to single precision."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class _Scanner:
    """Reads whitespace-separated fields from text, stopping at the first mismatch."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip_space(self) -> None:
        self._pos = _WHITESPACE.match(self._text, self._pos).end()

    def _take(self, pattern: re.Pattern[str]) -> Optional[str]:
        self._skip_space()
        match = pattern.match(self._text, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return match.group()

    def word(self, width: int) -> Optional[str]:
        return self._take(re.compile(r"\S{1,%d}" % width))

    def integer(self) -> Optional[int]:
        token = self._take(_INTEGER)
        return None if token is None else int(token)

    def number(self) -> Optional[float]:
        token = self._take(_NUMBER)
        return None if token is None else _single(float(token))


def read_floats(stream: IO[str]) -> list[float]:
    """Read single-precision numbers from *stream* until one cannot be parsed."""
    scanner = _Scanner(stream.read())
    return list(iter(scanner.number, None))


def reversed_lines(values: Iterable[float]) -> list[str]:
    """Return the values formatted with two decimals, last one first."""
    return [f"{value:.2f}" for value in reversed(list(values))]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the numbers of the input file in reverse order."""
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else DEFAULT_INPUT
    print(BANNER + "\n")
    try:
        with open(path, encoding="utf-8") as stream:
            values = read_floats(stream)
    except OSError:
        print("Neotevrel soubor..")
        return -1
    if not values:
        print("Nenacetl cislo..")
        return -2
    for line in reversed_lines(values):
        print(line)
    print("\n\n" + BANNER)
    return 0


if __name__ == "__main__":
    sys.exit(main())