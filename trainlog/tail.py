"""Keep only the last n numbers of a counted input file."""

from __future__ import annotations

import sys
from collections import deque
from typing import IO, Optional, Sequence

from trainlog.reverse import _Scanner

DEFAULT_INPUT = "data10k.txt"


def read_last(stream: IO[str], n: int) -> list[float]:
    """Read a count followed by that many numbers and return the last *n* of them.

    A non-positive *n* keeps every number.
    """
    scanner = _Scanner(stream.read())
    count = scanner.integer()
    if count is None:
        print("Nenacetl delku ze souboru..")
        return []
    window: deque[float] = deque(maxlen=n if n > 0 else None)
    for _ in range(count):
        value = scanner.number()
        if value is None:
            print("Konec..")
            break
        window.append(value)
    return list(window)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask how many trailing numbers to show and print them."""
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else DEFAULT_INPUT
    print("Kolik poslednich prvku chces vypsat? ", end="")
    n = _Scanner(sys.stdin.readline()).integer() or 0
    print("-" * 37)
    try:
        with open(path, encoding="utf-8") as stream:
            values = read_last(stream, n)
    except OSError:
        print("Neotevrel soubor..")
        return -1
    for value in values:
        print(f"{value:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())