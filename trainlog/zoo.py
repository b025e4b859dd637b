"""Zoo records: read, sort by age and look up the youngest animal of a pavilion."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import IO, Iterable, Optional, Sequence

from trainlog.reverse import _Scanner

DEFAULT_INPUT = "OPRAVNYTEST.txt"
FIELD_WIDTH = 14
SEARCHED_PAVILION = 5

TABLE_HEADER = (
    "Jmeno          Rod          Vek        pohlavi       pavilon\n"
    + "-" * 72
    + "\n"
)


@dataclass(frozen=True)
class Animal:
    """One animal of the zoo."""

    name: str
    genus: str
    age: int
    sex: int
    pavilion: int


def read_animals(stream: IO[str], limit: int) -> list[Animal]:
    """Read at most *limit* animals, stopping at the first malformed record."""
    scanner = _Scanner(stream.read())
    animals: list[Animal] = []
    while len(animals) < limit:
        name = scanner.word(FIELD_WIDTH)
        genus = scanner.word(FIELD_WIDTH) if name is not None else None
        age = scanner.integer() if genus is not None else None
        sex = scanner.integer() if age is not None else None
        pavilion = scanner.integer() if sex is not None else None
        if pavilion is None:
            break
        animals.append(Animal(name, genus, age, sex, pavilion))
    return animals


def format_table(animals: Iterable[Animal]) -> str:
    """Return the animals as a table with a header."""
    rows = "".join(
        f"{a.name:<15}{a.genus:<14}{a.age:<13d}{a.sex:<13d}{a.pavilion}\n"
        for a in animals
    )
    return TABLE_HEADER + rows


def sort_by_age(animals: Iterable[Animal]) -> list[Animal]:
    """Return the animals ordered from youngest, keeping the order of equal ages."""
    return sorted(animals, key=lambda animal: animal.age)


def find_by_pavilion(animals: Iterable[Animal], pavilion: int) -> Optional[Animal]:
    """Return the first animal living in *pavilion*, or None."""
    return next((a for a in animals if a.pavilion == pavilion), None)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """List the animals, sort them and report the youngest in pavilion 5."""
    args = sys.argv[1:] if argv is None else list(argv)
    path = args[0] if args else DEFAULT_INPUT
    out = sys.stdout
    try:
        with open(path, encoding="utf-8") as stream:
            scanner_text = stream.read()
    except OSError:
        out.write("neotevrel")
        return -1
    scanner = _Scanner(scanner_text)
    count = scanner.integer()
    if count is None:
        out.write("Nenacteno")
        return -2
    rest = scanner_text[scanner_text.find(str(count)) + len(str(count)):]
    animals = read_animals(_text_stream(rest), max(count, 0))

    out.write(f"pocet: {len(animals)}\n\n")
    out.write(format_table(animals))
    out.write("\n\n")
    animals = sort_by_age(animals)
    out.write("\n\n")
    out.write(format_table(animals))
    out.write("\n\n")

    youngest = find_by_pavilion(animals, SEARCHED_PAVILION)
    if youngest is not None:
        out.write(
            f"Nejmladsi zvire z pavilonu {SEARCHED_PAVILION} je {youngest.name} "
            f"a jeho vek: {youngest.age}"
        )
    else:
        out.write(f"Zvire z pavilonu {SEARCHED_PAVILION} tu neni,.....")
    return 0


def _text_stream(text: str) -> IO[str]:
    import io

    return io.StringIO(text)


if __name__ == "__main__":
    sys.exit(main())