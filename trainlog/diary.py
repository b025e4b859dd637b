"""Training diary: validated training units kept in insertion order."""

from __future__ import annotations

import re
import string
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterator

ALLOWED_ACTIVITIES: tuple[str, ...] = (
    "plavani",
    "posilovna",
    "strecink",
    "sauna",
    "masaz",
)

DATE_WIDTH = 10
ACTIVITY_WIDTH = 14

TABLE_HEADER = (
    "==============================Treninkovy denik==================================\n"
    "Datum                  Aktivita               Delka (min)              Narocnost\n"
    "================================================================================\n"
)

EMPTY_MESSAGE = "Denik je prazdny."


class InvalidUnitError(ValueError):
    """Raised when a training unit fails validation."""


@dataclass(frozen=True)
class TrainingUnit:
    """One training session."""

    date: str
    activity: str
    duration: int
    intensity: int


def is_valid_date(text: str) -> bool:
    """Return True if *text* has the shape YYYY-MM-DD (digits and dashes only)."""
    if len(text) != DATE_WIDTH or text[4] != "-" or text[7] != "-":
        return False
    return all(
        ch in string.digits for pos, ch in enumerate(text) if pos not in (4, 7)
    )


def is_valid_activity(name: str) -> bool:
    """Return True if *name* is one of the allowed activities."""
    return name in ALLOWED_ACTIVITIES


def is_valid_duration(minutes: int) -> bool:
    """Return True if the duration is positive."""
    return minutes > 0


def is_valid_intensity(value: int) -> bool:
    """Return True if the intensity lies between 1 and 10 inclusive."""
    return 1 <= value <= 10


def validate_unit(date: str, activity: str, duration: int, intensity: int) -> TrainingUnit:
    """Check every field and build a unit, raising InvalidUnitError on the first bad one."""
    if not is_valid_date(date):
        raise InvalidUnitError(f"Chybny format data: {date}")
    if not is_valid_activity(activity):
        raise InvalidUnitError(f"Neplatna aktivita: {activity}")
    if not is_valid_duration(duration):
        raise InvalidUnitError(f"Chybna delka trvani: {duration} minut")
    if not is_valid_intensity(intensity):
        raise InvalidUnitError(f"Chybna narocnost: {intensity}/10")
    return TrainingUnit(date, activity, duration, intensity)


_WHITESPACE = re.compile(r"\s*")
_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)


class _Scanner:
    """Reads whitespace-separated fields with scanf-like width limits."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _skip_space(self) -> None:
        self._pos = _WHITESPACE.match(self._text, self._pos).end()

    def word(self, width: int) -> str | None:
        self._skip_space()
        match = re.compile(r"\S{1,%d}" % width).match(self._text, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return match.group()

    def integer(self) -> int | None:
        self._skip_space()
        match = _INTEGER.match(self._text, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return int(match.group())

    def record(self) -> tuple[str, str, int, int] | None:
        date = self.word(DATE_WIDTH)
        if date is None:
            return None
        activity = self.word(ACTIVITY_WIDTH)
        if activity is None:
            return None
        duration = self.integer()
        if duration is None:
            return None
        intensity = self.integer()
        if intensity is None:
            return None
        return date, activity, duration, intensity


def _format_row(unit: TrainingUnit) -> str:
    return (
        f"{unit.date:<23} {unit.activity:<25} "
        f"{unit.duration:<18d} {unit.intensity:>5d}"
    )


class Diary:
    """An ordered collection of training units."""

    def __init__(self) -> None:
        self._units: list[TrainingUnit] = []

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[TrainingUnit]:
        return iter(self._units)

    def is_empty(self) -> bool:
        return not self._units

    def add(self, unit: TrainingUnit) -> None:
        """Append a unit at the end of the diary."""
        self._units.append(unit)

    def entries_on(self, date: str) -> list[TrainingUnit]:
        """Return all units recorded on *date*, in diary order."""
        return [unit for unit in self._units if unit.date == date]

    def remove(self, date: str, activity: str) -> TrainingUnit:
        """Remove and return the first unit matching date and activity."""
        for position, unit in enumerate(self._units):
            if unit.date == date and unit.activity == activity:
                del self._units[position]
                return unit
        raise KeyError(
            f"Jednotka s aktivitou '{activity}' pro dane datum nebyla nalezena."
        )

    def load(self, path: str | Path, out: IO[str] | None = None) -> int:
        """Read units from a text file, reporting rejected ones to *out*.

        Reading stops at the first record that cannot be parsed.
        Returns the number of units added.
        """
        if out is None:
            out = sys.stdout
        text = Path(path).read_text(encoding="utf-8")
        scanner = _Scanner(text)
        added = 0
        while (record := scanner.record()) is not None:
            try:
                unit = validate_unit(*record)
            except InvalidUnitError as error:
                print(error, file=out)
                continue
            self.add(unit)
            added += 1
        return added

    def format_table(self) -> str:
        """Return the diary as a table with a header."""
        if self.is_empty():
            return EMPTY_MESSAGE + "\n"
        rows = "".join(f"{_format_row(unit)}/10\n" for unit in self._units)
        return TABLE_HEADER + rows

    def save(self, path: str | Path) -> None:
        """Write all units to *path* without a header, one per line."""
        if self.is_empty():
            raise ValueError(EMPTY_MESSAGE)
        with open(path, "w", encoding="utf-8") as handle:
            for unit in self._units:
                handle.write(_format_row(unit) + "\n")