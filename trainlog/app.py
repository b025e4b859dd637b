"""Interactive training diary: menu, statistics and guided removal."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from dataclasses import dataclass, field
from typing import IO, Callable, Optional, Sequence

from trainlog.diary import (
    ACTIVITY_WIDTH,
    DATE_WIDTH,
    Diary,
    InvalidUnitError,
    TrainingUnit,
    validate_unit,
)

MAX_TRACKED_ACTIVITIES = 10
FILENAME_WIDTH = 20
SAVE_NAME_WIDTH = 49
CHOICE_WIDTH = 19

EMPTY_STATS_MESSAGE = "Denik je prazdny, nejsou dostupne zadne statistiky."


@dataclass
class ActivityStats:
    """Totals for one kind of activity."""

    activity: str
    count: int = 0
    total_duration: int = 0
    max_duration: int = 0

    @property
    def average_duration(self) -> float:
        """Average duration, truncated to whole minutes."""
        return float(self.total_duration // self.count)


@dataclass
class Statistics:
    """Summary of a whole diary."""

    count: int = 0
    total_duration: int = 0
    total_intensity: int = 0
    hardest: Optional[TrainingUnit] = None
    longest: Optional[TrainingUnit] = None
    activities: list[ActivityStats] = field(default_factory=list)

    @property
    def average_duration(self) -> float:
        """Average duration, truncated to whole minutes."""
        return float(self.total_duration // self.count)

    @property
    def average_intensity(self) -> float:
        """Average intensity, truncated to a whole number."""
        return float(self.total_intensity // self.count)


def compute_statistics(diary: Diary) -> Statistics:
    """Summarise the diary; at most ten distinct activities are tracked."""
    if diary.is_empty():
        raise ValueError(EMPTY_STATS_MESSAGE)
    stats = Statistics()
    hardest_value = 0
    longest_value = 0
    by_name: dict[str, ActivityStats] = {}
    for unit in diary:
        stats.count += 1
        stats.total_duration += unit.duration
        stats.total_intensity += unit.intensity
        if unit.intensity > hardest_value:
            hardest_value = unit.intensity
            stats.hardest = unit
        if unit.duration > longest_value:
            longest_value = unit.duration
            stats.longest = unit
        entry = by_name.get(unit.activity)
        if entry is None:
            if len(stats.activities) >= MAX_TRACKED_ACTIVITIES:
                continue
            entry = ActivityStats(unit.activity, max_duration=unit.duration)
            by_name[unit.activity] = entry
            stats.activities.append(entry)
        entry.count += 1
        entry.total_duration += unit.duration
        entry.max_duration = max(entry.max_duration, unit.duration)
    return stats


def format_statistics(stats: Statistics) -> str:
    """Render statistics as the report text."""
    hardest = stats.hardest
    longest = stats.longest
    lines = [
        "",
        "--- STATISTIKY DENIKU ---",
        f"Celkovy pocet treninku: {stats.count}",
        f"Celkovy cas vsech treninku: {stats.total_duration} minut",
        f"Prumerna delka treninku: {stats.average_duration:.2f} minut",
        f"Prumerna narocnost: {stats.average_intensity:.2f} / 10",
        "Nejtezsi trenink: {} - {} (Narocnost: {}/10)".format(
            hardest.date if hardest else "",
            hardest.activity if hardest else "",
            hardest.intensity if hardest else 0,
        ),
        "Nejdelsi trenink: {} - {} (Delka: {} minut)".format(
            longest.date if longest else "",
            longest.activity if longest else "",
            longest.duration if longest else 0,
        ),
        "",
        "--- Pocet treninku podle aktivit ---",
    ]
    for entry in stats.activities:
        lines.append(f"{entry.activity}: {entry.count} treninku")
        lines.append(f"  - Prumerna delka treninku: {entry.average_duration:.2f} minut")
        lines.append(f"  - Nejvetsi delka treninku: {entry.max_duration} minut")
    return "\n".join(lines) + "\n"


_RULE = "=" * 79


def help_text() -> str:
    """Return the help screen."""
    return "\n".join(
        [
            _RULE,
            "                      NAPOVEDA K POUZIVANI APLIKACE      ",
            _RULE,
            "Na kazdem radku se nachazi data k treninkove jednotce v nasledujicim poradi:",
            "",
            "1. DATUM:         zadavej ve tvaru: YYYY-MM-DD",
            "2. AKTIVITA:      klicova slova: plavani, posilovna, strecink, masaz, sauna",
            "3. DELKA TRVANI:  delka treninku uvedena v minutach (cela cisla)",
            "4. NAROCNOST:     RPE = Rate of Perceived Exertion; ciselna hodnota v rozsahu 1-10",
            "",
            "Priklad platneho radku: 2024-10-12 plavani 100 7",
            "",
            "Pokud je format souboru spatny, vypise se chybove hlaseni.",
            "Doporucujeme pravidelne zaznamenavat sve treninky pro lepsi prehled.",
            "Pro pridani nove jednotky muzete vyuzit funkci denikPridatJednotku.",
            "Caste chyby: zkontrolujte format datumu a typ aktivity.",
            _RULE,
        ]
    ) + "\n"


def menu_text() -> str:
    """Return the main menu."""
    stars = "*" * 45
    return "\n".join(
        [
            "",
            stars,
            "*         APLIKACE - TRENINKOVY DENIK       *",
            stars,
            "*  [0] - KONEC                              *",
            "*  [1] - NAPOVEDA                           *",
            "*  [2] - VYPIS DENIKU                       *",
            "*  [3] - PRIDAT JEDNOTKU                    *",
            "*  [4] - ODSTRANIT JEDNOTKU                 *",
            "*  [5] - STATISTIKY                         *",
            "*  [6] - ULOZ STAV DENIKU                   *",
            stars,
        ]
    ) + "\n"


def clear_screen() -> None:
    """Clear the terminal using the system command."""
    command = "cls" if os.name == "nt" else "clear"
    subprocess.run(command, shell=True, check=False)


def remove_interactive(
    diary: Diary,
    date: str,
    read: Callable[[], Optional[str]],
    out: IO[str],
) -> Optional[TrainingUnit]:
    """Show the units on *date*, ask which activity to remove, and remove it.

    *read* returns the next input word, or None at end of input.
    Returns the removed unit, or None when nothing was removed.
    """
    if diary.is_empty():
        print("Denik je prazdny, nelze nic odstranit.", file=out)
        return None

    print(f"Nasledujici treninkove jednotky odpovidaji zadanemu datu {date}:", file=out)
    matches = diary.entries_on(date)
    for unit in matches:
        print(
            f"Aktivita: {unit.activity}, Delka: {unit.duration} min, "
            f"Narocnost: {unit.intensity}/10",
            file=out,
        )
    if not matches:
        print("Pro zadane datum nebyla nalezena zadna treninkova jednotka.", file=out)
        return None

    while True:
        print("Zadejte presny nazev aktivity k odstraneni: ", end="", file=out)
        activity = read()
        if activity is None:
            return None
        if any(unit.activity == activity for unit in matches):
            break
        print(
            f"Chyba: Aktivita '{activity}' pro zadane datum neexistuje. "
            "Chcete zadat jinou aktivitu? (Y/N): ",
            end="",
            file=out,
        )
        answer = read()
        if answer is None:
            return None
        letter = answer[0]
        if letter in "Nn":
            return None
        if letter not in "Yy":
            print(
                "Neplatna odpoved, prosim zadejte Y pro opravu nebo N pro zruseni.",
                file=out,
            )

    try:
        removed = diary.remove(date, activity)
    except KeyError:
        print(
            f"Jednotka s aktivitou '{activity}' pro dane datum nebyla nalezena.",
            file=out,
        )
        return None
    print("Jednotka byla uspesne odstranena.", file=out)
    return removed


_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)


class _Input:
    """Word-by-word reader over a line-oriented text stream."""

    def __init__(self, stream: IO[str]) -> None:
        self._stream = stream
        self._buffer = ""

    def _fill(self) -> bool:
        line = self._stream.readline()
        if not line:
            return False
        self._buffer += line
        return True

    def _skip_space(self) -> bool:
        while True:
            self._buffer = self._buffer.lstrip()
            if self._buffer:
                return True
            if not self._fill():
                return False

    def word(self, width: int) -> Optional[str]:
        if not self._skip_space():
            return None
        match = re.match(r"\S{1,%d}" % width, self._buffer)
        text = match.group()
        self._buffer = self._buffer[match.end():]
        return text

    def integer(self) -> Optional[int]:
        if not self._skip_space():
            return None
        match = _INTEGER.match(self._buffer)
        if match is None:
            return None
        self._buffer = self._buffer[match.end():]
        return int(match.group())

    def discard_line(self) -> None:
        if not self._buffer:
            self._fill()
        _, newline, rest = self._buffer.partition("\n")
        self._buffer = rest if newline else ""


def _choose_start(diary: Diary, reader: _Input, out: IO[str]) -> Optional[int]:
    """Ask whether to start empty or from a file; return an exit code to stop."""
    while True:
        print("Chces pokracovat s prazdnym denikem? [Y/N]: ", end="", file=out)
        choice = reader.word(CHOICE_WIDTH)
        if choice is None:
            return 0
        reader.discard_line()
        if choice in ("Y", "y"):
            print("Prazdny denik je k dispozici.", file=out)
            return None
        if choice in ("N", "n"):
            print("Zadej nazev souboru s daty: ", end="", file=out)
            name = reader.word(FILENAME_WIDTH)
            if name is None:
                return 0
            print(f"Nacitam soubor: {name}", file=out)
            try:
                diary.load(name, out)
            except OSError:
                print("Soubor se nepodarilo otevrit..", file=out)
            if len(diary) > 0:
                print("Soubor byl nacten.", file=out)
                return None
            print("Soubor neobsahuje platna data nebo se nacteni nezadarilo.", file=out)
            print("Konec programu.", file=out)
            return 1
        print("Neplatna volba - zadej Y/N", file=out)


def _add_unit(diary: Diary, reader: _Input, out: IO[str]) -> None:
    print("Zadej datum v platnem tvaru (YYYY-MM-DD): ", end="", file=out)
    date = reader.word(DATE_WIDTH) or ""
    print("Zadejte aktivitu: ", end="", file=out)
    activity = reader.word(ACTIVITY_WIDTH) or ""
    print("Zadejte delku trvani (v minutach): ", end="", file=out)
    duration = reader.integer()
    print("Zadejte narocnost (1-10): ", end="", file=out)
    intensity = reader.integer()
    if duration is None or intensity is None:
        print("Neplatna treninkova jednotka! Zkuste to znovu.", file=out)
        return
    try:
        unit = validate_unit(date, activity, duration, intensity)
    except InvalidUnitError as error:
        print(error, file=out)
        print("Neplatna treninkova jednotka! Zkuste to znovu.", file=out)
        return
    diary.add(unit)
    print("Jednotka byla uspesne pridana do deniku", end="", file=out)


def _save(diary: Diary, reader: _Input, out: IO[str]) -> None:
    if diary.is_empty():
        print("Nemuzu ulozit stav deniku, je prazdny!", end="", file=out)
        return
    print("Zadej nazev souboru pro ulozeni: ", end="", file=out)
    name = reader.word(SAVE_NAME_WIDTH)
    if name is None:
        return
    try:
        diary.save(name)
    except OSError:
        print("Chyba pri otevirani souboru.", file=out)
        return
    print(f"Denik byl uspesne ulozen do souboru {name}.", end="", file=out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive diary on standard input and output."""
    out = sys.stdout
    reader = _Input(sys.stdin)
    diary = Diary()

    stop = _choose_start(diary, reader, out)
    if stop is not None:
        return stop

    while True:
        clear_screen()
        print(menu_text(), end="", file=out)
        print("Zadej volbu: ", end="", file=out)
        choice = reader.word(CHOICE_WIDTH)
        if choice is None:
            return 0
        key = choice[0]
        if key == "0":
            print("Konec programu.", file=out)
            return 0
        if key == "1":
            clear_screen()
            print(help_text(), end="", file=out)
        elif key == "2":
            clear_screen()
            print(diary.format_table(), end="", file=out)
        elif key == "3":
            _add_unit(diary, reader, out)
        elif key == "4":
            print("Zadej datum v platnem tvaru (YYYY-MM-DD): ", end="", file=out)
            date = reader.word(DATE_WIDTH) or ""
            remove_interactive(diary, date, lambda: reader.word(ACTIVITY_WIDTH), out)
        elif key == "5":
            try:
                print(format_statistics(compute_statistics(diary)), end="", file=out)
            except ValueError as error:
                print(error, file=out)
        elif key == "6":
            _save(diary, reader, out)
        else:
            print("Neplatna volba, prosim zadejte cislo mezi 0 a 6.", file=out)

        print("\nStiskni Enter pro dalsi akci...", end="", file=out)
        reader.discard_line()
        reader.discard_line()


if __name__ == "__main__":
    sys.exit(main())