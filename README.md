# trainlog

A console training diary, together with four small text-processing tools. All prompts and messages are in Czech.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## The training diary

    trainlog

At start-up the program asks `Chces pokracovat s prazdnym denikem? [Y/N]`.

- Answer `Y` to start with an empty diary.
- Answer `N` to be asked for a file name. The program then loads units from that file.

If no valid unit can be loaded, the program exits with status 1.

A diary file holds whitespace-separated records of four fields:

    2024-10-12 plavani 100 7

The fields are:

- **date**: the shape `YYYY-MM-DD`. Only the digits and dashes are checked, not whether the month or day exist.
- **activity**: one of `plavani`, `posilovna`, `strecink`, `sauna`, `masaz`.
- **duration**: whole minutes, greater than zero.
- **intensity**: RPE from 1 to 10.

A record that fails validation is reported and skipped. Loading stops at the first record that cannot be parsed, for example when a number field holds no number.

The menu is read one choice at a time. The screen is cleared with `cls` or `clear` before the menu is shown.

| Choice | Action |
| --- | --- |
| 0 | quit |
| 1 | help |
| 2 | print the diary as a table |
| 3 | add a unit |
| 4 | remove a unit |
| 5 | statistics |
| 6 | save the diary |

**Adding a unit** asks for each field in turn and validates it.

**Removing a unit** lists the units on a date. It then asks which activity to remove and removes the first matching unit.

**Statistics** cover:

- the number of units
- the total and average duration
- the average intensity
- the hardest and the longest unit
- the count, average and longest duration per activity, for up to ten activities

Averages are truncated to whole numbers before they are printed with two decimals.

**Saving** writes one unit per line with no header. The saved file can be loaded again.

### Using the diary as a library

```python
from trainlog.diary import Diary, validate_unit
from trainlog.app import compute_statistics, format_statistics

diary = Diary()
diary.add(validate_unit("2024-10-12", "plavani", 100, 7))
print(diary.format_table())
print(format_statistics(compute_statistics(diary)))
diary.save("diary.txt")
```

The module `trainlog.diary` provides the following.

- `validate_unit` returns a `TrainingUnit`. It raises `InvalidUnitError` (a `ValueError`) for the first invalid field.
- `is_valid_date`, `is_valid_activity`, `is_valid_duration` and `is_valid_intensity` check single fields.
- `Diary` supports `len()` and iteration, along with these methods:
  - `add`
  - `is_empty`
  - `entries_on(date)`
  - `remove(date, activity)`, which raises `KeyError` when nothing matches
  - `load(path, out)`, which returns the number of units added
  - `format_table()`
  - `save(path)`, which raises `ValueError` for an empty diary

The module `trainlog.app` provides the following.

- `compute_statistics` returns a `Statistics` object with a list of `ActivityStats`. It raises `ValueError` for an empty diary.
- `format_statistics` renders a `Statistics` object as report text.
- `help_text` and `menu_text` return the screens that the program shows.
- `remove_interactive(diary, date, read, out)` runs the guided removal. Its `read` argument is any callable that returns the next input word, or `None`.

### What the diary does not do

The diary is kept in memory only. Nothing is saved unless you choose option 6. Units cannot be edited in place; remove one and add it again instead.

## Small tools

`trainlog-reverse [FILE]` reads decimal numbers from FILE (default `cviceni-pr5-02-data.txt`). It stops at the first token that is not a number. It then prints the numbers in reverse order with two decimals, between `YES!!!!!!!!!!` banners.

`trainlog-tail [FILE]` reads a number `n` from standard input. FILE (default `data10k.txt`) begins with a count, followed by that many numbers. The tool prints the last `n` of those numbers in their original order. A value of `n` that is zero or less keeps them all. The function `trainlog.tail.read_last(stream, n)` does the same for any text stream.

`trainlog-capitals` asks for an input file name on standard input. It writes to `Hotovo.txt` in the current directory:

- first, the words that begin with a capital letter A–Z
- then two blank lines
- then the remaining words, in their original order

Words longer than fourteen characters are split into pieces of fourteen.

`trainlog-zoo [FILE]` reads FILE (default `OPRAVNYTEST.txt`). The file holds a count, then records of the form name, genus, age, sex, pavilion. The tool:

1. prints the animals as a table
2. sorts them by age, keeping the order of equal ages, and prints them again
3. names the youngest animal in pavilion 5

The helpers `read_animals`, `format_table`, `sort_by_age` and `find_by_pavilion` in `trainlog.zoo` can be used directly.