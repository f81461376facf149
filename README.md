# advent

Solutions to Advent of Code puzzles from 2023 and 2024. Each puzzle day is a
module of plain Python functions. You pass the puzzle input in as a string and
the functions return the answer.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Layout

- `advent.y2023` covers 2023 with modules `day01` to `day13` and `day15`.
- `advent.y2024` covers 2024 with modules `day01` to `day14` and `day17` to
  `day19`.

Most modules provide `part_one(text)` and `part_two(text)`. A few provide only
one part, and some take arguments specific to their puzzle.

## Usage

```python
from advent.y2023 import day01
from advent.y2024 import day11, day14

text = "1abc2\npqr3stu8vwx\na1b2c3d4e5f\ntreb7uchet"
print(day01.part_one(text))        # 142

print(day11.count_stones("125 17", 25))   # 55312

with open("day_14.txt") as handle:
    print(day14.safety_factor(handle.read().strip("\n"), 101, 103))
```

Give the input without a trailing newline. Lines are separated by `\n` and
sections by a blank line. Malformed input raises `ValueError` where the module
checks for it.

Functions whose signatures differ from the usual pair, or which have extra
helpers:

- `advent.y2023.day04.win_counts(text)`: the number of winning numbers on each
  card.
- `advent.y2023.day06.beating_count(race_time, record)`
- `advent.y2023.day07.hand_type(hand)` and `total_winnings(text)`. In a hand,
  `*` is a wild card.
- `advent.y2023.day08.part_one(text)`: this module has only part one.
- `advent.y2023.day11.total_distance(text, factor)`
- `advent.y2023.day12.arrangements(row, spec)`
- `advent.y2023.day15.hash_label(text)`
- `advent.y2024.day02.count_safe(text, dampen)`
- `advent.y2024.day11.count_stones(text, blinks)`
- `advent.y2024.day14.safety_factor(text, width, height)`: gives the state
  after 100 seconds.
- `advent.y2024.day17.run_program(text)`: returns the output as a
  comma-separated string.
- `advent.y2024.day18.part_one(text, size, take)` and `part_two(text, size)`

## What it does not do

- It has no command-line program. Call the functions from Python.
- It ships no puzzle inputs. You supply your own.
- It does not cover every puzzle day. Only the modules listed above exist.