"""Hot springs: counting arrangements of damaged springs."""

from __future__ import annotations

from functools import lru_cache
from typing import Sequence


def _parse_spec(text: str) -> tuple[int, ...]:
    return tuple(int(field) for field in text.split(","))


def arrangements(row: str, spec: Sequence[int]) -> int:
    """Count the ways the unknown springs in row can satisfy the run lengths in spec."""

    @lru_cache(maxsize=None)
    def count(row: str, spec: tuple[int, ...]) -> int:
        left = sum(spec)
        if row.count("#") > left:
            return 0
        if not spec:
            return 1
        run_length = spec[0]
        total = 0
        while len(row) >= left + len(spec) - 1 and sum(c != "." for c in row) >= left:
            fits = "." not in row[:run_length] and row[run_length : run_length + 1] != "#"
            if fits:
                total += count(row[run_length + 1 :], spec[1:])
            if row[:1] == "#":
                break
            row = row[1:]
        return total

    return count(row, tuple(spec))


def _split_line(line: str) -> tuple[str, str]:
    row, spec = line.split(" ")
    return row, spec


def part_one(text: str) -> int:
    """Sum the arrangement counts of every line."""
    return sum(
        arrangements(row, _parse_spec(spec))
        for row, spec in map(_split_line, text.split("\n"))
    )


def part_two(text: str) -> int:
    """As part_one, with each row and spec unfolded five times."""
    return sum(
        arrangements("?".join([row] * 5), _parse_spec(",".join([spec] * 5)))
        for row, spec in map(_split_line, text.split("\n"))
    )