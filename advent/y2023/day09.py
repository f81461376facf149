"""Mirage maintenance: extrapolating sequences by differences."""

from __future__ import annotations

from functools import reduce


def _diffs(line: str) -> list[list[int]]:
    rows = [[int(field) for field in line.split()]]
    while True:
        last = rows[-1]
        following = [b - a for a, b in zip(last, last[1:])]
        if all(value == 0 for value in following):
            return rows
        rows.append(following)


def _next_value(line: str) -> int:
    return reduce(lambda acc, row: acc + row[-1], reversed(_diffs(line)), 0)


def _previous_value(line: str) -> int:
    return reduce(lambda acc, row: row[0] - acc, reversed(_diffs(line)), 0)


def part_one(text: str) -> int:
    """Sum the next value of every sequence."""
    return sum(_next_value(line) for line in text.split("\n"))


def part_two(text: str) -> int:
    """Sum the value before the start of every sequence."""
    return sum(_previous_value(line) for line in text.split("\n"))