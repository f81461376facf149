"""Linen layout: building designs from towel patterns."""

from __future__ import annotations

from functools import lru_cache
from typing import Sequence


def _count_arrangements(design: str, towels: Sequence[str]) -> int:
    @lru_cache(maxsize=None)
    def count(start: int) -> int:
        if start == len(design):
            return 1
        return sum(
            count(start + len(towel)) for towel in towels if design.startswith(towel, start)
        )

    return count(0)


def _arrangement_counts(text: str) -> list[int]:
    sections = text.split("\n\n")
    if len(sections) < 2:
        raise ValueError("expected towels and designs separated by a blank line")
    towels = sections[0].split(", ")
    if any(not towel for towel in towels):
        raise ValueError("empty towel pattern")
    return [_count_arrangements(design, towels) for design in sections[1].split("\n")]


def part_one(text: str) -> int:
    """Count the designs that can be made at all."""
    return sum(1 for count in _arrangement_counts(text) if count)


def part_two(text: str) -> int:
    """Sum the number of ways every design can be made."""
    return sum(_arrangement_counts(text))