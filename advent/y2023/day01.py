"""Trebuchet calibration values."""

from __future__ import annotations

import re
from typing import Iterable

DIGIT_WORDS = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
)

_ALTERNATION = "|".join(DIGIT_WORDS) + "|[0-9]"
_FROM_LEFT = re.compile(f"({_ALTERNATION})")
_FROM_RIGHT = re.compile(f".*({_ALTERNATION})")


def _first_digit(chars: Iterable[str], line: str) -> int:
    digit = next((c for c in chars if c in "0123456789"), None)
    if digit is None:
        raise ValueError(f"no digit in line {line!r}")
    return int(digit)


def part_one(text: str) -> int:
    """Sum the numbers formed by each line's first and last digit."""
    return sum(
        10 * _first_digit(line, line) + _first_digit(reversed(line), line)
        for line in text.split("\n")
    )


def _matched_digit(line: str, pattern: re.Pattern[str]) -> int:
    match = pattern.search(line)
    if match is None:
        raise ValueError(f"no digit in line {line!r}")
    found = match.group(1)
    if found in DIGIT_WORDS:
        return DIGIT_WORDS.index(found)
    return int(found)


def part_two(text: str) -> int:
    """As part_one, but spelled-out digits count too."""
    return sum(
        10 * _matched_digit(line, _FROM_LEFT) + _matched_digit(line, _FROM_RIGHT)
        for line in text.split("\n")
    )