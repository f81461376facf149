"""Bridge repair: operator combinations reaching a target."""

from __future__ import annotations

import operator
from typing import Callable, Sequence

Operator = Callable[[int, int], int]


def _concat(a: int, b: int) -> int:
    shifted = a * 10
    while b > 9:
        shifted *= 10
        b //= 10
    return shifted


def _concatenate(a: int, b: int) -> int:
    return _concat(a, b) + b


def _is_possible(target: int, total: int, series: Sequence[int], operators: Sequence[Operator]) -> bool:
    if total > target:
        return False
    if not series:
        return target == total
    return any(
        _is_possible(target, op(total, series[0]), series[1:], operators) for op in operators
    )


def _calibration(text: str, operators: Sequence[Operator]) -> int:
    total = 0
    for line in text.split("\n"):
        values = [int(field.rstrip(":")) for field in line.split(" ")]
        if _is_possible(values[0], values[1], values[2:], operators):
            total += values[0]
    return total


def part_one(text: str) -> int:
    """Sum the targets reachable with addition and multiplication."""
    return _calibration(text, (operator.add, operator.mul))


def part_two(text: str) -> int:
    """Sum the targets reachable with addition, multiplication and concatenation."""
    return _calibration(text, (operator.add, operator.mul, _concatenate))