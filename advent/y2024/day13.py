"""Claw contraption: the cheapest button presses that reach each prize."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

PRIZE_SHIFT = 10_000_000_000_000

_VALUE = re.compile(r"[+=](-?\d+)")


@dataclass(frozen=True)
class _Offset:
    x: int
    y: int


@dataclass(frozen=True)
class _Button:
    offset: _Offset
    tokens: int


@dataclass(frozen=True)
class _Machine:
    a: _Button
    b: _Button
    prize: _Offset


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _rem(a: int, b: int) -> int:
    """Remainder taking the sign of the dividend."""
    return a - b * _div(a, b)


def _parse_offset(line: str) -> _Offset:
    values = [int(value) for value in _VALUE.findall(line)]
    if len(values) != 2:
        raise ValueError(f"expected two values in {line!r}")
    return _Offset(values[0], values[1])


def _parse_machine(text: str) -> _Machine:
    offsets = [_parse_offset(line) for line in text.split("\n")]
    if len(offsets) != 3:
        raise ValueError(f"a machine has three lines:\n{text}")
    return _Machine(_Button(offsets[0], 3), _Button(offsets[1], 1), offsets[2])


def _intersection(m: _Machine) -> _Offset:
    """Where the line of A presses from the origin meets the B line into the prize."""
    a, b, prize = m.a.offset, m.b.offset, m.prize
    numerator_factor = prize.x * b.y - prize.y * b.x
    denominator = a.x * b.y - a.y * b.x
    return _Offset(
        _div(a.x * numerator_factor, denominator),
        _div(a.y * numerator_factor, denominator),
    )


def _min_tokens(m: _Machine) -> int | None:
    point = _intersection(m)
    a, b, prize = m.a.offset, m.b.offset, m.prize
    if (
        _rem(point.x, a.x) != 0
        or _rem(point.y, a.y) != 0
        or _rem(prize.x - point.x, b.x) != 0
        or _rem(prize.y - point.y, b.y) != 0
    ):
        return None
    return _div(point.x * m.a.tokens, a.x) + _div((prize.x - point.x) * m.b.tokens, b.x)


def _total_tokens(machines: list[_Machine]) -> int:
    return sum(tokens for m in machines if (tokens := _min_tokens(m)) is not None)


def part_one(text: str) -> int:
    """Sum the fewest tokens needed to win every winnable prize."""
    return _total_tokens([_parse_machine(block) for block in text.split("\n\n")])


def part_two(text: str) -> int:
    """As part_one, with every prize moved far along both axes."""
    machines = [_parse_machine(block) for block in text.split("\n\n")]
    shifted = [
        replace(m, prize=_Offset(m.prize.x + PRIZE_SHIFT, m.prize.y + PRIZE_SHIFT))
        for m in machines
    ]
    return _total_tokens(shifted)