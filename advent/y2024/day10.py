"""Hoof it: hiking trails climbing from 0 to 9."""

from __future__ import annotations

Offset = tuple[int, int]
Heights = dict[Offset, int]

_DIRECTIONS = ((-1, 0), (0, -1), (1, 0), (0, 1))
_SUMMIT = 10


def _parse(text: str) -> Heights:
    return {
        (x, y): int(char)
        for y, line in enumerate(text.split("\n"))
        for x, char in enumerate(line)
    }


def _steps_up(heights: Heights, offset: Offset, next_height: int) -> list[Offset]:
    x, y = offset
    neighbours = ((x + dx, y + dy) for dx, dy in _DIRECTIONS)
    return [n for n in neighbours if heights.get(n) == next_height]


def _trail_ends(heights: Heights, offset: Offset, next_height: int) -> set[Offset]:
    if next_height == _SUMMIT:
        return {offset}
    ends: set[Offset] = set()
    for step in _steps_up(heights, offset, next_height):
        ends |= _trail_ends(heights, step, next_height + 1)
    return ends


def _rating(heights: Heights, offset: Offset, next_height: int) -> int:
    if next_height == _SUMMIT:
        return 1
    return sum(
        _rating(heights, step, next_height + 1)
        for step in _steps_up(heights, offset, next_height)
    )


def _trailheads(heights: Heights) -> list[Offset]:
    return [offset for offset, height in heights.items() if height == 0]


def part_one(text: str) -> int:
    """Sum, over trailheads, the number of distinct 9s each can reach."""
    heights = _parse(text)
    return sum(len(_trail_ends(heights, start, 1)) for start in _trailheads(heights))


def part_two(text: str) -> int:
    """Sum, over trailheads, the number of distinct trails each starts."""
    heights = _parse(text)
    return sum(_rating(heights, start, 1) for start in _trailheads(heights))