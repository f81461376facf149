"""Cosmic expansion: distances between galaxies."""

from __future__ import annotations

from bisect import bisect_left
from itertools import combinations

Coord = tuple[int, int]


def _parse(text: str) -> set[Coord]:
    return {
        (x, y)
        for y, line in enumerate(text.split("\n"))
        for x, char in enumerate(line)
        if char == "#"
    }


def _empty_between(values: set[int]) -> list[int]:
    return [value for value in range(min(values), max(values)) if value not in values]


def _expanded(galaxies: set[Coord], factor: int) -> set[Coord]:
    empty_xs = _empty_between({x for x, _ in galaxies})
    empty_ys = _empty_between({y for _, y in galaxies})
    grow = factor - 1
    return {
        (x + bisect_left(empty_xs, x) * grow, y + bisect_left(empty_ys, y) * grow)
        for x, y in galaxies
    }


def total_distance(text: str, factor: int) -> int:
    """Sum the Manhattan distances between all galaxy pairs after expansion.

    Every empty row and column becomes factor rows or columns wide.
    """
    if factor < 1:
        raise ValueError("expansion factor must be at least 1")
    galaxies = _parse(text)
    if not galaxies:
        raise ValueError("no galaxies")
    expanded = sorted(_expanded(galaxies, factor))
    return sum(abs(ax - bx) + abs(ay - by) for (ax, ay), (bx, by) in combinations(expanded, 2))