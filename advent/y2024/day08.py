"""Resonant collinearity: antinodes of antenna pairs."""

from __future__ import annotations

from typing import Callable

Offset = tuple[int, int]
AddAntinodes = Callable[[dict[Offset, str], set[Offset], Offset, Offset], None]


def _antinodes(text: str, add: AddAntinodes) -> int:
    cells = {
        (x, y): char
        for y, line in enumerate(text.split("\n"))
        for x, char in enumerate(line)
    }
    antennas = [(offset, freq) for offset, freq in cells.items() if freq != "."]
    found: set[Offset] = set()
    for a, freq in antennas:
        for b, other in antennas:
            if b == a or other != freq:
                continue
            add(cells, found, a, (b[0] - a[0], b[1] - a[1]))
            add(cells, found, b, (a[0] - b[0], a[1] - b[1]))
    return len(found)


def _single(cells: dict[Offset, str], found: set[Offset], start: Offset, diff: Offset) -> None:
    point = (start[0] - diff[0], start[1] - diff[1])
    if point in cells:
        found.add(point)


def _line(cells: dict[Offset, str], found: set[Offset], start: Offset, diff: Offset) -> None:
    while start in cells:
        found.add(start)
        start = (start[0] - diff[0], start[1] - diff[1])


def part_one(text: str) -> int:
    """Count the cells holding an antinode one pair-distance beyond each antenna."""
    return _antinodes(text, _single)


def part_two(text: str) -> int:
    """Count the cells on any line through two same-frequency antennas."""
    return _antinodes(text, _line)