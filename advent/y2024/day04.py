"""Ceres search: finding XMAS in a letter grid."""

from __future__ import annotations

_DIRECTIONS = [(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)]


def _char_at(grid: list[str], x: int, y: int) -> str | None:
    if x < 0 or y < 0 or y >= len(grid) or x >= len(grid[y]):
        return None
    return grid[y][x]


def _cells(grid: list[str]):
    for y, row in enumerate(grid):
        for x in range(len(row)):
            yield x, y


def _is_match(grid: list[str], target: str, x: int, y: int, dx: int, dy: int) -> bool:
    return all(
        _char_at(grid, x + dx * i, y + dy * i) == char for i, char in enumerate(target)
    )


def part_one(text: str) -> int:
    """Count occurrences of XMAS in any of the eight directions."""
    grid = text.split("\n")
    return sum(
        _is_match(grid, "XMAS", x, y, dx, dy)
        for x, y in _cells(grid)
        for dx, dy in _DIRECTIONS
    )


def part_two(text: str) -> int:
    """Count the cells where two diagonal MAS words cross."""
    grid = text.split("\n")

    def is_mas(x: int, y: int, dx: int, dy: int) -> bool:
        return _is_match(grid, "MAS", x - dx, y - dy, dx, dy)

    def is_mas_x(x: int, y: int) -> bool:
        return (is_mas(x, y, 1, 1) or is_mas(x, y, -1, -1)) and (
            is_mas(x, y, -1, 1) or is_mas(x, y, 1, -1)
        )

    return sum(is_mas_x(x, y) for x, y in _cells(grid))