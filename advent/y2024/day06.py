"""Guard gallivant: patrol routes and loop-making obstacles."""

from __future__ import annotations

from dataclasses import dataclass

Offset = tuple[int, int]
UP: Offset = (0, -1)


@dataclass(frozen=True)
class _Position:
    offset: Offset
    direction: Offset

    def next(self) -> _Position:
        (x, y), (dx, dy) = self.offset, self.direction
        return _Position((x + dx, y + dy), self.direction)


@dataclass
class _Route:
    positions: list[_Position]
    loops: bool


def _get(grid: list[list[str]], offset: Offset) -> str | None:
    x, y = offset
    if x < 0 or y < 0 or y >= len(grid) or x >= len(grid[y]):
        return None
    return grid[y][x]


def _route(grid: list[list[str]], position: _Position) -> _Route:
    positions = [position]
    visited: set[_Position] = set()
    while (char := _get(grid, position.next().offset)) is not None:
        if char == "#":
            dx, dy = position.direction
            position = _Position(position.offset, (-dy, dx))
        else:
            position = position.next()
            if position in visited:
                return _Route(positions, True)
            visited.add(position)
        positions.append(position)
    return _Route(positions, False)


def _parse(text: str) -> list[list[str]]:
    return [list(line) for line in text.split("\n")]


def _start(grid: list[list[str]]) -> _Position:
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char == "^":
                return _Position((x, y), UP)
    raise ValueError("no guard in map")


def part_one(text: str) -> int:
    """Count the distinct tiles the guard visits before leaving the map."""
    grid = _parse(text)
    return len({p.offset for p in _route(grid, _start(grid)).positions})


def part_two(text: str) -> int:
    """Count the single obstacle placements that trap the guard in a loop."""
    grid = _parse(text)
    been_blocked: set[Offset] = set()
    last_blocked: Offset | None = None
    loops = 0
    for position in _route(grid, _start(grid)).positions:
        block_at = position.next().offset
        char = _get(grid, block_at)
        if char is None or char == "#" or block_at in been_blocked:
            continue
        been_blocked.add(block_at)
        grid[block_at[1]][block_at[0]] = "#"
        if last_blocked is not None:
            grid[last_blocked[1]][last_blocked[0]] = "."
        last_blocked = block_at
        if _route(grid, position).loops:
            loops += 1
    return loops