"""Pipe maze: the main loop and the tiles it encloses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3


N, S, E, W = Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST

Coord = tuple[int, int]
Connects = tuple[Direction, Direction]

_DELTAS = {N: (0, -1), E: (1, 0), S: (0, 1), W: (-1, 0)}

_PIPES: dict[str, Connects] = {
    "|": (N, S),
    "-": (E, W),
    "L": (N, E),
    "J": (N, W),
    "7": (S, W),
    "F": (S, E),
}


def _offset(coord: Coord, direction: Direction) -> Coord | None:
    dx, dy = _DELTAS[direction]
    x, y = coord[0] + dx, coord[1] + dy
    if x < 0 or y < 0:
        return None
    return x, y


@dataclass
class _Field:
    rows: list[str]
    start: Coord
    pipes: dict[Coord, Connects]


def _infer_connects(pipes: dict[Coord, Connects], coord: Coord) -> Connects:
    connects = []
    for direction, has in ((N, S), (E, W), (S, N), (W, E)):
        neighbour = _offset(coord, direction)
        pipe = pipes.get(neighbour) if neighbour is not None else None
        if pipe is not None and has in pipe:
            connects.append(direction)
    if len(connects) != 2:
        raise ValueError(f"start connects to {len(connects)} pipes, not 2")
    first, second = sorted(connects, key=lambda d: d.value)
    return first, second


def _parse(text: str) -> _Field:
    rows = text.split("\n")
    pipes: dict[Coord, Connects] = {}
    start: Coord | None = None
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char == "S":
                if start is None:
                    start = (x, y)
            elif char != ".":
                try:
                    pipes[(x, y)] = _PIPES[char]
                except KeyError:
                    raise ValueError(f"Bad pipe char {char!r}") from None
    if start is None:
        raise ValueError("no start tile")
    pipes[start] = _infer_connects(pipes, start)
    return _Field(rows, start, pipes)


def _step(field: _Field, coord: Coord, last: Coord) -> Coord:
    pipe = field.pipes.get(coord)
    if pipe is None:
        raise ValueError(f"loop broken at {coord}")
    for direction in pipe:
        neighbour = _offset(coord, direction)
        if neighbour is not None and neighbour != last:
            return neighbour
    raise ValueError(f"loop broken at {coord}")


def _main_loop(field: _Field) -> list[Coord]:
    trail = [field.start]
    while True:
        last = field.start if len(trail) == 1 else trail[-2]
        trail.append(_step(field, trail[-1], last))
        if trail[-1] == field.start:
            return trail


def part_one(text: str) -> int:
    """Return the distance to the point of the loop farthest from the start."""
    return len(_main_loop(_parse(text))) // 2


def part_two(text: str) -> int:
    """Count the tiles enclosed by the main loop."""
    field = _parse(text)
    visited = set(_main_loop(field))
    inside = 0
    for y, row in enumerate(field.rows):
        out = True
        primer: Direction | None = None
        for x in range(len(row)):
            coord = (x, y)
            if coord in visited:
                connects = field.pipes[coord]
                if connects == (N, S):
                    out = not out
                elif connects == (N, E):
                    primer = S
                elif connects == (S, E):
                    primer = N
                elif connects[1] is W and primer is connects[0]:
                    out = not out
            elif not out:
                inside += 1
    return inside