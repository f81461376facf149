"""RAM run: escaping a memory space as bytes fall into it."""

from __future__ import annotations

from collections import deque

Offset = tuple[int, int]

_DIRECTIONS = ((0, -1), (1, 0), (0, 1), (-1, 0))
_START: Offset = (0, 0)


def _parse(text: str) -> list[Offset]:
    falling = []
    for line in text.split("\n"):
        x, y = (int(field) for field in line.split(","))
        falling.append((x, y))
    return falling


def _open_cells(size: int) -> set[Offset]:
    if size <= 0:
        raise ValueError("size must be positive")
    return {(x, y) for x in range(size) for y in range(size)}


def _block(cells: set[Offset], size: int, offset: Offset) -> None:
    x, y = offset
    if not (0 <= x < size and 0 <= y < size):
        raise ValueError(f"byte {x},{y} falls outside the memory space")
    cells.discard(offset)


def _distances(cells: set[Offset], start: Offset) -> dict[Offset, int]:
    """Steps from start to every reachable open cell."""
    if start not in cells:
        return {}
    distances = {start: 0}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for dx, dy in _DIRECTIONS:
            neighbour = (x + dx, y + dy)
            if neighbour in cells and neighbour not in distances:
                distances[neighbour] = distances[(x, y)] + 1
                queue.append(neighbour)
    return distances


def _min_path(cells: set[Offset], end: Offset) -> set[Offset] | None:
    distances = _distances(cells, _START)
    if end not in distances:
        return None
    path = {end}
    position = end
    while position != _START:
        x, y = position
        position = min(
            ((x + dx, y + dy) for dx, dy in _DIRECTIONS),
            key=lambda o: distances.get(o, float("inf")),
        )
        path.add(position)
    return path


def part_one(text: str, size: int, take: int) -> int:
    """Return the fewest steps to the far corner after the first take bytes fall.

    The memory space is size cells square.
    """
    cells = _open_cells(size)
    for offset in _parse(text)[:take]:
        _block(cells, size, offset)
    end = (size - 1, size - 1)
    distances = _distances(cells, _START)
    if end not in distances:
        raise ValueError("no path to the exit")
    return distances[end]


def part_two(text: str, size: int) -> str:
    """Return the coordinates of the first byte that cuts off the exit."""
    cells = _open_cells(size)
    end = (size - 1, size - 1)
    path = _min_path(cells, end)
    if path is None:
        raise ValueError("no path to the exit")
    for offset in _parse(text):
        _block(cells, size, offset)
        if offset not in path:
            continue
        path = _min_path(cells, end)
        if path is None:
            return f"{offset[0]},{offset[1]}"
    raise ValueError("the exit is never cut off")