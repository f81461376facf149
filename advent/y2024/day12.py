"""Garden groups: fencing regions of plants."""

from __future__ import annotations

from typing import Iterable

Offset = tuple[int, int]
Region = set[Offset]
# (offset, vertical, inward)
Fence = tuple[Offset, bool, bool]

_DIRECTIONS = ((-1, 0), (0, -1), (1, 0), (0, 1))


def _regions(text: str) -> list[Region]:
    plants = {
        (x, y): char
        for y, line in enumerate(text.split("\n"))
        for x, char in enumerate(line)
    }
    claimed: set[Offset] = set()
    regions: list[Region] = []
    for start, plant in plants.items():
        if start in claimed:
            continue
        region: Region = set()
        todo = [start]
        while todo:
            offset = todo.pop()
            if offset in claimed or plants.get(offset) != plant:
                continue
            claimed.add(offset)
            region.add(offset)
            x, y = offset
            todo.extend((x + dx, y + dy) for dx, dy in _DIRECTIONS)
        regions.append(region)
    return regions


def _bounds(offsets: Iterable[Offset]) -> tuple[int, int, int, int]:
    points = list(offsets)
    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    return min(xs), max(xs), min(ys), max(ys)


def _perimeter(region: Region) -> set[Fence]:
    x_min, x_max, y_min, y_max = _bounds(region)
    fences: set[Fence] = set()

    def scan(vertical: bool, offsets: Iterable[Offset]) -> None:
        inside = False
        for offset in offsets:
            in_region = offset in region
            if inside != in_region:
                fences.add((offset, vertical, not inside))
            inside = in_region

    for y in range(y_min, y_max + 1):
        scan(True, ((x, y) for x in range(x_min, x_max + 2)))
    for x in range(x_min, x_max + 1):
        scan(False, ((x, y) for y in range(y_min, y_max + 2)))
    return fences


def _runs(flags: Iterable[bool]) -> int:
    count = 0
    previous = False
    for flag in flags:
        if flag and not previous:
            count += 1
        previous = flag
    return count


def _sides(perimeter: set[Fence]) -> int:
    x_min, x_max, y_min, y_max = _bounds(offset for offset, _, _ in perimeter)
    total = 0
    for y in range(y_min, y_max + 1):
        for inward in (True, False):
            total += _runs(((x, y), False, inward) in perimeter for x in range(x_min, x_max))
    for x in range(x_min, x_max + 1):
        for inward in (True, False):
            total += _runs(((x, y), True, inward) in perimeter for y in range(y_min, y_max))
    return total


def part_one(text: str) -> int:
    """Sum area times perimeter over every region."""
    return sum(len(region) * len(_perimeter(region)) for region in _regions(text))


def part_two(text: str) -> int:
    """Sum area times number of straight sides over every region."""
    return sum(len(region) * _sides(_perimeter(region)) for region in _regions(text))