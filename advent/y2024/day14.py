"""Restroom redoubt: robots patrolling a wrapping room."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

SECONDS = 100

_NUMBER = re.compile(r"-?\d+")


@dataclass(frozen=True)
class _Robot:
    x: int
    y: int
    vx: int
    vy: int


def _parse_robot(line: str) -> _Robot:
    values = [int(value) for value in _NUMBER.findall(line)]
    if len(values) != 4:
        raise ValueError(f"expected position and velocity in {line!r}")
    return _Robot(*values)


def safety_factor(text: str, width: int, height: int) -> int:
    """Multiply the robot counts of the four quadrants after a hundred seconds.

    Robots on the middle row or column belong to no quadrant.
    """
    if width <= 0 or height <= 0:
        raise ValueError("room dimensions must be positive")
    positions = []
    for line in text.split("\n"):
        robot = _parse_robot(line)
        positions.append(
            ((robot.x + robot.vx * SECONDS) % width, (robot.y + robot.vy * SECONDS) % height)
        )
    mid_x, mid_y = width // 2, height // 2
    quadrants = [
        ((0, 0), (mid_x, mid_y)),
        ((mid_x + 1, 0), (width, mid_y)),
        ((0, mid_y + 1), (mid_x, height)),
        ((mid_x + 1, mid_y + 1), (width, height)),
    ]
    return math.prod(
        sum(1 for x, y in positions if x0 <= x < x1 and y0 <= y < y1)
        for (x0, y0), (x1, y1) in quadrants
    )