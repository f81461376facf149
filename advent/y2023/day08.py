"""Haunted wasteland: following left/right instructions through a network."""

from __future__ import annotations

from itertools import cycle


def _parse(text: str) -> tuple[str, dict[str, tuple[str, str]]]:
    lines = text.split("\n")
    nodes = {line[:3]: (line[7:10], line[12:15]) for line in lines[2:]}
    return lines[0], nodes


def part_one(text: str) -> int:
    """Count the steps from AAA to ZZZ, repeating the instructions as needed."""
    directions, nodes = _parse(text)
    node = "AAA"
    steps = 0
    for direction in cycle(directions):
        steps += 1
        left, right = nodes[node]
        node = left if direction == "L" else right
        if node == "ZZZ":
            break
    return steps