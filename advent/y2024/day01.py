"""Historian hysteria: comparing two location lists."""

from __future__ import annotations

from collections import Counter


def _parse(text: str) -> tuple[list[int], list[int]]:
    left: list[int] = []
    right: list[int] = []
    for line in text.split("\n"):
        fields = line.split("   ")
        left.append(int(fields[0]))
        right.append(int(fields[1]))
    return left, right


def part_one(text: str) -> int:
    """Sum the distances between the lists once both are sorted."""
    left, right = _parse(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part_two(text: str) -> int:
    """Sum each left number times how often it appears on the right."""
    left, right = _parse(text)
    counts = Counter(right)
    return sum(number * counts[number] for number in left)