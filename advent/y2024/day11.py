"""Plutonian pebbles: stones that change on every blink."""

from __future__ import annotations

from functools import lru_cache


@lru_cache(maxsize=None)
def _count(stone: int, blinks: int) -> int:
    if blinks == 0:
        return 1
    if stone == 0:
        return _count(1, blinks - 1)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return _count(int(digits[:half]), blinks - 1) + _count(int(digits[half:]), blinks - 1)
    return _count(stone * 2024, blinks - 1)


def count_stones(text: str, blinks: int) -> int:
    """Return how many stones the space-separated stones become after blinks."""
    if blinks < 0:
        raise ValueError("blinks must not be negative")
    return sum(_count(int(field), blinks) for field in text.split(" "))