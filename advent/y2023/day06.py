"""Boat races: ways to beat the record."""

from __future__ import annotations

import math


def beating_count(race_time: int, record: int) -> int:
    """Count the hold times whose distance beats record."""
    root = math.sqrt(race_time * race_time - 4 * record)
    high = math.floor((race_time + root) / 2)
    low = math.ceil((race_time - root) / 2)

    def beats(hold: int) -> bool:
        return (race_time - hold) * hold > record

    if not beats(high):
        high -= 1
    if not beats(low):
        low += 1
    return high - low + 1


def part_one(text: str) -> int:
    """Multiply the winning counts of every race."""
    times, records = ([int(field) for field in line.split()[1:]] for line in text.split("\n"))
    return math.prod(beating_count(t, r) for t, r in zip(times, records))


def part_two(text: str) -> int:
    """Read each line as one number, ignoring spaces, and count wins."""
    race_time, record = (int(line.split(":")[1]) for line in text.replace(" ", "").split("\n"))
    return beating_count(race_time, record)