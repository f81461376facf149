"""Scratchcards."""

from __future__ import annotations


def _parse_numbers(text: str) -> set[int]:
    return {int(field) for field in text.split()}


def win_counts(text: str) -> list[int]:
    """Return how many winning numbers each card holds."""
    counts = []
    for line in text.split("\n"):
        winning, held = (_parse_numbers(part) for part in line.split(":")[1].split("|"))
        counts.append(len(held & winning))
    return counts


def part_one(text: str) -> int:
    """Sum the card scores, each doubling per match after the first."""
    return sum(1 << (count - 1) for count in win_counts(text) if count)


def part_two(text: str) -> int:
    """Count all cards, including copies won from earlier cards."""
    counts = win_counts(text)
    copies = [1] * len(counts)
    for index, count in enumerate(counts):
        for won in range(index + 1, index + 1 + count):
            copies[won] += copies[index]
    return sum(copies)