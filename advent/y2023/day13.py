"""Point of incidence: mirror lines in patterns of ash and rock."""

from __future__ import annotations

from typing import Sequence


def _reflection_indexes(lines: Sequence[Sequence[str]]) -> list[int]:
    return [
        index
        for index in range(1, len(lines))
        if all(a == b for a, b in zip(reversed(lines[:index]), lines[index:]))
    ]


def _score_pattern(text: str) -> list[int]:
    rows = [tuple(line) for line in text.split("\n")]
    columns = list(zip(*rows))
    return [index * 100 for index in _reflection_indexes(rows)] + _reflection_indexes(columns)


def _first_score(pattern: str) -> int:
    scores = _score_pattern(pattern)
    if not scores:
        raise ValueError(f"no reflection in pattern:\n{pattern}")
    return scores[0]


def part_one(text: str) -> int:
    """Sum the reflection scores of every pattern."""
    return sum(_first_score(pattern) for pattern in text.split("\n\n"))


def _unsmudged_score(pattern: str) -> int:
    original = _first_score(pattern)
    chars = list(pattern)
    for index, char in enumerate(chars):
        if char == "\n":
            continue
        chars[index] = "." if char == "#" else "#"
        score = next((s for s in _score_pattern("".join(chars)) if s != original), None)
        if score is not None:
            return score
        chars[index] = char
    raise ValueError(f"no new score:\n{pattern}\nOriginal score {original}")


def part_two(text: str) -> int:
    """Sum the scores of the new reflections found after fixing one smudge."""
    return sum(_unsmudged_score(pattern) for pattern in text.split("\n\n"))