"""Red-nosed reports: safe level sequences."""

from __future__ import annotations

from typing import Sequence


def _is_safe_step(prior: int, level: int, increasing: bool) -> bool:
    diff = level - prior
    return (diff > 0) == increasing and abs(diff) <= 3 and diff != 0


def _is_safe(levels: Sequence[int], increasing: bool, dampen: bool) -> bool:
    all_steps_safe = True
    step_safe = True
    for index in range(1, len(levels)):

        def safe(back_a: int, back_b: int) -> bool:
            return index < back_a or _is_safe_step(
                levels[index - back_a], levels[index - back_b], increasing
            )

        if step_safe:
            step_safe = safe(1, 0)
        else:
            step_safe = safe(2, 0) or (safe(1, 0) and safe(3, 1))

        if not step_safe:
            if not all_steps_safe or not dampen:
                return False
            all_steps_safe = False
    return True


def count_safe(text: str, dampen: bool) -> int:
    """Count reports that are safe, optionally tolerating one bad level."""
    reports = ([int(field) for field in line.split(" ")] for line in text.split("\n"))
    return sum(
        1
        for levels in reports
        if _is_safe(levels, True, dampen) or _is_safe(levels, False, dampen)
    )