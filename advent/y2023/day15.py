"""Lens library: the HASH algorithm and lens boxes."""

from __future__ import annotations

import re

BOX_COUNT = 256

_STEP = re.compile(r"[=-]")


def hash_label(text: str) -> int:
    """Return the HASH value of text."""
    value = 0
    for char in text:
        value = (value + ord(char)) * 17 % BOX_COUNT
    return value


def part_one(text: str) -> int:
    """Sum the HASH values of every comma-separated step."""
    return sum(hash_label(step) for step in text.split(","))


def part_two(text: str) -> int:
    """Run the lens steps and return the total focusing power."""
    boxes: list[dict[str, int]] = [{} for _ in range(BOX_COUNT)]
    for step in text.split(","):
        fields = _STEP.split(step)
        label = fields[0]
        box = boxes[hash_label(label)]
        focal = int(fields[1]) if len(fields) > 1 and fields[1].strip().isdigit() else None
        if focal is not None:
            box[label] = focal
        else:
            box.pop(label, None)
    return sum(
        (box_index + 1) * (slot + 1) * focal
        for box_index, box in enumerate(boxes)
        for slot, focal in enumerate(box.values())
    )