"""Mull it over: multiplications in corrupted memory."""

from __future__ import annotations

import re

_MUL = re.compile(r"mul\((\d+),(\d+)\)")
_INSTRUCTION = re.compile(r"do\(\)|don't\(\)|mul\((\d+),(\d+)\)")


def part_one(text: str) -> int:
    """Sum the products of every well-formed mul instruction."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def part_two(text: str) -> int:
    """As part_one, honouring do() and don't() switches."""
    enabled = True
    total = 0
    for match in _INSTRUCTION.finditer(text):
        instruction = match.group(0)
        if instruction == "do()":
            enabled = True
        elif instruction == "don't()":
            enabled = False
        elif enabled:
            total += int(match.group(1)) * int(match.group(2))
    return total