"""Gear ratios: part numbers around engine symbols."""

from __future__ import annotations

import re

_NUMBER = re.compile(r"[0-9]+")

Matrix = list[str]


def _is_digit(char: str | None) -> bool:
    return char is not None and char in "0123456789"


def _char_at(matrix: Matrix, x: int, y: int) -> str | None:
    if x < 0 or y < 0 or y >= len(matrix) or x >= len(matrix[y]):
        return None
    return matrix[y][x]


def _is_symbol(char: str | None) -> bool:
    return char is not None and char != "." and not _is_digit(char)


def part_one(text: str) -> int:
    """Sum every number that touches a symbol, diagonals included."""
    matrix = text.split("\n")
    total = 0
    for y, line in enumerate(matrix):
        for match in _NUMBER.finditer(line):
            touches = any(
                _is_symbol(_char_at(matrix, x, ny))
                for ny in range(y - 1, y + 2)
                for x in range(match.start() - 1, match.end() + 1)
            )
            if touches:
                total += int(match.group())
    return total


def _number_at(matrix: Matrix, x: int, y: int) -> int | None:
    if not _is_digit(_char_at(matrix, x, y)):
        return None
    while _is_digit(_char_at(matrix, x - 1, y)):
        x -= 1
    digits = []
    while _is_digit(char := _char_at(matrix, x, y)):
        digits.append(char)
        x += 1
    return int("".join(digits))


def _surrounding_numbers(matrix: Matrix, x: int, y: int) -> list[int]:
    candidates = [_number_at(matrix, x - 1, y + dy) for dy in (-1, 0, 1)]
    for dx in (0, 1):
        for dy in (-1, 0, 1):
            left = _char_at(matrix, x + dx - 1, y + dy)
            if left is not None and not _is_digit(left):
                candidates.append(_number_at(matrix, x + dx, y + dy))
    return [number for number in candidates if number is not None]


def part_two(text: str) -> int:
    """Sum the products of the two numbers around each gear."""
    matrix = text.split("\n")
    total = 0
    for y, line in enumerate(matrix):
        for x, char in enumerate(line):
            if char != "*":
                continue
            numbers = _surrounding_numbers(matrix, x, y)
            if len(numbers) == 2:
                total += numbers[0] * numbers[1]
    return total