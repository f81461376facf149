"""Disk fragmenter: compacting files on a disk map."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass
class _Block:
    id: int
    file_len: int
    free_len: int


def _parse(text: str) -> list[_Block]:
    digits = [int(char) for char in text]
    return [
        _Block(file_id, digits[index], digits[index + 1] if index + 1 < len(digits) else 0)
        for file_id, index in enumerate(range(0, len(digits), 2))
    ]


def _span_checksum(file_id: int, position: int, length: int) -> int:
    """Checksum of a file's length cells starting at position."""
    return file_id * (length * position + length * (length - 1) // 2)


def part_one(text: str) -> int:
    """Move file cells one at a time into the leftmost free space, then checksum."""
    disk = deque(_parse(text))
    checksum = 0
    position = 0

    def place(file_id: int, length: int) -> None:
        nonlocal checksum, position
        checksum += _span_checksum(file_id, position, length)
        position += length

    while disk:
        front = disk.popleft()
        place(front.id, front.file_len)
        while front.free_len > 0 and disk:
            back = disk.pop()
            length = min(front.free_len, back.file_len)
            place(back.id, length)
            front.free_len -= length
            back.file_len -= length
            if back.file_len > 0:
                disk.append(back)
    return checksum


def part_two(text: str) -> int:
    """Move whole files into the leftmost space that fits them, then checksum."""
    disk = _parse(text)
    if not disk:
        raise ValueError("empty disk map")
    back_index = len(disk) - 1
    while back_index > 0:
        back_len = disk[back_index].file_len
        front_index = next(
            (index for index, block in enumerate(disk[:back_index]) if block.free_len >= back_len),
            None,
        )
        if front_index is None:
            back_index -= 1
            continue
        back = disk.pop(back_index)
        disk[back_index - 1].free_len += back.file_len + back.free_len
        front = disk[front_index]
        back.free_len = front.free_len - back.file_len
        front.free_len = 0
        disk.insert(front_index + 1, back)

    checksum = 0
    position = 0
    for block in disk:
        checksum += _span_checksum(block.id, position, block.file_len)
        position += block.file_len + block.free_len
    return checksum