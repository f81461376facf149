import pytest

from advent.y2024.day09 import part_one, part_two

EXAMPLE = "2333133121414131402"


def test_part_one_example():
    assert part_one(EXAMPLE) == 1928


def test_part_two_example():
    assert part_two(EXAMPLE) == 2858


def test_part_one_small_map():
    assert part_one("12345") == 60


def test_part_two_small_map_nothing_fits():
    assert part_two("12345") == 132


def test_single_file_has_zero_checksum():
    assert part_one("5") == 0
    assert part_two("5") == 0


def test_bad_digit_rejected():
    with pytest.raises(ValueError):
        part_one("12a")


def test_part_two_empty_rejected():
    with pytest.raises(ValueError):
        part_two("")