import pytest

from advent.y2023.day01 import part_one, part_two

EXAMPLE_ONE = "1abc2\npqr3stu8vwx\na1b2c3d4e5f\ntreb7uchet"

EXAMPLE_TWO = (
    "two1nine\n"
    "eightwothree\n"
    "abcone2threexyz\n"
    "xtwone3four\n"
    "4nineeightseven2\n"
    "zoneight234\n"
    "7pqrstsixteen"
)


def test_part_one_example():
    assert part_one(EXAMPLE_ONE) == 142


def test_part_two_example():
    assert part_two(EXAMPLE_TWO) == 281


def test_part_two_agrees_with_part_one_on_digits_only():
    assert part_two(EXAMPLE_ONE) == part_one(EXAMPLE_ONE)


def test_line_without_digit_raises():
    with pytest.raises(ValueError):
        part_one("abc")
    with pytest.raises(ValueError):
        part_two("xyz")