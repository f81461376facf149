import pytest

from advent.y2024.day11 import count_stones

PUZZLE = "28591 78 0 3159881 4254 524155 598 1"


def test_example():
    assert count_stones("125 17", 25) == 55312


def test_puzzle_25_blinks():
    assert count_stones(PUZZLE, 25) == 220722


def test_puzzle_75_blinks():
    assert count_stones(PUZZLE, 75) == 261952051690787


def test_zero_blinks_counts_stones():
    assert count_stones("125 17", 0) == 2


@pytest.mark.parametrize(
    ("stones", "expected"),
    [("0", 1), ("1", 1), ("10", 2), ("1000", 2)],
)
def test_single_blink(stones, expected):
    assert count_stones(stones, 1) == expected


def test_negative_blinks_rejected():
    with pytest.raises(ValueError):
        count_stones("1", -1)