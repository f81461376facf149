import pytest

from advent.y2023.day06 import beating_count, part_one, part_two

EXAMPLE = "Time:      7  15   30\nDistance:  9  40  200"

INPUT = "Time:        60     94     78     82\nDistance:   475   2138   1015   1650"


def test_part_one_example():
    assert part_one(EXAMPLE) == 288


def test_part_one_real():
    assert part_one(INPUT) == 345015


def test_part_two_example():
    assert part_two(EXAMPLE) == 71503


def test_part_two_real():
    assert part_two(INPUT) == 42588603


@pytest.mark.parametrize("race_time, record", [(7, 9), (15, 40), (30, 200)])
def test_beating_count_matches_brute_force(race_time, record):
    wins = [hold for hold in range(race_time + 1) if (race_time - hold) * hold > record]
    assert beating_count(race_time, record) == len(wins)