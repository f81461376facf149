import pytest

from advent.y2024.day05 import part_one, part_two

SAMPLE = "10|20\n20|30\n\n10,20,30\n30,20,10\n20,10,30\n40,10,50"


def test_part_one_sums_ordered_middles():
    assert part_one(SAMPLE) == 30


def test_part_two_sums_reordered_middles():
    assert part_two(SAMPLE) == 40


def test_all_ordered_gives_nothing_to_fix():
    text = "1|2\n\n1,2,3"
    assert part_one(text) == 2
    assert part_two(text) == 0


def test_cyclic_rules_raise():
    with pytest.raises(ValueError):
        part_two("1|2\n2|1\n\n2,1")