from advent.y2023.day09 import part_one, part_two

EXAMPLE = "0 3 6 9 12 15\n1 3 6 10 15 21\n10 13 16 21 30 45"


def test_part_one_example():
    assert part_one(EXAMPLE) == 114


def test_part_two_example():
    assert part_two(EXAMPLE) == 2


def test_linear_sequence_next():
    assert part_one("0 3 6 9 12 15") == 18


def test_linear_sequence_previous():
    assert part_two("0 3 6 9 12 15") == -3


def test_constant_sequence():
    assert part_one("5 5 5") == 5
    assert part_two("5 5 5") == 5