import pytest

from advent.y2024.day18 import part_one, part_two

SNAKE = "0,1\n1,1\n2,1\n3,1\n1,3\n2,3\n3,3\n4,3"


def test_empty_corridor_walls():
    assert part_one("1,0\n1,1", 3, 2) == 4


def test_take_limits_fallen_bytes():
    assert part_one("1,0\n1,1\n1,2", 3, 2) == 4


def test_snake_path():
    assert part_one(SNAKE, 5, 8) == 16


def test_cut_off_raises_in_part_one():
    with pytest.raises(ValueError):
        part_one("1,0\n1,1\n1,2", 3, 3)


def test_first_cutting_byte_in_wall():
    assert part_two("1,0\n1,1\n1,2", 3) == "1,2"


def test_first_cutting_byte_in_snake():
    assert part_two(SNAKE + "\n4,2", 5) == "4,2"


def test_never_cut_off_raises():
    with pytest.raises(ValueError):
        part_two("1,0\n1,1", 3)


def test_byte_outside_raises():
    with pytest.raises(ValueError):
        part_one("5,5", 3, 1)