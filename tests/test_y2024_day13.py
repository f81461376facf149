import pytest

from advent.y2024.day13 import part_one, part_two

EXAMPLE = (
    "Button A: X+94, Y+34\n"
    "Button B: X+22, Y+67\n"
    "Prize: X=8400, Y=5400\n"
    "\n"
    "Button A: X+26, Y+66\n"
    "Button B: X+67, Y+21\n"
    "Prize: X=12748, Y=12176\n"
    "\n"
    "Button A: X+17, Y+86\n"
    "Button B: X+84, Y+37\n"
    "Prize: X=7870, Y=6450\n"
    "\n"
    "Button A: X+69, Y+23\n"
    "Button B: X+27, Y+71\n"
    "Prize: X=18641, Y=10279"
)

SYMMETRIC = "Button A: X+2, Y+1\nButton B: X+1, Y+2\nPrize: X=2, Y=2"


def test_example_part_one():
    assert part_one(EXAMPLE) == 480


def test_single_winnable_machine():
    assert part_one(EXAMPLE.split("\n\n")[0]) == 280


def test_single_unwinnable_machine():
    assert part_one(EXAMPLE.split("\n\n")[1]) == 0


def test_symmetric_machine_unwinnable_before_shift():
    assert part_one(SYMMETRIC) == 0


def test_symmetric_machine_after_shift():
    assert part_two(SYMMETRIC) == 13333333333336


def test_malformed_machine_raises():
    with pytest.raises(ValueError):
        part_one("Button A: X+2\nButton B: X+1, Y+2\nPrize: X=2, Y=2")