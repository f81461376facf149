import pytest

from advent.y2024.day12 import part_one, part_two

EXAMPLE_A = "AAAA\nBBCD\nBBCC\nEEEC"

EXAMPLE_B = "OOOOO\nOXOXO\nOOOOO\nOXOXO\nOOOOO"

EXAMPLE_C = "\n".join(
    [
        "RRRRIICCFF",
        "RRRRIICCCF",
        "VVRRRCCFFF",
        "VVRCCCJFFF",
        "VVVVCJJCFE",
        "VVIVCCJJEE",
        "VVIIICJJEE",
        "MIIIIIJJEE",
        "MIIISIJEEE",
        "MMMISSJEEE",
    ]
)

EXAMPLE_D = "EEEEE\nEXXXX\nEEEEE\nEXXXX\nEEEEE"

EXAMPLE_E = "AAAAAA\nAAABBA\nAAABBA\nABBAAA\nABBAAA\nAAAAAA"


@pytest.mark.parametrize(
    ("text", "expected"),
    [(EXAMPLE_A, 140), (EXAMPLE_B, 772), (EXAMPLE_C, 1930)],
)
def test_part_one_examples(text, expected):
    assert part_one(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        (EXAMPLE_A, 80),
        (EXAMPLE_B, 436),
        (EXAMPLE_C, 1206),
        (EXAMPLE_D, 236),
        (EXAMPLE_E, 368),
    ],
)
def test_part_two_examples(text, expected):
    assert part_two(text) == expected


def test_single_plot():
    assert part_one("A") == 4
    assert part_two("A") == 4


def test_sides_never_exceed_perimeter():
    for text in (EXAMPLE_A, EXAMPLE_B, EXAMPLE_C, EXAMPLE_D, EXAMPLE_E):
        assert part_two(text) <= part_one(text)