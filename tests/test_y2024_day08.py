from advent.y2024.day08 import part_one, part_two

EXAMPLE = "\n".join(
    [
        "............",
        "........0...",
        ".....0......",
        ".......0....",
        "....0.......",
        "......A.....",
        "............",
        "............",
        "........A...",
        ".........A..",
        "............",
        "............",
    ]
)


def test_part_one_example():
    assert part_one(EXAMPLE) == 14


def test_part_two_example():
    assert part_two(EXAMPLE) == 34


def test_antinodes_outside_grid_ignored():
    assert part_one("a.a") == 0
    assert part_two("a.a") == 2


def test_pair_in_a_row():
    assert part_one("..a.a..") == 2
    assert part_two("..a.a..") == 4


def test_different_frequencies_do_not_pair():
    assert part_one("..a.b..") == 0