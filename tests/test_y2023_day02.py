from advent.y2023.day02 import part_one, part_two

EXAMPLE = (
    "Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green\n"
    "Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue\n"
    "Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red\n"
    "Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red\n"
    "Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green"
)


def test_part_one_example():
    assert part_one(EXAMPLE) == 8


def test_part_two_example():
    assert part_two(EXAMPLE) == 2286


def test_unknown_colour_makes_game_impossible():
    assert part_one("Game 7: 1 purple") == 0