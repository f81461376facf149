from advent.y2023.day03 import part_one, part_two

EXAMPLE = (
    "467..114..\n"
    "...*......\n"
    "..35..633.\n"
    "......#...\n"
    "617*......\n"
    ".....+.58.\n"
    "..592.....\n"
    "......755.\n"
    "...$.*....\n"
    ".664.598.."
)


def test_part_one_example():
    assert part_one(EXAMPLE) == 4361


def test_part_two_example():
    assert part_two(EXAMPLE) == 467835


def test_no_symbols_means_no_parts():
    assert part_one("12..34\n......") == 0


def test_gear_needs_exactly_two_numbers():
    assert part_two("2*....\n......") == 0