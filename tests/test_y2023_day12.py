import pytest

from advent.y2023.day12 import arrangements, part_one, part_two

EXAMPLE = "\n".join(
    [
        "???.### 1,1,3",
        ".??..??...?##. 1,1,3",
        "?#?#?#?#?#?#?#? 1,3,1,6",
        "????.#...#... 4,1,1",
        "????.######..#####. 1,6,5",
        "?###???????? 3,2,1",
    ]
)


def test_part_one_example():
    assert part_one(EXAMPLE) == 21


def test_part_two_example():
    assert part_two(EXAMPLE) == 525152


@pytest.mark.parametrize(
    "row, spec, expected",
    [
        ("??", [1], 2),
        ("???", [1, 1], 1),
        ("#.#", [1, 1], 1),
        ("##", [1], 0),
        ("...", [], 1),
    ],
)
def test_arrangements_small(row, spec, expected):
    assert arrangements(row, spec) == expected


def test_bad_spec_raises():
    with pytest.raises(ValueError):
        part_one("??? 1,x")