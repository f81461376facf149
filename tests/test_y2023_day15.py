from advent.y2023.day15 import hash_label, part_one, part_two

EXAMPLE = "rn=1,cm-,qp=3,cm=2,qp-,pc=4,ot=9,ab=5,pc-,pc=6,ot=7"


def test_hash_label():
    assert hash_label("HASH") == 52


def test_hash_label_empty():
    assert hash_label("") == 0


def test_hash_label_in_range():
    assert all(0 <= hash_label(step) < 256 for step in EXAMPLE.split(","))


def test_part_one_example():
    assert part_one(EXAMPLE) == 1320


def test_part_two_example():
    assert part_two(EXAMPLE) == 145


def test_part_two_removed_lens_scores_nothing():
    assert part_two("rn=1,rn-") == 0