"""Cube conundrum: coloured cubes drawn from a bag."""

from __future__ import annotations

import math

BallCounts = dict[str, int]

BAG_CONTENTS: BallCounts = {"red": 12, "green": 13, "blue": 14}


def _parse_draw(text: str) -> BallCounts:
    counts: BallCounts = {}
    for part in text.split(","):
        fields = part.strip().split(" ")
        counts[fields[1]] = int(fields[0])
    return counts


def _parse_draws(text: str) -> list[BallCounts]:
    return [_parse_draw(part) for part in text.split(";")]


def _parse_game(line: str) -> tuple[int, list[BallCounts]]:
    fields = line.split(":")
    return int(fields[0][5:]), _parse_draws(fields[1])


def _draw_possible(draw: BallCounts, contents: BallCounts) -> bool:
    return all(
        colour in contents and count <= contents[colour]
        for colour, count in draw.items()
    )


def part_one(text: str) -> int:
    """Sum the ids of games possible with the standard bag contents."""
    games = (_parse_game(line) for line in text.split("\n"))
    return sum(
        game_id
        for game_id, draws in games
        if all(_draw_possible(draw, BAG_CONTENTS) for draw in draws)
    )


def _min_contents(draws: list[BallCounts]) -> BallCounts:
    minimum: BallCounts = {}
    for draw in draws:
        for colour, count in draw.items():
            minimum[colour] = max(minimum.get(colour, count), count)
    return minimum


def part_two(text: str) -> int:
    """Sum the powers of each game's minimal bag contents."""
    return sum(
        math.prod(_min_contents(_parse_game(line)[1]).values())
        for line in text.split("\n")
    )