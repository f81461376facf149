"""Camel cards: ranking poker-like hands."""

from __future__ import annotations

from collections import Counter

CARD_ORDER = "*23456789TJQKA"
HAND_SIZE = 5


def _card_rank(card: str) -> int:
    rank = CARD_ORDER.find(card)
    if rank < 0:
        raise ValueError(f"unknown card {card!r}")
    return rank


def hand_type(hand: str) -> int:
    """Return the strength of a hand's type, 0 (high card) to 6 (five of a kind).

    The '*' card is wild.
    """
    counts = Counter(hand)
    wild = counts.pop("*", 0)
    if wild == HAND_SIZE:
        return 6
    ordered = sorted(counts.values(), reverse=True)
    ordered[0] += wild
    match ordered:
        case [5]:
            return 6
        case [4, 1]:
            return 5
        case [3, 2]:
            return 4
        case [3, *_]:
            return 3
        case [2, 2, *_]:
            return 2
        case [2, *_]:
            return 1
        case _:
            return 0


def _parse_hand(text: str) -> str:
    if len(text) != HAND_SIZE:
        raise ValueError(f"a hand has {HAND_SIZE} cards: {text!r}")
    return text


def _sort_key(hand: str) -> tuple[int, tuple[int, ...]]:
    return hand_type(hand), tuple(_card_rank(card) for card in hand)


def total_winnings(text: str) -> int:
    """Sum each bid multiplied by its hand's rank."""
    hand_bids = []
    for line in text.split("\n"):
        fields = line.split(" ")
        hand_bids.append((_parse_hand(fields[0]), int(fields[1])))
    hands = [hand for hand, _ in hand_bids]
    if len(set(hands)) != len(hands):
        raise ValueError("equal hands cannot be ranked")
    ranked = sorted(hand_bids, key=lambda pair: _sort_key(pair[0]))
    return sum(rank * bid for rank, (_, bid) in enumerate(ranked, start=1))


def part_one(text: str) -> int:
    return total_winnings(text)


def part_two(text: str) -> int:
    """Score with jacks as the weakest, wild card."""
    return total_winnings(text.replace("J", "*"))