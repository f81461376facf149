"""Seed almanac: chained range mappings."""

from __future__ import annotations

from dataclasses import dataclass

Span = tuple[int, int]


@dataclass(frozen=True)
class _MapItem:
    source_start: int
    source_end: int
    target_start: int

    def translate(self, value: int) -> int | None:
        if self.source_start <= value < self.source_end:
            return value - self.source_start + self.target_start
        return None


def _parse_map_item(line: str) -> _MapItem:
    target, source, length = (int(field) for field in line.split(" "))
    return _MapItem(source, source + length, target)


def _parse_map(section: str) -> list[_MapItem]:
    return [_parse_map_item(line) for line in section.split("\n")[1:]]


def _parse(text: str) -> tuple[list[int], list[list[_MapItem]]]:
    sections = text.split("\n\n")
    seeds = [int(field) for field in sections[0].split(" ")[1:]]
    return seeds, [_parse_map(section) for section in sections[1:]]


def _apply_map(value: int, mapping: list[_MapItem]) -> int:
    for item in mapping:
        translated = item.translate(value)
        if translated is not None:
            return translated
    return value


def part_one(text: str) -> int:
    """Return the lowest location reached by any listed seed."""
    seeds, maps = _parse(text)
    locations = []
    for seed in seeds:
        for mapping in maps:
            seed = _apply_map(seed, mapping)
        locations.append(seed)
    return min(locations)


def _slice(source: Span, item: _MapItem) -> tuple[Span | None, list[Span]]:
    """Split source into the part item covers and the parts it does not."""
    start, end = source
    if end <= item.source_start or start >= item.source_end:
        return None, [source]
    matching = (max(start, item.source_start), min(end, item.source_end))
    remainder = [(start, item.source_start), (item.source_end, end)]
    return matching, [(a, b) for a, b in remainder if a < b]


def _apply_map_to_span(span: Span, mapping: list[_MapItem]) -> list[Span]:
    output: list[Span] = []
    remainders = [span]
    for item in mapping:
        leftover: list[Span] = []
        for source in remainders:
            matching, rest = _slice(source, item)
            if matching is not None and matching[0] < matching[1]:
                target = item.target_start + matching[0] - item.source_start
                output.append((target, target + matching[1] - matching[0]))
            leftover.extend(rest)
        remainders = leftover
    return output + remainders


def part_two(text: str) -> int:
    """Treat the seeds as (start, length) pairs and find the lowest location."""
    numbers, maps = _parse(text)
    if len(numbers) % 2:
        raise ValueError("seed ranges must come in pairs")
    spans = [(start, start + length) for start, length in zip(numbers[::2], numbers[1::2])]
    for mapping in maps:
        spans = [out for span in spans for out in _apply_map_to_span(span, mapping)]
    return min(start for start, _ in spans)