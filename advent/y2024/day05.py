"""Print queue: page ordering rules."""

from __future__ import annotations

Rule = tuple[int, int]


def _parse(text: str) -> tuple[list[Rule], list[list[int]]]:
    sections = text.split("\n\n")
    rules = []
    for line in sections[0].split("\n"):
        before, after = (int(field) for field in line.split("|"))
        rules.append((before, after))
    updates = [[int(field) for field in line.split(",")] for line in sections[1].split("\n")]
    return rules, updates


def _meets_rule(rule: Rule, update: list[int]) -> bool:
    before, after = rule
    first = next((page for page in update if page in rule), None)
    return not (first == after and before in update)


def _is_ordered(update: list[int], rules: list[Rule]) -> bool:
    return all(_meets_rule(rule, update) for rule in rules)


def _reordered(pages: list[int], rules: list[Rule]) -> list[int]:
    dependencies: dict[int, set[int]] = {page: set() for page in sorted(pages)}
    for before, after in rules:
        if before in dependencies and after in dependencies:
            dependencies[after].add(before)
    ordered = []
    while dependencies:
        page = next((p for p, deps in dependencies.items() if not deps), None)
        if page is None:
            raise ValueError(f"rules for update {pages} form a cycle")
        ordered.append(page)
        del dependencies[page]
        for deps in dependencies.values():
            deps.discard(page)
    return ordered


def part_one(text: str) -> int:
    """Sum the middle pages of the correctly ordered updates."""
    rules, updates = _parse(text)
    return sum(u[len(u) // 2] for u in updates if _is_ordered(u, rules))


def part_two(text: str) -> int:
    """Sum the middle pages of the misordered updates once reordered."""
    rules, updates = _parse(text)
    fixed = (_reordered(u, rules) for u in updates if not _is_ordered(u, rules))
    return sum(u[len(u) // 2] for u in fixed)