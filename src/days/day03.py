"""Day 3: Rucksack Reorganization."""

from __future__ import annotations

from functools import reduce
from typing import Iterable, List

DAY = 3


def priority(item: str) -> int:
    if "a" <= item <= "z":
        return ord(item) - ord("a") + 1
    if "A" <= item <= "Z":
        return ord(item) - ord("A") + 27
    raise ValueError(f"Unexpected rucksack item {item!r}")


def _common(groups: Iterable[str]) -> str:
    shared = reduce(set.intersection, (set(group) for group in groups))
    if len(shared) != 1:
        raise ValueError(f"Expected exactly one shared item, found {sorted(shared)}")
    return shared.pop()


def _lines(text: str) -> List[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def level1(text: str) -> int:
    total = 0
    for line in _lines(text):
        half = len(line) // 2
        total += priority(_common((line[:half], line[half:])))
    return total


def level2(text: str) -> int:
    lines = _lines(text)
    return sum(priority(_common(lines[i : i + 3])) for i in range(0, len(lines), 3))


if __name__ == "__main__":  # pragma: no cover
    from tools.cli.aoc import day_main

    raise SystemExit(day_main(DAY))
