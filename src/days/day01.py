"""Day 1: Calorie Counting."""

from __future__ import annotations

from typing import List

DAY = 1


def _group_totals(text: str) -> List[int]:
    return [
        sum(int(line) for line in group.splitlines() if line.strip())
        for group in text.strip().split("\n\n")
    ]


def level1(text: str) -> int:
    """Largest number of calories carried by a single elf."""

    return max(_group_totals(text))


def level2(text: str) -> int:
    """Calories carried by the top three elves together."""

    return sum(sorted(_group_totals(text))[-3:])


if __name__ == "__main__":  # pragma: no cover
    from tools.cli.aoc import day_main

    raise SystemExit(day_main(DAY))
