"""Day 13: Distress Signal."""

from __future__ import annotations

import json
from functools import cmp_to_key
from typing import Any, List

DAY = 13

DIVIDERS = ([[2]], [[6]])


def compare(left: Any, right: Any) -> int:
    """Three-way comparison of two packets: negative when in the right order."""

    if isinstance(left, int) and isinstance(right, int):
        return (left > right) - (left < right)
    if isinstance(left, int):
        left = [left]
    if isinstance(right, int):
        right = [right]
    for a, b in zip(left, right):
        result = compare(a, b)
        if result:
            return result
    return (len(left) > len(right)) - (len(left) < len(right))


def _packets(text: str) -> List[Any]:
    return [json.loads(line) for line in text.splitlines() if line.strip()]


def level1(text: str) -> int:
    packets = _packets(text)
    pairs = zip(packets[0::2], packets[1::2])
    return sum(index for index, (left, right) in enumerate(pairs, start=1) if compare(left, right) <= 0)


def level2(text: str) -> int:
    packets = _packets(text) + list(DIVIDERS)
    packets.sort(key=cmp_to_key(compare))
    first, second = (packets.index(divider) + 1 for divider in DIVIDERS)
    return first * second


if __name__ == "__main__":  # pragma: no cover
    from tools.cli.aoc import day_main

    raise SystemExit(day_main(DAY))
