"""Day 4: Camp Cleanup."""

from __future__ import annotations

from typing import Iterator, Tuple

DAY = 4

Section = Tuple[int, int]


def _pairs(text: str) -> Iterator[Tuple[Section, Section]]:
    for line in text.splitlines():
        if not line.strip():
            continue
        first, second = line.strip().split(",")
        a_lo, a_hi = (int(part) for part in first.split("-"))
        b_lo, b_hi = (int(part) for part in second.split("-"))
        yield (a_lo, a_hi), (b_lo, b_hi)


def _contains(outer: Section, inner: Section) -> bool:
    return outer[0] <= inner[0] and inner[1] <= outer[1]


def _overlaps(a: Section, b: Section) -> bool:
    return a[0] <= b[1] and b[0] <= a[1]


def level1(text: str) -> int:
    return sum(1 for a, b in _pairs(text) if _contains(a, b) or _contains(b, a))


def level2(text: str) -> int:
    return sum(1 for a, b in _pairs(text) if _overlaps(a, b))


if __name__ == "__main__":  # pragma: no cover
    from tools.cli.aoc import day_main

    raise SystemExit(day_main(DAY))
