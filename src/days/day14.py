"""Day 14: Regolith Reservoir."""

from __future__ import annotations

from typing import List, Set, Tuple

DAY = 14

SOURCE = (500, 0)

Point = Tuple[int, int]


def _rocks(text: str) -> Set[Point]:
    rocks: Set[Point] = set()
    for line in text.splitlines():
        if not line.strip():
            continue
        corners = [tuple(int(v) for v in part.split(",")) for part in line.split(" -> ")]
        for (x1, y1), (x2, y2) in zip(corners, corners[1:]):
            for x in range(min(x1, x2), max(x1, x2) + 1):
                for y in range(min(y1, y2), max(y1, y2) + 1):
                    rocks.add((x, y))
    return rocks


def pour(text: str, *, floor: bool) -> int:
    """Count the grains that come to rest.

    Without a floor, sand stops once a grain falls below the lowest rock. With
    the floor two rows below the lowest rock, it stops when the source is
    covered. Each grain resumes from the path of the previous one.
    """

    blocked = _rocks(text)
    lowest = max(y for _, y in blocked) if blocked else 0
    floor_y = lowest + 2
    path: List[Point] = [SOURCE]
    settled = 0

    while path:
        x, y = path[-1]
        if not floor and y > lowest:
            break
        for candidate in ((x, y + 1), (x - 1, y + 1), (x + 1, y + 1)):
            if candidate not in blocked and candidate[1] < floor_y:
                path.append(candidate)
                break
        else:
            blocked.add(path.pop())
            settled += 1
    return settled


def level1(text: str) -> int:
    return pour(text, floor=False)


def level2(text: str) -> int:
    return pour(text, floor=True)


if __name__ == "__main__":  # pragma: no cover
    from tools.cli.aoc import day_main

    raise SystemExit(day_main(DAY))
