"""Day 12: Hill Climbing Algorithm.

Both levels run a single breadth-first search backwards from the summit, so
a step from ``here`` to ``there`` is allowed when ``here`` is at most one
higher than ``there``.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple

DAY = 12

Position = Tuple[int, int]


@dataclass(frozen=True)
class Heightmap:
    heights: List[List[int]]
    start: Position
    summit: Position

    def neighbours(self, pos: Position) -> Iterator[Position]:
        row, col = pos
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            r, c = row + dr, col + dc
            if 0 <= r < len(self.heights) and 0 <= c < len(self.heights[r]):
                yield r, c

    def height(self, pos: Position) -> int:
        return self.heights[pos[0]][pos[1]]


def _parse(text: str) -> Heightmap:
    heights: List[List[int]] = []
    start = summit = None
    for row, line in enumerate(raw.strip() for raw in text.splitlines() if raw.strip()):
        cells = []
        for col, ch in enumerate(line):
            if ch == "S":
                start, ch = (row, col), "a"
            elif ch == "E":
                summit, ch = (row, col), "z"
            cells.append(ord(ch) - ord("a"))
        heights.append(cells)
    if start is None or summit is None:
        raise ValueError("Heightmap needs both a start (S) and a summit (E)")
    return Heightmap(heights=heights, start=start, summit=summit)


def _distances_from_summit(hmap: Heightmap) -> Dict[Position, int]:
    distances = {hmap.summit: 0}
    queue = deque([hmap.summit])
    while queue:
        here = queue.popleft()
        for there in hmap.neighbours(here):
            if there in distances or hmap.height(here) > hmap.height(there) + 1:
                continue
            distances[there] = distances[here] + 1
            queue.append(there)
    return distances


def level1(text: str) -> int:
    hmap = _parse(text)
    distances = _distances_from_summit(hmap)
    if hmap.start not in distances:
        raise ValueError("The summit cannot be reached from the start")
    return distances[hmap.start]


def level2(text: str) -> int:
    hmap = _parse(text)
    distances = _distances_from_summit(hmap)
    return min(dist for pos, dist in distances.items() if hmap.height(pos) == 0)


if __name__ == "__main__":  # pragma: no cover
    from tools.cli.aoc import day_main

    raise SystemExit(day_main(DAY))
