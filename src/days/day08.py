"""Day 8: Treetop Tree House."""

from __future__ import annotations

from typing import Iterator, List, Sequence

DAY = 8

Grid = List[List[int]]


def _grid(text: str) -> Grid:
    return [[int(ch) for ch in line.strip()] for line in text.splitlines() if line.strip()]


def _sight_lines(grid: Grid, row: int, col: int) -> Iterator[Sequence[int]]:
    """Heights seen from (row, col) looking left, right, up and down, nearest first."""

    line = grid[row]
    column = [r[col] for r in grid]
    yield line[:col][::-1]
    yield line[col + 1 :]
    yield column[:row][::-1]
    yield column[row + 1 :]


def _viewing_distance(height: int, sight: Sequence[int]) -> int:
    for distance, other in enumerate(sight, start=1):
        if other >= height:
            return distance
    return len(sight)


def level1(text: str) -> int:
    grid = _grid(text)
    visible = 0
    for row, line in enumerate(grid):
        for col, height in enumerate(line):
            if any(all(other < height for other in sight) for sight in _sight_lines(grid, row, col)):
                visible += 1
    return visible


def level2(text: str) -> int:
    grid = _grid(text)
    best = 0
    for row, line in enumerate(grid):
        for col, height in enumerate(line):
            score = 1
            for sight in _sight_lines(grid, row, col):
                score *= _viewing_distance(height, sight)
            best = max(best, score)
    return best


if __name__ == "__main__":  # pragma: no cover
    from tools.cli.aoc import day_main

    raise SystemExit(day_main(DAY))
