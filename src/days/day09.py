"""Day 9: Rope Bridge."""

from __future__ import annotations

from typing import Iterator, List, Set, Tuple

DAY = 9

Position = Tuple[int, int]

_STEPS = {
    "L": (-1, 0),
    "R": (1, 0),
    "U": (0, 1),
    "D": (0, -1),
}


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _moves(text: str) -> Iterator[Tuple[Position, int]]:
    for line in text.splitlines():
        if not line.strip():
            continue
        direction, length = line.split()
        if direction not in _STEPS:
            raise ValueError(f"Unknown direction {direction!r}")
        yield _STEPS[direction], int(length)


def _follow(head: Position, tail: Position) -> Position:
    dx = head[0] - tail[0]
    dy = head[1] - tail[1]
    if abs(dx) <= 1 and abs(dy) <= 1:
        return tail
    return tail[0] + _sign(dx), tail[1] + _sign(dy)


def simulate(text: str, knots: int) -> int:
    """Number of distinct positions visited by the last of ``knots`` knots."""

    rope: List[Position] = [(0, 0)] * knots
    seen: Set[Position] = {rope[-1]}
    for (dx, dy), length in _moves(text):
        for _ in range(length):
            rope[0] = (rope[0][0] + dx, rope[0][1] + dy)
            for index in range(1, knots):
                rope[index] = _follow(rope[index - 1], rope[index])
            seen.add(rope[-1])
    return len(seen)


def level1(text: str) -> int:
    return simulate(text, 2)


def level2(text: str) -> int:
    return simulate(text, 10)


if __name__ == "__main__":  # pragma: no cover
    from tools.cli.aoc import day_main

    raise SystemExit(day_main(DAY))
