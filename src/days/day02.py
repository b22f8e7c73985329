"""Day 2: Rock Paper Scissors.

Shapes are mapped to 0 (rock), 1 (paper) and 2 (scissors) so that shape
``s + 1`` always beats shape ``s`` modulo 3.
"""

from __future__ import annotations

from typing import Iterator, Tuple

DAY = 2


def _rounds(text: str) -> Iterator[Tuple[int, int]]:
    for line in text.splitlines():
        if not line.strip():
            continue
        theirs, ours = line.split()
        yield ord(theirs) - ord("A"), ord(ours) - ord("X")


def _score(theirs: int, ours: int) -> int:
    outcome = (ours - theirs + 1) % 3
    return ours + 1 + 3 * outcome


def level1(text: str) -> int:
    return sum(_score(theirs, ours) for theirs, ours in _rounds(text))


def level2(text: str) -> int:
    # The second column is the required outcome: lose, draw, win.
    return sum(_score(theirs, (theirs + outcome - 1) % 3) for theirs, outcome in _rounds(text))


if __name__ == "__main__":  # pragma: no cover
    from tools.cli.aoc import day_main

    raise SystemExit(day_main(DAY))
