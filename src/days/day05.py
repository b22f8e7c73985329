"""Day 5: Supply Stacks."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Tuple

DAY = 5

_MOVE_RE = re.compile(r"move (\d+) from (\d+) to (\d+)")


@dataclass(frozen=True)
class Move:
    count: int
    source: int
    target: int


def _parse_stacks(drawing: str) -> List[List[str]]:
    lines = drawing.splitlines()
    labels = lines[-1].split()
    stacks: List[List[str]] = [[] for _ in labels]
    # Bottom row first so that the end of each list is the top of the stack.
    for line in reversed(lines[:-1]):
        for index in range(len(stacks)):
            column = 1 + 4 * index
            if column < len(line) and line[column].strip():
                stacks[index].append(line[column])
    return stacks


def _parse(text: str) -> Tuple[List[List[str]], List[Move]]:
    drawing, _, procedure = text.strip("\n").partition("\n\n")
    moves = [
        Move(count=int(count), source=int(source) - 1, target=int(target) - 1)
        for count, source, target in _MOVE_RE.findall(procedure)
    ]
    return _parse_stacks(drawing), moves


def _rearrange(text: str, *, one_at_a_time: bool) -> str:
    stacks, moves = _parse(text)
    for move in moves:
        source = stacks[move.source]
        lifted = source[len(source) - move.count :]
        del source[len(source) - move.count :]
        if one_at_a_time:
            lifted.reverse()
        stacks[move.target].extend(lifted)
    return "".join(stack[-1] for stack in stacks if stack)


def level1(text: str) -> str:
    return _rearrange(text, one_at_a_time=True)


def level2(text: str) -> str:
    return _rearrange(text, one_at_a_time=False)


if __name__ == "__main__":  # pragma: no cover
    from tools.cli.aoc import day_main

    raise SystemExit(day_main(DAY))
