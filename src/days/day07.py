"""Day 7: No Space Left On Device.

The terminal transcript is replayed with a stack of running directory
totals; a directory's size is final once it is left with ``cd ..`` or the
transcript ends.
"""

from __future__ import annotations

from typing import List

DAY = 7

DISK_SIZE = 70_000_000
REQUIRED_FREE = 30_000_000
SMALL_DIR_LIMIT = 100_000


def directory_sizes(text: str) -> List[int]:
    """Total size of every directory, in the order each one is closed.

    The outermost directory is always last.
    """

    stack: List[int] = []
    closed: List[int] = []

    def close() -> None:
        size = stack.pop()
        closed.append(size)
        if stack:
            stack[-1] += size

    for line in text.splitlines():
        if line == "$ cd ..":
            close()
        elif line.startswith("$ cd "):
            stack.append(0)
        elif line and line.split(" ", 1)[0].isdigit():
            stack[-1] += int(line.split(" ", 1)[0])

    while stack:
        close()
    return closed


def level1(text: str) -> int:
    return sum(size for size in directory_sizes(text) if size <= SMALL_DIR_LIMIT)


def level2(text: str) -> int:
    sizes = directory_sizes(text)
    needed = sizes[-1] - (DISK_SIZE - REQUIRED_FREE)
    return min(size for size in sizes if size >= needed)


if __name__ == "__main__":  # pragma: no cover
    from tools.cli.aoc import day_main

    raise SystemExit(day_main(DAY))
