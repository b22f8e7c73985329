"""Day 10: Cathode-Ray Tube."""

from __future__ import annotations

from typing import Iterator, Tuple

DAY = 10

WIDTH = 40
HEIGHT = 6
LIT = "#"
DARK = "."


def register_trace(text: str) -> Iterator[Tuple[int, int]]:
    """Yield ``(cycle, x)`` for every cycle, with ``x`` as seen during it."""

    cycle = 1
    x = 1
    for line in text.splitlines():
        if not line.strip():
            continue
        op, *args = line.split()
        if op == "noop":
            yield cycle, x
            cycle += 1
        elif op == "addx":
            yield cycle, x
            yield cycle + 1, x
            cycle += 2
            x += int(args[0])
        else:
            raise ValueError(f"Unknown instruction {line!r}")


def level1(text: str) -> int:
    return sum(
        cycle * x
        for cycle, x in register_trace(text)
        if cycle % WIDTH == 20 and cycle <= 220
    )


def level2(text: str) -> str:
    """Render the CRT as six rows of ``#``/``.`` pixels."""

    pixels = [
        LIT if abs((cycle - 1) % WIDTH - x) <= 1 else DARK
        for cycle, x in register_trace(text)
    ][: WIDTH * HEIGHT]
    return "\n".join("".join(pixels[row : row + WIDTH]) for row in range(0, len(pixels), WIDTH))


if __name__ == "__main__":  # pragma: no cover
    from tools.cli.aoc import day_main

    raise SystemExit(day_main(DAY))
