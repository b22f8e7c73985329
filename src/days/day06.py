"""Day 6: Tuning Trouble."""

from __future__ import annotations

DAY = 6


def first_distinct_window(signal: str, size: int) -> int:
    """Return the number of characters read once ``size`` distinct ones were seen."""

    signal = signal.strip()
    for end in range(size, len(signal) + 1):
        if len(set(signal[end - size : end])) == size:
            return end
    raise ValueError(f"No window of {size} distinct characters in the signal")


def level1(text: str) -> int:
    return first_distinct_window(text, 4)


def level2(text: str) -> int:
    return first_distinct_window(text, 14)


if __name__ == "__main__":  # pragma: no cover
    from tools.cli.aoc import day_main

    raise SystemExit(day_main(DAY))
