"""Day 15: Beacon Exclusion Zone.

Both levels take a keyword argument for the puzzle's scale: the row to scan
and the upper bound of the search square. The defaults are the values used
by the real puzzle input; the published example uses ``row=10`` and
``limit=20``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Tuple

DAY = 15

ROW = 2_000_000
LIMIT = 4_000_000
TUNING_MULTIPLIER = 4_000_000

_LINE_RE = re.compile(
    r"Sensor at x=(-?\d+), y=(-?\d+): closest beacon is at x=(-?\d+), y=(-?\d+)"
)

Interval = Tuple[int, int]


@dataclass(frozen=True)
class Sensor:
    x: int
    y: int
    beacon: Tuple[int, int]

    @property
    def radius(self) -> int:
        return abs(self.x - self.beacon[0]) + abs(self.y - self.beacon[1])

    def covers(self, x: int, y: int) -> bool:
        return abs(self.x - x) + abs(self.y - y) <= self.radius

    def span(self, row: int) -> Interval | None:
        reach = self.radius - abs(self.y - row)
        if reach < 0:
            return None
        return self.x - reach, self.x + reach


def parse(text: str) -> List[Sensor]:
    sensors = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _LINE_RE.fullmatch(line.strip())
        if match is None:
            raise ValueError(f"Unrecognised sensor report {line!r}")
        sx, sy, bx, by = (int(value) for value in match.groups())
        sensors.append(Sensor(sx, sy, (bx, by)))
    return sensors


def merge(intervals: Iterable[Interval]) -> List[Interval]:
    """Merge inclusive intervals that overlap or touch."""

    merged: List[Interval] = []
    for start, end in sorted(intervals):
        if merged and start <= merged[-1][1] + 1:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def level1(text: str, *, row: int = ROW) -> int:
    sensors = parse(text)
    spans = merge(span for span in (sensor.span(row) for sensor in sensors) if span is not None)
    beacons = {sensor.beacon for sensor in sensors if sensor.beacon[1] == row}
    covered_beacons = sum(1 for bx, _ in beacons if any(start <= bx <= end for start, end in spans))
    return sum(end - start + 1 for start, end in spans) - covered_beacons


def _candidates(sensors: List[Sensor], limit: int) -> Iterable[Tuple[int, int]]:
    # A single free cell sits just outside the borders of several sensors, so
    # it lies where a rising and a falling border line cross.
    rising = set()
    falling = set()
    for sensor in sensors:
        outer = sensor.radius + 1
        rising.update((sensor.x - sensor.y - outer, sensor.x - sensor.y + outer))
        falling.update((sensor.x + sensor.y - outer, sensor.x + sensor.y + outer))
    for a in falling:
        for b in rising:
            if (a + b) % 2:
                continue
            yield (a + b) // 2, (a - b) // 2
    yield from ((0, 0), (0, limit), (limit, 0), (limit, limit))


def level2(text: str, *, limit: int = LIMIT) -> int:
    """Tuning frequency of the only cell in ``[0, limit]²`` no sensor covers."""

    sensors = parse(text)
    for x, y in _candidates(sensors, limit):
        if 0 <= x <= limit and 0 <= y <= limit and not any(sensor.covers(x, y) for sensor in sensors):
            return x * TUNING_MULTIPLIER + y
    raise ValueError("No uncovered position found in the search area")


if __name__ == "__main__":  # pragma: no cover
    from tools.cli.aoc import day_main

    raise SystemExit(day_main(DAY))
