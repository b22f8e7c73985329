"""Aggregation helpers for the run journal."""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Iterable, Mapping

__all__ = ["aggregate"]


def _load_events(paths: Iterable[Path]) -> Iterable[Mapping[str, object]]:
    for path in paths:
        for line in path.read_text(encoding="utf-8").splitlines():
            if not line.strip():
                continue
            yield json.loads(line)


def aggregate(paths: Iterable[Path], *, top: int = 5) -> Mapping[str, object]:
    verdicts: Counter[str] = Counter()
    days: Counter[str] = Counter()
    failures = 0
    submissions = 0
    for event in _load_events(paths):
        kind = event.get("event")
        if kind == "submit.completed":
            verdicts[str(event.get("verdict", "unknown"))] += 1
        elif kind == "submit.failed":
            failures += 1
        else:
            continue
        submissions += 1
        days[f"day{int(event.get('day', 0)):02d}"] += 1

    return {
        "total_submissions": submissions,
        "verdicts": dict(verdicts),
        "failures": failures,
        "top_days": days.most_common(top),
    }
