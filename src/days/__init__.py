"""Per-day puzzle solutions and their bundled inputs.

Every ``dayNN`` module exposes two pure functions, ``level1(text)`` and
``level2(text)``.  Inputs ship inside the package under ``inputs/`` and are
read at most once per process.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import resources

_INPUT_DIR = "inputs"


def module_name(day: int) -> str:
    return f"{__name__}.day{day:02d}"


def input_name(day: int) -> str:
    return f"day{day:02d}.txt"


def _input_resource(day: int):
    return resources.files(__name__).joinpath(_INPUT_DIR).joinpath(input_name(day))


def has_input(day: int) -> bool:
    return _input_resource(day).is_file()


@lru_cache(maxsize=None)
def load_input(day: int) -> str:
    """Return the bundled input text for *day*."""

    return _input_resource(day).read_text(encoding="utf-8")


def available_days() -> list[int]:
    """Return the days that ship an input file, in ascending order."""

    found = []
    for entry in resources.files(__name__).joinpath(_INPUT_DIR).iterdir():
        stem = entry.name.removesuffix(".txt")
        if entry.name.endswith(".txt") and stem.startswith("day") and stem[3:].isdigit():
            found.append(int(stem[3:]))
    return sorted(found)


__all__ = ["available_days", "has_input", "input_name", "load_input", "module_name"]
