"""Day port: dispatches a level to the resolved day's computation."""

from __future__ import annotations

from typing import Any, Callable

import days
from contracts.errors import RouterError
from runner.router import ResolvedDay
from runner.task import Level

from ._loader import load_module

_ENTRYPOINTS = {
    Level.ONE: "level1",
    Level.TWO: "level2",
}


def entrypoint(resolved: ResolvedDay, level: Level) -> Callable[[str], Any]:
    """Return the ``level1``/``level2`` callable of the resolved day."""

    module = load_module(resolved)
    name = _ENTRYPOINTS[Level(level)]
    handler = getattr(module, name, None)
    if not callable(handler):
        raise RouterError(f"Module '{resolved.module_name}' does not define {name}()")
    return handler


def solve(resolved: ResolvedDay, level: Level) -> Any:
    """Run the selected level of ``resolved`` over its bundled input."""

    handler = entrypoint(resolved, level)
    return handler(days.load_input(resolved.day))


__all__ = ["entrypoint", "solve"]
