"""Day resolution router: maps a day number to its module and bundled input."""

from __future__ import annotations

import importlib.util
import logging
from dataclasses import dataclass

import days
from contracts.errors import RouterError

_LOGGER = logging.getLogger(__name__)

FIRST_DAY = 1
LAST_DAY = 25


@dataclass(frozen=True)
class ResolvedDay:
    """Description of the module and input chosen for a puzzle day."""

    day: int
    module_name: str
    input_name: str


def _coerce_day(day: int | str) -> int:
    try:
        value = int(day)
    except (TypeError, ValueError) as exc:
        raise RouterError(f"Day must be an integer, got {day!r}") from exc
    if not FIRST_DAY <= value <= LAST_DAY:
        raise RouterError(f"Day {value} is outside {FIRST_DAY}-{LAST_DAY}")
    return value


def resolve(day: int | str) -> ResolvedDay:
    """Resolve *day* and make sure both its module and input are present."""

    value = _coerce_day(day)
    module_name = days.module_name(value)
    if importlib.util.find_spec(module_name) is None:
        raise RouterError(f"Day {value} has no solution module '{module_name}'")

    input_name = days.input_name(value)
    if not days.has_input(value):
        raise RouterError(f"Day {value} has no bundled input '{input_name}'")

    _LOGGER.debug("resolved day %d to %s (%s)", value, module_name, input_name)
    return ResolvedDay(day=value, module_name=module_name, input_name=input_name)


__all__ = ["FIRST_DAY", "LAST_DAY", "ResolvedDay", "RouterError", "resolve"]
