"""Request and result types for a single puzzle run."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


class Level(enum.IntEnum):
    """Part selector for a two-part puzzle."""

    ONE = 1
    TWO = 2

    @classmethod
    def parse(cls, token: str | int) -> "Level":
        """Build a level from the CLI token ``1`` or ``2``."""

        try:
            return cls(int(str(token).strip()))
        except ValueError as exc:
            raise ValueError(f"level must be 1 or 2, got {token!r}") from exc


class SubmitFlag(enum.Enum):
    """Marker requesting that the answer be submitted."""

    SUBMIT = "submit"


@dataclass(frozen=True)
class RunRequest:
    """One puzzle invocation.

    ``submit_day`` overrides the day identifier sent with the submission; when
    unset the configured ``[submit] day`` or the puzzle day itself is used.
    """

    day: int
    level: Level
    submit: bool = False
    submit_day: int | None = None


@dataclass(frozen=True)
class RunResult:
    """Answer produced by a run; the submission outcome is never part of it."""

    day: int
    level: Level
    answer: Any
    submitted: bool = False


__all__ = ["Level", "RunRequest", "RunResult", "SubmitFlag"]
