"""Puzzle run orchestrator (Day → Input → Level → Answer → Submit)."""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable, Mapping, TextIO

from contracts.errors import SubmitError
from ports import day_port, submit_port
from ports._utils import build_env
from project_config import get_section
from session import resolve_session

from . import log, router
from .task import Level, RunRequest, RunResult

_LOGGER = logging.getLogger(__name__)

Submitter = Callable[[int, Level, Any, str], Any]


def submission_day(request: RunRequest, resolved: router.ResolvedDay) -> int:
    """Return the day identifier sent along with a submission."""

    if request.submit_day is not None:
        return int(request.submit_day)
    pinned = get_section("submit.day", None)
    if pinned is not None:
        return int(pinned)
    return resolved.day


def _fire_and_forget(submitter: Submitter, day: int, level: Level, answer: Any, session: str) -> None:
    """Submit once and drop the outcome; a failed submission never fails the run."""

    try:
        outcome = submitter(day, level, answer, session)
    except SubmitError as exc:
        _LOGGER.debug("submission for day %d level %d failed: %s", day, int(level), exc)
        log.append_event(
            {
                "event": "submit.failed",
                "day": day,
                "level": int(level),
                "answer": str(answer),
                "error": str(exc),
                "status_code": exc.status_code,
            }
        )
        return

    log.append_event(
        {
            "event": "submit.completed",
            "day": day,
            "level": int(level),
            "answer": str(answer),
            "verdict": getattr(outcome, "verdict", submit_port.VERDICT_UNKNOWN),
            "status_code": getattr(outcome, "status_code", None),
        }
    )


def run(
    request: RunRequest,
    *,
    env: Mapping[str, str] | None = None,
    stdout: TextIO | None = None,
    submitter: Submitter | None = None,
) -> RunResult:
    """Execute one puzzle invocation.

    The answer is printed before the session is looked up, so a
    :class:`MissingCredentialError` leaves the printed answer in place. The
    environment is only consulted when ``request.submit`` is set.
    """

    resolved = router.resolve(request.day)
    level = Level(request.level)
    answer = day_port.solve(resolved, level)

    print(answer, file=stdout if stdout is not None else sys.stdout, flush=True)
    log.append_event(
        {
            "event": "run.completed",
            "day": resolved.day,
            "level": int(level),
            "answer": str(answer),
            "submit": request.submit,
        }
    )

    if not request.submit:
        return RunResult(day=resolved.day, level=level, answer=answer)

    env_map = env if env is not None else build_env()
    session = resolve_session(env_map)
    _fire_and_forget(
        submitter or submit_port.submit,
        submission_day(request, resolved),
        level,
        answer,
        session,
    )
    return RunResult(day=resolved.day, level=level, answer=answer, submitted=True)


__all__ = ["Submitter", "run", "submission_day"]
