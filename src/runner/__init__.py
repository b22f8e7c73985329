"""Puzzle runner: request types, day routing and the run journal."""

from .task import Level, RunRequest, RunResult, SubmitFlag

__all__ = [
    "Level",
    "RunRequest",
    "RunResult",
    "SubmitFlag",
]
