"""Port facades for day computations and answer submission."""

from __future__ import annotations

from .day_port import solve
from .submit_port import SubmitOutcome, SubmitSettings, submit

__all__ = [
    "SubmitOutcome",
    "SubmitSettings",
    "solve",
    "submit",
]
