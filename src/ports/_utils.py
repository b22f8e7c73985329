"""Utility helpers for port facades."""

from __future__ import annotations

import os
from typing import Dict, Mapping


def build_env(overrides: Mapping[str, str] | None = None) -> Dict[str, str]:
    """Merge process environment with optional overrides."""

    env: Dict[str, str] = {str(k): str(v) for k, v in os.environ.items()}
    if overrides:
        env.update({str(k): str(v) for k, v in overrides.items()})
    return env


def clip(text: str, limit: int = 200) -> str:
    """Collapse whitespace in *text* and cut it to ``limit`` characters."""

    collapsed = " ".join(text.split())
    if len(collapsed) <= limit:
        return collapsed
    return collapsed[: limit - 3] + "..."


__all__ = ["build_env", "clip"]
