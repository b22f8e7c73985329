"""Utility helpers for loading project-wide configuration.

The configuration file is looked up in this order: the path named by
``AOC_CONFIG``, ``config.toml`` in the working directory, then the copy next
to the source tree. When none exists the built-in defaults apply, so an
installed ``aoc`` command works without any file.
"""

from __future__ import annotations

import copy
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older Python
    import tomli as tomllib  # type: ignore[import-untyped]

from contracts.config_schema import validate_config
from contracts.errors import ConfigurationError

_CONFIG_FILENAME = "config.toml"
_CONFIG_ENV = "AOC_CONFIG"
_SOURCE_TREE_CONFIG = Path(__file__).resolve().parents[1] / _CONFIG_FILENAME

DEFAULTS: Dict[str, Any] = {
    "runner": {"year": 2022, "default_day": 1},
    "submit": {
        "base_url": "https://adventofcode.com",
        "session_env": "SESSION",
        "timeout_s": 30.0,
        "user_agent": "aoc2022-runner",
    },
    "events": {"enabled": False, "dir": "logs/runs", "max_bytes": 10 * 1024 * 1024},
    "logging": {"level": "WARNING"},
}

_MISSING = object()


def _config_path() -> Path | None:
    override = os.environ.get(_CONFIG_ENV)
    if override:
        return Path(override)
    for candidate in (Path.cwd() / _CONFIG_FILENAME, _SOURCE_TREE_CONFIG):
        if candidate.is_file():
            return candidate
    return None


@lru_cache(maxsize=1)
def get_config() -> Dict[str, Any]:
    """Load, validate and cache the project configuration as a dictionary."""
    path = _config_path()
    if path is None:
        return copy.deepcopy(DEFAULTS)
    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except FileNotFoundError as exc:
        raise ConfigurationError(
            f"Configuration file '{path}' was not found; fix {_CONFIG_ENV} or unset it"
        ) from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Configuration file '{path}' is not valid TOML: {exc}") from exc
    validate_config(data)
    return data


def reload() -> None:
    """Clear the cached configuration."""

    get_config.cache_clear()


def get_section(path: str, default: Any = _MISSING) -> Any:
    """Retrieve a nested configuration value using dotted notation."""

    data: Any = get_config()
    for part in path.split("."):
        if isinstance(data, dict) and part in data:
            data = data[part]
        else:
            if default is not _MISSING:
                return default
            raise KeyError(f"Configuration path '{path}' not found")
    return data


__all__ = ["DEFAULTS", "get_config", "get_section", "reload"]
