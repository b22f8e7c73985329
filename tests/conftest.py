from __future__ import annotations

from pathlib import Path

import pytest

import project_config
from ports import _loader
from runner import log

_BASE_CONFIG = """
[runner]
year = 2022
default_day = 1

[submit]
base_url = "https://scoring.invalid"
session_env = "SESSION"
timeout_s = 5.0
user_agent = "aoc2022-tests"
{submit_extra}

[events]
enabled = false
dir = "{events_dir}"
max_bytes = 1048576
"""


@pytest.fixture(autouse=True)
def _isolate_state():
    project_config.reload()
    _loader.clear_cache()
    log.disable()
    yield
    project_config.reload()
    _loader.clear_cache()
    log.disable()


@pytest.fixture
def write_config(tmp_path, monkeypatch):
    """Point ``AOC_CONFIG`` at a fresh config file and return its path."""

    def _write(*, submit_extra: str = "", raw: str | None = None) -> Path:
        path = tmp_path / "config.toml"
        if raw is None:
            raw = _BASE_CONFIG.format(
                submit_extra=submit_extra,
                events_dir=(tmp_path / "events").as_posix(),
            )
        path.write_text(raw, encoding="utf-8")
        monkeypatch.setenv("AOC_CONFIG", str(path))
        project_config.reload()
        return path

    return _write
