"""JSONL journal of runs and submissions.

The journal stays off until :func:`configure` names a directory. Events go to
``<dir>/<YYYYMMDD>/runs_NN.jsonl``; a file that reached the size limit is
left alone and the next number is started.
"""

from __future__ import annotations

import json
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

__all__ = ["append_event", "configure", "current_log_path", "disable"]

_DEFAULT_MAX_BYTES = 10 * 1024 * 1024
_LOCK = threading.Lock()
_LOG_DIR: Path | None = None
_MAX_BYTES = _DEFAULT_MAX_BYTES
_LAST_PATH: Path | None = None


def configure(base_dir: str | Path, *, max_bytes: int | None = None) -> None:
    """Enable the journal below ``base_dir``."""

    global _LOG_DIR, _MAX_BYTES, _LAST_PATH
    _LOG_DIR = Path(base_dir)
    _MAX_BYTES = max_bytes or _DEFAULT_MAX_BYTES
    _LAST_PATH = None


def disable() -> None:
    global _LOG_DIR, _LAST_PATH
    _LOG_DIR = None
    _LAST_PATH = None


def _file_index(path: Path) -> int:
    return int(path.stem.rpartition("_")[2])


def _active_file(date_dir: Path) -> Path:
    existing = sorted(date_dir.glob("runs_[0-9]*.jsonl"), key=_file_index)
    if existing and existing[-1].stat().st_size < _MAX_BYTES:
        return existing[-1]
    index = _file_index(existing[-1]) + 1 if existing else 0
    return date_dir / f"runs_{index:02d}.jsonl"


def append_event(event: Dict[str, Any]) -> Path | None:
    """Append ``event`` with a ``ts`` field and return the file written.

    Returns ``None`` while the journal is disabled.
    """

    global _LAST_PATH
    if _LOG_DIR is None:
        return None

    now = datetime.now(timezone.utc)
    payload = {"ts": now.isoformat(timespec="milliseconds"), **event}
    line = json.dumps(payload, sort_keys=True, ensure_ascii=False, default=str)

    with _LOCK:
        date_dir = _LOG_DIR / now.strftime("%Y%m%d")
        date_dir.mkdir(parents=True, exist_ok=True)
        path = _active_file(date_dir)
        with path.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")
        _LAST_PATH = path
    return path


def current_log_path() -> Path | None:
    """Return the file the last event went to."""

    return _LAST_PATH
