"""Helpers for loading day modules."""

from __future__ import annotations

import importlib
from types import ModuleType
from typing import Dict

from runner.router import ResolvedDay

_MODULE_CACHE: Dict[str, ModuleType] = {}


def load_module(resolved: ResolvedDay) -> ModuleType:
    """Import the module described by ``resolved`` and cache the instance."""

    cached = _MODULE_CACHE.get(resolved.module_name)
    if cached is not None:
        return cached

    module = importlib.import_module(resolved.module_name)
    _MODULE_CACHE[resolved.module_name] = module
    return module


def clear_cache() -> None:
    _MODULE_CACHE.clear()


__all__ = ["clear_cache", "load_module"]
