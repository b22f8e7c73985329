"""JSON schema for ``config.toml`` and the validator built from it."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping

import jsonschema

from .errors import ConfigurationError

CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": "aoc2022/config.schema.json",
    "type": "object",
    "required": ["runner", "submit"],
    "properties": {
        "runner": {
            "type": "object",
            "required": ["year", "default_day"],
            "properties": {
                "year": {"type": "integer", "minimum": 2015},
                "default_day": {"type": "integer", "minimum": 1, "maximum": 25},
            },
            "additionalProperties": False,
        },
        "submit": {
            "type": "object",
            "required": ["base_url", "session_env"],
            "properties": {
                "base_url": {"type": "string", "pattern": "^https?://"},
                "session_env": {"type": "string", "minLength": 1},
                "timeout_s": {"type": "number", "minimum": 0},
                "user_agent": {"type": "string", "minLength": 1},
                "day": {"type": "integer", "minimum": 1, "maximum": 25},
            },
            "additionalProperties": False,
        },
        "events": {
            "type": "object",
            "properties": {
                "enabled": {"type": "boolean"},
                "dir": {"type": "string", "minLength": 1},
                "max_bytes": {"type": "integer", "minimum": 1},
            },
            "additionalProperties": False,
        },
        "logging": {
            "type": "object",
            "properties": {
                "level": {
                    "enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                },
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": False,
}


@lru_cache(maxsize=1)
def _validator() -> jsonschema.protocols.Validator:
    validator_cls = jsonschema.validators.validator_for(CONFIG_SCHEMA)
    validator_cls.check_schema(CONFIG_SCHEMA)
    return validator_cls(CONFIG_SCHEMA)


def _format_path(error: jsonschema.ValidationError) -> str:
    parts = [str(part) for part in error.absolute_path]
    return ".".join(parts) or "<root>"


def validate_config(data: Mapping[str, Any]) -> None:
    """Raise :class:`ConfigurationError` listing every schema violation in *data*."""

    errors = sorted(_validator().iter_errors(data), key=lambda err: list(err.absolute_path))
    if not errors:
        return
    details = "; ".join(f"{_format_path(err)}: {err.message}" for err in errors)
    raise ConfigurationError(f"Invalid configuration: {details}")


__all__ = ["CONFIG_SCHEMA", "validate_config"]
