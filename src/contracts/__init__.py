"""Error types and configuration contracts for the puzzle runner."""

from __future__ import annotations

from .config_schema import CONFIG_SCHEMA, validate_config
from .errors import (
    AocError,
    ArgumentParseError,
    ConfigurationError,
    MissingCredentialError,
    RouterError,
    SubmitError,
)

__all__ = [
    "AocError",
    "ArgumentParseError",
    "CONFIG_SCHEMA",
    "ConfigurationError",
    "MissingCredentialError",
    "RouterError",
    "SubmitError",
    "validate_config",
]
