"""Shared error types for the puzzle runner."""

from __future__ import annotations


class AocError(RuntimeError):
    """Base class for every error raised by the runner."""


class ArgumentParseError(AocError):
    """Raised when the command line cannot be turned into a run request."""


class MissingCredentialError(AocError):
    """Raised when a submission is requested without a usable session token."""


class ConfigurationError(AocError):
    """Raised when ``config.toml`` is missing, unreadable or fails validation."""


class RouterError(AocError):
    """Raised when a day cannot be resolved to a module and bundled input."""


class SubmitError(AocError):
    """Raised by the submit port on transport or HTTP failures."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


__all__ = [
    "AocError",
    "ArgumentParseError",
    "ConfigurationError",
    "MissingCredentialError",
    "RouterError",
    "SubmitError",
]
