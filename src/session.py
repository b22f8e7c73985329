"""Session credential helpers."""

from __future__ import annotations

import re
from typing import Mapping

from contracts.errors import MissingCredentialError
from project_config import get_section

__all__ = ["DEFAULT_SESSION_ENV", "resolve_session", "session_env_name"]

DEFAULT_SESSION_ENV = "SESSION"

# Printable ASCII without the cookie separator; anything else cannot be sent
# in a Cookie header.
_TOKEN_RE = re.compile(r"[!-:<-~]+")


def session_env_name() -> str:
    """Return the name of the environment variable holding the session token."""

    return str(get_section("submit.session_env", DEFAULT_SESSION_ENV))


def _normalise_token(value: str | None) -> str | None:
    if value is None:
        return None
    token = value.strip()
    # Tokens copied from the browser cookie jar sometimes keep the cookie name.
    if token.startswith("session="):
        token = token[len("session="):]
    return token or None


def resolve_session(env: Mapping[str, str], *, name: str | None = None) -> str:
    """Return the session token found in *env*.

    Only the single configured variable is consulted. A missing or blank value
    raises :class:`MissingCredentialError`, and so does a value that could not
    be sent as a cookie.
    """

    key = name or session_env_name()
    token = _normalise_token(env.get(key))
    if token is None:
        raise MissingCredentialError(f"{key} must be set to submit")
    if _TOKEN_RE.fullmatch(token) is None:
        raise MissingCredentialError(f"{key} must be printable ASCII without spaces or ';' to submit")
    return token
