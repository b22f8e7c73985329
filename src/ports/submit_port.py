"""Submit port: posts an answer to the scoring service.

The service answers with an HTML page; the text of its ``<article>`` element
is matched against known phrases to produce a verdict.
"""

from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass
from typing import Any, Mapping

import requests

from contracts.errors import SubmitError
from project_config import get_section
from runner.task import Level

from ._utils import clip

_LOGGER = logging.getLogger(__name__)

VERDICT_CORRECT = "correct"
VERDICT_INCORRECT = "incorrect"
VERDICT_RATE_LIMITED = "rate_limited"
VERDICT_ALREADY_SOLVED = "already_solved"
VERDICT_UNKNOWN = "unknown"

_VERDICT_PHRASES = (
    ("That's the right answer", VERDICT_CORRECT),
    ("That's not the right answer", VERDICT_INCORRECT),
    ("You gave an answer too recently", VERDICT_RATE_LIMITED),
    ("Did you already complete it", VERDICT_ALREADY_SOLVED),
    ("You don't seem to be solving the right level", VERDICT_ALREADY_SOLVED),
)

_ARTICLE_RE = re.compile(r"<article[^>]*>(.*?)</article>", re.DOTALL | re.IGNORECASE)
_TAG_RE = re.compile(r"<[^>]+>")


@dataclass(frozen=True)
class SubmitSettings:
    """Connection settings for the scoring service."""

    base_url: str
    year: int
    timeout_s: float | None = 30.0
    user_agent: str = "aoc2022-runner"

    @classmethod
    def from_config(cls) -> "SubmitSettings":
        submit: Mapping[str, Any] = get_section("submit")
        timeout = float(submit.get("timeout_s", 30.0))
        return cls(
            base_url=str(submit["base_url"]).rstrip("/"),
            year=int(get_section("runner.year")),
            timeout_s=timeout or None,
            user_agent=str(submit.get("user_agent", "aoc2022-runner")),
        )

    def answer_url(self, day: int) -> str:
        return f"{self.base_url}/{self.year}/day/{day}/answer"


@dataclass(frozen=True)
class SubmitOutcome:
    """What the scoring service said about a submitted answer."""

    day: int
    level: Level
    answer: str
    verdict: str
    message: str
    status_code: int


def _article_text(page: str) -> str:
    match = _ARTICLE_RE.search(page)
    body = match.group(1) if match else page
    return html.unescape(_TAG_RE.sub("", body))


def classify(page: str) -> tuple[str, str]:
    """Return ``(verdict, message)`` for a response page."""

    text = _article_text(page)
    for phrase, verdict in _VERDICT_PHRASES:
        if phrase in text:
            return verdict, clip(text)
    return VERDICT_UNKNOWN, clip(text)


def submit(
    day: int,
    level: Level,
    answer: Any,
    session: str,
    *,
    settings: SubmitSettings | None = None,
) -> SubmitOutcome:
    """Post ``answer`` for ``day``/``level`` and classify the response.

    Raises :class:`SubmitError` for transport failures and non-2xx replies.
    """

    settings = settings or SubmitSettings.from_config()
    level = Level(level)
    url = settings.answer_url(day)
    payload = {"level": str(int(level)), "answer": str(answer)}

    _LOGGER.info("submitting day %d level %d to %s", day, int(level), url)
    try:
        response = requests.post(
            url,
            data=payload,
            cookies={"session": session},
            headers={"User-Agent": settings.user_agent},
            timeout=settings.timeout_s,
        )
        response.raise_for_status()
    except requests.HTTPError as exc:
        status = exc.response.status_code if exc.response is not None else None
        raise SubmitError(f"Submission to {url} was rejected: {exc}", status_code=status) from exc
    except requests.RequestException as exc:
        raise SubmitError(f"Submission to {url} failed: {exc}") from exc

    verdict, message = classify(response.text)
    _LOGGER.info("day %d level %d verdict: %s", day, int(level), verdict)
    return SubmitOutcome(
        day=day,
        level=level,
        answer=payload["answer"],
        verdict=verdict,
        message=message,
        status_code=response.status_code,
    )


__all__ = [
    "SubmitOutcome",
    "SubmitSettings",
    "VERDICT_ALREADY_SOLVED",
    "VERDICT_CORRECT",
    "VERDICT_INCORRECT",
    "VERDICT_RATE_LIMITED",
    "VERDICT_UNKNOWN",
    "classify",
    "submit",
]
