from __future__ import annotations

import pytest
import requests

import project_config
from contracts.errors import SubmitError
from ports import submit_port
from ports.submit_port import SubmitSettings, classify, submit
from runner.task import Level

SETTINGS = SubmitSettings(base_url="https://scoring.invalid", year=2022, timeout_s=5.0, user_agent="tests")


class _FakeResponse:
    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


def _page(body: str) -> str:
    return f"<html><body><main><article><p>{body}</p></article></main></body></html>"


@pytest.fixture
def captured_post(monkeypatch):
    calls = []

    def _install(response: _FakeResponse):
        def _post(url, **kwargs):
            calls.append((url, kwargs))
            return response

        monkeypatch.setattr(requests, "post", _post)
        return calls

    return _install


def test_submit_posts_form_and_classifies(captured_post) -> None:
    calls = captured_post(_FakeResponse(_page("That's the right answer! You are one gold star closer.")))

    outcome = submit(6, Level.TWO, 19, "token", settings=SETTINGS)

    assert outcome.verdict == submit_port.VERDICT_CORRECT
    assert outcome.answer == "19"
    assert outcome.status_code == 200
    url, kwargs = calls[0]
    assert url == "https://scoring.invalid/2022/day/6/answer"
    assert kwargs["data"] == {"level": "2", "answer": "19"}
    assert kwargs["cookies"] == {"session": "token"}
    assert kwargs["headers"] == {"User-Agent": "tests"}
    assert kwargs["timeout"] == 5.0


def test_http_error_becomes_submit_error(captured_post) -> None:
    captured_post(_FakeResponse("server error", status_code=500))

    with pytest.raises(SubmitError) as excinfo:
        submit(1, Level.ONE, 1, "token", settings=SETTINGS)

    assert excinfo.value.status_code == 500


def test_transport_error_becomes_submit_error(monkeypatch) -> None:
    def _timeout(url, **kwargs):
        raise requests.Timeout("read timed out")

    monkeypatch.setattr(requests, "post", _timeout)

    with pytest.raises(SubmitError, match="read timed out"):
        submit(1, Level.ONE, 1, "token", settings=SETTINGS)


@pytest.mark.parametrize(
    ("body", "verdict"),
    [
        ("That's not the right answer; your answer is too high.", submit_port.VERDICT_INCORRECT),
        ("You gave an answer too recently; you have 42s left to wait.", submit_port.VERDICT_RATE_LIMITED),
        ("You don't seem to be solving the right level.  Did you already complete it?", submit_port.VERDICT_ALREADY_SOLVED),
        ("Something new happened.", submit_port.VERDICT_UNKNOWN),
    ],
)
def test_classify_verdicts(body: str, verdict: str) -> None:
    assert classify(_page(body))[0] == verdict


def test_classify_unescapes_and_strips_markup() -> None:
    verdict, message = classify(_page("That&apos;s the <em>right</em> answer!"))

    assert verdict == submit_port.VERDICT_CORRECT
    assert "<em>" not in message
    assert message.startswith("That's the right answer")


def test_settings_from_config(write_config) -> None:
    write_config()

    settings = SubmitSettings.from_config()

    assert settings.base_url == "https://scoring.invalid"
    assert settings.year == 2022
    assert settings.timeout_s == 5.0
    assert settings.user_agent == "aoc2022-tests"
    assert settings.answer_url(9) == "https://scoring.invalid/2022/day/9/answer"


def test_zero_timeout_means_no_timeout(write_config) -> None:
    path = write_config()
    path.write_text(path.read_text(encoding="utf-8").replace("timeout_s = 5.0", "timeout_s = 0"), encoding="utf-8")

    project_config.reload()
    assert SubmitSettings.from_config().timeout_s is None
