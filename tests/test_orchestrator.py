"""Behaviour of a single run: dispatch, printing and the submission step."""

from __future__ import annotations

import io
import json
import sys
import types
from typing import Iterator, Mapping

import pytest

import days
from contracts.errors import MissingCredentialError, SubmitError
from runner import log, orchestrator, router
from runner.task import Level, RunRequest

FAKE_MODULE = "days.fake_day"


class RecordingEnv(Mapping[str, str]):
    """Mapping that remembers every key it was asked for."""

    def __init__(self, values: Mapping[str, str]) -> None:
        self._values = dict(values)
        self.accessed: list[str] = []

    def __getitem__(self, key: str) -> str:
        self.accessed.append(key)
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        self.accessed.append("<iter>")
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)


class RecordingSubmitter:
    def __init__(self, *, error: Exception | None = None) -> None:
        self.calls: list[tuple] = []
        self._error = error

    def __call__(self, day, level, answer, session):
        self.calls.append((day, level, answer, session))
        if self._error is not None:
            raise self._error
        return types.SimpleNamespace(verdict="correct", status_code=200)


@pytest.fixture
def fake_day(monkeypatch):
    calls: list[str] = []
    module = types.ModuleType(FAKE_MODULE)

    def level1(text: str) -> int:
        calls.append("level1")
        return sum(int(line) for line in text.splitlines())

    def level2(text: str) -> str:
        calls.append("level2")
        return "two"

    module.level1 = level1
    module.level2 = level2
    monkeypatch.setitem(sys.modules, FAKE_MODULE, module)
    monkeypatch.setattr(
        router,
        "resolve",
        lambda day: router.ResolvedDay(day=int(day), module_name=FAKE_MODULE, input_name="fake.txt"),
    )
    monkeypatch.setattr(days, "load_input", lambda day: "3\n4\n")
    return calls


def _run(request: RunRequest, **kwargs) -> tuple[str, object]:
    out = io.StringIO()
    result = orchestrator.run(request, stdout=out, **kwargs)
    return out.getvalue(), result


def test_level_one_prints_single_line(fake_day) -> None:
    printed, result = _run(RunRequest(day=3, level=Level.ONE))

    assert printed == "7\n"
    assert result.answer == 7
    assert result.submitted is False
    assert fake_day == ["level1"]


def test_level_two_only_calls_level_two(fake_day) -> None:
    printed, _ = _run(RunRequest(day=3, level=Level.TWO))

    assert printed == "two\n"
    assert fake_day == ["level2"]


def test_without_submit_flag_env_and_network_are_untouched(fake_day) -> None:
    env = RecordingEnv({"SESSION": "token"})
    submitter = RecordingSubmitter()

    _run(RunRequest(day=3, level=Level.ONE), env=env, submitter=submitter)

    assert env.accessed == []
    assert submitter.calls == []


def test_missing_session_fails_after_printing(fake_day) -> None:
    out = io.StringIO()
    submitter = RecordingSubmitter()

    with pytest.raises(MissingCredentialError, match="SESSION must be set to submit"):
        orchestrator.run(
            RunRequest(day=3, level=Level.ONE, submit=True),
            env={},
            stdout=out,
            submitter=submitter,
        )

    assert out.getvalue() == "7\n"
    assert submitter.calls == []


def test_blank_session_counts_as_missing(fake_day) -> None:
    with pytest.raises(MissingCredentialError):
        _run(
            RunRequest(day=3, level=Level.ONE, submit=True),
            env={"SESSION": "   "},
            submitter=RecordingSubmitter(),
        )


def test_submission_happens_once_with_printed_answer(fake_day) -> None:
    submitter = RecordingSubmitter()

    printed, result = _run(
        RunRequest(day=3, level=Level.TWO, submit=True),
        env={"SESSION": "token"},
        submitter=submitter,
    )

    assert printed == "two\n"
    assert result.submitted is True
    assert submitter.calls == [(3, Level.TWO, "two", "token")]


def test_failed_submission_does_not_fail_the_run(fake_day) -> None:
    submitter = RecordingSubmitter(error=SubmitError("boom", status_code=502))

    printed, result = _run(
        RunRequest(day=3, level=Level.ONE, submit=True),
        env={"SESSION": "token"},
        submitter=submitter,
    )

    assert printed == "7\n"
    assert result.submitted is True
    assert len(submitter.calls) == 1


def test_submit_day_override_wins(fake_day) -> None:
    submitter = RecordingSubmitter()

    _run(
        RunRequest(day=3, level=Level.ONE, submit=True, submit_day=1),
        env={"SESSION": "token"},
        submitter=submitter,
    )

    assert submitter.calls[0][0] == 1


def test_configured_submit_day_is_used(fake_day, write_config) -> None:
    write_config(submit_extra="day = 1")
    submitter = RecordingSubmitter()

    _run(RunRequest(day=3, level=Level.ONE, submit=True), env={"SESSION": "token"}, submitter=submitter)

    assert submitter.calls[0][0] == 1


def test_submission_defaults_to_the_run_day(fake_day, write_config) -> None:
    write_config()
    submitter = RecordingSubmitter()

    _run(RunRequest(day=3, level=Level.ONE, submit=True), env={"SESSION": "token"}, submitter=submitter)

    assert submitter.calls[0][0] == 3


def test_journal_records_run_and_submission(fake_day, tmp_path) -> None:
    log.configure(tmp_path)
    submitter = RecordingSubmitter(error=SubmitError("rejected", status_code=400))

    _run(RunRequest(day=3, level=Level.ONE, submit=True), env={"SESSION": "token"}, submitter=submitter)

    path = log.current_log_path()
    assert path is not None
    events = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert [event["event"] for event in events] == ["run.completed", "submit.failed"]
    assert events[0]["answer"] == "7"
    assert events[1]["status_code"] == 400
    assert "token" not in path.read_text(encoding="utf-8")


def test_real_day_runs_end_to_end() -> None:
    printed, result = _run(RunRequest(day=5, level=Level.ONE))

    assert printed == "CMZ\n"
    assert result.day == 5
