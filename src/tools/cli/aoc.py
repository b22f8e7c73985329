"""Command line entry points for running and submitting puzzles."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Sequence

from contracts.errors import AocError, ArgumentParseError
from project_config import get_section
from runner import log
from runner.orchestrator import run
from runner.task import Level, RunRequest, SubmitFlag
from tools.reports import submission_report

_USAGE_EXIT_CODE = 2
_ERROR_EXIT_CODE = 1


class _ArgumentParser(argparse.ArgumentParser):
    """Parser raising :class:`ArgumentParseError` instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise ArgumentParseError(f"{self.prog}: error: {message}")


def _level(token: str) -> Level:
    try:
        return Level.parse(token)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _add_run_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("level", type=_level, help="Puzzle part to run (1 or 2)")
    parser.add_argument(
        "--submit",
        action="store_const",
        const=SubmitFlag.SUBMIT,
        default=None,
        help="Submit the answer using the session token from the environment",
    )


def parse_args(argv: Sequence[str] | None = None, *, prog: str | None = None) -> tuple[Level, SubmitFlag | None]:
    """Parse ``LEVEL [--submit]`` into the level and the optional submit flag."""

    parser = _ArgumentParser(prog=prog, description="Run one level of a puzzle day")
    _add_run_arguments(parser)
    args = parser.parse_args(argv)
    return args.level, args.submit


def _configure_logging() -> None:
    level_name = str(get_section("logging.level", "WARNING"))
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _configure_events(event_dir: str | None) -> None:
    max_bytes = get_section("events.max_bytes", None)
    if event_dir:
        log.configure(event_dir, max_bytes=max_bytes)
    elif get_section("events.enabled", False):
        log.configure(get_section("events.dir", "logs/runs"), max_bytes=max_bytes)


def _execute(day: int, level: Level, flag: SubmitFlag | None, event_dir: str | None) -> int:
    _configure_events(event_dir)
    request = RunRequest(day=day, level=level, submit=flag is SubmitFlag.SUBMIT)
    run(request)
    return 0


def cmd_run(args: argparse.Namespace) -> int:
    day = args.day if args.day is not None else int(get_section("runner.default_day"))
    return _execute(day, args.level, args.submit, args.event_dir)


def cmd_report(args: argparse.Namespace) -> int:
    base_dir = Path(args.path)
    files = sorted(base_dir.glob("**/*.jsonl"))
    if not files:
        raise SystemExit(f"No JSONL logs found under {base_dir}")
    summary = submission_report.aggregate(files, top=args.top)
    print(json.dumps(summary, indent=2, sort_keys=True))
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="aoc", description="Advent of Code puzzle runner")
    sub = parser.add_subparsers(dest="command", required=True)

    run_cmd = sub.add_parser("run", help="Run one level of a puzzle day")
    _add_run_arguments(run_cmd)
    run_cmd.add_argument(
        "--day",
        type=int,
        default=None,
        help="Puzzle day (defaults to [runner] default_day)",
    )
    run_cmd.add_argument(
        "--event-dir",
        default=None,
        help="Append run and submission events to JSONL files under this directory",
    )
    run_cmd.set_defaults(func=cmd_run)

    report = sub.add_parser("report", help="Summarise journalled submissions")
    report.add_argument("path", help="Directory containing JSONL journals")
    report.add_argument("--top", type=int, default=5)
    report.set_defaults(func=cmd_report)

    return parser


def _fail(message: str, code: int) -> int:
    print(message, file=sys.stderr)
    return code


def main(argv: List[str] | None = None) -> int:
    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except ArgumentParseError as exc:
        return _fail(f"{parser.format_usage().rstrip()}\n{exc}", _USAGE_EXIT_CODE)

    try:
        _configure_logging()
        return args.func(args)
    except AocError as exc:
        return _fail(f"error: {exc}", _ERROR_EXIT_CODE)


def day_main(day: int, argv: Sequence[str] | None = None) -> int:
    """Entry point for ``python -m days.dayNN LEVEL [--submit]``."""

    prog = f"day{day:02d}"
    try:
        level, flag = parse_args(argv, prog=prog)
    except ArgumentParseError as exc:
        return _fail(str(exc), _USAGE_EXIT_CODE)

    try:
        _configure_logging()
        return _execute(day, level, flag, None)
    except AocError as exc:
        return _fail(f"error: {exc}", _ERROR_EXIT_CODE)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
