"""Unit tests for structured logging and console output."""

from __future__ import annotations

import io
import json
import logging

import pytest

from gjira.console import RED, RESET, Console
from gjira.logging import JsonFormatter, configure_logging


def test_json_formatter_includes_extra_fields() -> None:
    record = logging.LogRecord(
        name="gjira.git.adapter",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Git command failed",
        args=(),
        exc_info=None,
    )
    record.returncode = 128

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "gjira.git.adapter"
    assert payload["message"] == "Git command failed"
    assert payload["extra"] == {"returncode": 128}


def test_configure_logging_replaces_handlers(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("debug")
    configure_logging("info")

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == logging.INFO

    logging.getLogger("gjira.test").info("hello", extra={"branch": "PROJ-42"})

    captured = capsys.readouterr()
    assert captured.out == ""
    line = json.loads(captured.err.strip().splitlines()[-1])
    assert line["message"] == "hello"
    assert line["extra"] == {"branch": "PROJ-42"}


def test_console_colors_only_when_enabled() -> None:
    plain_out = io.StringIO()
    Console(out=plain_out, color=False).error("Issue PROJ-1 not found")
    assert plain_out.getvalue() == "Issue PROJ-1 not found\n"

    colored_out = io.StringIO()
    Console(out=colored_out, color=True).error("Issue PROJ-1 not found")
    assert colored_out.getvalue() == f"{RED}Issue PROJ-1 not found{RESET}\n"


def test_console_respects_no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    out = io.StringIO()
    out.isatty = lambda: True  # type: ignore[method-assign]

    Console(out=out).info("Stashing local changes")

    assert out.getvalue() == "Stashing local changes\n"


def test_json_formatter_redacts_credentials() -> None:
    record = logging.LogRecord(
        name="gjira.jira.client",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Tracker settings updated",
        args=(),
        exc_info=None,
    )
    record.jiraPass = "s3cret"
    record.api_token = "abc"
    record.host = "jira.example.com"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["extra"] == {
        "jiraPass": "***",
        "api_token": "***",
        "host": "jira.example.com",
    }
