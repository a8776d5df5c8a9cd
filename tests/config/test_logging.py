# topmark:header:start
#
#   project      : Termplate
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Tests for the logging helpers."""

from __future__ import annotations

import io
import json
import logging as stdlib_logging
from typing import TYPE_CHECKING

from termplate.config.logging import (
    TRACE_LEVEL,
    get_logger,
    parse_log_format,
    parse_log_level,
    resolve_env_log_level,
    setup_logging,
)

if TYPE_CHECKING:
    import pytest


def test_parse_log_level() -> None:
    """Names are case-insensitive, numbers pass through, junk is None."""
    assert parse_log_level("trace") == TRACE_LEVEL
    assert parse_log_level(" Debug ") == stdlib_logging.DEBUG
    assert parse_log_level("10") == 10
    assert parse_log_level("loud") is None
    assert parse_log_level("") is None


def test_resolve_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """The level comes from TERMPLATE_LOG_LEVEL."""
    assert resolve_env_log_level() is None

    monkeypatch.setenv("TERMPLATE_LOG_LEVEL", "warning")

    assert resolve_env_log_level() == stdlib_logging.WARNING


def test_trace_records_reach_the_stream() -> None:
    """`trace()` emits below DEBUG once the level allows it."""
    stream = io.StringIO()
    setup_logging(level=TRACE_LEVEL, stream=stream)
    try:
        get_logger("termplate.tests").trace("deep %s", "detail")
    finally:
        setup_logging(level=TRACE_LEVEL)

    assert "deep detail" in stream.getvalue()


def test_parse_log_format() -> None:
    """Only text and json are log formats."""
    assert parse_log_format(" JSON ") == "json"
    assert parse_log_format("text") == "text"
    assert parse_log_format("logfmt") is None
    assert parse_log_format(None) is None


def test_json_log_format_emits_one_object_per_line() -> None:
    """JSON logs carry level, logger and message, without color codes."""
    stream = io.StringIO()
    setup_logging(level=stdlib_logging.INFO, stream=stream, log_format="json")
    try:
        get_logger("termplate.tests").info("loaded %d file(s)", 2)
    finally:
        setup_logging(level=TRACE_LEVEL, log_format="text")

    lines: list[str] = stream.getvalue().splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["level"] == "INFO"
    assert record["logger"] == "termplate.tests"
    assert record["msg"] == "loaded 2 file(s)"
    assert "time" in record


def test_log_format_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """TERMPLATE_LOG_FORMAT applies when no format is passed."""
    monkeypatch.setenv("TERMPLATE_LOG_FORMAT", "json")
    stream = io.StringIO()
    setup_logging(level=stdlib_logging.WARNING, stream=stream)
    try:
        get_logger("termplate.tests").warning("careful")
    finally:
        setup_logging(level=TRACE_LEVEL, log_format="text")

    assert json.loads(stream.getvalue())["msg"] == "careful"
