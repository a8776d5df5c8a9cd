# topmark:header:start
#
#   project      : Termplate
#   file         : logging.py
#   file_relpath : src/termplate/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Custom Termplate logging with TRACE logging.

This module extends the standard logging module with Termplate-specific features,
including a custom TRACE level, a specialized logger class, and colored output formatting.

Diagnostics go to ``stderr`` so they never interleave with rendered program
output (JSON, CSV, ...) on ``stdout``.
"""

from __future__ import annotations

import json
import logging
import os
import sys
from typing import TYPE_CHECKING, Final, TextIO, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "TERMPLATE_LOG_LEVEL"
LOG_FORMAT_ENV_VAR: Final[str] = "TERMPLATE_LOG_FORMAT"

LOG_FORMAT_TEXT: Final[str] = "text"
LOG_FORMAT_JSON: Final[str] = "json"
LOG_FORMATS: Final[tuple[str, ...]] = (LOG_FORMAT_TEXT, LOG_FORMAT_JSON)


class TermplateLogger(logging.Logger):
    """Custom logger class for Termplate with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(TermplateLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class ChalkFormatter(logging.Formatter):
    """Formatter that outputs log records with chalk-colored formatting based on severity level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message as a string.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.CRITICAL:
            return chalk.red_bright(message)
        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.gray(message)
        if level >= TRACE_LEVEL:
            return chalk.blue(message)
        return chalk.dim.red(message)


class JsonLinesFormatter(logging.Formatter):
    """Formatter that emits one JSON object per record, for log collectors.

    Keys: ``time`` (ISO 8601), ``level``, ``logger``, ``msg`` and, when the record
    carries an exception, ``exc``.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Return ``record`` as a single-line JSON object."""
        payload: dict[str, object] = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def parse_log_format(raw: str | None) -> str | None:
    """Return ``"text"`` or ``"json"`` for ``raw`` (case-insensitive), else ``None``."""
    if not raw:
        return None
    v = raw.strip().lower()
    return v if v in LOG_FORMATS else None


def parse_log_level(raw: str | None) -> int | None:
    """Parse a level name (``"TRACE"``, ``"debug"``) or number (``"10"``).

    Returns:
        int | None: The numeric level, or ``None`` if ``raw`` is empty or unknown.
    """
    if not raw:
        return None
    v = raw.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return a logging level from environment or None if unset.

    Honors TERMPLATE_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    """
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV_VAR))


def setup_logging(
    level: int | None = None,
    *,
    stream: TextIO | None = None,
    log_format: str | None = None,
) -> None:
    """Configure the root logger with a specified log level and output format.

    If ``level`` is None, environment variables are consulted via
    [`resolve_env_log_level`][termplate.config.logging.resolve_env_log_level].
    Default is CRITICAL when unspecified, which keeps normal runs silent.

    Args:
        level (int | None): Explicit log level.
        stream (TextIO | None): Destination stream; defaults to ``sys.stderr``.
        log_format (str | None): ``"text"`` (chalk-colored) or ``"json"`` (one
            object per line). ``None`` reads ``TERMPLATE_LOG_FORMAT``, then uses text.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL
    if log_format is None:
        log_format = parse_log_format(os.environ.get(LOG_FORMAT_ENV_VAR)) or LOG_FORMAT_TEXT

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Iterate over a copy since we're modifying the list
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    formatter: logging.Formatter
    if log_format == LOG_FORMAT_JSON:
        formatter = JsonLinesFormatter()
    else:
        formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> TermplateLogger:
    """Retrieve a TermplateLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        TermplateLogger: A TermplateLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("TermplateLogger", logger)
