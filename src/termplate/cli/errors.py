# topmark:header:start
#
#   project      : Termplate
#   file         : errors.py
#   file_relpath : src/termplate/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Exceptions for the Termplate CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Domain and rendering errors raised below the CLI
    layer are translated with `to_cli_error` / `cli_errors`.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import IO, TYPE_CHECKING, Any

import click

from termplate.cli.exit_codes import ExitCode
from termplate.config.logging import TermplateLogger, get_logger
from termplate.core.errors import (
    AlreadyExistsError,
    ConfigError,
    InvalidInputError,
    NotFoundError,
    TermplateDomainError,
    UnauthorizedError,
)
from termplate.output.errors import (
    RenderError,
    RenderWriteError,
    SerializationError,
    UnsupportedShapeError,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

logger: TermplateLogger = get_logger(__name__)


class TermplateError(click.ClickException):
    """Base class for all Termplate CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (uncolored)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is not None:
            console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
            return
        super().show(file)


class TermplateUsageError(TermplateError):
    """Error for command-line invocation errors (invalid flags/args/values)."""

    exit_code = ExitCode.USAGE_ERROR


class TermplateDataError(TermplateError):
    """Error for input that cannot be parsed or rendered in the requested format."""

    exit_code = ExitCode.DATA_ERROR


class TermplateIOError(TermplateError):
    """Error for output that could not be written."""

    exit_code = ExitCode.IO_ERROR


class TermplateConfigError(TermplateError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class TermplateUnexpectedError(TermplateError):
    """Error for unhandled/unknown errors (last resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


def to_cli_error(exc: Exception) -> TermplateError:
    """Translate a rendering or domain error into the matching CLI error.

    Args:
        exc (Exception): The error raised below the CLI layer.

    Returns:
        TermplateError: A CLI error carrying the exit code for ``exc``.
    """
    message = str(exc)
    match exc:
        case UnsupportedShapeError() | SerializationError():
            return TermplateDataError(message)
        case RenderWriteError():
            return TermplateIOError(message)
        case ConfigError():
            return TermplateConfigError(message)
        case InvalidInputError() | UnauthorizedError():
            return TermplateUsageError(message)
        case NotFoundError() | AlreadyExistsError() | RenderError() | TermplateDomainError():
            return TermplateError(message)
        case _:
            return TermplateUnexpectedError(message)


@contextmanager
def cli_errors() -> Iterator[None]:
    """Re-raise rendering and domain errors as CLI errors (original chained)."""
    try:
        yield
    except (RenderError, TermplateDomainError) as exc:
        logger.debug("Translating %s to a CLI error", type(exc).__name__)
        raise to_cli_error(exc) from exc
