# topmark:header:start
#
#   project      : Termplate
#   file         : console.py
#   file_relpath : src/termplate/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Click-backed console for user-facing program output.

Use the console for messages intended for end users and `logging` for
diagnostics. Rendered data goes through the formatter to ``console.out``.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click

from termplate.cli.console_api import ConsoleLike
from termplate.core.diagnostics import Diagnostic, DiagnosticLevel


class ClickConsole(ConsoleLike):
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, enables ANSI color codes in the output.
        out (TextIO | None): Stream for standard output. Defaults to ``sys.stdout``.
        err (TextIO | None): Stream for error output. Defaults to ``sys.stderr``.

    Attributes:
        enable_color (bool): Whether to emit ANSI color codes.
        out (TextIO): Stream for standard output.
        err (TextIO): Stream for error output.
    """

    enable_color: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def diagnostic(self, diag: Diagnostic) -> None:
        """Write a configuration diagnostic to stderr, colored by its level."""
        match diag.level:
            case DiagnosticLevel.ERROR:
                self.error(str(diag))
            case DiagnosticLevel.WARNING:
                self.warn(str(diag))
            case _:
                click.secho(str(diag), file=self.err, color=self.enable_color, dim=True)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style`, or unchanged if color is disabled."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
