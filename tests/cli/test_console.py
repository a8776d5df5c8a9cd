# topmark:header:start
#
#   project      : Termplate
#   file         : test_console.py
#   file_relpath : tests/cli/test_console.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Tests for the Click-backed console."""

from __future__ import annotations

import io

from tests.conftest import parametrize
from termplate.cli.console import ClickConsole
from termplate.core.diagnostics import Diagnostic, DiagnosticLevel


def _console(*, enable_color: bool = False) -> tuple[ClickConsole, io.StringIO, io.StringIO]:
    out, err = io.StringIO(), io.StringIO()
    return ClickConsole(enable_color=enable_color, out=out, err=err), out, err


def test_messages_go_to_their_streams() -> None:
    """Plain messages go to ``out``; warnings and errors go to ``err``."""
    console, out, err = _console()

    console.print("hello")
    console.warn("careful")
    console.error("broken")

    assert out.getvalue() == "hello\n"
    assert err.getvalue() == "careful\nbroken\n"


@parametrize("level", list(DiagnosticLevel))
def test_diagnostics_are_written_to_err(level: DiagnosticLevel) -> None:
    """Every diagnostic level is reported on ``err`` with its level tag."""
    console, out, err = _console()

    console.diagnostic(Diagnostic(level, "bad value"))

    assert out.getvalue() == ""
    assert err.getvalue() == f"[{level.value}] bad value\n"


def test_styled_is_plain_without_color() -> None:
    """Styling is a no-op when color is disabled."""
    console, _, _ = _console()

    assert console.styled("x", fg="red") == "x"
    assert "\x1b[" in _console(enable_color=True)[0].styled("x", fg="red")
