# topmark:header:start
#
#   project      : Termplate
#   file         : test_greet_cmd.py
#   file_relpath : tests/cli/test_greet_cmd.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""CLI tests for `termplate example greet`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli

if TYPE_CHECKING:
    from click.testing import Result


def test_greet() -> None:
    """The greeting is printed as plain text."""
    result: Result = run_cli(["example", "greet", "--name", "John"])

    assert_SUCCESS(result)
    assert result.stdout == "Hello, John! Welcome to Termplate.\n"


def test_greet_uppercase_short_flags() -> None:
    """``-n`` and ``-u`` are accepted."""
    result: Result = run_cli(["example", "greet", "-n", "Jane", "-u"])

    assert_SUCCESS(result)
    assert result.stdout == "HELLO, JANE! WELCOME TO TERMPLATE.\n"


def test_greet_json() -> None:
    """Machine formats render a ``message`` record."""
    result: Result = run_cli(["-o", "json", "example", "greet", "--name", "John"])

    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {"message": "Hello, John! Welcome to Termplate."}


def test_greet_empty_name_is_usage_error() -> None:
    """An empty name fails validation with the usage exit code."""
    result: Result = run_cli(["example", "greet", "--name", ""])

    assert_USAGE_ERROR(result)
    assert "validation error on name: name is required" in result.stderr


def test_greet_missing_name() -> None:
    """``--name`` is required."""
    result: Result = run_cli(["example", "greet"])

    assert result.exit_code != 0
    assert "--name" in result.output
