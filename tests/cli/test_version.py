# topmark:header:start
#
#   project      : Termplate
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""CLI tests for `termplate version`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import yaml

from tests.cli.conftest import assert_SUCCESS, run_cli
from termplate.constants import TERMPLATE_VERSION

if TYPE_CHECKING:
    from click.testing import Result


def test_version_text() -> None:
    """Text output is a one-line summary starting with the version."""
    result: Result = run_cli(["version"])

    assert_SUCCESS(result)
    assert result.stdout.startswith(f"Termplate {TERMPLATE_VERSION} (commit: ")
    assert result.stdout.count("\n") == 1


def test_version_json() -> None:
    """JSON output holds every build field."""
    result: Result = run_cli(["-o", "json", "version"])

    assert_SUCCESS(result)
    data = json.loads(result.stdout)
    assert data["version"] == TERMPLATE_VERSION
    assert list(data) == ["version", "commit", "date", "branch", "python_version", "platform"]


def test_version_yaml() -> None:
    """YAML output parses to the same mapping."""
    result: Result = run_cli(["-o", "yaml", "version"])

    assert_SUCCESS(result)
    assert yaml.safe_load(result.stdout)["version"] == TERMPLATE_VERSION


def test_version_table() -> None:
    """Table output is a key/value table."""
    result: Result = run_cli(["-o", "table", "--table-style", "markdown", "version"])

    assert_SUCCESS(result)
    lines = result.stdout.splitlines()
    assert lines[0].startswith("| Key ")
    assert lines[2].startswith("| version ")
    assert len(lines) == 8


def test_version_csv() -> None:
    """CSV output starts with the Key,Value header."""
    result: Result = run_cli(["-o", "csv", "version"])

    assert_SUCCESS(result)
    assert result.stdout.startswith("Key,Value\nversion,")
