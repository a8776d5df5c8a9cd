# topmark:header:start
#
#   project      : Termplate
#   file         : test_config_cmd.py
#   file_relpath : tests/cli/test_config_cmd.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""CLI tests for `termplate config show` / `config init` and config layering."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import tomlkit

from tests.cli.conftest import assert_CONFIG_ERROR, assert_SUCCESS, run_cli, write_input

if TYPE_CHECKING:
    from pathlib import Path

    import pytest
    from click.testing import Result


def test_config_show_text_defaults(isolation: Path) -> None:
    """Text output lists dotted keys with their effective values."""
    result: Result = run_cli(["config", "show"])

    assert_SUCCESS(result)
    assert result.stdout.splitlines() == [
        "output.format = text",
        "output.color = true",
        "output.pretty = true",
        "output.quiet = false",
        "output.table_style = ascii",
        "logging.level = critical",
        "logging.format = text",
    ]


def test_project_file_is_applied(isolation: Path) -> None:
    """termplate.toml in the working directory changes the defaults."""
    write_input(isolation, "termplate.toml", '[output]\nformat = "json"\npretty = false\n')

    result: Result = run_cli(["config", "show"])

    assert_SUCCESS(result)
    data = json.loads(result.stdout)
    assert data["output.format"] == "json"
    assert data["output.pretty"] == "false"


def test_cli_overrides_env_and_files(isolation: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flags beat environment variables, which beat config files."""
    write_input(isolation, "termplate.toml", '[output]\nformat = "yaml"\n')
    monkeypatch.setenv("TERMPLATE_OUTPUT_FORMAT", "csv")

    assert run_cli(["config", "show"]).stdout.startswith("Key,Value\n")

    result: Result = run_cli(["-o", "json", "config", "show"])
    assert json.loads(result.stdout)["output.format"] == "json"


def test_no_config_ignores_project_file(isolation: Path) -> None:
    """``--no-config`` skips discovered files."""
    write_input(isolation, "termplate.toml", '[output]\nformat = "json"\n')

    result: Result = run_cli(["--no-config", "config", "show"])

    assert_SUCCESS(result)
    assert result.stdout.startswith("output.format = text\n")


def test_extra_config_file(isolation: Path, tmp_path: Path) -> None:
    """``--config`` merges an explicit file."""
    extra = write_input(tmp_path, "extra.toml", '[output]\ntable_style = "markdown"\n')

    result: Result = run_cli(["--config", str(extra), "config", "show"])

    assert_SUCCESS(result)
    assert "output.table_style = markdown" in result.stdout.splitlines()


def test_invalid_value_is_a_warning(isolation: Path) -> None:
    """Invalid values are reported on stderr and the default is kept."""
    write_input(isolation, "termplate.toml", '[output]\nformat = "xml"\n')

    result: Result = run_cli(["config", "show"])

    assert_SUCCESS(result)
    assert "invalid output format 'xml'" in result.stderr
    assert result.stdout.startswith("output.format = text\n")


def test_quiet_hides_warnings(isolation: Path) -> None:
    """``-q`` suppresses configuration warnings."""
    write_input(isolation, "termplate.toml", '[output]\nformat = "xml"\n')

    result: Result = run_cli(["-q", "config", "show"])

    assert_SUCCESS(result)
    assert result.stderr == ""
    assert "output.quiet = true" in result.stdout.splitlines()


def test_malformed_config_is_config_error(isolation: Path) -> None:
    """A config file that is not valid TOML exits with CONFIG_ERROR."""
    write_input(isolation, "termplate.toml", "[output\n")

    result: Result = run_cli(["config", "show"])

    assert_CONFIG_ERROR(result)
    assert "invalid configuration" in result.stderr


def test_config_init_prints_defaults(isolation: Path) -> None:
    """The starter file is valid TOML holding the defaults."""
    result: Result = run_cli(["config", "init"])

    assert_SUCCESS(result)
    data = tomlkit.parse(result.stdout).unwrap()
    assert data["output"]["format"] == "text"
    assert data["logging"]["level"] == "critical"


def test_config_init_pyproject(isolation: Path) -> None:
    """``--pyproject`` nests the defaults under [tool.termplate]."""
    result: Result = run_cli(["config", "init", "--pyproject"])

    assert_SUCCESS(result)
    data = tomlkit.parse(result.stdout).unwrap()
    assert data["tool"]["termplate"]["output"]["table_style"] == "ascii"
