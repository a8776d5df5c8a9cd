# topmark:header:start
#
#   project      : Termplate
#   file         : options.py
#   file_relpath : src/termplate/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Common CLI option utilities for the Termplate command tree.

This module centralizes reusable options (verbosity, color, configuration and
output) and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import os
import sys
from typing import Callable, ParamSpec, TypeVar

import click

from termplate.cli.cli_types import EnumChoiceParam
from termplate.cli.errors import TermplateUsageError
from termplate.config.logging import TermplateLogger, get_logger
from termplate.core.enum_mixins import KeyedStrEnum
from termplate.output.formats import OutputFormat, TableStyle

P = ParamSpec("P")
R = TypeVar("R")

logger: TermplateLogger = get_logger(__name__)

#: Program-output verbosity levels (not logging levels).
VERBOSITY_QUIET: int = -1
VERBOSITY_DEFAULT: int = 0
VERBOSITY_MAX: int = 2


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` is passed.
        quiet_count (int): Number of times ``-q`` is passed.

    Returns:
        int: ``-1`` when quiet, ``0`` by default, up to ``2`` for ``-vv`` and above.

    Raises:
        TermplateUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise TermplateUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return VERBOSITY_QUIET
    return min(verbose_count, VERBOSITY_MAX)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command.

    These control program output only; internal logging is configured with
    ``TERMPLATE_LOG_LEVEL`` or ``[logging] level``.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-essential output (warnings, hints).",
    )(f)
    return f


class ColorMode(KeyedStrEnum):
    """User intent for colorized terminal output."""

    AUTO = ("auto", "Color when writing to a terminal")
    ALWAYS = ("always", "Always color")
    NEVER = ("never", "Never color")


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: OutputFormat | None,
    config_color: bool = True,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode (ColorMode | None): Explicit color mode from CLI options.
        output_format (OutputFormat | None): Effective output format.
        config_color (bool): ``[output] color`` from the configuration.
        stdout_isatty (bool | None): Whether stdout is a TTY; auto-detected if None.

    Returns:
        bool: True if color output should be enabled.

    Behavior:
        Disables color for machine formats (JSON, YAML, CSV).
        Honors ``--color`` and ``--no-color`` over everything else.
        Honors ``FORCE_COLOR`` and ``NO_COLOR`` environment variables.
        Otherwise colors when the configuration allows it and stdout is a TTY.
    """
    if output_format in (OutputFormat.JSON, OutputFormat.YAML, OutputFormat.CSV):
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None or not config_color:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color [auto|always|never]`` and ``--no-color`` to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-c/--config PATH`` (repeatable) and ``--no-config`` to a command."""
    f = click.option(
        "-c",
        "--config",
        "config_files",
        type=click.Path(exists=True, dir_okay=False, path_type=str),
        multiple=True,
        help="Merge this TOML config file after the discovered ones (repeatable).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore user and project config files (only defaults, --config and env apply).",
    )(f)
    return f


def common_output_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-o/--output``, ``--pretty/--no-pretty`` and ``--table-style`` to a command."""
    f = click.option(
        "-o",
        "--output",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(OutputFormat.keys())}).",
    )(f)
    f = click.option(
        "--pretty/--no-pretty",
        "pretty",
        default=None,
        help="Pretty-print JSON and YAML output.",
    )(f)
    f = click.option(
        "--table-style",
        "table_style",
        type=EnumChoiceParam(TableStyle),
        default=None,
        help=f"Table style for '-o table' ({', '.join(TableStyle.keys())}).",
    )(f)
    return f
