# topmark:header:start
#
#   project      : Termplate
#   file         : cmd_common.py
#   file_relpath : src/termplate/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers shared by several commands: reading the shared state that the
group stored on ``ctx.obj`` and rendering a value through the output formatter.
They avoid policy (messages, exit codes) beyond the error translation done by
[`cli_errors`][termplate.cli.errors.cli_errors].
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from termplate.cli.errors import cli_errors
from termplate.config.logging import TermplateLogger, get_logger
from termplate.output.formatter import Formatter

if TYPE_CHECKING:
    from termplate.cli.console_api import ConsoleLike
    from termplate.config.model import Config

logger: TermplateLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on ``ctx.obj`` by the group."""
    return ctx.obj["console"]


def get_config(ctx: click.Context) -> Config:
    """Return the frozen configuration stored on ``ctx.obj`` by the group."""
    return ctx.obj["config"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return program-output verbosity (``-1`` quiet, ``0`` default, ``1..2`` verbose)."""
    return int(ctx.obj.get("verbosity_level", 0))


def render_value(ctx: click.Context, value: object) -> None:
    """Render ``value`` to the console's stdout using the effective output options.

    Raises:
        TermplateDataError: The value cannot be rendered in the selected format.
        TermplateIOError: Standard output rejected the write.
    """
    config: Config = get_config(ctx)
    console: ConsoleLike = get_console(ctx)
    formatter = Formatter(config.to_render_options(), console.out)
    with cli_errors():
        formatter.render(value)
