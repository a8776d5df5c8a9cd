# topmark:header:start
#
#   project      : Termplate
#   file         : version.py
#   file_relpath : src/termplate/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Termplate `version` command.

Prints the version and build information of the running installation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from termplate import version
from termplate.cli.cmd_common import get_config, get_console, get_effective_verbosity, render_value
from termplate.output.formats import OutputFormat, is_tabular_format

if TYPE_CHECKING:
    from termplate.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the version and build information of Termplate.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Show the version and build information.

    Text output is a one-line summary (the bare version unless ``-v``); JSON and
    YAML get a mapping; table and CSV a key/value record.
    """
    console: ConsoleLike = get_console(ctx)
    info: version.BuildInfo = version.get()
    fmt: OutputFormat = get_config(ctx).output_format

    if is_tabular_format(fmt):
        render_value(ctx, info.to_record())
    elif fmt in (OutputFormat.JSON, OutputFormat.YAML):
        render_value(ctx, info.to_dict())
    elif get_effective_verbosity(ctx) > 0:
        console.print(f"Termplate {info}")
        console.print(f"    branch: {info.branch}, platform: {info.platform}")
    else:
        console.print(console.styled(f"Termplate {info}", bold=True))
