# topmark:header:start
#
#   project      : Termplate
#   file         : config.py
#   file_relpath : src/termplate/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Termplate `config` command group.

Subcommands:
    show: Display the effective (merged) configuration.
    init: Print a starter configuration file with the built-in defaults.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from termplate.cli.cmd_common import get_config, get_console, get_effective_verbosity, render_value
from termplate.config.loaders import to_toml
from termplate.config.model import MutableConfig
from termplate.constants import PYPROJECT_TOOL_SECTION
from termplate.output.formats import OutputFormat
from termplate.output.shapes import SingleRecord

if TYPE_CHECKING:
    from termplate.cli.console_api import ConsoleLike
    from termplate.config.loaders import TomlTable
    from termplate.config.model import Config


@click.group(name="config", help="Inspect and initialize Termplate configuration.")
def config_command() -> None:
    """Group for configuration subcommands."""


@config_command.command(name="show", help="Show the effective configuration.")
@click.pass_context
def config_show_command(ctx: click.Context) -> None:
    """Show the merged configuration as ``section.key`` pairs.

    Text output prints ``key = value`` lines (preceded by the merged sources with
    ``-v``); every other format renders a key/value record.
    """
    console: ConsoleLike = get_console(ctx)
    config: Config = get_config(ctx)
    settings: dict[str, str] = config.flattened()

    if config.output_format != OutputFormat.TEXT:
        render_value(ctx, SingleRecord.from_mapping(settings))
        return

    if get_effective_verbosity(ctx) > 0:
        for source in config.config_files:
            console.print(console.styled(f"# source: {source}", dim=True))
    for key, value in settings.items():
        console.print(f"{key} = {value}")


@config_command.command(name="init", help="Print a starter configuration file.")
@click.option(
    "--pyproject",
    is_flag=True,
    default=False,
    help="Nest the settings under [tool.termplate] for use in pyproject.toml.",
)
@click.pass_context
def config_init_command(ctx: click.Context, pyproject: bool) -> None:
    """Print the default configuration as TOML to stdout."""
    console: ConsoleLike = get_console(ctx)
    data: TomlTable = MutableConfig.from_defaults().freeze().to_toml_dict()
    if pyproject:
        data = {"tool": {PYPROJECT_TOOL_SECTION: data}}

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("# === BEGIN ===", fg="cyan", dim=True))
    console.print(to_toml(data), nl=False)
    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("# === END ===", fg="cyan", dim=True))
