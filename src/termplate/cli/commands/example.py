# topmark:header:start
#
#   project      : Termplate
#   file         : example.py
#   file_relpath : src/termplate/cli/commands/example.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Termplate `example` command group.

A worked example of a command backed by a handler and a service
(see [`termplate.services.greet`][termplate.services.greet]).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from termplate.cli.cmd_common import get_config, get_console, render_value
from termplate.cli.errors import cli_errors
from termplate.config.logging import TermplateLogger, get_logger
from termplate.output.formats import OutputFormat
from termplate.services.greet import GreetHandler, GreetInput

if TYPE_CHECKING:
    from termplate.cli.console_api import ConsoleLike
    from termplate.services.greet import GreetOutput

logger: TermplateLogger = get_logger(__name__)


@click.group(name="example", help="Example commands demonstrating the project layout.")
def example_command() -> None:
    """Group for example subcommands."""


@example_command.command(
    name="greet",
    help=(
        "Greet a user with a personalized message.\n\n"
        "Examples:\n\n"
        "    termplate example greet --name John\n\n"
        "    termplate example greet --name Jane --uppercase"
    ),
)
@click.option("-n", "--name", required=True, help="Name to greet.")
@click.option(
    "-u",
    "--uppercase",
    is_flag=True,
    default=False,
    help="Convert the message to uppercase.",
)
@click.pass_context
def greet_command(ctx: click.Context, name: str, uppercase: bool) -> None:
    """Print a greeting for ``--name``.

    Raises:
        TermplateUsageError: If the name is empty.
    """
    logger.debug("greeting user (name=%r, uppercase=%s)", name, uppercase)
    console: ConsoleLike = get_console(ctx)

    with cli_errors():
        result: GreetOutput = GreetHandler().greet(GreetInput(name=name, uppercase=uppercase))

    if get_config(ctx).output_format == OutputFormat.TEXT:
        console.print(result.message)
    else:
        render_value(ctx, {"message": result.message})
