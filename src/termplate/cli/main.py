# topmark:header:start
#
#   project      : Termplate
#   file         : main.py
#   file_relpath : src/termplate/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Termplate command-line entry point.

Key ideas:
- Group-level options are resolved once, and the resulting state (console,
  frozen configuration, verbosity) is placed into ``ctx.obj``.
- Subcommands read that state through the helpers in
  [`termplate.cli.cmd_common`][termplate.cli.cmd_common].
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from termplate.cli.commands.config import config_command
from termplate.cli.commands.example import example_command
from termplate.cli.commands.render import render_command
from termplate.cli.commands.version import version_command
from termplate.cli.console import ClickConsole
from termplate.cli.errors import to_cli_error
from termplate.cli.options import (
    VERBOSITY_QUIET,
    ColorMode,
    common_color_options,
    common_config_options,
    common_output_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from termplate.config.logging import (
    TermplateLogger,
    get_logger,
    parse_log_level,
    resolve_env_log_level,
    setup_logging,
)
from termplate.config.model import MutableConfig
from termplate.core.diagnostics import DiagnosticLevel
from termplate.core.errors import ConfigError

if TYPE_CHECKING:
    from termplate.cli.console_api import ConsoleLike
    from termplate.config.model import Config
    from termplate.output.formats import OutputFormat, TableStyle

logger: TermplateLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_files: tuple[str, ...] = (),
    no_config: bool = False,
    output_format: OutputFormat | None = None,
    pretty: bool | None = None,
    table_style: TableStyle | None = None,
) -> None:
    """Initialize shared state (config, verbosity, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_files (tuple[str, ...]): Extra config files from ``--config``.
        no_config (bool): Skip user and project config discovery.
        output_format (OutputFormat | None): ``--output`` override.
        pretty (bool | None): ``--pretty/--no-pretty`` override.
        table_style (TableStyle | None): ``--table-style`` override.

    Raises:
        TermplateConfigError: If the merged configuration has errors.
    """
    ctx.obj = ctx.obj or {}

    verbosity_level: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbosity_level

    # Env first, so config loading itself can be traced
    level_env: int | None = resolve_env_log_level()
    setup_logging(level=level_env)

    effective_color_mode: ColorMode | None = ColorMode.NEVER if no_color else color_mode
    draft: MutableConfig = MutableConfig.load_merged(
        extra_config_files=[Path(p) for p in config_files],
        no_config=no_config,
    )
    draft.apply_cli_args(
        {
            "output_format": output_format,
            "pretty": pretty,
            "table_style": table_style,
            "color": _color_override(effective_color_mode),
            "quiet": True if verbosity_level == VERBOSITY_QUIET else None,
        }
    )
    config: Config = draft.freeze()
    ctx.obj["config"] = config

    setup_logging(
        level=level_env if level_env is not None else parse_log_level(config.log_level),
        log_format=config.log_format,
    )

    enable_color: bool = resolve_color_mode(
        cli_mode=effective_color_mode,
        output_format=config.output_format,
        config_color=config.color,
    )
    ctx.color = enable_color
    console = ClickConsole(enable_color=enable_color)
    ctx.obj["console"] = console

    if not config.quiet:
        for diag in config.diagnostics:
            if diag.level != DiagnosticLevel.ERROR:
                console.diagnostic(diag)

    try:
        config.validate()
    except ConfigError as exc:
        raise to_cli_error(exc) from exc


def _color_override(mode: ColorMode | None) -> bool | None:
    match mode:
        case ColorMode.ALWAYS:
            return True
        case ColorMode.NEVER:
            return False
        case _:
            return None


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Termplate CLI: render structured data as text, JSON, YAML, tables or CSV.",
)
@common_verbose_options
@common_color_options
@common_config_options
@common_output_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_files: tuple[str, ...],
    no_config: bool,
    output_format: OutputFormat | None,
    pretty: bool | None,
    table_style: TableStyle | None,
) -> None:
    """Entry point for the Termplate CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_files=config_files,
        no_config=no_config,
        output_format=output_format,
        pretty=pretty,
        table_style=table_style,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'termplate render FILE -o table' to render data.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(render_command)

cli.add_command(config_command)

cli.add_command(example_command)

if __name__ == "__main__":
    cli()
