# topmark:header:start
#
#   project      : Termplate
#   file         : render.py
#   file_relpath : src/termplate/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Termplate `render` command.

Reads JSON or YAML data from a file (or standard input) and renders it in the
selected output format. The shape of the data decides what tabular formats can
show:

- a mapping of scalars renders as a ``Key``/``Value`` table;
- a list of mappings renders one row per mapping;
- a list of lists renders as a grid whose first row is the header.
"""

from __future__ import annotations

import json
from pathlib import PurePath
from typing import Any, TextIO

import click
import yaml

from termplate.cli.cli_types import EnumChoiceParam
from termplate.cli.cmd_common import render_value
from termplate.cli.errors import TermplateDataError
from termplate.config.logging import TermplateLogger, get_logger
from termplate.core.enum_mixins import KeyedStrEnum

logger: TermplateLogger = get_logger(__name__)


class _InputLoader(yaml.SafeLoader):
    """``SafeLoader`` that keeps timestamps as the text they were written as."""


_InputLoader.add_constructor("tag:yaml.org,2002:timestamp", _InputLoader.construct_yaml_str)


class InputFormat(KeyedStrEnum):
    """Format of the data read by ``termplate render``."""

    AUTO = ("auto", "Detect from file extension, then content")
    JSON = ("json", "JSON document")
    YAML = ("yaml", "YAML document", ("yml",))


def detect_input_format(name: str | PurePath | None) -> InputFormat:
    """Return the input format implied by a file name (`AUTO` when unknown)."""
    suffix: str = PurePath(str(name or "")).suffix.lower()
    match suffix:
        case ".json":
            return InputFormat.JSON
        case ".yaml" | ".yml":
            return InputFormat.YAML
        case _:
            return InputFormat.AUTO


def parse_input(text: str, input_format: InputFormat) -> Any:
    """Parse ``text`` as JSON or YAML.

    With `InputFormat.AUTO` the text is tried as JSON first, then as YAML.

    Raises:
        TermplateDataError: If the text cannot be parsed.
    """
    match input_format:
        case InputFormat.JSON:
            return _load_json(text)
        case InputFormat.YAML:
            return _load_yaml(text)
        case _:
            try:
                return json.loads(text)
            except json.JSONDecodeError:
                logger.debug("Input is not JSON, trying YAML")
                return _load_yaml(text)


def _load_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise TermplateDataError(f"parsing JSON input: {exc}") from exc


def _load_yaml(text: str) -> Any:
    try:
        return yaml.load(text, Loader=_InputLoader)
    except yaml.YAMLError as exc:
        raise TermplateDataError(f"parsing YAML input: {exc}") from exc


@click.command(
    name="render",
    help="Render JSON or YAML data (from INPUT or STDIN) in the selected output format.",
)
@click.argument(
    "input_file",
    metavar="[INPUT]",
    type=click.File("r", encoding="utf-8"),
    default="-",
)
@click.option(
    "--input-format",
    "input_format",
    type=EnumChoiceParam(InputFormat),
    default=InputFormat.AUTO,
    show_default=True,
    help="Format of the input data.",
)
@click.pass_context
def render_command(ctx: click.Context, input_file: TextIO, input_format: InputFormat) -> None:
    """Render JSON or YAML input.

    Args:
        ctx (click.Context): Click context holding the shared state.
        input_file (TextIO): Open input stream (``-`` for STDIN).
        input_format (InputFormat): Declared input format; ``auto`` detects it.

    Raises:
        TermplateDataError: Input is malformed or does not fit a tabular format.
    """
    name: str | None = getattr(input_file, "name", None)
    if input_format == InputFormat.AUTO:
        input_format = detect_input_format(name)
    logger.debug("Reading %s input from %s", input_format, name)

    try:
        text: str = input_file.read()
    except UnicodeDecodeError as exc:
        raise TermplateDataError(f"reading input: not valid UTF-8 ({exc})") from exc

    data: Any = parse_input(text, input_format)
    render_value(ctx, data)
