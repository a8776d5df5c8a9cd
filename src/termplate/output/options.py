# topmark:header:start
#
#   project      : Termplate
#   file         : options.py
#   file_relpath : src/termplate/output/options.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Resolved render options for a single render call."""

from __future__ import annotations

from dataclasses import dataclass

from termplate.config.logging import TermplateLogger, get_logger
from termplate.output.formats import (
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_TABLE_STYLE,
    OutputFormat,
    TableStyle,
)

logger: TermplateLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Immutable options driving one render call.

    Attributes:
        format (OutputFormat): Output format to produce.
        pretty (bool): JSON uses two-space indentation and YAML block style when set.
        color (bool): Reserved; no renderer currently emits color.
        table_style (TableStyle): Drawing style, consulted only for ``OutputFormat.TABLE``.
    """

    format: OutputFormat = DEFAULT_OUTPUT_FORMAT
    pretty: bool = True
    color: bool = False
    table_style: TableStyle = DEFAULT_TABLE_STYLE

    @classmethod
    def from_values(
        cls,
        *,
        format: OutputFormat | str | None = None,
        pretty: bool = True,
        color: bool = False,
        table_style: TableStyle | str | None = None,
    ) -> RenderOptions:
        """Build options from raw (possibly string) values.

        Unrecognized format tokens fall back to ``text`` and unrecognized table
        styles to ``ascii``. This is a configuration-default policy, not an error.

        Args:
            format (OutputFormat | str | None): Format member or token.
            pretty (bool): Pretty-print JSON/YAML.
            color (bool): Reserved color flag.
            table_style (TableStyle | str | None): Table style member or token.

        Returns:
            RenderOptions: The resolved options.
        """
        fmt: OutputFormat | None = (
            format if isinstance(format, OutputFormat) else OutputFormat.parse(format)
        )
        if fmt is None:
            if format is not None:
                logger.debug(
                    "Unrecognized output format %r, using %s", format, DEFAULT_OUTPUT_FORMAT
                )
            fmt = DEFAULT_OUTPUT_FORMAT

        style: TableStyle | None = (
            table_style if isinstance(table_style, TableStyle) else TableStyle.parse(table_style)
        )
        if style is None:
            if table_style is not None:
                logger.debug(
                    "Unrecognized table style %r, using %s", table_style, DEFAULT_TABLE_STYLE
                )
            style = DEFAULT_TABLE_STYLE

        return cls(format=fmt, pretty=pretty, color=color, table_style=style)
