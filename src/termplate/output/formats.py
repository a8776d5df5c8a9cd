# topmark:header:start
#
#   project      : Termplate
#   file         : formats.py
#   file_relpath : src/termplate/output/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Output format and table style vocabularies.

This module centralizes the `OutputFormat` and `TableStyle` enums so the CLI,
the configuration layer and the renderer agree on the same vocabulary without
introducing Click or console dependencies.
"""

from __future__ import annotations

from termplate.core.enum_mixins import KeyedStrEnum


class OutputFormat(KeyedStrEnum):
    """Output format selected by ``RenderOptions.format``.

    Attributes:
        TEXT: The value's default string representation (fallback format).
        JSON: A single JSON document.
        YAML: A single YAML document.
        TABLE: A table; the drawing style comes from `TableStyle`.
        CSV: Comma-separated values, header row first.

    Notes:
        - ``JSON`` and ``YAML`` serialize the original value; ``TABLE`` and
          ``CSV`` require a tabular shape (see `termplate.output.shapes`).
        - Unknown tokens never raise here; `KeyedStrEnum.parse` returns
          ``None`` and callers fall back to ``TEXT``.
    """

    TEXT = ("text", "Plain text", ("txt", "plain"))
    JSON = ("json", "JSON document")
    YAML = ("yaml", "YAML document", ("yml",))
    TABLE = ("table", "Table")
    CSV = ("csv", "Comma-separated values")


class TableStyle(KeyedStrEnum):
    """Drawing style for ``OutputFormat.TABLE``."""

    ASCII = ("ascii", "ASCII pipes and dashes")
    UNICODE = ("unicode", "Unicode box drawing", ("box",))
    MARKDOWN = ("markdown", "GitHub-flavored Markdown", ("md", "gfm"))


DEFAULT_OUTPUT_FORMAT: OutputFormat = OutputFormat.TEXT
DEFAULT_TABLE_STYLE: TableStyle = TableStyle.ASCII


def is_tabular_format(fmt: OutputFormat | None) -> bool:
    """Return True for formats that need a canonical table.

    Args:
        fmt: the output format to be checked.

    Returns:
        `True` for ``TABLE`` and ``CSV``, else `False`.
    """
    return fmt in {OutputFormat.TABLE, OutputFormat.CSV}
