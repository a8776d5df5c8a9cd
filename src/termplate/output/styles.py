# topmark:header:start
#
#   project      : Termplate
#   file         : styles.py
#   file_relpath : src/termplate/output/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Table style renderers: ASCII, Unicode box drawing, Markdown and CSV.

Each renderer takes a `CanonicalTable` and its `ColumnWidths` and returns the
complete text, every line terminated by a newline. Cells are left-aligned and
padded to the column width. A table without columns renders as ``""``; a table
without data rows still renders its header (and separators).

These helpers are pure (no I/O); the formatter writes their result to the sink.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Final

from termplate.output.formats import TableStyle

if TYPE_CHECKING:
    from termplate.output.table import CanonicalTable, ColumnWidths

TableRenderer = Callable[["CanonicalTable", "ColumnWidths"], str]


def _pad(text: str, width: int) -> str:
    return f"{text:<{width}}"


def _delimited_row(row: Sequence[str], widths: ColumnWidths, bar: str) -> str:
    """Return ``<bar> c1 <bar> c2 <bar>`` with each cell padded to its width."""
    cells: str = f" {bar} ".join(_pad(cell, widths[i]) for i, cell in enumerate(row))
    return f"{bar} {cells} {bar}"


def _rule(widths: ColumnWidths, *, left: str, mid: str, right: str, fill: str) -> str:
    return left + mid.join(fill * (w + 2) for w in widths) + right


def _pipe_table(table: CanonicalTable, widths: ColumnWidths) -> str:
    if table.is_empty:
        return ""
    lines: list[str] = [
        _delimited_row(table.header, widths, "|"),
        _rule(widths, left="|", mid="|", right="|", fill="-"),
    ]
    lines.extend(_delimited_row(row, widths, "|") for row in table.rows)
    return "\n".join(lines) + "\n"


# --- ASCII ---


def render_ascii_table(table: CanonicalTable, widths: ColumnWidths) -> str:
    """Render ``| a | b |`` rows with a dashed rule under the header.

    Example:
        ```
        | Key  | Value |
        |------|-------|
        | name | Alice |
        ```
    """
    return _pipe_table(table, widths)


# --- Unicode box drawing ---

_BOX_TOP: Final[tuple[str, str, str]] = ("┌", "┬", "┐")
_BOX_MID: Final[tuple[str, str, str]] = ("├", "┼", "┤")
_BOX_BOTTOM: Final[tuple[str, str, str]] = ("└", "┴", "┘")
_BOX_VERTICAL: Final[str] = "│"
_BOX_HORIZONTAL: Final[str] = "─"


def _box_rule(widths: ColumnWidths, corners: tuple[str, str, str]) -> str:
    left, mid, right = corners
    return _rule(widths, left=left, mid=mid, right=right, fill=_BOX_HORIZONTAL)


def render_unicode_table(table: CanonicalTable, widths: ColumnWidths) -> str:
    """Render a fully bordered box-drawing table with a cross-rule under the header."""
    if table.is_empty:
        return ""
    lines: list[str] = [
        _box_rule(widths, _BOX_TOP),
        _delimited_row(table.header, widths, _BOX_VERTICAL),
        _box_rule(widths, _BOX_MID),
    ]
    lines.extend(_delimited_row(row, widths, _BOX_VERTICAL) for row in table.rows)
    lines.append(_box_rule(widths, _BOX_BOTTOM))
    return "\n".join(lines) + "\n"


# --- Markdown ---


def render_markdown_table(table: CanonicalTable, widths: ColumnWidths) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    The separator row is ``|`` plus ``width + 2`` dashes per column, so it lines
    up with the padded cells in a monospace view.
    """
    return _pipe_table(table, widths)


# --- CSV ---


def render_csv(table: CanonicalTable, widths: ColumnWidths | None = None) -> str:
    """Render the table as CSV, header row first.

    Fields containing a comma, a double quote, CR or LF are quoted and embedded
    quotes are doubled (``csv.QUOTE_MINIMAL``). Widths are not used; the
    parameter exists so every renderer shares one signature.
    """
    if table.is_empty:
        return ""
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerows(table.all_rows())
    return buf.getvalue()


TABLE_RENDERERS: Final[Mapping[TableStyle, TableRenderer]] = {
    TableStyle.ASCII: render_ascii_table,
    TableStyle.UNICODE: render_unicode_table,
    TableStyle.MARKDOWN: render_markdown_table,
}


def get_table_renderer(style: TableStyle | str | None) -> TableRenderer:
    """Return the renderer for ``style``; unknown styles use ASCII."""
    resolved: TableStyle | None = (
        style if isinstance(style, TableStyle) else TableStyle.parse(style)
    )
    return TABLE_RENDERERS[resolved or TableStyle.ASCII]
