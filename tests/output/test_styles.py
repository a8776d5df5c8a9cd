# topmark:header:start
#
#   project      : Termplate
#   file         : test_styles.py
#   file_relpath : tests/output/test_styles.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Tests for the table style renderers (byte-exact output)."""

from __future__ import annotations

from termplate.output.formats import TableStyle
from termplate.output.shapes import Grid, RecordList, SingleRecord
from termplate.output.styles import (
    get_table_renderer,
    render_ascii_table,
    render_csv,
    render_markdown_table,
    render_unicode_table,
)
from termplate.output.table import CanonicalTable, column_widths, to_table

PERSON = SingleRecord.from_pairs([("name", "Alice"), ("age", 30)])


def _render(renderer: object, value: object) -> str:
    table: CanonicalTable = to_table(value)
    return renderer(table, column_widths(table))  # type: ignore[operator]


def test_ascii_key_value_table() -> None:
    """A record renders as a padded Key/Value table with a dashed rule."""
    assert _render(render_ascii_table, PERSON) == (
        "| Key  | Value |\n"
        "|------|-------|\n"
        "| name | Alice |\n"
        "| age  | 30    |\n"
    )


def test_markdown_grid() -> None:
    """The first grid row is the header of a GitHub-flavored table."""
    grid = Grid.of([["H1", "H2"], ["x", "y"]])

    assert _render(render_markdown_table, grid) == (
        "| H1 | H2 |\n"
        "|----|----|\n"
        "| x  | y  |\n"
    )


def test_unicode_box_table() -> None:
    """Box drawing frames the table with a cross rule under the header."""
    assert _render(render_unicode_table, PERSON) == (
        "┌──────┬───────┐\n"
        "│ Key  │ Value │\n"
        "├──────┼───────┤\n"
        "│ name │ Alice │\n"
        "│ age  │ 30    │\n"
        "└──────┴───────┘\n"
    )


def test_csv_record_list() -> None:
    """CSV writes the header then one line per record."""
    records = RecordList.of([{"id": 1, "name": "Bob"}, {"id": 2, "name": "Carol"}])

    assert _render(render_csv, records) == "id,name\n1,Bob\n2,Carol\n"


def test_csv_quotes_special_fields() -> None:
    """Commas, quotes and newlines are quoted; embedded quotes are doubled."""
    records = RecordList.of([{"note": 'say "hi", ok', "lines": "a\nb", "plain": "p"}])

    assert _render(render_csv, records) == (
        'note,lines,plain\n"say ""hi"", ok","a\nb",p\n'
    )


def test_header_only_tables() -> None:
    """A table without rows still renders its header and rules."""
    records = RecordList.of([], columns=("id", "name"))

    assert _render(render_ascii_table, records) == "| id | name |\n|----|------|\n"
    assert _render(render_unicode_table, records) == (
        "┌────┬──────┐\n"
        "│ id │ name │\n"
        "├────┼──────┤\n"
        "└────┴──────┘\n"
    )
    assert _render(render_csv, records) == "id,name\n"


def test_zero_columns_render_nothing() -> None:
    """Every style renders an empty string for a table without columns."""
    for renderer in (render_ascii_table, render_unicode_table, render_markdown_table, render_csv):
        assert _render(renderer, RecordList()) == ""


def test_no_trailing_whitespace() -> None:
    """Lines end at the closing delimiter."""
    out: str = _render(render_ascii_table, Grid.of([["a", "b"], ["", ""]]))

    assert all(not line.endswith(" ") for line in out.splitlines())


def test_get_table_renderer() -> None:
    """Styles resolve by member, key or alias; unknown styles fall back to ASCII."""
    assert get_table_renderer(TableStyle.UNICODE) is render_unicode_table
    assert get_table_renderer("md") is render_markdown_table
    assert get_table_renderer("box") is render_unicode_table
    assert get_table_renderer("nope") is render_ascii_table
    assert get_table_renderer(None) is render_ascii_table
