# topmark:header:start
#
#   project      : Termplate
#   file         : table.py
#   file_relpath : src/termplate/output/table.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Tabular normalization and column width computation.

Every tabular renderer consumes one canonical representation: a header row plus
data rows, all with the same number of columns. `to_table` builds it from any
renderable shape and `column_widths` measures it.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, TypeAlias

from termplate.config.logging import TermplateLogger, get_logger
from termplate.output.errors import UnsupportedShapeError
from termplate.output.shapes import Grid, RecordList, SingleRecord, as_renderable, cell_text

logger: TermplateLogger = get_logger(__name__)

KEY_VALUE_HEADER: tuple[str, str] = ("Key", "Value")

ColumnWidths: TypeAlias = tuple[int, ...]


@dataclass(frozen=True, slots=True)
class CanonicalTable:
    """Normalized header + rows.

    Invariant: ``len(row) == len(header)`` for every row. It is established by
    `to_table` and not re-checked by the renderers.

    Attributes:
        header (tuple[str, ...]): Column headers.
        rows (tuple[tuple[str, ...], ...]): Data rows.
    """

    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...] = ()

    @property
    def ncols(self) -> int:
        """Number of columns (derived from the header)."""
        return len(self.header)

    @property
    def is_empty(self) -> bool:
        """True when the table has no columns; renderers write nothing then."""
        return not self.header

    def all_rows(self) -> Iterator[tuple[str, ...]]:
        """Yield the header, then every data row."""
        yield self.header
        yield from self.rows


def _fit_row(row: tuple[str, ...], ncols: int) -> tuple[str, ...]:
    if len(row) == ncols:
        return row
    if len(row) > ncols:
        return row[:ncols]
    return row + ("",) * (ncols - len(row))


def _record_list_to_table(data: RecordList) -> CanonicalTable:
    keys: tuple[Any, ...] = data.keys()
    rows: list[tuple[str, ...]] = []
    for record in data.records:
        # Missing keys render empty; keys outside the header are dropped.
        rows.append(tuple(cell_text(record.get(k)) for k in keys))
    return CanonicalTable(header=data.header(), rows=tuple(rows))


def _grid_to_table(data: Grid) -> CanonicalTable:
    if not data.rows:
        return CanonicalTable(header=())
    header: tuple[str, ...] = data.rows[0]
    ncols: int = len(header)
    rows = tuple(_fit_row(r, ncols) for r in data.rows[1:])
    return CanonicalTable(header=header, rows=rows)


def to_table(value: object, *, format: str = "table") -> CanonicalTable:
    """Convert a renderable value into a `CanonicalTable`.

    Conversions:
      - `SingleRecord` -> header ``("Key", "Value")``, one row per pair, in pair order.
      - `RecordList` -> header from `RecordList.header`, one row per record.
      - `Grid` -> first row is the header, ragged rows padded/truncated to it.

    Plain Python values are classified first with `as_renderable`.

    Args:
        value (object): The value to normalize.
        format (str): Requested format key, used in the error message.

    Returns:
        CanonicalTable: The normalized table.

    Raises:
        UnsupportedShapeError: If ``value`` is none of the three shapes.
    """
    shape = as_renderable(value)
    match shape:
        case SingleRecord(items=items):
            table = CanonicalTable(header=KEY_VALUE_HEADER, rows=tuple((k, v) for k, v in items))
        case RecordList():
            table = _record_list_to_table(shape)
        case Grid():
            table = _grid_to_table(shape)
        case _:
            raise UnsupportedShapeError(format, type(value).__name__)

    logger.trace(
        "Normalized %s into %d column(s), %d row(s)",
        type(shape).__name__,
        table.ncols,
        len(table.rows),
    )
    return table


def column_widths(table: CanonicalTable) -> ColumnWidths:
    """Return the maximum cell length of each column, header included.

    A header-only table yields the header widths. There is no maximum width:
    wide cells are kept and narrower cells are padded to match.
    """
    widths: list[int] = [len(h) for h in table.header]
    for row in table.rows:
        for i, cell in enumerate(row):
            if len(cell) > widths[i]:
                widths[i] = len(cell)
    return tuple(widths)
