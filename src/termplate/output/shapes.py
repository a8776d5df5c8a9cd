# topmark:header:start
#
#   project      : Termplate
#   file         : shapes.py
#   file_relpath : src/termplate/output/shapes.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Renderable shapes accepted by the tabular renderers.

A renderable value is one of three closed variants:

- `SingleRecord`: ordered key/value pairs (rendered as a ``Key``/``Value`` table).
- `RecordList`: ordered records sharing (ideally) the same keys.
- `Grid`: rows of string cells; row 0 is the header.

Ordering is explicit by construction: a `SingleRecord` stores a tuple of pairs,
so rendering order is exactly the order the caller supplied. Building one from a
``dict`` uses the dict's insertion order.

Any other value is still valid for the text, JSON and YAML renderers, which do
not need a tabular shape; see `as_renderable`.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias


def cell_text(value: object) -> str:
    """Coerce a cell value to text: ``None`` becomes ``""``, strings pass through."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def _is_row_like(obj: object) -> bool:
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray))


def _is_scalar(obj: object) -> bool:
    return obj is None or isinstance(obj, (str, int, float, bool))


@dataclass(frozen=True, slots=True)
class SingleRecord:
    """Ordered key/value pairs with unique keys.

    Attributes:
        items (tuple[tuple[str, str], ...]): The pairs in rendering order.
    """

    items: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        keys = [k for k, _ in self.items]
        if len(keys) != len(set(keys)):
            raise ValueError("SingleRecord keys must be unique")

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> SingleRecord:
        """Build a record from a mapping, keeping its iteration order."""
        return cls(tuple((cell_text(k), cell_text(v)) for k, v in mapping.items()))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[Any, Any]]) -> SingleRecord:
        """Build a record from ``(key, value)`` pairs."""
        return cls(tuple((cell_text(k), cell_text(v)) for k, v in pairs))

    def to_data(self) -> dict[str, str]:
        """Return the record as a plain ``dict`` for structured renderers."""
        return dict(self.items)


@dataclass(frozen=True, slots=True)
class RecordList:
    """Ordered list of records.

    The header is ``columns`` when given, otherwise the keys of the first
    record, in the order that record presents them. Records with missing keys
    render empty cells and extra keys are ignored; heterogeneous input is
    rendered best-effort and never rejected.

    Attributes:
        records (tuple[Mapping[str, Any], ...]): The records.
        columns (tuple[str, ...] | None): Explicit header; lets an empty list
            still render a header row.
    """

    records: tuple[Mapping[str, Any], ...] = ()
    columns: tuple[str, ...] | None = None

    @classmethod
    def of(
        cls,
        records: Iterable[Mapping[str, Any]],
        *,
        columns: Iterable[str] | None = None,
    ) -> RecordList:
        """Build a record list from any iterable of mappings."""
        return cls(
            records=tuple(records),
            columns=tuple(columns) if columns is not None else None,
        )

    def keys(self) -> tuple[Any, ...]:
        """Return the lookup keys behind `header`, as the records hold them."""
        if self.columns is not None:
            return self.columns
        if not self.records:
            return ()
        return tuple(self.records[0])

    def header(self) -> tuple[str, ...]:
        """Return the header columns used for tabular rendering."""
        return tuple(cell_text(k) for k in self.keys())

    def to_data(self) -> list[dict[str, Any]]:
        """Return the records as a list of plain dicts."""
        return [dict(r) for r in self.records]


@dataclass(frozen=True, slots=True)
class Grid:
    """Rows of string cells; the first row is the header by convention.

    Attributes:
        rows (tuple[tuple[str, ...], ...]): The rows, header first.
    """

    rows: tuple[tuple[str, ...], ...] = ()

    @classmethod
    def of(cls, rows: Iterable[Iterable[Any]]) -> Grid:
        """Build a grid from any iterable of row iterables."""
        return cls(tuple(tuple(cell_text(c) for c in row) for row in rows))

    def to_data(self) -> list[list[str]]:
        """Return the rows as nested lists."""
        return [list(r) for r in self.rows]


Renderable: TypeAlias = SingleRecord | RecordList | Grid

RENDERABLE_TYPES: tuple[type, ...] = (SingleRecord, RecordList, Grid)


def as_renderable(value: object) -> Renderable | None:
    """Classify a plain Python value into a renderable shape.

    Rules:
      - a shape instance is returned unchanged;
      - a ``Mapping`` whose values are all scalars, and whose keys stay
        distinct as text, is a `SingleRecord`;
      - an empty list/tuple is an empty `RecordList`;
      - a list/tuple of mappings is a `RecordList`;
      - a list/tuple of rows (non-string sequences) is a `Grid`.

    Args:
        value (object): Any value.

    Returns:
        Renderable | None: The shape, or ``None`` when ``value`` is not tabular.
    """
    if isinstance(value, RENDERABLE_TYPES):
        return value  # type: ignore[return-value]

    if isinstance(value, Mapping):
        if not all(_is_scalar(v) for v in value.values()):
            return None
        # Keys such as 1 and "1" would collide once printed.
        if len({cell_text(k) for k in value}) != len(value):
            return None
        return SingleRecord.from_mapping(value)

    if not _is_row_like(value):
        return None

    items: Sequence[Any] = value  # type: ignore[assignment]
    if not items:
        return RecordList()
    if all(isinstance(item, Mapping) for item in items):
        return RecordList.of(items)
    if all(_is_row_like(item) for item in items):
        return Grid.of(items)
    return None


def to_plain_data(value: object) -> object:
    """Unwrap a shape into its plain data; return any other value unchanged."""
    if isinstance(value, RENDERABLE_TYPES):
        return value.to_data()  # type: ignore[union-attr]
    return value
