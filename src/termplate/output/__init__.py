# topmark:header:start
#
#   project      : Termplate
#   file         : __init__.py
#   file_relpath : src/termplate/output/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Multi-format structured-data output renderer.

Public surface:

```python
import sys

from termplate.output import Formatter, RenderOptions, SingleRecord

options = RenderOptions.from_values(format="table", table_style="unicode")
Formatter(options, sys.stdout).render(SingleRecord.from_mapping({"name": "Alice"}))
```
"""

from __future__ import annotations

from termplate.output.errors import (
    RenderError,
    RenderWriteError,
    SerializationError,
    UnsupportedShapeError,
)
from termplate.output.formats import OutputFormat, TableStyle
from termplate.output.formatter import Formatter, render
from termplate.output.options import RenderOptions
from termplate.output.shapes import Grid, RecordList, SingleRecord, as_renderable
from termplate.output.table import CanonicalTable, ColumnWidths, column_widths, to_table

__all__ = [
    "CanonicalTable",
    "ColumnWidths",
    "Formatter",
    "Grid",
    "OutputFormat",
    "RecordList",
    "RenderError",
    "RenderOptions",
    "RenderWriteError",
    "SerializationError",
    "SingleRecord",
    "TableStyle",
    "UnsupportedShapeError",
    "as_renderable",
    "column_widths",
    "render",
    "to_table",
]
