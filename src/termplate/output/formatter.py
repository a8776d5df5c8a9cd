# topmark:header:start
#
#   project      : Termplate
#   file         : formatter.py
#   file_relpath : src/termplate/output/formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Format selection and sink output.

`Formatter` binds resolved `RenderOptions` to an explicit output sink and
dispatches each value to the matching renderer:

- ``json`` / ``yaml``: structured renderers on the original value;
- ``table``: `to_table` -> `column_widths` -> style renderer;
- ``csv``: `to_table` -> CSV renderer;
- ``text`` and any unrecognized format: the value's string form.

Each call renders the complete output in memory, then writes it with a single
``write()`` and flushes the sink. Renderer errors propagate unchanged; sink
failures are raised as `RenderWriteError`.

The formatter keeps no state between calls, so one instance may be shared by
threads that write to different sinks. Concurrent calls on the *same* sink must
be serialized by the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from termplate.config.logging import TermplateLogger, get_logger
from termplate.output.errors import RenderWriteError
from termplate.output.formats import OutputFormat
from termplate.output.structured import render_json, render_text, render_yaml
from termplate.output.styles import get_table_renderer, render_csv
from termplate.output.table import column_widths, to_table

if TYPE_CHECKING:
    from termplate.output.options import RenderOptions
    from termplate.output.table import CanonicalTable, ColumnWidths

logger: TermplateLogger = get_logger(__name__)


class Formatter:
    """Render values to a sink according to fixed render options.

    Args:
        options (RenderOptions): Resolved options for every call on this formatter.
        sink (TextIO): Writable text stream receiving the output.

    Attributes:
        options (RenderOptions): The render options.
        sink (TextIO): The output sink.
    """

    options: RenderOptions
    sink: TextIO

    def __init__(self, options: RenderOptions, sink: TextIO) -> None:
        self.options = options
        self.sink = sink

    def render(self, value: object) -> None:
        """Render ``value`` and write it to the sink.

        Args:
            value (object): A `SingleRecord`, `RecordList`, `Grid`, a plain
                mapping/list that classifies as one, or (for text/JSON/YAML)
                any other value.

        Raises:
            UnsupportedShapeError: ``table``/``csv`` requested for a non-tabular value.
            SerializationError: JSON/YAML encoding failed.
            RenderWriteError: The sink rejected the write or flush.
        """
        self._emit(self.format(value))

    def format(self, value: object) -> str:
        """Return the rendered text for ``value`` without writing it."""
        fmt = self.options.format
        logger.debug("Rendering %s as %s", type(value).__name__, fmt)
        match fmt:
            case OutputFormat.JSON:
                return render_json(value, pretty=self.options.pretty)
            case OutputFormat.YAML:
                return render_yaml(value, pretty=self.options.pretty)
            case OutputFormat.TABLE:
                table: CanonicalTable = to_table(value, format=OutputFormat.TABLE.key)
                widths: ColumnWidths = column_widths(table)
                return get_table_renderer(self.options.table_style)(table, widths)
            case OutputFormat.CSV:
                return render_csv(to_table(value, format=OutputFormat.CSV.key))
            case OutputFormat.TEXT:
                return render_text(value)
            case _:
                logger.debug("Unrecognized output format %r, falling back to text", fmt)
                return render_text(value)

    def _emit(self, text: str) -> None:
        if not text:
            return
        try:
            self.sink.write(text)
            flush = getattr(self.sink, "flush", None)
            if callable(flush):
                flush()
        except (OSError, ValueError) as exc:
            # ValueError: "I/O operation on closed file"
            logger.debug("Sink rejected output: %s", exc)
            raise RenderWriteError(exc) from exc


def render(value: object, options: RenderOptions, sink: TextIO) -> None:
    """Render ``value`` once to ``sink``; see `Formatter.render`."""
    Formatter(options, sink).render(value)
