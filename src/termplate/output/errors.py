# topmark:header:start
#
#   project      : Termplate
#   file         : errors.py
#   file_relpath : src/termplate/output/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Exceptions raised by the output renderer.

These errors are Click-free. The CLI maps them to exit codes in
[`termplate.cli.errors`][termplate.cli.errors]; library callers can catch
`RenderError` to handle all of them at once.

Propagation policy: every error is raised immediately, with no retry and no
fallback to another format.
"""

from __future__ import annotations


class RenderError(Exception):
    """Base class for all renderer errors."""


class UnsupportedShapeError(RenderError):
    """The value cannot be normalized into a table.

    Raised only for formats that require a tabular shape (``table`` and ``csv``).

    Attributes:
        format (str): The requested output format key.
        type_name (str): Type name of the offending value.
    """

    def __init__(self, format: str, type_name: str) -> None:
        self.format = format
        self.type_name = type_name
        super().__init__(
            f"unsupported data type for {format} output: {type_name} "
            "(expected a record, a list of records, or a grid of strings)"
        )


class SerializationError(RenderError):
    """JSON or YAML encoding failed (unsupported or cyclic value).

    Attributes:
        format (str): ``"json"`` or ``"yaml"``.
    """

    def __init__(self, format: str, reason: object) -> None:
        self.format = format
        super().__init__(f"encoding {format.upper()}: {reason}")


class RenderWriteError(RenderError):
    """The output sink rejected a write or flush (broken pipe, closed stream)."""

    def __init__(self, reason: object) -> None:
        super().__init__(f"writing output: {reason}")
