# topmark:header:start
#
#   project      : Termplate
#   file         : console_api.py
#   file_relpath : src/termplate/cli/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Console protocol shared by Termplate commands.

A console owns the two streams a command talks to: ``out`` receives rendered
data (it is the formatter's sink) and ordinary messages, ``err`` receives
warnings, configuration diagnostics and errors. Logging stays separate and is
configured in `termplate.config.logging`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TextIO

if TYPE_CHECKING:
    from termplate.core.diagnostics import Diagnostic


class ConsoleLike(Protocol):
    """Streams and message helpers a Termplate command may use.

    Attributes:
        out (TextIO): Sink for rendered data and plain messages.
        err (TextIO): Sink for warnings, diagnostics and errors.
        enable_color (bool): Whether messages may carry ANSI styling. Rendered
            JSON, YAML and CSV never do, whatever this says.
    """

    out: TextIO
    err: TextIO
    enable_color: bool

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to ``out``."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning to ``err``."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error to ``err``."""
        ...

    def diagnostic(self, diag: Diagnostic) -> None:
        """Report a configuration diagnostic on ``err``, styled by its level."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return ``text`` styled, or unchanged when color is off."""
        ...
