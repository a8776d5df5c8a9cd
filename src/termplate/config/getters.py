# topmark:header:start
#
#   project      : Termplate
#   file         : getters.py
#   file_relpath : src/termplate/config/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Checked value getters for parsed TOML tables and environment strings.

Getters never raise on bad user input: they record a warning in the supplied
`DiagnosticLog`, log it, and return ``None`` so the previous configuration
layer's value is kept.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, cast

from termplate.config.logging import TermplateLogger, get_logger

if TYPE_CHECKING:
    from termplate.config.loaders import TomlTable
    from termplate.core.diagnostics import DiagnosticLog

logger: TermplateLogger = get_logger(__name__)

_TRUE_TOKENS: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_TOKENS: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table at ``key``, or an empty dict when absent or not a table."""
    value: Any | None = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.debug("Ignoring non-table value for [%s]: %r", key, value)
    return {}


def get_string_value_or_none(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> str | None:
    """Extract an optional string; a non-string value is reported and ignored.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        where (str): Human-readable location used in the diagnostic (e.g. a file path).
        diagnostics (DiagnosticLog): Receives a warning for invalid values.

    Returns:
        str | None: The string, or ``None`` when missing or invalid.
    """
    if key not in table:
        return None
    value: Any = table[key]
    if isinstance(value, str):
        return value
    msg = f"{where}: '{key}' must be a string, got {type(value).__name__}"
    logger.warning(msg)
    diagnostics.add_warning(msg)
    return None


def get_bool_value_or_none(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> bool | None:
    """Extract an optional boolean; a non-boolean value is reported and ignored."""
    if key not in table:
        return None
    value: Any = table[key]
    if isinstance(value, bool):
        return value
    msg = f"{where}: '{key}' must be a boolean, got {type(value).__name__}"
    logger.warning(msg)
    diagnostics.add_warning(msg)
    return None


def parse_bool_token(
    raw: str | None,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> bool | None:
    """Parse an environment-style boolean (``1/0``, ``true/false``, ``yes/no``, ``on/off``)."""
    if raw is None or not raw.strip():
        return None
    token = raw.strip().lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    msg = f"{where}: cannot interpret {raw!r} as a boolean"
    logger.warning(msg)
    diagnostics.add_warning(msg)
    return None
