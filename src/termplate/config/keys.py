# topmark:header:start
#
#   project      : Termplate
#   file         : keys.py
#   file_relpath : src/termplate/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Canonical TOML section/key names and environment variable names.

Keys defined here are the external configuration API: renaming or removing one
is a breaking change. CLI option names are defined on the Click commands.
"""

from __future__ import annotations

from typing import Final

from termplate.constants import ENV_PREFIX


class Toml:
    """TOML section names and keys used by Termplate configuration.

    The same keys are accepted in ``termplate.toml`` and in
    ``[tool.termplate]`` inside ``pyproject.toml``.
    """

    # [output]
    SECTION_OUTPUT: Final[str] = "output"

    KEY_FORMAT: Final[str] = "format"
    KEY_COLOR: Final[str] = "color"
    KEY_PRETTY: Final[str] = "pretty"
    KEY_QUIET: Final[str] = "quiet"
    KEY_TABLE_STYLE: Final[str] = "table_style"

    # [logging]
    SECTION_LOGGING: Final[str] = "logging"

    KEY_LEVEL: Final[str] = "level"
    KEY_LOG_FORMAT: Final[str] = "format"


class Env:
    """Environment variables overriding the file-based configuration."""

    OUTPUT_FORMAT: Final[str] = f"{ENV_PREFIX}_OUTPUT_FORMAT"
    OUTPUT_COLOR: Final[str] = f"{ENV_PREFIX}_OUTPUT_COLOR"
    OUTPUT_PRETTY: Final[str] = f"{ENV_PREFIX}_OUTPUT_PRETTY"
    OUTPUT_QUIET: Final[str] = f"{ENV_PREFIX}_OUTPUT_QUIET"
    OUTPUT_TABLE_STYLE: Final[str] = f"{ENV_PREFIX}_OUTPUT_TABLE_STYLE"
    LOG_LEVEL: Final[str] = f"{ENV_PREFIX}_LOG_LEVEL"
    LOG_FORMAT: Final[str] = f"{ENV_PREFIX}_LOG_FORMAT"
