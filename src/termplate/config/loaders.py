# topmark:header:start
#
#   project      : Termplate
#   file         : loaders.py
#   file_relpath : src/termplate/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Load and render TOML configuration sources.

This module provides I/O helpers for:
- the runtime defaults (defined in code, no I/O),
- on-disk TOML files (``termplate.toml`` / ``pyproject.toml``),
- rendering a config table back to TOML text.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, TypeAlias, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from termplate.config.keys import Toml
from termplate.config.logging import TermplateLogger, get_logger
from termplate.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_SECTION

logger: TermplateLogger = get_logger(__name__)

TomlTable: TypeAlias = dict[str, Any]


def load_defaults_dict() -> TomlTable:
    """Return Termplate's runtime defaults as a new TOML-compatible dict.

    Sections/keys align with [`termplate.config.keys.Toml`][termplate.config.keys.Toml].
    """
    return {
        Toml.SECTION_OUTPUT: {
            Toml.KEY_FORMAT: "text",
            Toml.KEY_COLOR: True,
            Toml.KEY_PRETTY: True,
            Toml.KEY_QUIET: False,
            Toml.KEY_TABLE_STYLE: "ascii",
        },
        Toml.SECTION_LOGGING: {
            Toml.KEY_LEVEL: "critical",
            Toml.KEY_LOG_FORMAT: "text",
        },
    }


def read_toml_dict(path: Path) -> TomlTable:
    """Read and parse a TOML file.

    Raises:
        OSError: If the file cannot be read.
        tomlkit.exceptions.ParseError: If the file is not valid TOML.
    """
    text: str = path.read_text(encoding="utf-8")
    doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load a TOML file, logging errors and returning an empty dict on failure."""
    try:
        return read_toml_dict(path)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
    return {}


def extract_tool_section(data: TomlTable) -> TomlTable | None:
    """Return ``[tool.termplate]`` from a parsed ``pyproject.toml``, if present."""
    tool: Any = data.get("tool", {})
    if not isinstance(tool, dict):
        return None
    section: Any = tool.get(PYPROJECT_TOOL_SECTION)
    return cast("TomlTable", section) if isinstance(section, dict) else None


def discover_user_config_file() -> Path | None:
    """Return a user-scoped config path if it exists.

    Looks under XDG config (``$XDG_CONFIG_HOME/termplate/termplate.toml``) and a
    legacy fallback (``~/.termplate.toml``). The first existing path is returned.
    """
    xdg: str | None = os.environ.get("XDG_CONFIG_HOME")
    base: Path = Path(xdg) if xdg else Path.home() / ".config"
    for p in (base / "termplate" / CONFIG_FILE_NAME, Path.home() / f".{CONFIG_FILE_NAME}"):
        if p.is_file():
            return p
    return None


def discover_project_config_files(start: Path) -> list[Path]:
    """Return project config files in ``start``, in merge order.

    ``pyproject.toml`` (only when it has a ``[tool.termplate]`` table) comes
    first and ``termplate.toml`` second, so the dedicated file wins.
    """
    found: list[Path] = []
    pyproject: Path = start / PYPROJECT_FILE_NAME
    if pyproject.is_file() and extract_tool_section(load_toml_dict(pyproject)) is not None:
        found.append(pyproject)
    local: Path = start / CONFIG_FILE_NAME
    if local.is_file():
        found.append(local)
    for p in found:
        logger.debug("Discovered config file: %s", p)
    return found


def to_toml(data: TomlTable) -> str:
    """Render a TOML table as text."""
    return tomlkit.dumps(data)
