# topmark:header:start
#
#   project      : Termplate
#   file         : constants.py
#   file_relpath : src/termplate/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Termplate Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version


def _resolve_version() -> str:
    try:
        return get_version("termplate")
    except PackageNotFoundError:
        return "dev"


TERMPLATE_VERSION: str = _resolve_version()

# Environment variable prefix shared by logging and config overrides
ENV_PREFIX: str = "TERMPLATE"

# Project config file name, and the pyproject.toml table that may hold the same keys
CONFIG_FILE_NAME: str = "termplate.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "termplate"

VALUE_NOT_SET: str = "<not set>"
