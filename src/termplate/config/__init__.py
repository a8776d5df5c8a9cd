# topmark:header:start
#
#   project      : Termplate
#   file         : __init__.py
#   file_relpath : src/termplate/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Configuration layer for Termplate.

Submodules:
    - ``logging``: TRACE-aware logger class and chalk-colored formatter.
    - ``keys``: canonical TOML section/key names and environment variable names.
    - ``loaders``: TOML I/O (runtime defaults, files, discovery) via ``tomlkit``.
    - ``model``: ``MutableConfig`` builder and the frozen ``Config`` snapshot.

Import from the submodules directly; this package module stays import-light so
that ``termplate.config.logging`` can be used from anywhere without cycles.
"""

from __future__ import annotations
