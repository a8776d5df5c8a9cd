# topmark:header:start
#
#   project      : Termplate
#   file         : __init__.py
#   file_relpath : src/termplate/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Termplate package.

Termplate is a small CLI application scaffold. Its reusable core is a
multi-format output renderer (text, JSON, YAML, CSV and ASCII/Unicode/Markdown
tables) exposed from [`termplate.output`][termplate.output], wrapped by a Click
command tree, a TOML configuration layer and chalk-colored logging.
"""

from __future__ import annotations
