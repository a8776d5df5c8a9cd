# topmark:header:start
#
#   project      : Termplate
#   file         : __init__.py
#   file_relpath : src/termplate/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Shared, frontend-agnostic building blocks for Termplate.

Nothing in this package imports Click or writes to a console.
"""

from __future__ import annotations
