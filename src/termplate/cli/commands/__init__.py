# topmark:header:start
#
#   project      : Termplate
#   file         : __init__.py
#   file_relpath : src/termplate/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Termplate subcommands."""
