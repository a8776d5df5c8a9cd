# topmark:header:start
#
#   project      : Termplate
#   file         : __init__.py
#   file_relpath : src/termplate/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Click command-line interface for Termplate."""
