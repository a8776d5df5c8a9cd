# topmark:header:start
#
#   project      : Termplate
#   file         : __init__.py
#   file_relpath : src/termplate/services/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Application services and the handlers that front them.

A handler validates caller input and maps failures onto
[`termplate.core.errors`][termplate.core.errors]; a service holds the business
logic and its dependencies. CLI commands only ever talk to handlers.
"""
