# topmark:header:start
#
#   project      : Termplate
#   file         : __main__.py
#   file_relpath : src/termplate/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Allow ``python -m termplate``."""

from termplate.cli.main import cli

if __name__ == "__main__":
    cli()
