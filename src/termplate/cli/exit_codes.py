# topmark:header:start
#
#   project      : Termplate
#   file         : exit_codes.py
#   file_relpath : src/termplate/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Exit codes for the Termplate CLI.

Termplate follows the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Termplate CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure; prefer a more specific code if available.
        USAGE_ERROR: Invalid flags, arguments or input values. Mirrors ``EX_USAGE (64)``.
        DATA_ERROR: Input data cannot be parsed or rendered in the requested
            format. Mirrors ``EX_DATAERR (65)``.
        IO_ERROR: Output could not be written. Mirrors ``EX_IOERR (74)``.
        CONFIG_ERROR: Missing/invalid/malformed configuration. Mirrors ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
