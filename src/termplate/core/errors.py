# topmark:header:start
#
#   project      : Termplate
#   file         : errors.py
#   file_relpath : src/termplate/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Domain-level errors shared by services and handlers.

These are plain exceptions (no Click dependency). The CLI layer maps them to
exit codes in [`termplate.cli.errors`][termplate.cli.errors].
"""

from __future__ import annotations


class TermplateDomainError(Exception):
    """Base class for domain errors raised below the CLI layer."""


class NotFoundError(TermplateDomainError):
    """A requested entity does not exist."""

    def __init__(self, message: str = "not found") -> None:
        super().__init__(message)


class AlreadyExistsError(TermplateDomainError):
    """An entity with the same identity already exists."""

    def __init__(self, message: str = "already exists") -> None:
        super().__init__(message)


class InvalidInputError(TermplateDomainError):
    """Caller-supplied input is malformed."""

    def __init__(self, message: str = "invalid input") -> None:
        super().__init__(message)


class UnauthorizedError(TermplateDomainError):
    """The caller is not allowed to perform the operation."""

    def __init__(self, message: str = "unauthorized") -> None:
        super().__init__(message)


class ValidationError(InvalidInputError):
    """Validation failure on a single named field.

    Attributes:
        field (str): Name of the offending field.
        message (str): Human-readable reason.
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"validation error on {field}: {message}")


class OperationError(TermplateDomainError):
    """Wraps a failure of an operation on an entity.

    The wrapped error is kept on ``err`` and should also be chained with
    ``raise ... from err`` so tracebacks show the root cause.

    Attributes:
        op (str): Operation name (e.g. ``"create"``).
        entity (str): Entity kind (e.g. ``"greeting"``).
        id (str): Entity identifier; may be empty.
        err (BaseException): The underlying error.
    """

    def __init__(self, op: str, entity: str, id: str, err: BaseException) -> None:
        self.op = op
        self.entity = entity
        self.id = id
        self.err = err
        if id:
            text = f"{op} {entity} {id}: {err}"
        else:
            text = f"{op} {entity}: {err}"
        super().__init__(text)


class ConfigError(TermplateDomainError):
    """The effective configuration is invalid.

    Attributes:
        problems (tuple[str, ...]): One message per offending setting or source.
    """

    def __init__(self, problems: tuple[str, ...]) -> None:
        self.problems = problems
        super().__init__("invalid configuration: " + "; ".join(problems))
