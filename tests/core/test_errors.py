# topmark:header:start
#
#   project      : Termplate
#   file         : test_errors.py
#   file_relpath : tests/core/test_errors.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Tests for the domain error types."""

from __future__ import annotations

import pytest

from termplate.core.errors import (
    ConfigError,
    InvalidInputError,
    NotFoundError,
    OperationError,
    TermplateDomainError,
    ValidationError,
)


def test_validation_error_message() -> None:
    """The message names the field."""
    err = ValidationError("name", "name is required")

    assert str(err) == "validation error on name: name is required"
    assert err.field == "name"
    assert isinstance(err, InvalidInputError)


def test_operation_error_message_with_and_without_id() -> None:
    """The id is included only when non-empty."""
    cause = RuntimeError("boom")

    assert str(OperationError("create", "user", "42", cause)) == "create user 42: boom"
    assert str(OperationError("list", "users", "", cause)) == "list users: boom"


def test_operation_error_chains_cause() -> None:
    """The wrapped error stays reachable via ``err`` and ``__cause__``."""
    cause = KeyError("k")

    with pytest.raises(OperationError) as excinfo:
        try:
            raise cause
        except KeyError as exc:
            raise OperationError("get", "item", "k", exc) from exc

    assert excinfo.value.err is cause
    assert excinfo.value.__cause__ is cause


def test_defaults_and_hierarchy() -> None:
    """All domain errors share one base class."""
    assert str(NotFoundError()) == "not found"
    assert isinstance(ConfigError(("a",)), TermplateDomainError)
    assert str(ConfigError(("a", "b"))) == "invalid configuration: a; b"
