# topmark:header:start
#
#   project      : Termplate
#   file         : greet.py
#   file_relpath : src/termplate/services/greet.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Example greeting service and handler.

This pair demonstrates the layering used by Termplate commands:

    CLI command -> `GreetHandler` (validation, error mapping) -> `GreetService` (logic)

Replace it with your own services; the tests in ``tests/services`` show how to
exercise each layer in isolation.
"""

from __future__ import annotations

from dataclasses import dataclass

from termplate.config.logging import TermplateLogger, get_logger
from termplate.core.errors import OperationError, ValidationError

logger: TermplateLogger = get_logger(__name__)

GREETING_TEMPLATE: str = "Hello, {name}! Welcome to Termplate."


class GreetService:
    """Builds greeting messages."""

    def generate_greeting(self, name: str, *, uppercase: bool = False) -> str:
        """Return the greeting for ``name``, upper-cased on request."""
        logger.info("generating greeting (name=%r, uppercase=%s)", name, uppercase)
        message: str = GREETING_TEMPLATE.format(name=name)
        if uppercase:
            message = message.upper()
        return message


@dataclass(frozen=True)
class GreetInput:
    """Input for [`GreetHandler.greet`][termplate.services.greet.GreetHandler.greet]."""

    name: str
    uppercase: bool = False


@dataclass(frozen=True)
class GreetOutput:
    """Result of a greeting."""

    message: str


class GreetHandler:
    """Validates greeting requests and delegates to a `GreetService`.

    Args:
        service (GreetService | None): Service to use; a new one when omitted.
    """

    def __init__(self, service: GreetService | None = None) -> None:
        self.service: GreetService = service or GreetService()

    def greet(self, data: GreetInput) -> GreetOutput:
        """Greet ``data.name``.

        Raises:
            ValidationError: If the name is empty or blank.
            OperationError: If the service fails; the original error is chained.
        """
        if not data.name.strip():
            raise ValidationError("name", "name is required")

        try:
            message: str = self.service.generate_greeting(data.name, uppercase=data.uppercase)
        except Exception as exc:
            raise OperationError("generate", "greeting", data.name, exc) from exc
        return GreetOutput(message=message)
