# topmark:header:start
#
#   project      : Termplate
#   file         : cli_types.py
#   file_relpath : src/termplate/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Custom Click parameter types for Termplate.

`EnumChoiceParam` lets Click options accept any token understood by
[`KeyedStrEnum.parse`][termplate.core.enum_mixins.KeyedStrEnum.parse] (keys,
member names and aliases, case-insensitively) and hands the command the enum
member itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, NoReturn, Protocol, TypeVar

import click

from termplate.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=KeyedStrEnum)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a `KeyedStrEnum`."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = self.enum_cls.keys()

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a token to a member of the enum."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        member: E | None = self.enum_cls.parse(value)
        if member is not None:
            return member
        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Return ``[a|b|c]`` like `click.Choice`."""
        return f"[{'|'.join(self.choices)}]"

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Complete enum keys for Click's shell completion."""
        # Runtime import to avoid import-time dependency for non-completion paths
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix = (incomplete or "").lower()
        return [RuntimeCompletionItem(k) for k in self.choices if k.startswith(prefix)]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumChoiceParam({self.enum_cls.__name__})"
