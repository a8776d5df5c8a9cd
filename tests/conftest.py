# topmark:header:start
#
#   project      : Termplate
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Termplate Authors
#
# topmark:header:end

"""Pytest configuration for the Termplate test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, and provides typed wrappers around common pytest decorators.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `termplate.config.model.MutableConfig` (mutable), then
      `freeze()` into a `termplate.config.model.Config`.
    - Do **not** mutate a frozen `Config`. If you need to tweak one, call
      `Config.thaw()`, edit the returned `MutableConfig`, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from termplate.config import logging
from termplate.config.model import MutableConfig

if TYPE_CHECKING:
    from pathlib import Path

    from termplate.config.model import Config

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]

TERMPLATE_ENV_VARS: tuple[str, ...] = (
    "TERMPLATE_LOG_LEVEL",
    "TERMPLATE_LOG_FORMAT",
    "TERMPLATE_OUTPUT_FORMAT",
    "TERMPLATE_OUTPUT_COLOR",
    "TERMPLATE_OUTPUT_PRETTY",
    "TERMPLATE_OUTPUT_QUIET",
    "TERMPLATE_OUTPUT_TABLE_STYLE",
    "FORCE_COLOR",
    "NO_COLOR",
)


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def isolate_termplate_env(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Keep the developer's environment and user config out of test runs.

    Removes ``TERMPLATE_*`` and color variables and points ``HOME`` and
    ``XDG_CONFIG_HOME`` at an empty directory, so no user config file is found.

    Args:
        tmp_path_factory (pytest.TempPathFactory): Source of the empty home directory.
        monkeypatch (pytest.MonkeyPatch): Used to manipulate environment variables.
    """
    for name in TERMPLATE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    home: Path = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE so failing tests show detailed logs."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test in an empty project directory (no project config files).

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and CLI-style overrides.

    Args:
        **overrides (Any): Keys accepted by `MutableConfig.apply_cli_args`.

    Returns:
        Config: The frozen configuration.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    draft.apply_cli_args(overrides)
    return draft.freeze()
