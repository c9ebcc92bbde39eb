# topmark:header:start
#
#   project      : GenBelt
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the GenBelt test suite.

Sets up TRACE logging for test runs, keeps the developer's environment from
leaking into tests, and provides a console that captures program output.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from genbelt.cli_shared.console import ClickConsole, set_default_console
from genbelt.config import logging

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


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
mark_fs: DecoratorType[Any] = as_typed_mark(pytest.mark.fs)


class CapturingConsole(ClickConsole):
    """ClickConsole writing to in-memory buffers."""

    def __init__(self, *, enable_color: bool = True) -> None:
        super().__init__(enable_color=enable_color, out=io.StringIO(), err=io.StringIO())

    @property
    def stdout(self) -> str:
        """Everything printed so far."""
        return cast("io.StringIO", self.out).getvalue()


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep shell settings (log level, indentation, color) out of test runs.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    for name in ("GENBELT_LOG_LEVEL", "GENBELT_INDENTATION", "FORCE_COLOR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_default_console() -> Any:
    """Start and finish every test with a lazily created process console."""
    set_default_console(None)
    yield
    set_default_console(None)


@pytest.fixture
def console() -> CapturingConsole:
    """A color-enabled console capturing its output."""
    return CapturingConsole()


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Enable TRACE logging for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
