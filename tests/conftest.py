# topmark:header:start
#
#   project      : Hydrant
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Hydrant test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    `hydrant.config.settings.ENV_SETTINGS` is resolved once at import time. Tests that
    exercise environment handling call `settings_from_env()` with an explicit mapping
    instead of relying on the process environment.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, cast

import pytest

from hydrant.config import logging
from hydrant.constants import ENV_DEBUG_LEVEL, ENV_LOG_LEVEL, ENV_LOG_LIMIT

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
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


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def clean_hydrant_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the developer's shell does not leak Hydrant or color settings into tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in (ENV_LOG_LEVEL, ENV_LOG_LIMIT, ENV_DEBUG_LEVEL, "FORCE_COLOR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure pytest settings and customize logging for the test suite.

    This function sets the logging level to TRACE for all tests,
    ensuring detailed output is captured during test execution.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
