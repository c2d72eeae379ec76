# topmark:header:start
#
#   project      : Hydrant
#   file         : options.py
#   file_relpath : src/hydrant/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click options and resolvers for Hydrant commands."""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, Generic, NoReturn, ParamSpec, TypeVar, cast

import click

from hydrant.cli.errors import HydrantUsageError
from hydrant.config.logging import TRACE_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

P = ParamSpec("P")
R = TypeVar("R")
E = TypeVar("E", bound=Enum)


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class InputFormat(str, Enum):
    """Format of the data read by `hydrant serialize`."""

    JSON = "json"
    TOML = "toml"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the internal logging level from ``-v`` / ``-q`` counts.

    Raises:
        HydrantUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level.
        Two -v flags set DEBUG level.
        One -v flag sets INFO level.
        One or more -q flags set ERROR level (serialization diagnostics muted).
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise HydrantUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def resolve_color_mode(*, cli_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Determine whether color output should be enabled.

    Behavior:
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors (hides serialization diagnostics).",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


class EnumChoiceParam(click.ParamType, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Converts a string to a member of the Enum (case-insensitive)."""
        if value is None or isinstance(value, self.enum_cls):
            return value

        lookup: dict[str, E] = {
            cast("str", getattr(choice, "value", str(choice))).lower(): choice
            for choice in cast("Iterable[E]", self.enum_cls)
        }
        key = str(value).lower()
        if key in lookup:
            return lookup[key]

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )
