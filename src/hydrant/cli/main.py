# topmark:header:start
#
#   project      : Hydrant
#   file         : main.py
#   file_relpath : src/hydrant/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the Hydrant CLI.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the shared console from there.
"""

from __future__ import annotations

import click

from hydrant.cli.commands.serialize import serialize_command
from hydrant.cli.commands.version import version_command
from hydrant.cli.console import ClickConsole
from hydrant.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from hydrant.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Flags win over HYDRANT_DEBUG_LEVEL when given
    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    level: int = level_env if level_env is not None and not (verbose or quiet) else level_cli
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Hydrant CLI: serialize data to self-contained JavaScript expressions.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the Hydrant CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'hydrant serialize PATH' to serialize a JSON/TOML document.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(serialize_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
