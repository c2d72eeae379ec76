# topmark:header:start
#
#   project      : Hydrant
#   file         : serialize.py
#   file_relpath : src/hydrant/cli/commands/serialize.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hydrant `serialize` command.

Reads a JSON or TOML document and prints the equivalent JavaScript expression.

Settings precedence (highest first): ``--level`` / ``--limit`` flags, the
``--config`` TOML file, then the ``HYDRANT_LOG_LEVEL`` / ``HYDRANT_LOG_LIMIT``
environment variables.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from hydrant.api import serialize_report
from hydrant.cli.errors import HydrantConfigError
from hydrant.cli.io import STDIN_SENTINEL, load_input
from hydrant.cli.options import EnumChoiceParam, InputFormat
from hydrant.config.logging import get_logger
from hydrant.config.settings import ENV_SETTINGS, ConfigError, load_settings_toml
from hydrant.diagnostic.model import DiagnosticLevel

if TYPE_CHECKING:
    from hydrant.api import SerializeResult
    from hydrant.cli.console import ConsoleLike
    from hydrant.config.settings import Settings

logger = get_logger(__name__)


def render_report(console: ConsoleLike, result: SerializeResult, *, color: bool) -> None:
    """Write a diagnostics summary for ``result`` to stderr."""
    stats = result.diagnostics.stats()
    for diagnostic in result.diagnostics:
        label = f"[{diagnostic.level.value}]"
        if color:
            label = diagnostic.level.color(label)
        console.warn(f"{label} {diagnostic.message}")
    console.warn(f"{stats.total} diagnostic(s) reported, {stats.suppressed} suppressed")


@click.command(
    name="serialize",
    help="Serialize a JSON or TOML document (PATH or '-' for STDIN) to a JavaScript expression.",
)
@click.argument("source", required=False, default=STDIN_SENTINEL, metavar="[PATH]")
@click.option(
    "--format",
    "input_format",
    type=EnumChoiceParam(InputFormat),
    default=None,
    help=(
        f"Input format ({', '.join(v.value for v in InputFormat)}). "
        "Defaults to the file suffix, JSON for STDIN."
    ),
)
@click.option(
    "--level",
    "level",
    type=click.Choice(DiagnosticLevel.names(), case_sensitive=False),
    default=None,
    help="Severity used for unsupported-value diagnostics (default: warn).",
)
@click.option(
    "--limit",
    "limit",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of diagnostics reported (default: 99).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="TOML file with 'log_level' / 'log_limit' (pyproject.toml: [tool.hydrant]).",
)
@click.option(
    "--report",
    is_flag=True,
    default=False,
    help="Print a diagnostics summary to stderr after the expression.",
)
def serialize_command(
    *,
    source: str,
    input_format: InputFormat | None,
    level: str | None,
    limit: int | None,
    config_path: Path | None,
    report: bool,
) -> None:
    """Serialize a document to a JavaScript expression.

    Args:
        source (str): Input path, or ``-`` for STDIN.
        input_format (InputFormat | None): Explicit input format.
        level (str | None): Diagnostic severity override.
        limit (int | None): Diagnostic cap override.
        config_path (Path | None): Optional TOML settings file.
        report (bool): Whether to print a diagnostics summary.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    settings: Settings = ENV_SETTINGS
    if config_path is not None:
        try:
            settings = load_settings_toml(config_path, ENV_SETTINGS)
        except ConfigError as exc:
            raise HydrantConfigError(str(exc)) from exc

    data = load_input(source, input_format)
    result: SerializeResult = serialize_report(data, level, limit=limit, settings=settings)
    console.print(result.text)

    if report:
        render_report(console, result, color=bool(ctx.obj.get("color_enabled")))
