# topmark:header:start
#
#   project      : Hydrant
#   file         : version.py
#   file_relpath : src/hydrant/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hydrant `version` command.

Prints the current Hydrant version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import TYPE_CHECKING

import click

from hydrant.cli.options import EnumChoiceParam
from hydrant.constants import HYDRANT_VERSION

if TYPE_CHECKING:
    from hydrant.cli.console import ConsoleLike


class VersionFormat(str, Enum):
    """Output formats for the `version` command."""

    TEXT = "text"
    JSON = "json"


@click.command(
    name="version",
    help="Show the current version of Hydrant.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(VersionFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in VersionFormat)}).",
)
def version_command(*, output_format: VersionFormat | None = None) -> None:
    """Show the current version of Hydrant.

    Args:
        output_format (VersionFormat | None): Optional output format (plain text or JSON).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if output_format == VersionFormat.JSON:
        console.print(json.dumps({"version": HYDRANT_VERSION}))
    else:
        console.print(console.styled(HYDRANT_VERSION, bold=True))
