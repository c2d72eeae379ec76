# topmark:header:start
#
#   project      : Hydrant
#   file         : io.py
#   file_relpath : src/hydrant/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input handling for `hydrant serialize`.

Reads the document from a path or STDIN (``-``) and parses it into plain Python
values: JSON with the stdlib `json` module, TOML with `tomlkit` (TOML dates and
datetimes come back as `datetime` objects and serialize to ``new Date(...)``).
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from hydrant.cli.errors import HydrantDataError, HydrantFileNotFoundError, HydrantIOError
from hydrant.cli.options import InputFormat
from hydrant.config.logging import get_logger

logger = get_logger(__name__)

STDIN_SENTINEL = "-"


def read_input_text(source: str, *, encoding: str = "utf-8") -> str:
    """Return the text of ``source`` (a path, or ``-`` for STDIN).

    Raises:
        HydrantFileNotFoundError: If the path does not exist.
        HydrantIOError: If the path cannot be read.
        HydrantDataError: If the bytes cannot be decoded.
    """
    if source == STDIN_SENTINEL:
        return sys.stdin.read()

    path = Path(source)
    try:
        return path.read_text(encoding=encoding)
    except FileNotFoundError as exc:
        raise HydrantFileNotFoundError(f"Input file not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise HydrantDataError(f"Cannot decode {path} as {encoding}: {exc}") from exc
    except OSError as exc:
        raise HydrantIOError(f"Cannot read {path}: {exc}") from exc


def parse_input(text: str, fmt: InputFormat, *, origin: str = "<stdin>") -> Any:
    """Parse ``text`` as ``fmt`` into plain Python values.

    Raises:
        HydrantDataError: If the text is not valid JSON/TOML.
    """
    if fmt == InputFormat.TOML:
        try:
            return tomlkit.parse(text).unwrap()
        except TomlkitParseError as exc:
            raise HydrantDataError(f"Invalid TOML in {origin}: {exc}") from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise HydrantDataError(f"Invalid JSON in {origin}: {exc}") from exc


def load_input(source: str, fmt: InputFormat | None = None) -> Any:
    """Read and parse ``source``.

    When ``fmt`` is None the format is inferred from the file suffix (``.toml``
    means TOML, anything else JSON).
    """
    if fmt is None:
        fmt = InputFormat.TOML if source.lower().endswith(".toml") else InputFormat.JSON
    origin = "<stdin>" if source == STDIN_SENTINEL else source
    logger.debug("Loading %s input from %s", fmt.value, origin)
    return parse_input(read_input_text(source), fmt, origin=origin)
