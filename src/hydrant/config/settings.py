# topmark:header:start
#
#   project      : Hydrant
#   file         : settings.py
#   file_relpath : src/hydrant/config/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serialization settings: diagnostic level and per-call diagnostic cap.

Settings come from three layers, lowest precedence first:

1. Built-in defaults (``warn``, 99).
2. Environment variables ``HYDRANT_LOG_LEVEL`` / ``HYDRANT_LOG_LIMIT``, read once
   when this module is imported (see `ENV_SETTINGS`).
3. A TOML file: ``hydrant.toml`` (top-level keys) or ``pyproject.toml``
   (``[tool.hydrant]`` table), parsed with `tomlkit`. Used by the CLI.

Explicit arguments (API keyword arguments, CLI flags) override all of these.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from hydrant.config.logging import get_logger
from hydrant.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_LIMIT,
    ENV_LOG_LEVEL,
    ENV_LOG_LIMIT,
    PYPROJECT_TOML_NAME,
)
from hydrant.diagnostic.model import DiagnosticLevel

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from hydrant.config.logging import HydrantLogger

logger: HydrantLogger = get_logger(__name__)


class ConfigError(ValueError):
    """Raised when a settings source is missing, malformed or holds invalid values."""


@dataclass(frozen=True)
class Settings:
    """Immutable serialization settings.

    Attributes:
        log_level (DiagnosticLevel): Severity used for unsupported-value reports.
        log_limit (int): Maximum number of reports per serialization call.
    """

    log_level: DiagnosticLevel = DiagnosticLevel.WARNING
    log_limit: int = DEFAULT_LOG_LIMIT

    def merged(
        self,
        *,
        log_level: str | DiagnosticLevel | None = None,
        log_limit: int | None = None,
    ) -> Settings:
        """Return a copy with the given overrides applied (``None`` keeps the current value)."""
        result: Settings = self
        if log_level is not None:
            result = replace(result, log_level=DiagnosticLevel.from_name(log_level))
        if log_limit is not None:
            result = replace(result, log_limit=log_limit)
        return result


def parse_log_limit(value: object) -> int:
    """Return a diagnostic cap, falling back to the default for unusable values.

    Unset, non-numeric and non-positive values all fall back to 99.
    """
    if isinstance(value, bool):
        return DEFAULT_LOG_LIMIT
    if isinstance(value, int):
        return value if value > 0 else DEFAULT_LOG_LIMIT
    if isinstance(value, str):
        try:
            parsed = int(value.strip())
        except ValueError:
            return DEFAULT_LOG_LIMIT
        return parsed if parsed > 0 else DEFAULT_LOG_LIMIT
    return DEFAULT_LOG_LIMIT


def settings_from_env(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from ``HYDRANT_LOG_LEVEL`` and ``HYDRANT_LOG_LIMIT``.

    An unknown level name is logged and replaced by the default ``warn``.

    Args:
        environ (Mapping[str, str] | None): Environment mapping (defaults to `os.environ`).

    Returns:
        Settings: The resolved settings.
    """
    env: Mapping[str, str] = os.environ if environ is None else environ
    level_name: str = env.get(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL
    try:
        level = DiagnosticLevel.from_name(level_name)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r", ENV_LOG_LEVEL, level_name)
        level = DiagnosticLevel.from_name(DEFAULT_LOG_LEVEL)
    return Settings(log_level=level, log_limit=parse_log_limit(env.get(ENV_LOG_LIMIT)))


def settings_from_mapping(data: Mapping[str, Any], base: Settings) -> Settings:
    """Apply ``log_level`` / ``log_limit`` keys from a parsed TOML table onto ``base``.

    Raises:
        ConfigError: If ``log_level`` is not a known severity name or ``log_limit``
            is not a positive integer.
    """
    level: Any = data.get("log_level")
    limit: Any = data.get("log_limit")
    if level is not None and not isinstance(level, str):
        raise ConfigError(f"log_level must be a string, got {type(level).__name__}")
    if limit is not None and (isinstance(limit, bool) or not isinstance(limit, int) or limit < 1):
        raise ConfigError(f"log_limit must be a positive integer, got {limit!r}")
    try:
        return base.merged(log_level=level, log_limit=limit)
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc


def load_settings_toml(path: Path, base: Settings | None = None) -> Settings:
    """Load settings from a TOML file.

    For ``pyproject.toml`` the ``[tool.hydrant]`` table is used; any other file is
    read from its top-level keys.

    Args:
        path (Path): The TOML file.
        base (Settings | None): Settings to override (defaults to `ENV_SETTINGS`).

    Returns:
        Settings: ``base`` with the file's values applied.

    Raises:
        ConfigError: If the file cannot be read or parsed, or holds invalid values.
    """
    base = ENV_SETTINGS if base is None else base
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        doc: dict[str, Any] = tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc

    table: Any = doc
    if path.name == PYPROJECT_TOML_NAME:
        table = doc.get("tool", {}).get("hydrant", {})
    if not isinstance(table, dict):
        raise ConfigError(f"Expected a table of settings in {path}")

    logger.debug("Loaded settings from %s: %r", path, table)
    return settings_from_mapping(table, base)


# Read once at import time.
ENV_SETTINGS: Settings = settings_from_env()
