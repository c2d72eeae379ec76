# topmark:header:start
#
#   project      : Hydrant
#   file         : logging.py
#   file_relpath : src/hydrant/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hydrant's internal logger: a TRACE level below DEBUG and severity-colored output.

These are developer logs about the serializer itself. Diagnostics about unsupported
input values are a separate stream, forwarded to the ``hydrant.diagnostics`` logger
by [`DiagnosticLog`][hydrant.diagnostic.model.DiagnosticLog].
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from hydrant.constants import ENV_DEBUG_LEVEL

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class HydrantLogger(logging.Logger):
    """`logging.Logger` with a `trace()` method for per-node serializer events."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at `TRACE_LEVEL`, attributed to the caller."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(HydrantLogger)

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}

# Highest threshold first; a record takes the style of the first one it reaches
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Color each formatted record by severity."""

    def format(self, record: logging.LogRecord) -> str:
        message: str = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def resolve_level_name(value: str | None) -> int | None:
    """Return a logging level for a level name or numeric string.

    Accepts the standard names plus ``TRACE``, ``WARN`` and ``FATAL``
    (case-insensitive) and plain integers such as ``"10"``.
    """
    if not value:
        return None
    v = value.strip().upper()
    if v.isdigit():
        return int(v)
    return LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``HYDRANT_DEBUG_LEVEL``, or None."""
    return resolve_level_name(os.environ.get(ENV_DEBUG_LEVEL))


def setup_logging(level: int | None = None) -> None:
    """Install a single colored stderr handler on the root logger.

    Without ``level``, ``HYDRANT_DEBUG_LEVEL`` decides, falling back to WARNING so
    serialization diagnostics stay visible. Records below INFO use the longer
    format that names the emitting logger and line.
    """
    if level is None:
        level = resolve_env_log_level() or logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # stdout carries the emitted expression
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> HydrantLogger:
    """Return the `HydrantLogger` registered under ``name``."""
    return cast("HydrantLogger", logging.getLogger(name))
