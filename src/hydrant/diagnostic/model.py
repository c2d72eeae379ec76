# topmark:header:start
#
#   project      : Hydrant
#   file         : model.py
#   file_relpath : src/hydrant/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types and helpers for Hydrant.

Serialization never fails on unsupported values (callables, foreign class
instances, records with non-string keys). Instead it reports a diagnostic and
degrades the output. This module defines the primitives used to collect and
forward those reports.

Sections:
    * DiagnosticLevel: reporter severity names with logging levels and terminal colors.
    * Diagnostic: immutable structured diagnostic payload (level + message).
    * DiagnosticStats: aggregated per-level counts plus the number of dropped reports.
    * DiagnosticLog: mutable per-call collection that enforces the report cap.
    * FrozenDiagnosticLog: immutable snapshot returned to callers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, cast

from yachalk import chalk

from hydrant.config.logging import TRACE_LEVEL, get_logger
from hydrant.constants import DEFAULT_LOG_LIMIT, DIAGNOSTICS_LOGGER_NAME

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from hydrant.config.logging import HydrantLogger


logger: HydrantLogger = get_logger(__name__)

# Sink for the reports themselves, separate from Hydrant's internal logging
diagnostics_logger: HydrantLogger = get_logger(DIAGNOSTICS_LOGGER_NAME)


class DiagnosticLevel(Enum):
    """Severity used when reporting unsupported values.

    The values are the canonical reporter severity names. `from_name` also
    accepts the usual aliases (``warn``, ``log``, ``success``, ``critical``).
    """

    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"

    @classmethod
    def from_name(cls, name: str | DiagnosticLevel) -> DiagnosticLevel:
        """Return the level for a reporter severity name.

        Args:
            name (str | DiagnosticLevel): A level, or a case-insensitive severity name.

        Returns:
            DiagnosticLevel: The matching level.

        Raises:
            ValueError: If ``name`` is not a known severity.
        """
        if isinstance(name, DiagnosticLevel):
            return name
        key: str = name.strip().lower()
        level: DiagnosticLevel | None = _ALIASES.get(key)
        if level is None:
            raise ValueError(
                f"Unknown diagnostic level {name!r}. "
                f"Must be one of: {', '.join(sorted(_ALIASES))}"
            )
        return level

    @classmethod
    def names(cls) -> list[str]:
        """Return every accepted severity name (canonical values and aliases), sorted."""
        return sorted(_ALIASES)

    @property
    def logging_level(self) -> int:
        """Return the standard `logging` level used to forward reports of this severity."""
        return {
            DiagnosticLevel.TRACE: TRACE_LEVEL,
            DiagnosticLevel.DEBUG: logging.DEBUG,
            DiagnosticLevel.INFO: logging.INFO,
            DiagnosticLevel.WARNING: logging.WARNING,
            DiagnosticLevel.ERROR: logging.ERROR,
            DiagnosticLevel.FATAL: logging.CRITICAL,
        }[self]

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Intended for human-readable output only; machine formats should not use colors.

        Returns:
            Callable[[str], str]: The `yachalk` color function associated with this severity level.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.TRACE: chalk.gray,
                DiagnosticLevel.DEBUG: chalk.gray,
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red,
                DiagnosticLevel.FATAL: chalk.red_bright,
            }[self],
        )


_ALIASES: dict[str, DiagnosticLevel] = {
    "trace": DiagnosticLevel.TRACE,
    "verbose": DiagnosticLevel.TRACE,
    "debug": DiagnosticLevel.DEBUG,
    "info": DiagnosticLevel.INFO,
    "log": DiagnosticLevel.INFO,
    "success": DiagnosticLevel.INFO,
    "warn": DiagnosticLevel.WARNING,
    "warning": DiagnosticLevel.WARNING,
    "error": DiagnosticLevel.ERROR,
    "fatal": DiagnosticLevel.FATAL,
    "critical": DiagnosticLevel.FATAL,
}


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message."""

    level: DiagnosticLevel
    message: str


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level.

    Attributes:
        counts (dict[str, int]): Number of recorded diagnostics per level value.
        suppressed (int): Number of reports dropped because the cap was reached.
    """

    counts: dict[str, int]
    suppressed: int = 0

    @property
    def total(self) -> int:
        """Return the total count of recorded diagnostics."""
        return sum(self.counts.values())


@dataclass
class DiagnosticLog:
    """Mutable, per-call collection of diagnostics with a report cap.

    One log is created for every top-level serialization call. At most ``limit``
    reports are recorded and forwarded to the ``hydrant.diagnostics`` logger; any
    further report is dropped on the floor and only counted in ``suppressed``.

    Attributes:
        level (DiagnosticLevel): Severity attached to every report.
        limit (int): Maximum number of reports recorded for this call.
        items (list[Diagnostic]): Recorded diagnostics, in report order.
        suppressed (int): Number of reports dropped past ``limit``.
    """

    level: DiagnosticLevel = DiagnosticLevel.WARNING
    limit: int = DEFAULT_LOG_LIMIT
    items: list[Diagnostic] = field(default_factory=lambda: [])
    suppressed: int = 0

    def report(self, message: str) -> bool:
        """Record and forward ``message`` unless the cap is reached.

        Args:
            message (str): The diagnostic message.

        Returns:
            bool: True if the message was recorded, False if it was dropped.
        """
        if len(self.items) >= self.limit:
            self.suppressed += 1
            return False
        self.items.append(Diagnostic(self.level, message))
        logger.trace("Adding [%s]: %r", self.level.value, message)
        diagnostics_logger.log(self.level.logging_level, message)
        return True

    def freeze(self) -> FrozenDiagnosticLog:
        """Return an immutable snapshot of this log's diagnostics."""
        return FrozenDiagnosticLog(items=tuple(self.items), suppressed=self.suppressed)

    def stats(self) -> DiagnosticStats:
        """Return per-level counts for diagnostics in this log."""
        return compute_diagnostic_stats(self.items, suppressed=self.suppressed)

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over recorded diagnostics in insertion order."""
        return iter(self.items)

    def __len__(self) -> int:
        """Return the number of recorded diagnostics."""
        return len(self.items)


@dataclass(frozen=True, slots=True)
class FrozenDiagnosticLog:
    """Immutable counterpart to `DiagnosticLog`, returned with serialization results."""

    items: tuple[Diagnostic, ...] = ()
    suppressed: int = 0

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over contained diagnostics in insertion order."""
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def messages(self) -> list[str]:
        """Return the recorded messages in report order."""
        return [d.message for d in self.items]

    def stats(self) -> DiagnosticStats:
        """Return aggregated per-level counts for the contained diagnostics."""
        return compute_diagnostic_stats(self.items, suppressed=self.suppressed)


def compute_diagnostic_stats(
    diagnostics: Iterable[Diagnostic],
    *,
    suppressed: int = 0,
) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics.

    Args:
        diagnostics (Iterable[Diagnostic]): The recorded diagnostics.
        suppressed (int): Number of reports dropped by the cap.

    Returns:
        DiagnosticStats: Counts keyed by level value (levels without reports are omitted).
    """
    counts: dict[str, int] = {}
    for d in diagnostics:
        counts[d.level.value] = counts.get(d.level.value, 0) + 1
    return DiagnosticStats(counts=counts, suppressed=suppressed)
