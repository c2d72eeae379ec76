# topmark:header:start
#
#   project      : Hydrant
#   file         : __init__.py
#   file_relpath : src/hydrant/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives and helpers.

Design:
    - Reports are represented by immutable `Diagnostic` instances.
    - During a serialization call, reports are accumulated in a mutable, capped
      `DiagnosticLog` (one per call; nothing is shared across calls).
    - Results expose an immutable `FrozenDiagnosticLog`.
"""

from __future__ import annotations

from hydrant.diagnostic.model import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    DiagnosticStats,
    FrozenDiagnosticLog,
    compute_diagnostic_stats,
)

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
    "DiagnosticStats",
    "FrozenDiagnosticLog",
    "compute_diagnostic_stats",
]
