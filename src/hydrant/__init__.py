# topmark:header:start
#
#   project      : Hydrant
#   file         : __init__.py
#   file_relpath : src/hydrant/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hydrant package.

Hydrant turns a Python value graph (including shared and cyclic structure) into
one self-contained JavaScript expression for state hydration, and exposes both a
small typed API and a CLI.
"""

from __future__ import annotations

from hydrant.api import SerializeResult, serialize, serialize_report
from hydrant.core.values import HOLE, UNDEFINED, Boxed, JSMap, NullProtoDict
from hydrant.diagnostic.model import DiagnosticLevel

__all__ = [
    "HOLE",
    "UNDEFINED",
    "Boxed",
    "DiagnosticLevel",
    "JSMap",
    "NullProtoDict",
    "SerializeResult",
    "serialize",
    "serialize_report",
]
