# topmark:header:start
#
#   project      : Hydrant
#   file         : __init__.py
#   file_relpath : src/hydrant/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core serialization passes.

- [`hydrant.core.canonicalizer`][hydrant.core.canonicalizer]: reference counting,
  conversion hooks, unsupported-value reports.
- [`hydrant.core.emitter`][hydrant.core.emitter]: naming and rendering.
- [`hydrant.core.literals`][hydrant.core.literals]: primitive literals and escaping.
"""

from __future__ import annotations

from hydrant.core.canonicalizer import Canonical, canonicalize
from hydrant.core.emitter import emit
from hydrant.core.kinds import NodeKind, classify
from hydrant.core.values import HOLE, UNDEFINED, Boxed, JSMap, NullProtoDict

__all__ = [
    "HOLE",
    "UNDEFINED",
    "Boxed",
    "Canonical",
    "JSMap",
    "NodeKind",
    "NullProtoDict",
    "canonicalize",
    "classify",
    "emit",
]
