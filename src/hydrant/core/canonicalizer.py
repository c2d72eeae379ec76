# topmark:header:start
#
#   project      : Hydrant
#   file         : canonicalizer.py
#   file_relpath : src/hydrant/core/canonicalizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Graph canonicalization: the first of the two serialization passes.

The canonicalizer walks the value graph once, depth-first and pre-order, and
produces:

- an identity-keyed reference-count table ([`RefCounts`][hydrant.core.canonicalizer.RefCounts]);
  a node's children are walked only on its first encounter, later encounters
  only bump its count, which is what makes cycles and shared sub-graphs safe;
- a side table of ``to_json()`` conversion results
  ([`Conversions`][hydrant.core.canonicalizer.Conversions]); the input graph is
  never mutated, the emitter substitutes converted results while rendering.

Unsupported values are reported through the per-call
[`DiagnosticLog`][hydrant.diagnostic.model.DiagnosticLog] and skipped:

- callables are never counted and never walked;
- class instances without ``to_json()`` are reported, then their public
  attributes are walked anyway;
- dicts with non-``str`` keys are reported, and only their ``str`` keys are walked.

Nothing is raised for unsupported input. A ``RecursionError`` on pathologically
deep input, and exceptions raised by a ``to_json()`` hook, propagate.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Final

from hydrant.config.logging import get_logger
from hydrant.core.kinds import (
    NodeKind,
    callable_name,
    classify,
    is_shared_empty,
    string_items,
    symbolic_keys,
)
from hydrant.diagnostic.model import DiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Iterator

    from hydrant.config.logging import HydrantLogger

logger: HydrantLogger = get_logger(__name__)

_MISSING: Final = object()


@dataclass
class RefEntry:
    """A counted node. Holding ``node`` keeps its ``id()`` from being reused."""

    node: Any
    count: int = 1


class RefCounts:
    """Reference counts keyed by object identity, in first-encounter order."""

    def __init__(self) -> None:
        self._entries: dict[int, RefEntry] = {}

    def __contains__(self, node: object) -> bool:
        return id(node) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RefEntry]:
        return iter(self._entries.values())

    def add(self, node: object) -> None:
        """Record the first encounter of ``node`` (count = 1)."""
        self._entries[id(node)] = RefEntry(node)

    def increment(self, node: object) -> int:
        """Bump the count of an already recorded node and return the new count."""
        entry = self._entries[id(node)]
        entry.count += 1
        return entry.count

    def count(self, node: object) -> int:
        """Return the count of ``node`` (0 when it was never recorded)."""
        entry = self._entries.get(id(node))
        return entry.count if entry else 0

    def shared(self) -> list[Any]:
        """Return nodes seen more than once, by descending count.

        The sort is stable, so ties keep first-encounter order.
        """
        entries = [e for e in self._entries.values() if e.count > 1]
        entries.sort(key=lambda e: e.count, reverse=True)
        return [e.node for e in entries]


class Conversions:
    """Results of ``to_json()`` hooks, keyed by the identity of the original node."""

    def __init__(self) -> None:
        # id(original) -> (original, result); keeping the original alive pins its id
        self._results: dict[int, tuple[Any, Any]] = {}

    def __contains__(self, node: object) -> bool:
        return id(node) in self._results

    def __len__(self) -> int:
        return len(self._results)

    def record(self, original: object, result: object) -> None:
        self._results[id(original)] = (original, result)

    def get(self, node: object, default: Any = _MISSING) -> Any:
        """Return the converted result for ``node``, or ``default``."""
        pair = self._results.get(id(node))
        return default if pair is None else pair[1]

    def resolve(self, node: Any) -> Any:
        """Follow conversions from ``node`` to the value that is actually rendered.

        A node whose hook fell back to the node itself resolves to itself.
        """
        while True:
            result = self.get(node)
            if result is _MISSING or result is node:
                return node
            node = result


@dataclass
class Canonical:
    """Outcome of the canonicalization pass.

    Attributes:
        counts (RefCounts): Identity-keyed reference counts.
        conversions (Conversions): ``to_json()`` results by original node.
        diagnostics (DiagnosticLog): Reports recorded during the walk.
    """

    counts: RefCounts = field(default_factory=RefCounts)
    conversions: Conversions = field(default_factory=Conversions)
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    @property
    def suppressed(self) -> int:
        """Number of reports dropped because the diagnostic cap was reached."""
        return self.diagnostics.suppressed


class Canonicalizer:
    """Single-use walker building a [`Canonical`][hydrant.core.canonicalizer.Canonical]."""

    def __init__(self, diagnostics: DiagnosticLog | None = None) -> None:
        self.result = Canonical(diagnostics=diagnostics if diagnostics is not None else DiagnosticLog())

    @property
    def counts(self) -> RefCounts:
        return self.result.counts

    @property
    def conversions(self) -> Conversions:
        return self.result.conversions

    def report(self, message: str) -> None:
        self.result.diagnostics.report(message)

    def walk(self, node: Any) -> None:
        """Count ``node`` and, on its first encounter, walk its children."""
        kind: NodeKind = classify(node)

        if kind is NodeKind.CALLABLE:
            self.report(f"Cannot stringify a function {callable_name(node)}")
            return
        if not kind.has_identity or is_shared_empty(node):
            return
        if kind is NodeKind.CONVERTIBLE:
            self._convert(node)
            return

        if node in self.counts:
            self.counts.increment(node)
            return
        self.counts.add(node)

        if kind.is_leaf:
            return

        if kind is NodeKind.SEQUENCE or kind is NodeKind.SET:
            for item in node:
                self.walk(item)
        elif kind is NodeKind.MAP:
            for key, value in node.items():
                self.walk(key)
                self.walk(value)
        elif kind is NodeKind.FOREIGN:
            self.report(f"Cannot stringify arbitrary non-POJOs {type(node).__name__}")
            self._walk_items(node)
        else:
            keys = symbolic_keys(node)
            if keys:
                self.report(
                    f"Cannot stringify POJOs with symbolic keys {','.join(repr(k) for k in keys)}"
                )
            self._walk_items(node)

    def _walk_items(self, node: Any) -> None:
        for _key, value in string_items(node):
            self.walk(value)

    def _convert(self, node: Any) -> None:
        """Apply the ``to_json()`` hook of ``node`` at most once per call.

        Later encounters of the same original count the cached result instead.
        A text result is parsed as JSON; when parsing fails the node itself
        stands in for the result and is walked as a plain record.
        """
        if node in self.conversions:
            result = self.conversions.get(node)
            if result is node:
                self.counts.increment(node)
            else:
                self.walk(result)
            return

        result = node.to_json()
        if isinstance(result, str):
            try:
                result = json.loads(result)
            except json.JSONDecodeError:
                result = node
        self.conversions.record(node, result)
        logger.trace("Converted %s via to_json() to %s", type(node).__name__, type(result).__name__)

        if result is node:
            self.counts.add(node)
            self._walk_items(node)
        else:
            self.walk(result)

    def run(self, root: Any) -> Canonical:
        self.walk(root)
        logger.debug(
            "Canonicalized graph: %d node(s), %d conversion(s), %d report(s), %d suppressed",
            len(self.counts),
            len(self.conversions),
            len(self.result.diagnostics),
            self.result.suppressed,
        )
        return self.result


def canonicalize(root: Any, *, diagnostics: DiagnosticLog | None = None) -> Canonical:
    """Run the canonicalization pass over ``root``.

    Args:
        root (Any): The value graph to serialize.
        diagnostics (DiagnosticLog | None): Per-call diagnostic log (a default
            ``warning``-level log capped at 99 is created when omitted).

    Returns:
        Canonical: Reference counts, conversion results and diagnostics.
    """
    return Canonicalizer(diagnostics).run(root)
