# topmark:header:start
#
#   project      : Hydrant
#   file         : emitter.py
#   file_relpath : src/hydrant/core/emitter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Expression emission: the second serialization pass.

Every node counted more than once by the canonicalizer gets a short name
(descending count, first encounter breaking ties). Named nodes are rendered as
their name at every occurrence; their contents are created by a self-invoking
function instead:

```js
(function(a){a.self=a;return {root:a}}({}))
```

The function parameters receive *shell* values (``{}``, ``Array(3)``,
``new Set``, ...) as arguments, statements then fill the shells in, which is
what lets cycles be expressed at all. Without shared nodes the output is the
plain nested literal.
"""

from __future__ import annotations

import datetime as dt
import re
from typing import TYPE_CHECKING, Any, Final

from hydrant.config.logging import get_logger
from hydrant.core.kinds import NodeKind, classify, string_items
from hydrant.core.literals import render_primitive, safe_key, safe_prop
from hydrant.core.names import get_name

if TYPE_CHECKING:
    from hydrant.config.logging import HydrantLogger
    from hydrant.core.canonicalizer import Canonical

logger: HydrantLogger = get_logger(__name__)

_EPOCH: Final[dt.datetime] = dt.datetime(1970, 1, 1, tzinfo=dt.timezone.utc)

_ABSENT: Final[frozenset[NodeKind]] = frozenset({NodeKind.HOLE, NodeKind.CALLABLE})

# Python-only group syntax with no JavaScript counterpart
_INLINE_FLAGS_RE: Final[re.Pattern[str]] = re.compile(r"\(\?[aiLmsux]+\)")
_COMMENT_GROUP_RE: Final[re.Pattern[str]] = re.compile(r"\(\?#[^)]*\)")
_NAMED_BACKREF_RE: Final[re.Pattern[str]] = re.compile(r"\(\?P=(\w+)\)")

# Characters escaped inside a regex literal, mapped to the text after the backslash
_PATTERN_ESCAPES: Final[dict[str, str]] = {
    "/": "/",
    "<": "x3C",
    "\n": "n",
    "\r": "r",
    chr(0x2028): "u2028",
    chr(0x2029): "u2029",
}


def epoch_millis(value: dt.date) -> int:
    """Return milliseconds since the Unix epoch (naive datetimes and dates are UTC)."""
    if isinstance(value, dt.datetime):
        moment = value if value.utcoffset() is not None else value.replace(tzinfo=dt.timezone.utc)
    else:
        moment = dt.datetime(value.year, value.month, value.day, tzinfo=dt.timezone.utc)
    return (moment - _EPOCH) // dt.timedelta(milliseconds=1)


def _pattern_body(source: str) -> str:
    """Respell a Python pattern source as the body of a JavaScript regex literal."""
    i: int = 0
    match = _INLINE_FLAGS_RE.match(source)
    while match:
        # already folded into ``pattern.flags``
        i = match.end()
        match = _INLINE_FLAGS_RE.match(source, i)

    out: list[str] = []
    n: int = len(source)
    class_open: int = -1
    while i < n:
        char = source[i]
        if char == "\\" and i + 1 < n:
            nxt = source[i + 1]
            out.append("\\" + _PATTERN_ESCAPES.get(nxt, nxt))
            i += 2
            continue
        if char in _PATTERN_ESCAPES:
            out.append("\\" + _PATTERN_ESCAPES[char])
        elif class_open >= 0:
            at_start = i == class_open + 1 or (i == class_open + 2 and source[i - 1] == "^")
            if char == "]" and at_start:
                # literal in Python, an empty class in JavaScript
                out.append("\\]")
            else:
                if char == "]":
                    class_open = -1
                out.append(char)
        elif char == "[":
            class_open = i
            out.append(char)
        elif char == "(":
            backref = _NAMED_BACKREF_RE.match(source, i)
            comment = _COMMENT_GROUP_RE.match(source, i)
            if source.startswith("(?P<", i):
                out.append("(?<")
                i += 4
                continue
            if source.startswith("(?<", i):
                out.append("(?<")
                i += 3
                continue
            if backref:
                out.append(f"\\k<{backref.group(1)}>")
                i = backref.end()
                continue
            if comment:
                i = comment.end()
                continue
            out.append(char)
        else:
            out.append(char)
        i += 1

    # a negative lookbehind on "--" would otherwise open a markup comment
    return "".join(out).replace("<!--", "<!\\-\\-") or "(?:)"


def render_pattern(pattern: re.Pattern[Any]) -> str:
    """Render a compiled pattern as a JavaScript regular expression literal.

    ``/``, ``<`` and line terminators are escaped wherever they appear, named
    groups and backreferences are respelled, leading inline flags and comment
    groups are dropped, and ``IGNORECASE``/``MULTILINE``/``DOTALL`` become
    ``i``/``m``/``s``.
    """
    source: str = (
        pattern.pattern.decode("latin-1") if isinstance(pattern.pattern, bytes) else pattern.pattern
    )
    body: str = _pattern_body(source)

    flags = ""
    if pattern.flags & re.IGNORECASE:
        flags += "i"
    if pattern.flags & re.MULTILINE:
        flags += "m"
    if pattern.flags & re.DOTALL:
        flags += "s"
    return f"/{body}/{flags}"


def _is_present(value: Any) -> bool:
    """Whether ``value`` occupies its slot (holes and callables vanish)."""
    return classify(value) not in _ABSENT


class Emitter:
    """Render a canonicalized value graph as a JavaScript expression.

    Args:
        canonical (Canonical): Result of the canonicalization pass over the same root.
    """

    def __init__(self, canonical: Canonical) -> None:
        self.canonical = canonical
        self.named: list[Any] = canonical.counts.shared()
        self.names: dict[int, str] = {id(node): get_name(i) for i, node in enumerate(self.named)}

    def render(self, node: Any) -> str:
        """Render ``node``, or its name when it is shared."""
        node = self.canonical.conversions.resolve(node)
        kind: NodeKind = classify(node)
        if kind.has_identity:
            name = self.names.get(id(node))
            if name is not None:
                return name
        return self._render_value(node, kind)

    def _render_value(self, node: Any, kind: NodeKind) -> str:
        if kind in _ABSENT:
            return "void 0"
        if kind is NodeKind.PRIMITIVE:
            return render_primitive(node)
        if kind is NodeKind.BOXED:
            return f"Object({render_primitive(node.value)})"
        if kind is NodeKind.PATTERN:
            return render_pattern(node)
        if kind is NodeKind.DATE:
            return f"new Date({epoch_millis(node)})"
        if kind is NodeKind.SEQUENCE:
            members = [self.render(v) if _is_present(v) else "" for v in node]
            tail = "," if members and not _is_present(node[-1]) else ""
            return f"[{','.join(members)}{tail}]"
        if kind is NodeKind.SET:
            return f"new Set([{','.join(self.render(v) for v in node if _is_present(v))}])"
        if kind is NodeKind.MAP:
            pairs = [
                f"[{self.render(k)},{self.render(v)}]"
                for k, v in node.items()
                if _is_present(k) and _is_present(v)
            ]
            return f"new Map([{','.join(pairs)}])"

        items = [(k, v) for k, v in string_items(node) if _is_present(v)]
        if kind is NodeKind.NULL_RECORD:
            if not items:
                return "Object.create(null)"
            props = ",".join(
                f"{safe_key(k)}:{{writable:true,enumerable:true,value:{self.render(v)}}}"
                for k, v in items
            )
            return f"Object.create(null,{{{props}}})"
        # RECORD, FOREIGN, and CONVERTIBLE nodes whose hook fell back to themselves
        return "{" + ",".join(f"{safe_key(k)}:{self.render(v)}" for k, v in items) + "}"

    def _define(self, node: Any, name: str, statements: list[str]) -> str:
        """Return the shell value for a named node and append its populating statements."""
        kind: NodeKind = classify(node)
        if kind is NodeKind.SEQUENCE:
            for i, v in enumerate(node):
                if _is_present(v):
                    statements.append(f"{name}[{i}]={self.render(v)}")
            return f"Array({len(node)})"
        if kind is NodeKind.SET:
            adds = [f"add({self.render(v)})" for v in node if _is_present(v)]
            if adds:
                statements.append(f"{name}.{'.'.join(adds)}")
            return "new Set"
        if kind is NodeKind.MAP:
            sets = [
                f"set({self.render(k)}, {self.render(v)})"
                for k, v in node.items()
                if _is_present(k) and _is_present(v)
            ]
            if sets:
                statements.append(f"{name}.{'.'.join(sets)}")
            return "new Map"
        if kind.is_leaf:
            return self._render_value(node, kind)

        for k, v in string_items(node):
            if _is_present(v):
                statements.append(f"{name}{safe_prop(k)}={self.render(v)}")
        return "Object.create(null)" if kind is NodeKind.NULL_RECORD else "{}"

    def emit(self, root: Any) -> str:
        """Render ``root``, wrapped in a binding function when any node is shared."""
        main: str = self.render(root)
        if not self.named:
            return main

        params: list[str] = []
        statements: list[str] = []
        values: list[str] = []
        for node in self.named:
            name = self.names[id(node)]
            params.append(name)
            values.append(self._define(node, name, statements))
        statements.append(f"return {main}")

        logger.debug("Emitted %d shared binding(s)", len(params))
        return f"(function({','.join(params)}){{{';'.join(statements)}}}({','.join(values)}))"


def emit(root: Any, canonical: Canonical) -> str:
    """Run the emission pass for ``root`` over its canonicalization result."""
    return Emitter(canonical).emit(root)
