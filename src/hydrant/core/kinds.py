# topmark:header:start
#
#   project      : Hydrant
#   file         : kinds.py
#   file_relpath : src/hydrant/core/kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Classification of Python values into the closed set of serializable kinds.

Both passes dispatch on `classify`; no other module inspects value types.
"""

from __future__ import annotations

import datetime as dt
import re
from enum import Enum
from typing import Any

from hydrant.core.values import Boxed, Hole, JSMap, NullProtoDict, Undefined


class NodeKind(str, Enum):
    """Kind of a node in the value graph."""

    PRIMITIVE = "primitive"  # None, bool, int, float, str, UNDEFINED
    HOLE = "hole"  # absent array slot
    BOXED = "boxed"
    DATE = "date"
    PATTERN = "pattern"
    SEQUENCE = "sequence"
    SET = "set"
    MAP = "map"
    RECORD = "record"
    NULL_RECORD = "null_record"
    CONVERTIBLE = "convertible"  # exposes a to_json() hook
    CALLABLE = "callable"
    FOREIGN = "foreign"  # class instance without hook

    @property
    def is_leaf(self) -> bool:
        """Whether nodes of this kind have no children to walk."""
        return self in (NodeKind.BOXED, NodeKind.DATE, NodeKind.PATTERN)

    @property
    def has_identity(self) -> bool:
        """Whether nodes of this kind are counted and may be named."""
        return self not in (NodeKind.PRIMITIVE, NodeKind.HOLE, NodeKind.CALLABLE)


_PRIMITIVE_TYPES = (str, int, float, Undefined)

# Public members of `dict` itself; a subclass adding nothing else is a plain record.
_DICT_MEMBERS: frozenset[str] = frozenset(n for n in dir(dict) if not n.startswith("_"))


def _is_plain_dict_type(cls: type) -> bool:
    for klass in cls.__mro__:
        if klass in (dict, object):
            continue
        if any(not name.startswith("_") and name not in _DICT_MEMBERS for name in vars(klass)):
            return False
    return True


def classify(value: Any) -> NodeKind:
    """Return the `NodeKind` of ``value``.

    Order matters: callables are rejected before the ``to_json`` hook is looked
    up (classes defining ``to_json`` are still callables), and the hook is looked
    up before plain records.
    """
    if value is None or isinstance(value, _PRIMITIVE_TYPES):
        return NodeKind.PRIMITIVE
    if isinstance(value, Hole):
        return NodeKind.HOLE
    if isinstance(value, Boxed):
        return NodeKind.BOXED
    if isinstance(value, dt.date):
        return NodeKind.DATE
    if isinstance(value, re.Pattern):
        return NodeKind.PATTERN
    if isinstance(value, JSMap):
        return NodeKind.MAP
    if isinstance(value, NullProtoDict):
        return NodeKind.NULL_RECORD
    if isinstance(value, (list, tuple)):
        return NodeKind.SEQUENCE
    if isinstance(value, (set, frozenset)):
        return NodeKind.SET
    if callable(value):
        return NodeKind.CALLABLE
    if callable(getattr(value, "to_json", None)):
        return NodeKind.CONVERTIBLE
    if isinstance(value, dict) and _is_plain_dict_type(type(value)):
        return NodeKind.RECORD
    return NodeKind.FOREIGN


def is_shared_empty(value: Any) -> bool:
    """Whether ``value`` is the empty ``tuple`` or ``frozenset`` CPython shares process-wide.

    Unrelated occurrences are the same object, so they are left out of reference
    counting.
    """
    return type(value) in (tuple, frozenset) and not value


def callable_name(value: Any) -> str:
    """Return a display name for a callable (function, class, bound method...)."""
    return str(getattr(value, "__qualname__", None) or getattr(value, "__name__", None) or type(value).__name__)


def string_items(node: Any) -> list[tuple[str, Any]]:
    """Return the ``(key, value)`` pairs serialized for a keyed record.

    Dicts contribute their ``str`` keys. Other objects contribute their public
    attributes from ``__dict__`` and ``__slots__``, in definition order.
    """
    if isinstance(node, dict):
        return [(k, v) for k, v in node.items() if isinstance(k, str)]

    items: dict[str, Any] = {}
    for klass in reversed(type(node).__mro__):
        slots = vars(klass).get("__slots__", ())
        for name in (slots,) if isinstance(slots, str) else slots:
            if not name.startswith("_") and hasattr(node, name):
                items[name] = getattr(node, name)
    for name, value in getattr(node, "__dict__", {}).items():
        if isinstance(name, str) and not name.startswith("_"):
            items[name] = value
    return list(items.items())


def symbolic_keys(node: Any) -> list[Any]:
    """Return the non-``str`` keys of a dict (empty for any other object)."""
    if isinstance(node, dict):
        return [k for k in node if not isinstance(k, str)]
    return []
