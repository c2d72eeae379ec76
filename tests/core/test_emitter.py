# topmark:header:start
#
#   project      : Hydrant
#   file         : test_emitter.py
#   file_relpath : tests/core/test_emitter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the emission pass (`hydrant.core.emitter`).

Covers pattern and date rendering helpers, binding name assignment, shell values and
populating statements for every container kind.
"""

from __future__ import annotations

import datetime as dt
import re
from typing import Any

from hydrant import HOLE, Boxed, JSMap, NullProtoDict
from hydrant.core.canonicalizer import canonicalize
from hydrant.core.emitter import Emitter, emit, epoch_millis, render_pattern
from tests.conftest import parametrize


def _emit(root: Any) -> str:
    return emit(root, canonicalize(root))


@parametrize(
    "value,expected",
    [
        (dt.datetime(1970, 1, 1, tzinfo=dt.timezone.utc), 0),
        (dt.datetime(1970, 1, 1, 0, 0, 1, tzinfo=dt.timezone.utc), 1000),
        (dt.datetime(1970, 1, 1, 0, 0, 0, 1500), 1),
        (dt.datetime(2000, 1, 1), 946684800000),
        (dt.datetime(2000, 1, 1, 1, tzinfo=dt.timezone(dt.timedelta(hours=1))), 946684800000),
        (dt.date(1970, 1, 2), 86400000),
        (dt.datetime(1969, 12, 31, 23, 59, 59, tzinfo=dt.timezone.utc), -1000),
    ],
)
def test_epoch_millis(value: dt.date, expected: int) -> None:
    """Naive datetimes and dates count as UTC; aware datetimes honor their offset."""
    assert epoch_millis(value) == expected


@parametrize(
    "pattern,expected",
    [
        (re.compile("abc"), "/abc/"),
        (re.compile(""), "/(?:)/"),
        (re.compile("a/b"), "/a\\/b/"),
        (re.compile("a\\/b"), "/a\\/b/"),
        (re.compile("x", re.IGNORECASE), "/x/i"),
        (re.compile("x", re.MULTILINE | re.DOTALL), "/x/ms"),
        (re.compile("\\d+\\.\\d*"), "/\\d+\\.\\d*/"),
        (re.compile("(?P<year>\\d{4})-(?P=year)"), "/(?<year>\\d{4})-\\k<year>/"),
        (re.compile("a\nb"), "/a\\nb/"),
        (re.compile("a" + chr(0x2028) + "b"), "/a\\u2028b/"),
        (re.compile("a\\" + chr(0x2029)), "/a\\u2029/"),
        (re.compile("(?i)abc"), "/abc/i"),
        (re.compile("(?ms)x"), "/x/ms"),
        (re.compile("(?i)"), "/(?:)/i"),
        (re.compile("\\(?P<x>"), "/\\(?P\\x3Cx>/"),
        (re.compile("[(?P<x>]"), "/[(?P\\x3Cx>]/"),
        (re.compile("[]a]"), "/[\\]a]/"),
        (re.compile("[^]a]"), "/[^\\]a]/"),
        (re.compile("a(?#note)b"), "/ab/"),
        (re.compile("(?<=a)b"), "/(?<=a)b/"),
        (re.compile("<!--"), "/\\x3C!--/"),
        (re.compile("(?<!--)x"), "/(?<!\\-\\-)x/"),
        (re.compile("a\\</b"), "/a\\x3C\\/b/"),
    ],
)
def test_render_pattern(pattern: re.Pattern[str], expected: str) -> None:
    assert render_pattern(pattern) == expected


def test_emitter_names_shared_nodes_by_descending_count() -> None:
    d: dict[str, int] = {"d": 1}
    c: dict[str, int] = {"c": 1}
    root: list[Any] = [d, c, c, d, c]
    emitter = Emitter(canonicalize(root))
    assert emitter.named == [c, d]
    assert emitter.names == {id(c): "a", id(d): "b"}
    assert emitter.emit(root) == "(function(a,b){a.c=1;b.d=1;return [b,a,a,b,a]}({},{}))"


def test_emit_without_sharing_has_no_wrapper() -> None:
    assert _emit({"a": 1, "b": [1, 2, 3]}) == "{a:1,b:[1,2,3]}"


def test_emit_unrelated_empty_tuples_stay_inline() -> None:
    assert _emit({"a": (), "b": ()}) == "{a:[],b:[]}"
    assert _emit([frozenset(), frozenset()]) == "[new Set([]),new Set([])]"


def test_emit_shared_sequence_uses_sized_array_shell() -> None:
    shared: list[Any] = [1, HOLE, 3]
    assert _emit({"x": shared, "y": shared}) == (
        "(function(a){a[0]=1;a[2]=3;return {x:a,y:a}}(Array(3)))"
    )


def test_emit_shared_set_chains_add_calls() -> None:
    shared: set[int] = {7}
    assert _emit([shared, shared]) == "(function(a){a.add(7);return [a,a]}(new Set))"


def test_emit_shared_empty_set_has_no_statement() -> None:
    shared: set[int] = set()
    assert _emit([shared, shared]) == "(function(a){return [a,a]}(new Set))"


def test_emit_shared_map_chains_set_calls() -> None:
    shared = JSMap({"k": 1, 2: "v"})
    assert _emit([shared, shared]) == (
        '(function(a){a.set("k", 1).set(2, "v");return [a,a]}(new Map))'
    )


def test_emit_shared_null_record_uses_bare_shell() -> None:
    shared = NullProtoDict({"a b": 1, "c": 2})
    assert _emit([shared, shared]) == (
        '(function(a){a["a b"]=1;a.c=2;return [a,a]}(Object.create(null)))'
    )


def test_emit_shared_leaf_is_its_own_shell() -> None:
    boxed = Boxed(True)
    when = dt.datetime(1970, 1, 1, 0, 0, 2, tzinfo=dt.timezone.utc)
    assert _emit([boxed, boxed, when, when]) == (
        "(function(a,b){return [a,a,b,b]}(Object(true),new Date(2000)))"
    )


def test_emit_nested_shared_nodes_reference_each_other() -> None:
    x: dict[str, int] = {"v": 1}
    y: dict[str, Any] = {"x": x}
    assert _emit([y, y, x]) == "(function(a,b){a.x=b;b.v=1;return [a,a,b]}({},{}))"


def test_emit_cycle() -> None:
    a: dict[str, Any] = {}
    a["self"] = a
    assert _emit(a) == "(function(a){a.self=a;return a}({}))"


def test_emit_cycle_through_sequence() -> None:
    items: list[Any] = [1]
    items.append(items)
    assert _emit(items) == "(function(a){a[0]=1;a[1]=a;return a}(Array(2)))"
