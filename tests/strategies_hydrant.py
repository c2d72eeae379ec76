# topmark:header:start
#
#   project      : Hydrant
#   file         : strategies_hydrant.py
#   file_relpath : tests/strategies_hydrant.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating value graphs Hydrant can serialize.

The strategies cover every supported node kind. Sharing and cycles are added
on top by `s_shared_graph`, which reuses one generated container at several
places of a root record.
"""

from __future__ import annotations

import datetime as dt
import re
from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

from hydrant import HOLE, UNDEFINED, Boxed, JSMap, NullProtoDict

Draw = Callable[[st.SearchStrategy[Any]], Any]

# Text with markup-sensitive characters mixed in
s_text: st.SearchStrategy[str] = st.text(
    alphabet=st.one_of(
        st.sampled_from(["<", ">", "/", "\\", '"', "\n", "\0", chr(0x2028), "!--"]),
        st.characters(blacklist_categories=("Cs",)),
    ),
    max_size=12,
)

s_keys: st.SearchStrategy[str] = st.one_of(
    st.sampled_from(["a", "b", "$x", "_y", "</script>", "a b", "1", ""]),
    s_text,
)

s_primitive: st.SearchStrategy[Any] = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-(2**53), max_value=2**53),
    st.floats(allow_nan=False),
    s_text,
    st.just(UNDEFINED),
)

# Compilable pattern sources, including Python-only group syntax
s_pattern: st.SearchStrategy[re.Pattern[str]] = st.builds(
    re.compile,
    st.one_of(
        st.sampled_from(
            [
                "(?i)abc",
                "(?P<x>a)(?P=x)",
                "\\(?P<x>",
                "[]a]",
                "a(?#note)b",
                "(?<!--)x",
                "<!--",
                "a/b",
                chr(0x2028),
                "a" + chr(0x2029) + "b",
            ]
        ),
        s_text.map(re.escape),
    ),
    st.sampled_from([0, re.IGNORECASE, re.MULTILINE | re.DOTALL]),
)

s_leaf: st.SearchStrategy[Any] = st.one_of(
    s_primitive,
    st.builds(Boxed, st.one_of(st.booleans(), st.integers(-1000, 1000), s_text)),
    st.datetimes(min_value=dt.datetime(1900, 1, 1), max_value=dt.datetime(2200, 1, 1)),
    s_pattern,
)

s_hashable: st.SearchStrategy[Any] = st.one_of(
    st.none(), st.booleans(), st.integers(-1000, 1000), s_text
)


def _containers(children: st.SearchStrategy[Any]) -> st.SearchStrategy[Any]:
    return st.one_of(
        st.lists(st.one_of(children, st.just(HOLE)), max_size=5),
        st.dictionaries(s_keys, children, max_size=5),
        st.builds(NullProtoDict, st.dictionaries(s_keys, children, max_size=3)),
        st.builds(JSMap, st.dictionaries(s_hashable, children, max_size=3)),
        st.frozensets(s_hashable, max_size=4),
    )


s_json_like: st.SearchStrategy[Any] = st.recursive(
    st.one_of(st.none(), st.booleans(), st.integers(), st.floats(allow_nan=False), s_text),
    lambda children: st.one_of(
        st.lists(children, max_size=5),
        st.dictionaries(s_keys, children, max_size=5),
    ),
    max_leaves=25,
)

s_value: st.SearchStrategy[Any] = st.recursive(s_leaf, _containers, max_leaves=25)


@st.composite
def s_shared_graph(draw: Draw) -> dict[str, Any]:
    """Return a root record that references one container several times.

    When ``cyclic`` is drawn, the shared container also points back at the root.
    """
    shared: dict[str, Any] = draw(st.dictionaries(s_keys, s_value, max_size=4))
    root: dict[str, Any] = {"first": shared, "second": [shared, draw(s_value)]}
    if draw(st.booleans()):
        shared["root"] = root
    return root
