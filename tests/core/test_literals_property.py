# topmark:header:start
#
#   project      : Hydrant
#   file         : test_literals_property.py
#   file_relpath : tests/core/test_literals_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for literal rendering.

Numbers must parse back to the same float, and rendered strings must decode back to
the original text when read by a JSON parser (after mapping the JavaScript-only
``\\0`` and ``\\x00`` escapes to their JSON spelling).
"""

from __future__ import annotations

import json
import re

from hypothesis import given
from hypothesis import strategies as st

from hydrant.core.literals import format_number, render_primitive, render_string

# A backslash pair is consumed as a unit so that an escaped backslash followed by
# a literal "0" is never mistaken for a NUL escape.
_JS_ONLY_ESCAPE: re.Pattern[str] = re.compile(r"(\\\\)|\\0|\\x00")


def _decode(literal: str) -> str:
    as_json: str = _JS_ONLY_ESCAPE.sub(lambda m: m.group(1) or "\\u0000", literal)
    return json.loads(as_json, strict=False)


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_format_number_round_trips(value: float) -> None:
    assert float(format_number(value)) == value


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_render_primitive_number_round_trips(value: float) -> None:
    assert float(render_primitive(value)) == value


@given(st.integers())
def test_render_primitive_integer_is_exact(value: int) -> None:
    assert render_primitive(value) == str(value)


@given(st.text())
def test_render_string_decodes_to_original(text: str) -> None:
    assert _decode(render_string(text)) == text


@given(st.text())
def test_render_string_is_markup_safe(text: str) -> None:
    rendered: str = render_string(text)
    assert "<" not in rendered
    assert ">" not in rendered
    assert chr(0x2028) not in rendered
    assert chr(0x2029) not in rendered
