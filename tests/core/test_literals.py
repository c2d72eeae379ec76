# topmark:header:start
#
#   project      : Hydrant
#   file         : test_literals.py
#   file_relpath : tests/core/test_literals.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for literal rendering in `hydrant.core.literals`.

Covers string escaping (markup safety, control characters, surrogates), JavaScript
number formatting, primitive literals, and object key / property accessor rendering.
"""

from __future__ import annotations

import math

from hydrant import HOLE, UNDEFINED
from hydrant.core.literals import (
    format_number,
    quote_key,
    render_primitive,
    render_string,
    safe_key,
    safe_prop,
)
from tests.conftest import parametrize


def test_render_string_escapes_script_close_tag() -> None:
    """`</script>` must not survive inside a string literal."""
    rendered: str = render_string("</script>")
    assert rendered == '"\\u003C\\u002Fscript\\u003E"'
    assert "</" not in rendered


@parametrize(
    "text,expected",
    [
        ('say "hi"', '"say \\"hi\\""'),
        ("back\\slash", '"back\\\\slash"'),
        ("\b\f\n\r\t", '"\\b\\f\\n\\r\\t"'),
        ("nul\0", '"nul\\0"'),
        ("\0" + "1", '"\\x001"'),
        (chr(0x2028) + chr(0x2029), '"\\u2028\\u2029"'),
        ("plain", '"plain"'),
        ("", '""'),
    ],
)
def test_render_string_short_escapes(text: str, expected: str) -> None:
    """Quotes, control characters and line separators use their short escapes."""
    assert render_string(text) == expected


def test_render_string_keeps_astral_characters() -> None:
    """Characters outside the BMP pass through unchanged."""
    emoji: str = chr(0x1F600)
    assert render_string(emoji) == f'"{emoji}"'


def test_render_string_recombines_surrogate_pair() -> None:
    """A high/low surrogate pair stored as two code points stays together."""
    pair: str = chr(0xD83D) + chr(0xDE00)
    assert render_string(pair) == '"' + chr(0x1F600) + '"'


@parametrize(
    "text,expected",
    [
        (chr(0xD800), '"\\uD800"'),
        (chr(0xDC00) + "x", '"\\uDC00x"'),
        ("x" + chr(0xDBFF), '"x\\uDBFF"'),
    ],
)
def test_render_string_escapes_lone_surrogates(text: str, expected: str) -> None:
    """Lone surrogates are escaped with uppercase hex digits."""
    assert render_string(text) == expected


@parametrize(
    "value,expected",
    [
        (0, "0"),
        (42, "42"),
        (-7, "-7"),
        (5.0, "5"),
        (100.0, "100"),
        (1.5, "1.5"),
        (-2.5, "-2.5"),
        (0.1, "0.1"),
        (0.000001, "0.000001"),
        (1e-7, "1e-7"),
        (1.5e-7, "1.5e-7"),
        (1.2345678901234568e20, "123456789012345680000"),
        (1e21, "1e+21"),
        (1.5e300, "1.5e+300"),
        (float("inf"), "Infinity"),
        (float("-inf"), "-Infinity"),
    ],
)
def test_format_number_matches_javascript(value: float, expected: str) -> None:
    """Numbers print like JavaScript's `String(number)`."""
    assert format_number(value) == expected


def test_format_number_nan() -> None:
    assert format_number(math.nan) == "NaN"


@parametrize(
    "value,expected",
    [
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (UNDEFINED, "void 0"),
        (HOLE, "void 0"),
        (-0.0, "-0"),
        (0.0, "0"),
        (0.5, ".5"),
        (-0.5, "-.5"),
        (0.000001, ".000001"),
        (12.25, "12.25"),
        ("x", '"x"'),
    ],
)
def test_render_primitive(value: object, expected: str) -> None:
    """Primitives render to their canonical literal."""
    assert render_primitive(value) == expected


@parametrize(
    "key,expected",
    [
        ("a", "a"),
        ("$x", "$x"),
        ("_y9", "_y9"),
        ("a-b", '"a-b"'),
        ("1a", '"1a"'),
        ("", '""'),
        ("a b", '"a b"'),
    ],
)
def test_safe_key(key: str, expected: str) -> None:
    """Identifier-shaped keys are bare, everything else is quoted."""
    assert safe_key(key) == expected


def test_quote_key_escapes_markup_and_separators() -> None:
    assert quote_key("</x>") == '"\\u003C/x\\u003E"'
    assert quote_key(chr(0x2028)) == '"\\u2028"'
    assert quote_key('q"') == '"q\\""'


def test_quote_key_escapes_lone_surrogate() -> None:
    assert quote_key(chr(0xD800)) == '"\\ud800"'


@parametrize(
    "key,expected",
    [
        ("x", ".x"),
        ("a b", '["a b"]'),
        ("0", '["0"]'),
    ],
)
def test_safe_prop(key: str, expected: str) -> None:
    """Property accessors use dot syntax only for identifier-shaped keys."""
    assert safe_prop(key) == expected


def test_render_primitive_prints_large_integers_exactly() -> None:
    assert render_primitive(2**60) == str(2**60)
