# topmark:header:start
#
#   project      : Hydrant
#   file         : literals.py
#   file_relpath : src/hydrant/core/literals.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Literal rendering for primitives, keys and property accessors.

Every string produced here is safe to inline in an HTML ``<script>`` element:
``<``, ``>`` and ``/`` never appear unescaped inside string literals, so neither
``</script>`` nor ``<!--`` can end the embedding early.
"""

from __future__ import annotations

import json
import math
import re
from decimal import Decimal
from typing import Any, Final

from hydrant.core.values import Hole, Undefined

IDENTIFIER_RE: Final[re.Pattern[str]] = re.compile(r"[_$a-zA-Z][_$a-zA-Z0-9]*")

_LINE_SEPARATOR: Final[str] = chr(0x2028)
_PARAGRAPH_SEPARATOR: Final[str] = chr(0x2029)

ESCAPED: Final[dict[str, str]] = {
    "<": "\\u003C",
    ">": "\\u003E",
    "/": "\\u002F",
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
    _LINE_SEPARATOR: "\\u2028",
    _PARAGRAPH_SEPARATOR: "\\u2029",
}

# Characters still unsafe after JSON quoting (JSON leaves them raw)
_UNSAFE_AFTER_JSON: Final[re.Pattern[str]] = re.compile(
    "[<>" + _LINE_SEPARATOR + _PARAGRAPH_SEPARATOR + "\\ud800-\\udfff]"
)


def _is_high_surrogate(code: int) -> bool:
    return 0xD800 <= code <= 0xDBFF


def _is_low_surrogate(code: int) -> bool:
    return 0xDC00 <= code <= 0xDFFF


def render_string(text: str) -> str:
    """Render ``text`` as a double-quoted JavaScript string literal.

    A high/low surrogate pair stored as two code points is kept together (and
    recombined into one character); a lone surrogate is escaped as ``\\uXXXX``.
    """
    out: list[str] = ['"']
    i = 0
    n = len(text)
    while i < n:
        char = text[i]
        code = ord(char)
        if char == '"':
            out.append('\\"')
        elif char == "\0" and i + 1 < n and text[i + 1].isdigit():
            # "\0" followed by a digit would read as a legacy octal escape
            out.append("\\x00")
        elif char in ESCAPED:
            out.append(ESCAPED[char])
        elif 0xD800 <= code <= 0xDFFF:
            nxt = ord(text[i + 1]) if i + 1 < n else 0
            if _is_high_surrogate(code) and _is_low_surrogate(nxt):
                out.append(chr(0x10000 + ((code - 0xD800) << 10) + (nxt - 0xDC00)))
                i += 1
            else:
                out.append(f"\\u{code:X}")
        else:
            out.append(char)
        i += 1
    out.append('"')
    return "".join(out)


def _shortest_digits(value: float) -> tuple[str, int]:
    """Return ``(digits, n)`` with ``abs(value) == 0.<digits> * 10**n``.

    ``repr`` yields the shortest round-tripping digit string, as JavaScript does.
    """
    dec = Decimal(repr(abs(value))).normalize()
    _sign, digit_tuple, exponent = dec.as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    return digits, int(exponent) + len(digits)


def format_number(value: float | int) -> str:
    """Return ``String(value)`` as a JavaScript engine would print it.

    Integers (other than booleans) print exactly. Floats use the shortest
    round-trip digits, positional notation for ``1e-7 <= |x| < 1e21`` and
    exponent notation (``1e+21``, ``1.5e-7``) outside that range.
    """
    if isinstance(value, int):
        return str(int(value))
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    digits, n = _shortest_digits(value)
    k = len(digits)
    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        body = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        exp = f"e{'+' if e >= 0 else '-'}{abs(e)}"
        body = digits + exp if k == 1 else f"{digits[0]}.{digits[1:]}{exp}"
    return sign + body


_LEADING_ZERO: Final[re.Pattern[str]] = re.compile(r"^(-)?0\.")


def render_primitive(value: Any) -> str:
    """Render a primitive (``None``, bool, number, str, `UNDEFINED`) as a literal.

    Negative zero renders as ``-0``; a leading ``0.`` is shortened, so ``0.5``
    renders as ``.5`` and ``-0.5`` as ``-.5``.
    """
    if isinstance(value, str):
        return render_string(value)
    if value is None:
        return "null"
    if isinstance(value, (Undefined, Hole)):
        return "void 0"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value == 0 and math.copysign(1.0, value) < 0:
        return "-0"
    return _LEADING_ZERO.sub(r"\1.", format_number(value))


def _escape_unsafe(match: re.Match[str]) -> str:
    char = match.group(0)
    if char in ESCAPED:
        return ESCAPED[char]
    return f"\\u{ord(char):04x}"


def quote_key(key: str) -> str:
    """Return ``key`` as a JSON string literal with markup-unsafe characters escaped."""
    return _UNSAFE_AFTER_JSON.sub(_escape_unsafe, json.dumps(key, ensure_ascii=False))


def safe_key(key: str) -> str:
    """Render an object-literal key: bare when identifier-shaped, quoted otherwise."""
    return key if IDENTIFIER_RE.fullmatch(key) else quote_key(key)


def safe_prop(key: str) -> str:
    """Render a property accessor: ``.key`` when identifier-shaped, ``["key"]`` otherwise."""
    return f".{key}" if IDENTIFIER_RE.fullmatch(key) else f"[{quote_key(key)}]"
