# topmark:header:start
#
#   project      : Hydrant
#   file         : names.py
#   file_relpath : src/hydrant/core/names.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Deterministic short binding names (``a``, ``b``, ..., ``$``, ``aa``, ``ab``, ...)."""

from __future__ import annotations

from hydrant.constants import NAME_CHARS, RESERVED_WORDS


def get_name(num: int) -> str:
    """Return the binding name for the zero-based index ``num``.

    Names are the bijective base-54 numerals over `NAME_CHARS`. A name that is a
    JavaScript reserved word (``do``, ``if``, ``in``, ...) gets a ``0`` suffix.

    Args:
        num (int): Zero-based index in naming order.

    Returns:
        str: The binding name.
    """
    base = len(NAME_CHARS)
    name = ""
    while True:
        name = NAME_CHARS[num % base] + name
        num = num // base - 1
        if num < 0:
            break
    return f"{name}0" if name in RESERVED_WORDS else name
