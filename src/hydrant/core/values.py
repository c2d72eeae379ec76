# topmark:header:start
#
#   project      : Hydrant
#   file         : values.py
#   file_relpath : src/hydrant/core/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Python stand-ins for JavaScript values that have no native Python counterpart.

- `UNDEFINED`: JavaScript ``undefined`` (``None`` maps to ``null``).
- `HOLE`: an absent slot in a sparse array (``[1, HOLE, 3]`` is ``[1,,3]``).
- `Boxed`: a boxed scalar, ``Object(1)``.
- `JSMap`: a ``Map`` (keys may be any hashable value, including containers).
- `NullProtoDict`: an object without prototype, ``Object.create(null)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Literal


class Undefined(Enum):
    """Type of the `UNDEFINED` singleton."""

    UNDEFINED = "undefined"

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> Literal[False]:
        return False


class Hole(Enum):
    """Type of the `HOLE` singleton."""

    HOLE = "hole"

    def __repr__(self) -> str:
        return "HOLE"

    def __bool__(self) -> Literal[False]:
        return False


UNDEFINED: Final = Undefined.UNDEFINED
HOLE: Final = Hole.HOLE


@dataclass(frozen=True, eq=False)
class Boxed:
    """A boxed scalar (``Object(true)``, ``Object(1)``, ``Object("x")``).

    Two `Boxed` instances are never equal unless they are the same object, like
    their JavaScript counterparts.

    Attributes:
        value (bool | int | float | str): The wrapped primitive.
    """

    value: bool | int | float | str

    def __post_init__(self) -> None:
        if not isinstance(self.value, (bool, int, float, str)):
            raise TypeError(f"Boxed() expects a bool, number or string, got {type(self.value).__name__}")


class JSMap(dict):  # type: ignore[type-arg]
    """A JavaScript ``Map``: insertion-ordered, keys of any hashable type."""

    def __repr__(self) -> str:
        return f"JSMap({dict.__repr__(self)})"


class NullProtoDict(dict):  # type: ignore[type-arg]
    """A record without prototype (``Object.create(null)``)."""

    def __repr__(self) -> str:
        return f"NullProtoDict({dict.__repr__(self)})"
