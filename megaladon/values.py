"""Runtime values: their kinds, printing, equality and truthiness.

Values are plain Python objects: ``None`` is void, ``float`` a number,
``bool`` a boolean, ``str`` a string, ``list`` a list and a
:class:`Callable` a function.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Any


class ValueType(Enum):
    """The kinds of runtime value."""

    VOID = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    STRING = auto()
    LIST = auto()
    FUNCTION = auto()
    INVALID = auto()


class _Invalid:
    """Marker for a value produced by an impossible operation."""

    _instance: _Invalid | None = None

    def __new__(cls) -> _Invalid:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "INVALID"


INVALID = _Invalid()


class Callable(ABC):
    """Something that can be called from a program."""

    @abstractmethod
    def arity(self) -> int:
        """Number of arguments expected, or -1 for any number."""

    @abstractmethod
    def call(self, interpreter: Any, arguments: list[Any]) -> Any:
        """Invoke with already evaluated arguments."""

    @abstractmethod
    def __str__(self) -> str:
        """Text shown when the value is printed."""


def type_of(value: Any) -> ValueType:
    """Return the kind of a runtime value."""
    if value is None:
        return ValueType.VOID
    if value is INVALID:
        return ValueType.INVALID
    if isinstance(value, bool):
        return ValueType.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueType.NUMBER
    if isinstance(value, str):
        return ValueType.STRING
    if isinstance(value, list):
        return ValueType.LIST
    if isinstance(value, Callable):
        return ValueType.FUNCTION
    raise TypeError(f"not a runtime value: {value!r}")


def _format_number(number: float) -> str:
    if isinstance(number, int):
        return str(number)
    if math.isfinite(number) and number.is_integer():
        return str(int(number))
    text = f"{number:.6f}".rstrip("0")
    return text[:-1] if text.endswith(".") else text


def stringify(value: Any) -> str:
    """Render a value the way ``print`` shows it."""
    kind = type_of(value)
    if kind is ValueType.VOID:
        return "void"
    if kind is ValueType.NUMBER:
        return _format_number(value)
    if kind is ValueType.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueType.STRING:
        return value
    if kind is ValueType.LIST:
        return "[" + ", ".join(stringify(item) for item in value) + "]"
    if kind is ValueType.FUNCTION:
        return str(value)
    return "invalid"


def values_equal(a: Any, b: Any) -> bool:
    """Equality of two values; values of different kinds are never equal."""
    kind = type_of(a)
    if kind is not type_of(b):
        return False
    if kind in (ValueType.VOID, ValueType.INVALID):
        return True
    if kind is ValueType.LIST:
        return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    if kind is ValueType.FUNCTION:
        return a is b
    return a == b


def is_truthy(value: Any) -> bool:
    """Void and false are false; everything else is true."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True