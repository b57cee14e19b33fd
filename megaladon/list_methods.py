"""Operations on list values that take the list as their first argument."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any

from .values import ValueType, type_of, values_equal


def is_integer(value: Any) -> bool:
    """Whether ``value`` is a number with no fractional part."""
    return type_of(value) is ValueType.NUMBER and float(value).is_integer()


def _is_list(value: Any) -> bool:
    return type_of(value) is ValueType.LIST


def value_less_than(a: Any, b: Any) -> bool:
    """Order two numbers or two strings; other pairs cannot be compared."""
    kind_a, kind_b = type_of(a), type_of(b)
    if kind_a is ValueType.NUMBER and kind_b is ValueType.NUMBER:
        return a < b
    if kind_a is ValueType.STRING and kind_b is ValueType.STRING:
        return a < b
    raise RuntimeError("MegaladonError: Cannot compare these types for sorting.")


def _compare(a: Any, b: Any) -> int:
    if value_less_than(a, b):
        return -1
    if value_less_than(b, a):
        return 1
    return 0


def list_add(arguments: list[Any]) -> None:
    """Append an item to the list in place."""
    if len(arguments) != 2 or not _is_list(arguments[0]):
        raise RuntimeError(
            "MegaladonError: list.add() expects a list object and one argument."
        )
    items, item = arguments
    items.append(item)


def list_remove_at(arguments: list[Any]) -> Any:
    """Remove and return the item at an index."""
    if len(arguments) != 2 or not _is_list(arguments[0]) or not is_integer(arguments[1]):
        raise RuntimeError(
            "MegaladonError: list.remove_at() expects a list object and an integer index."
        )
    items = arguments[0]
    index = int(arguments[1])
    if not 0 <= index < len(items):
        raise RuntimeError("MegaladonError: List index out of bounds in remove_at.")
    return items.pop(index)


def list_get(arguments: list[Any]) -> Any:
    """Return the item at an index."""
    if len(arguments) != 2 or not _is_list(arguments[0]) or not is_integer(arguments[1]):
        raise RuntimeError(
            "MegaladonError: list.get() expects a list object and an integer index."
        )
    items = arguments[0]
    index = int(arguments[1])
    if not 0 <= index < len(items):
        raise RuntimeError("MegaladonError: List index out of bounds in get.")
    return items[index]


def list_set(arguments: list[Any]) -> None:
    """Replace the item at an index."""
    if len(arguments) != 3 or not _is_list(arguments[0]) or not is_integer(arguments[1]):
        raise RuntimeError(
            "MegaladonError: list.set() expects a list object, an integer index, and a value."
        )
    items, raw_index, value = arguments
    index = int(raw_index)
    if not 0 <= index < len(items):
        raise RuntimeError("MegaladonError: List index out of bounds in set.")
    items[index] = value


def list_insert_at(arguments: list[Any]) -> None:
    """Insert an item before an index; the list's length appends."""
    if len(arguments) != 3 or not _is_list(arguments[0]) or not is_integer(arguments[1]):
        raise RuntimeError(
            "MegaladonError: list.insert_at() expects a list object, an integer index, "
            "and a value."
        )
    items, raw_index, value = arguments
    index = int(raw_index)
    if not 0 <= index <= len(items):
        raise RuntimeError("MegaladonError: List index out of bounds in insert_at.")
    items.insert(index, value)


def list_pop(arguments: list[Any]) -> Any:
    """Remove and return the last item, or the item at an optional index."""
    if not 1 <= len(arguments) <= 2 or not _is_list(arguments[0]):
        raise RuntimeError(
            "MegaladonError: list.pop() expects a list object and an optional integer index."
        )
    items = arguments[0]
    if not items:
        raise RuntimeError("MegaladonError: Cannot pop from an empty list.")
    if len(arguments) == 1:
        index = len(items) - 1
    else:
        if not is_integer(arguments[1]):
            raise RuntimeError("MegaladonError: list.pop() index must be an integer.")
        index = int(arguments[1])
    if not 0 <= index < len(items):
        raise RuntimeError("MegaladonError: List index out of bounds in pop.")
    return items.pop(index)


def list_clear(arguments: list[Any]) -> None:
    """Remove every item from the list."""
    if len(arguments) != 1 or not _is_list(arguments[0]):
        raise RuntimeError("MegaladonError: list.clear() expects a list object.")
    arguments[0].clear()


def list_remove(arguments: list[Any]) -> None:
    """Remove every item equal to a value; it is an error if there is none."""
    if len(arguments) != 2 or not _is_list(arguments[0]):
        raise RuntimeError(
            "MegaladonError: list.remove() expects a list object and a value to remove."
        )
    items, target = arguments
    kept = [item for item in items if not values_equal(item, target)]
    if len(kept) == len(items):
        raise RuntimeError("MegaladonError: Value not found in list for remove.")
    items[:] = kept


def list_sort(arguments: list[Any]) -> None:
    """Sort a list of numbers or of strings in place."""
    if len(arguments) != 1 or not _is_list(arguments[0]):
        raise RuntimeError("MegaladonError: list.sort() expects a list object.")
    items = arguments[0]
    if not items:
        return
    first_kind = type_of(items[0])
    for item in items[1:]:
        kind = type_of(item)
        if kind is not first_kind or kind not in (ValueType.NUMBER, ValueType.STRING):
            raise RuntimeError(
                "MegaladonError: List contains incomparable types for sorting."
            )
    items.sort(key=cmp_to_key(_compare))