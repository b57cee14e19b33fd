"""Operations on string values that take the string as their first argument."""

from __future__ import annotations

from typing import Any

from .errors import MegaladonError
from .values import ValueType, type_of

_WHITESPACE = " \t\n\v\f\r"
_VOWELS = frozenset("aeiou")


def _is_string(value: Any) -> bool:
    return type_of(value) is ValueType.STRING


def _is_number(value: Any) -> bool:
    return type_of(value) is ValueType.NUMBER


def _ascii_lower(text: str) -> str:
    return "".join(c.lower() if c.isascii() else c for c in text)


def _ascii_upper(text: str) -> str:
    return "".join(c.upper() if c.isascii() else c for c in text)


def string_len(args: list[Any]) -> float:
    """Length of the string."""
    if len(args) != 1 or not _is_string(args[0]):
        raise MegaladonError("String.len() expects one string argument.")
    return float(len(args[0]))


def string_substring(args: list[Any]) -> str:
    """Characters from a start index up to an optional end index."""
    if not 2 <= len(args) <= 3 or not _is_string(args[0]) or not _is_number(args[1]):
        raise MegaladonError(
            "String.substring(startIndex, [endIndex]) expects string, start_index "
            "(number), and optional end_index (number)."
        )
    text = args[0]
    start = int(args[1])
    end = len(text)
    if len(args) == 3:
        if not _is_number(args[2]):
            raise MegaladonError("String.substring() end_index must be a number.")
        end = int(args[2])
        if end < 0:
            end = len(text)
    if start < 0 or start >= len(text):
        return ""
    end = min(end, len(text))
    if start > end:
        return ""
    return text[start:end]


def string_to_lower(args: list[Any]) -> str:
    """The string with ASCII letters in lower case."""
    if len(args) != 1 or not _is_string(args[0]):
        raise MegaladonError("String.to_lower() expects one string argument.")
    return _ascii_lower(args[0])


def string_to_upper(args: list[Any]) -> str:
    """The string with ASCII letters in upper case."""
    if len(args) != 1 or not _is_string(args[0]):
        raise MegaladonError("String.to_upper() expects one string argument.")
    return _ascii_upper(args[0])


def string_trim(args: list[Any]) -> str:
    """The string without leading and trailing whitespace."""
    if len(args) != 1 or not _is_string(args[0]):
        raise MegaladonError("String.trim() expects one string argument.")
    return args[0].strip(_WHITESPACE)


def string_starts_with(args: list[Any]) -> bool:
    """Whether the string begins with a prefix."""
    if len(args) != 2 or not _is_string(args[0]) or not _is_string(args[1]):
        raise MegaladonError("String.starts_with(prefix) expects two string arguments.")
    return args[0].startswith(args[1])


def string_ends_with(args: list[Any]) -> bool:
    """Whether the string ends with a suffix."""
    if len(args) != 2 or not _is_string(args[0]) or not _is_string(args[1]):
        raise MegaladonError("String.ends_with(suffix) expects two string arguments.")
    return args[0].endswith(args[1])


def string_contains(args: list[Any]) -> bool:
    """Whether the string contains a substring."""
    if len(args) != 2 or not _is_string(args[0]) or not _is_string(args[1]):
        raise MegaladonError(
            "String.contains(substring) expects two string arguments."
        )
    return args[1] in args[0]


def string_replace(args: list[Any]) -> str:
    """Replace every occurrence of one substring with another, left to right."""
    if len(args) != 3 or not all(_is_string(arg) for arg in args):
        raise MegaladonError(
            "String.replace(old, new) expects three string arguments: original, "
            "old_substring, new_substring."
        )
    text, old, new = args
    if not old:
        raise MegaladonError("String.replace() old_substring must not be empty.")
    return text.replace(old, new)


def string_split(args: list[Any]) -> list[str]:
    """Split on a delimiter (a space by default); an empty one splits characters."""
    if not 1 <= len(args) <= 2 or not _is_string(args[0]):
        raise MegaladonError(
            "String.split([delimiter]) expects string and optional delimiter (string)."
        )
    text = args[0]
    delimiter = args[1] if len(args) == 2 and _is_string(args[1]) else " "
    if not delimiter:
        return list(text)
    return text.split(delimiter)


def string_index_of(args: list[Any]) -> float:
    """Position of a substring at or after an optional start, or -1."""
    if not 2 <= len(args) <= 3 or not _is_string(args[0]) or not _is_string(args[1]):
        raise MegaladonError(
            "String.index_of(substring, [startIndex]) expects string, substring "
            "(string), and optional start_index (number)."
        )
    text, needle = args[0], args[1]
    start = 0
    if len(args) == 3:
        if not _is_number(args[2]):
            raise MegaladonError("String.index_of() start_index must be a number.")
        start = int(args[2])
        if start < 0:
            return -1.0
    return float(text.find(needle, start))


def string_to_list(args: list[Any]) -> list[str]:
    """The string's characters as a list."""
    if len(args) != 1 or not _is_string(args[0]):
        raise MegaladonError("String.to_list() expects one string argument.")
    return list(args[0])


def string_count_vowels(args: list[Any]) -> float:
    """Number of the letters a, e, i, o, u in either case."""
    if len(args) != 1 or not _is_string(args[0]):
        raise MegaladonError("String.count_vowels() expects one string argument.")
    return float(sum(1 for char in _ascii_lower(args[0]) if char in _VOWELS))