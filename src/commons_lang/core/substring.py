"""Substring extraction, truncation and padding.

Every position and length in this module counts Unicode code points.
Out-of-range positions are clamped rather than rejected.  Only the
separator lookups, the padding helpers and :func:`abbreviate` raise.

Families
--------
1. **Extract**: :func:`substr` and the convenience wrappers built on it.
2. **Trim**: :func:`abbreviate`, :func:`chop`, :func:`remove_last_separator`.
3. **Pad**: :func:`left_pad`, :func:`right_pad`, :func:`center`.
"""

from __future__ import annotations

from commons_lang.core.ordering import max_value, min_value
from commons_lang.exceptions import (
    InvalidArgumentError,
    InvalidPaddingCharacterError,
    InvalidWidthError,
)

LF: str = "\n"
"""Line feed."""

CR: str = "\r"
"""Carriage return."""

ELLIPSIS: str = "..."

MIN_ABBREVIATE_WIDTH: int = len(ELLIPSIS) + 1
"""Three dots plus at least one character of content."""


# ---------------------------------------------------------------------------
# 1. Extract
# ---------------------------------------------------------------------------

def substr(value: str, start: int, length: int) -> str:
    """Return *length* code points of *value* starting at *start*.

    The end is clamped to the end of *value*.  A *start* past the end
    gives ``""``, a negative *start* counts as ``0`` and a negative
    *length* counts as ``0``.
    """
    start = max_value(start, 0)
    if start > len(value):
        return ""
    length = max_value(length, 0)
    if start + length > len(value):
        length = len(value) - start
    return value[start:start + length]


def substr_left(value: str, end: int) -> str:
    """Return the code points before position *end*."""
    if end <= 0:
        return ""
    end = min_value(len(value), end)
    return substr(value, 0, end)


def substr_right(value: str, start: int) -> str:
    """Return the code points from position *start* to the end."""
    return substr(value, start, len(value) - start)


def _validate_separator(separator: str) -> None:
    if len(separator) != 1:
        raise InvalidArgumentError(
            f"The separator must be a single character, got {separator!r}.",
            hint="Use str.partition for multi-character separators.",
        )


def substr_before(value: str, separator: str) -> str:
    """Return everything before the first *separator*, or ``""`` if absent."""
    _validate_separator(separator)
    index = value.find(separator)
    if index < 0:
        return ""
    return substr_left(value, index)


def substr_after(value: str, separator: str) -> str:
    """Return everything after the first *separator*, or ``""`` if absent."""
    _validate_separator(separator)
    index = value.find(separator)
    if index < 0:
        return ""
    return substr_right(value, index + 1)


def substr_after_last(value: str, separator: str) -> str:
    """Return everything after the last *separator*, or ``""`` if absent."""
    _validate_separator(separator)
    index = value.rfind(separator)
    if index < 0:
        return ""
    return substr_right(value, index + 1)


def capitalize(value: str) -> str:
    """Upper-case the first code point and leave the rest untouched.

    Unlike :meth:`str.capitalize`, the remainder is not lower-cased.
    """
    return substr(value, 0, 1).upper() + substr_right(value, 1)


# ---------------------------------------------------------------------------
# 2. Trim
# ---------------------------------------------------------------------------

def abbreviate(value: str, max_width: int) -> str:
    """Shorten *value* to *max_width* code points, ending in ``"..."``.

    ``abbreviate("It's a dangerous business, Frodo", 16)`` gives
    ``"It's a danger..."``.  Values that already fit are returned
    unchanged.

    Raises
    ------
    InvalidWidthError
        When *max_width* is below four and *value* does not fit.
    """
    if max_width >= len(value):
        return value
    if max_width < MIN_ABBREVIATE_WIDTH:
        raise InvalidWidthError(
            f"max_width must be at least {MIN_ABBREVIATE_WIDTH}, got {max_width}.",
            hint="Three characters are reserved for the ellipsis.",
        )

    remainder = len(value) - len(ELLIPSIS)
    kept = value[:max_width - len(ELLIPSIS)]
    if remainder > 0:
        return kept + ELLIPSIS
    if remainder == 0:
        return kept
    return value


def chop(value: str) -> str:
    """Remove the last code point, or a trailing ``CR LF`` pair as a unit."""
    if len(value) < 1:
        return ""
    if value.endswith(CR + LF):
        return value[:-2]
    return value[:-1]


def remove_last_separator(value: str) -> str:
    """Remove one trailing ``CR LF``, ``LF`` or ``CR``.

    Only one separator is removed: ``"abc\\n\\r"`` becomes ``"abc\\n"``.
    """
    if not value:
        return ""
    if value.endswith(CR + LF):
        return value[:-2]
    if value.endswith(LF) or value.endswith(CR):
        return value[:-1]
    return value


# ---------------------------------------------------------------------------
# 3. Pad
# ---------------------------------------------------------------------------

def _validate_padding_character(char: str) -> None:
    if len(char) != 1 or not char.isprintable():
        raise InvalidPaddingCharacterError(
            f"The padding character must be a single printable character, got {char!r}.",
            hint="Control characters such as newline or tab cannot be used for padding.",
        )


def left_pad(value: str, size: int, char: str = " ") -> str:
    """Prepend *char* until *value* is *size* code points long.

    Longer values are returned unchanged, never truncated.

    Raises
    ------
    InvalidPaddingCharacterError
        When *char* is not exactly one printable code point.
    """
    _validate_padding_character(char)
    count = size - len(value)
    if count < 0:
        return value
    return char * count + value


def right_pad(value: str, size: int, char: str = " ") -> str:
    """Append *char* until *value* is *size* code points long.

    Raises
    ------
    InvalidPaddingCharacterError
        When *char* is not exactly one printable code point.
    """
    _validate_padding_character(char)
    count = size - len(value)
    if count < 0:
        return value
    return value + char * count


def center(value: str, size: int, char: str = " ") -> str:
    """Pad both sides of *value* to *size*; an odd extra unit goes right.

    ``center("a", 4, "y")`` gives ``"yayy"``.  When no padding is needed
    *value* is returned as is, without validating *char*.
    """
    if size < 0:
        return value
    padding = size - len(value)
    if padding <= 0:
        return value
    padded = left_pad(value, len(value) + padding // 2, char)
    return right_pad(padded, size, char)
