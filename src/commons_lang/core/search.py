"""Searching, comparing and rearranging strings.

Nothing in this module raises: "not found" is always an ordinary
return value.  Indices are code-point offsets and ``-1`` is the
not-found sentinel.
"""

from __future__ import annotations

import re

from commons_lang.core.models import ABSENT, OptionalText, Present
from commons_lang.core.ordering import max_value, min_value

_DIGIT_PATTERN = re.compile(r"[0-9]")


# ---------------------------------------------------------------------------
# Prefix / suffix
# ---------------------------------------------------------------------------

def has_suffix_ignore_case(value: str, suffix: str) -> bool:
    """Return ``True`` if *value* ends with *suffix*, ignoring case."""
    return value.lower().endswith(suffix.lower())


def append_if_missing(value: str, suffix: str, ignore_case: bool = False) -> str:
    """Append *suffix* unless *value* already ends with it."""
    if ignore_case:
        if has_suffix_ignore_case(value, suffix):
            return value
    elif value.endswith(suffix):
        return value
    return value + suffix


def starts_with(prefix: str, text: str, ignore_case: bool = False) -> bool:
    """Return ``True`` if *text* begins with *prefix*.

    An empty *prefix* never matches, unlike :meth:`str.startswith`.
    """
    if not prefix:
        return False
    if ignore_case:
        prefix = prefix.lower()
        text = text.lower()
    return text.startswith(prefix)


def common_prefix(*values: str) -> str:
    """Return the longest prefix shared by every value.

    >>> common_prefix("i am a machine", "i am a robot")
    'i am a '
    """
    if not values:
        return ""
    if len(values) == 1:
        return values[0]

    prefix = ""
    for char in values[0]:
        candidate = prefix + char
        for value in values:
            if not value.startswith(candidate):
                return prefix
        prefix = candidate
    return prefix


# ---------------------------------------------------------------------------
# Containment
# ---------------------------------------------------------------------------

def contains_none(value: str, *candidates: str) -> bool:
    """Return ``True`` if no non-empty candidate occurs in *value*."""
    for candidate in candidates:
        if candidate and candidate in value:
            return False
    return True


def contains_only(value: str, *candidates: str) -> bool:
    """Return ``True`` if *value* is made up entirely of the candidates.

    Candidates are removed as substrings, in the order given, and the
    check passes when nothing is left.  ``contains_only("abad", "a", "b")``
    is ``False`` because ``"d"`` remains.
    """
    remaining = value
    for candidate in candidates:
        remaining = remaining.replace(candidate, "")
    return len(remaining) == 0


def first_non_empty(*values: str) -> OptionalText:
    """Return the first non-empty value, or :data:`ABSENT`."""
    for value in values:
        if value:
            return Present(value)
    return ABSENT


def safe_deref(optional: OptionalText | None) -> str:
    """Return the contained text, or ``""`` when there is none."""
    if isinstance(optional, Present):
        return optional.value
    return ""


def get_digits(value: str) -> str:
    """Return every ASCII digit of *value*, in order.

    ``get_digits("(541) 754-3010")`` gives ``"5417543010"``.
    """
    return "".join(_DIGIT_PATTERN.findall(value))


# ---------------------------------------------------------------------------
# Index scanning
# ---------------------------------------------------------------------------

def index_of_any(value: str, *candidates: str) -> int:
    """Return the position of the first candidate found in *value*.

    Candidates are tried in order.  A match at position ``0`` is not
    counted, so ``index_of_any("zzabyy", "zz")`` is ``-1``.
    """
    for candidate in candidates:
        index = value.find(candidate)
        if index > 0:
            return index
    return -1


def length_of_strings(*values: str) -> list[int]:
    """Return the code-point length of each value."""
    return [len(value) for value in values]


def index_of_difference(*values: str) -> int:
    """Return the first position at which the values stop agreeing.

    When every value agrees up to the shortest one, the shortest length
    is returned if the lengths differ and ``-1`` if they do not.  No
    values at all also gives ``-1``.
    """
    if not values:
        return -1

    lengths = length_of_strings(*values)
    shortest = min_value(*lengths)
    longest = max_value(*lengths)
    first = values[0]

    for position in range(shortest):
        expected = first[position]
        for value in values:
            if value[position] != expected:
                return position

    if longest > shortest:
        return shortest
    return -1


def last_index_of(value: str, target: str) -> int:
    """Return the position of the last *target* in *value*, or ``-1``."""
    return last_index_of_with_start_pos(value, target, max_value(0, len(value)))


def last_index_of_with_start_pos(value: str, target: str, start_pos: int) -> int:
    """Return the last position of *target* ending at or before *start_pos*.

    *start_pos* is clamped to the length of *value*; a negative
    *start_pos* gives ``-1``.

    >>> last_index_of_with_start_pos("aabaabaaz", "b", 4)
    2
    """
    if start_pos > len(value):
        start_pos = len(value)
    if start_pos < 0:
        return -1

    window = value[:start_pos]
    for position in range(start_pos, -1, -1):
        if target in window[position:]:
            return position
    return -1


def last_index_of_any(value: str, *candidates: str) -> int:
    """Return the rightmost :func:`last_index_of` across the candidates."""
    if not candidates:
        return -1
    return max_value(*(last_index_of(value, candidate) for candidate in candidates))


# ---------------------------------------------------------------------------
# Rearranging
# ---------------------------------------------------------------------------

def right(value: str, length: int) -> str:
    """Return the last *length* code points of *value*."""
    if not value:
        return ""
    if length > len(value):
        return value
    if length <= 0:
        return ""
    return value[len(value) - length:]


def rotate(value: str, shift: int) -> str:
    """Circularly shift *value* right by *shift* code points.

    Negative shifts rotate left: ``rotate("abc", 1)`` is ``"cab"`` and
    ``rotate("abc", -1)`` is ``"bca"``.
    """
    if not value:
        return value
    offset = shift % len(value)
    if offset == 0:
        return value
    return value[-offset:] + value[:-offset]
