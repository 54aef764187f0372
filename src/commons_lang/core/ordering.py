"""Generic minimum / maximum over totally ordered values.

Both helpers require at least one value.  An empty call raises
:class:`~commons_lang.exceptions.InvalidArgumentError` instead of
returning a made-up default.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

from commons_lang.exceptions import InvalidArgumentError


class SupportsOrdering(Protocol):
    """Anything comparable with ``<`` and ``>``."""

    def __lt__(self, other: Any, /) -> bool: ...  # pragma: no cover

    def __gt__(self, other: Any, /) -> bool: ...  # pragma: no cover


T = TypeVar("T", bound=SupportsOrdering)


def _require_values(values: tuple[T, ...], name: str) -> None:
    if not values:
        raise InvalidArgumentError(
            f"{name}() requires at least one value.",
            hint="Pass one or more comparable values.",
        )


def min_value(*values: T) -> T:
    """Return the smallest of *values*; ties keep the first occurrence."""
    _require_values(values, "min_value")
    smallest = values[0]
    for value in values:
        if value < smallest:
            smallest = value
    return smallest


def max_value(*values: T) -> T:
    """Return the largest of *values*; ties keep the first occurrence."""
    _require_values(values, "max_value")
    largest = values[0]
    for value in values:
        if value > largest:
            largest = value
    return largest
