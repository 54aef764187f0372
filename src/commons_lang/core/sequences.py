"""Non-mutating sequence helpers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def add(original: Iterable[T], value: T) -> list[T]:
    """Return a new list holding *original* followed by *value*.

    *original* is copied, never modified.
    """
    result: list[T] = list(original)
    result.append(value)
    return result
