"""Value types shared by the string helpers.

The optional result of :func:`~commons_lang.core.search.first_non_empty`
is a small sum type instead of a bare ``None`` so that "nothing found"
cannot be confused with a legitimate empty string.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Present / absent
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Present:
    """A text value that was found."""

    value: str
    """The contained text.  May itself be empty."""

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Absent:
    """Marker for "no value".  Use the :data:`ABSENT` singleton."""

    def __bool__(self) -> bool:
        return False


ABSENT = Absent()
"""The single :class:`Absent` instance returned by lookups."""

OptionalText = Present | Absent
"""Either :class:`Present` or :class:`Absent`."""
