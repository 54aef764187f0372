"""Logical aggregation over any number of booleans.

Both aggregates return ``False`` for an empty call.  For :func:`and_all`
this deliberately differs from :func:`all`, which returns ``True``.
"""

from __future__ import annotations


def and_all(*values: bool) -> bool:
    """Return ``True`` only when at least one value is given and all are true."""
    if not values:
        return False
    for value in values:
        if not value:
            return False
    return True


def or_any(*values: bool) -> bool:
    """Return ``True`` when any value is true."""
    for value in values:
        if value:
            return True
    return False
