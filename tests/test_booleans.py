"""Tests for boolean aggregation (core/booleans.py).

Both aggregates return ``False`` for an empty call.
"""

from __future__ import annotations

import pytest

from commons_lang.core.booleans import and_all, or_any


class TestAndAll:
    @pytest.mark.parametrize(
        ("values", "expected"),
        [
            ((False,), False),
            ((False, True, True), False),
            ((True, True, False), False),
            ((True, True, True), True),
            ((True,), True),
        ],
    )
    def test_table(self, values: tuple[bool, ...], expected: bool) -> None:
        assert and_all(*values) is expected

    def test_empty_is_false(self) -> None:
        assert and_all() is False


class TestOrAny:
    @pytest.mark.parametrize(
        ("values", "expected"),
        [
            ((False,), False),
            ((False, True, True), True),
            ((False, False, True), True),
            ((True, True, True), True),
            ((True,), True),
        ],
    )
    def test_table(self, values: tuple[bool, ...], expected: bool) -> None:
        assert or_any(*values) is expected

    def test_empty_is_false(self) -> None:
        assert or_any() is False
