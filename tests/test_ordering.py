"""Tests for generic min/max (core/ordering.py)."""

from __future__ import annotations

import pytest

from commons_lang.core.ordering import max_value, min_value
from commons_lang.exceptions import InvalidArgumentError


class TestMinValue:
    @pytest.mark.parametrize(
        ("values", "expected"),
        [
            ((1, 2, 3), 1),
            ((3, 2, 1), 1),
            ((3, 1, 2), 1),
            ((3,), 3),
            ((-5, 0, 5), -5),
        ],
    )
    def test_ints(self, values: tuple[int, ...], expected: int) -> None:
        assert min_value(*values) == expected

    def test_strings(self) -> None:
        assert min_value("b", "a", "c") == "a"

    def test_floats(self) -> None:
        assert min_value(1.5, 0.25, 3.0) == 0.25

    def test_empty_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="at least one value"):
            min_value()


class TestMaxValue:
    @pytest.mark.parametrize(
        ("values", "expected"),
        [
            ((1, 2, 3), 3),
            ((3, 2, 1), 3),
            ((3, 1, 2), 3),
            ((1,), 1),
        ],
    )
    def test_ints(self, values: tuple[int, ...], expected: int) -> None:
        assert max_value(*values) == expected

    def test_strings(self) -> None:
        assert max_value("b", "c", "a") == "c"

    def test_empty_raises(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            max_value()
        assert exc_info.value.hint is not None
