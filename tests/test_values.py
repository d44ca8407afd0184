"""Tests for replacement value formatting."""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from linguaengine.runtime import format_replacement, format_replacements


class TestFormatReplacement:
    """Test formatting of single values."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("text", "text"),
            ("", ""),
            (True, "true"),
            (False, "false"),
            (0, "0"),
            (-42, "-42"),
            (3.14159, "3.14"),
            (2.0, "2.00"),
            (Decimal("1.234"), "1.23"),
            (Decimal("10"), "10.00"),
            (None, ""),
            ([1, "a", True], "1, a, true"),
            ((1.5, None), "1.50, "),
            ({"b": 2, "a": 1}, "b: 2, a: 1"),
            (frozenset({"b", "a"}), "a, b"),
            ([[1, 2], [3]], "1, 2, 3"),
        ],
    )
    def test_format(self, value: object, expected: str) -> None:
        """Each supported type has a fixed format."""
        assert format_replacement(value) == expected

    def test_bool_is_not_formatted_as_int(self) -> None:
        """Booleans are checked before integers."""
        assert format_replacement(True) != "1"

    def test_other_types_use_str(self) -> None:
        """Unknown types fall back to str()."""

        class Named:
            def __str__(self) -> str:
                return "named"

        assert format_replacement(Named()) == "named"

    @given(st.integers())
    def test_integers_are_decimal(self, value: int) -> None:
        """Integers format like str()."""
        assert format_replacement(value) == str(value)

    @given(st.floats(allow_nan=False, allow_infinity=False, min_value=-1e6, max_value=1e6))
    def test_floats_have_two_decimals(self, value: float) -> None:
        """Finite floats always have exactly two decimals."""
        formatted = format_replacement(value)
        assert len(formatted.split(".")[1]) == 2


class TestFormatReplacements:
    """Test formatting of replacement mappings."""

    def test_none_is_empty(self) -> None:
        """None gives an empty mapping."""
        assert format_replacements(None) == {}

    def test_values_formatted(self) -> None:
        """Every value is formatted, keys are kept."""
        assert format_replacements({"n": 3, "ok": False}) == {"n": "3", "ok": "false"}

    def test_input_not_mutated(self) -> None:
        """The input mapping is left unchanged."""
        values: dict[str, object] = {"n": 3}
        format_replacements(values)
        assert values == {"n": 3}
