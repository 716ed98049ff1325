"""
Unit tests for numeric coercion (csv_dashboard.transforms.numbers).

Tests whitespace handling, failure-to-NaN coercion, and per-field
extraction that drops only the failing values.
"""

from __future__ import annotations

import numpy as np
import pytest

from csv_dashboard.transforms.numbers import numeric_values, to_numeric


class TestToNumeric:
    """Tests for to_numeric()."""

    def test_integers_and_decimals(self):
        result = to_numeric(["1204", "4.5", "-3"])
        assert result.tolist() == [1204.0, 4.5, -3.0]
        assert result.dtype == np.float64

    def test_whitespace_stripped(self):
        assert to_numeric(["  25  "]).iloc[0] == 25.0

    def test_empty_string_becomes_nan(self):
        assert np.isnan(to_numeric([""]).iloc[0])

    def test_non_numeric_becomes_nan(self):
        result = to_numeric(["N/A", "abc", "12abc"])
        assert result.isna().all()

    def test_none_becomes_nan(self):
        assert np.isnan(to_numeric([None]).iloc[0])

    def test_thousands_separator_not_supported(self):
        """No locale parsing: a comma makes the value non-numeric."""
        assert np.isnan(to_numeric(["1,234"]).iloc[0])

    def test_empty_input(self):
        assert len(to_numeric([])) == 0

    def test_aligned_with_input(self):
        result = to_numeric(["1", "x", "3"])
        assert len(result) == 3
        assert result.iloc[2] == 3.0


class TestNumericValues:
    """Tests for numeric_values()."""

    def test_drops_failures_keeps_rest(self):
        records = [{"v": "1"}, {"v": "oops"}, {"v": "3.5"}, {"v": ""}]
        assert numeric_values(records, "v") == [1.0, 3.5]

    def test_missing_field_counts_as_failure(self):
        records = [{"v": "1"}, {"w": "2"}]
        assert numeric_values(records, "v") == [1.0]

    def test_order_preserved(self):
        records = [{"v": str(n)} for n in (5, 1, 4)]
        assert numeric_values(records, "v") == [5.0, 1.0, 4.0]

    def test_zero_kept(self):
        assert numeric_values([{"v": "0"}], "v") == [0.0]

    @pytest.mark.parametrize("records", [[], [{"v": "x"}]])
    def test_nothing_usable(self, records):
        assert numeric_values(records, "v") == []
