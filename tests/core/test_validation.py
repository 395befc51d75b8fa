"""
Tests for input validators.
"""

import numpy as np
import pytest

from pydescstats.core.exceptions import (
    DimensionError,
    EmptyDataError,
    InsufficientDataError,
    InvalidPercentileError,
    ValidationError,
)
from pydescstats.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_min_samples,
    check_percentiles,
    check_positive_frequencies,
    drop_non_finite,
)


class TestCheckArray:

    def test_int_list_becomes_float(self):
        result = check_array([1, 2, 3], "x")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_mixed_values_parse_elementwise(self):
        result = check_array([1, "2.5", "abc", None], "x")
        assert result[0] == 1.0
        assert result[1] == 2.5
        assert np.isnan(result[2])
        assert np.isnan(result[3])

    def test_string_rejected(self):
        with pytest.raises(ValidationError, match="sequence"):
            check_array("1,2,3", "x")

    def test_scalar_rejected(self):
        with pytest.raises(DimensionError, match="scalar"):
            check_array(5.0, "x")

    def test_does_not_alias_input(self):
        original = np.array([3.0, 1.0, 2.0])
        result = check_array(original, "x")
        result[0] = 99.0
        assert original[0] == 3.0


class TestCheck1d:

    def test_accepts_1d(self):
        check_1d(np.zeros(3), "x")

    def test_rejects_2d(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((3, 2)), "x")


class TestDropNonFinite:

    def test_drops_nan_and_inf(self):
        clean, n_dropped = drop_non_finite(np.array([1.0, np.nan, np.inf, 4.0, -np.inf]), "x")
        np.testing.assert_array_equal(clean, [1.0, 4.0])
        assert n_dropped == 3

    def test_keeps_order(self):
        clean, n_dropped = drop_non_finite(np.array([5.0, 1.0, 3.0]), "x")
        np.testing.assert_array_equal(clean, [5.0, 1.0, 3.0])
        assert n_dropped == 0

    def test_all_non_finite(self):
        with pytest.raises(EmptyDataError) as exc_info:
            drop_non_finite(np.array([np.nan, np.inf]), "x")
        assert exc_info.value.n_dropped == 2

    def test_empty(self):
        with pytest.raises(EmptyDataError):
            drop_non_finite(np.array([]), "x")


class TestConsistentLength:

    def test_equal_lengths(self):
        check_consistent_length(np.zeros(3), np.zeros(3), names=("a", "b"))

    def test_unequal_lengths(self):
        with pytest.raises(DimensionError, match="a=3, b=2"):
            check_consistent_length(np.zeros(3), np.zeros(2), names=("a", "b"))

    def test_names_mismatch(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), names=("a", "b"))


class TestMinSamples:

    def test_enough(self):
        check_min_samples(np.zeros(4), 4, "x")

    def test_too_few(self):
        with pytest.raises(InsufficientDataError, match="at least 4") as exc_info:
            check_min_samples(np.zeros(3), 4, "x")
        assert exc_info.value.required == 4
        assert exc_info.value.actual == 3


class TestPercentiles:

    def test_scalar_becomes_array(self):
        np.testing.assert_array_equal(check_percentiles(50, "p"), [50.0])

    @pytest.mark.parametrize("p", [0, 100, 12.5])
    def test_bounds_inclusive(self, p):
        check_percentiles(p, "p")

    @pytest.mark.parametrize("p", [-0.1, 100.5, np.nan])
    def test_out_of_range(self, p):
        with pytest.raises(InvalidPercentileError):
            check_percentiles(p, "p")

    def test_reports_offending_value(self):
        with pytest.raises(InvalidPercentileError) as exc_info:
            check_percentiles([10, 150], "p")
        assert exc_info.value.percentile == 150.0


class TestPositiveFrequencies:

    def test_integral_floats_accepted(self):
        result = check_positive_frequencies(np.array([1.0, 3.0]), "f")
        assert result.dtype == np.int64
        np.testing.assert_array_equal(result, [1, 3])

    @pytest.mark.parametrize("bad", [[0, 2], [-1, 2], [1.5, 2]])
    def test_rejects(self, bad):
        with pytest.raises(ValidationError, match="positive integers"):
            check_positive_frequencies(np.array(bad), "f")
