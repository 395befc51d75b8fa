"""
Tests for the pydescstats exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via DescStatsError)
    - Input errors are ValidationError subclasses
    - Diagnostic attributes and their defaults
"""

import pytest

from pydescstats.core.exceptions import (
    DegenerateRangeError,
    DescStatsError,
    DimensionError,
    EmptyDataError,
    InsufficientDataError,
    InvalidPercentileError,
    MalformedCriterionError,
    MalformedRowError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via DescStatsError and ValidationError."""

    @pytest.mark.parametrize("exc", [
        DimensionError("x"),
        EmptyDataError("x"),
        InsufficientDataError("x", required=4, actual=2),
        DegenerateRangeError("x"),
        MalformedRowError("x", line_number=1, line="a", reason="r"),
        InvalidPercentileError("x", percentile=101.0),
        MalformedCriterionError("x", criterion="<", reason="r"),
    ])
    def test_is_validation_error(self, exc):
        assert isinstance(exc, ValidationError)
        assert isinstance(exc, DescStatsError)

    def test_validation_error_is_descstats_error(self):
        with pytest.raises(DescStatsError):
            raise ValidationError("bad input")

    def test_not_builtin_value_error(self):
        """Library errors are not confused with generic ValueErrors."""
        assert not isinstance(EmptyDataError("x"), ValueError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:

    def test_empty_data_defaults(self):
        err = EmptyDataError("nothing left")
        assert err.n_dropped == 0
        assert err.row_errors == ()
        assert str(err) == "nothing left"

    def test_empty_data_carries_row_errors(self):
        row = MalformedRowError("Line 1: bad", line_number=1, line="x", reason="bad")
        err = EmptyDataError("no rows", row_errors=[row])
        assert err.row_errors == (row,)

    def test_insufficient_data(self):
        err = InsufficientDataError("too few", required=4, actual=3)
        assert err.required == 4
        assert err.actual == 3

    def test_degenerate_range_value(self):
        err = DegenerateRangeError("flat", value=7.0)
        assert err.value == 7.0
        assert DegenerateRangeError("flat").value is None

    def test_malformed_row(self):
        err = MalformedRowError("Line 3: bad", line_number=3, line="3-1:2", reason="order")
        assert err.line_number == 3
        assert err.line == "3-1:2"
        assert err.reason == "order"

    def test_invalid_percentile(self):
        err = InvalidPercentileError("out of range", percentile=-5.0)
        assert err.percentile == -5.0

    def test_malformed_criterion(self):
        err = MalformedCriterionError("bad", criterion="<< 3", reason="expected number")
        assert err.criterion == "<< 3"
        assert err.reason == "expected number"
