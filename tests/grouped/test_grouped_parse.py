"""
Tests for grouped-data parsing and GroupedDesign construction.
"""

import numpy as np
import pytest

from pydescstats.core.exceptions import (
    DimensionError,
    EmptyDataError,
    MalformedRowError,
    ValidationError,
)
from pydescstats.grouped import FrequencyDatum, GroupedDesign, IntervalDatum
from pydescstats.grouped._parse import parse_rows, split_rows


class TestSplitRows:

    def test_newlines_and_commas(self):
        assert split_rows("1:2, 3:4\n5:6\r\n\n7:8") == ["1:2", "3:4", "5:6", "7:8"]

    def test_blank(self):
        assert split_rows(" \n , ") == []


class TestParseFrequencyRows:

    def test_valid(self):
        rows, errors = parse_rows("5:3\n2.5 : 4\n-1:2", 'frequency')
        assert rows == [(5.0, 3), (2.5, 4), (-1.0, 2)]
        assert errors == []

    def test_invalid_format(self):
        rows, errors = parse_rows("5:3\nabc", 'frequency')
        assert rows == [(5.0, 3)]
        assert len(errors) == 1
        err = errors[0]
        assert err.line_number == 2
        assert err.line == "abc"
        assert str(err) == "Line 2: invalid format, use value:frequency (e.g. 5:3): 'abc'"

    def test_zero_frequency(self):
        _, errors = parse_rows("5:0", 'frequency')
        assert errors[0].reason == "frequency must be a positive integer"

    @pytest.mark.parametrize("row", ["5:-1", "5:2.5", "5", ":3", "5:3:1"])
    def test_rejected_rows(self, row):
        rows, errors = parse_rows(row, 'frequency')
        assert rows == []
        assert len(errors) == 1


class TestParseIntervalRows:

    def test_dash_and_pipe(self):
        rows, errors = parse_rows("0-10:2\n10|20:8\n20.5 - 30 : 1", 'intervals')
        assert rows == [(0.0, 10.0, 2), (10.0, 20.0, 8), (20.5, 30.0, 1)]
        assert errors == []

    def test_reversed_bounds(self):
        _, errors = parse_rows("20-10:3", 'intervals')
        assert errors[0].reason == "lower bound must be less than upper bound"

    def test_equal_bounds(self):
        _, errors = parse_rows("10-10:3", 'intervals')
        assert errors[0].reason == "lower bound must be less than upper bound"

    def test_invalid_format(self):
        _, errors = parse_rows("10:3", 'intervals')
        assert "use start-end:frequency" in errors[0].reason

    def test_numbering_counts_every_row(self):
        _, errors = parse_rows("0-10:2\nx\n10-20:1\ny", 'intervals')
        assert [e.line_number for e in errors] == [2, 4]


class TestFromText:

    def test_frequency_mode(self):
        design = GroupedDesign.from_text("1:4, 2:6, 3:2", mode='frequency')
        assert design.mode == 'frequency'
        assert len(design) == 3
        assert design.total_frequency == 12
        np.testing.assert_array_equal(design.representatives, [1.0, 2.0, 3.0])
        np.testing.assert_array_equal(design.frequencies, [4, 6, 2])

    def test_interval_mode_midpoints(self, interval_text):
        design = GroupedDesign.from_text(interval_text, mode='intervals')
        np.testing.assert_array_equal(design.representatives, [5.0, 15.0])
        assert design.items[0] == IntervalDatum(0.0, 10.0, 2)

    def test_bad_rows_kept_as_errors(self):
        design = GroupedDesign.from_text("1:4\nabc\n2:2", mode='frequency')
        assert len(design) == 2
        assert len(design.row_errors) == 1
        assert 'skipped=1' in repr(design)

    def test_strict_raises_first_error(self):
        with pytest.raises(MalformedRowError, match="Line 2") as exc_info:
            GroupedDesign.from_text("1:4\nabc\n3:0", mode='frequency', strict=True)
        assert exc_info.value.line == "abc"

    def test_nothing_parsed(self):
        with pytest.raises(EmptyDataError) as exc_info:
            GroupedDesign.from_text("a\nb", mode='frequency')
        assert len(exc_info.value.row_errors) == 2

    def test_empty_text(self):
        with pytest.raises(EmptyDataError):
            GroupedDesign.from_text("", mode='intervals')

    def test_unknown_mode(self):
        with pytest.raises(ValidationError, match="'frequency' or 'intervals'"):
            GroupedDesign.from_text("1:2", mode='bins')


class TestArrayFactories:

    def test_from_frequencies(self):
        design = GroupedDesign.from_frequencies([1, 2, 3], [4, 6, 2])
        assert design.items[1] == FrequencyDatum(2.0, 6)
        assert design.items[1].label == "2"

    def test_from_frequencies_length_mismatch(self):
        with pytest.raises(DimensionError):
            GroupedDesign.from_frequencies([1, 2, 3], [4, 6])

    def test_from_frequencies_non_positive(self):
        with pytest.raises(ValidationError, match="positive integers"):
            GroupedDesign.from_frequencies([1, 2], [4, 0])

    def test_from_frequencies_non_finite(self):
        with pytest.raises(ValidationError, match="non-finite"):
            GroupedDesign.from_frequencies([1, np.nan], [4, 1])

    def test_from_intervals(self):
        design = GroupedDesign.from_intervals([0, 10], [10, 20], [2, 8])
        assert design.mode == 'intervals'
        assert design.items[1].label == "10 ⊢ 20"
        assert design.items[1].width == 10.0

    def test_from_intervals_reversed(self):
        with pytest.raises(ValidationError, match="Interval 2"):
            GroupedDesign.from_intervals([0, 20], [10, 10], [2, 8])


class TestFromDatums:

    def test_infers_mode(self):
        design = GroupedDesign.from_datums([IntervalDatum(0, 10, 2), IntervalDatum(10, 20, 8)])
        assert design.mode == 'intervals'

    def test_mixed_kinds(self):
        with pytest.raises(ValidationError, match="mixes"):
            GroupedDesign.from_datums([FrequencyDatum(1.0, 2), IntervalDatum(0, 10, 2)])

    def test_empty(self):
        with pytest.raises(EmptyDataError):
            GroupedDesign.from_datums([])

    def test_bad_frequency(self):
        with pytest.raises(ValidationError, match="Row 2"):
            GroupedDesign.from_datums([FrequencyDatum(1.0, 2), FrequencyDatum(2.0, 0)])

    def test_bad_interval(self):
        with pytest.raises(ValidationError, match="must be less than end"):
            GroupedDesign.from_datums([IntervalDatum(5, 5, 1)])
