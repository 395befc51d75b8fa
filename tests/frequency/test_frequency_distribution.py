"""
Tests for Sturges-rule frequency distributions.
"""

import numpy as np
import pytest

from pydescstats.core.exceptions import (
    DegenerateRangeError,
    InsufficientDataError,
    ValidationError,
)
from pydescstats.frequency import frequency_distribution, sturges_classes
from pydescstats.frequency._sturges import sturges_raw


class TestSturges:

    @pytest.mark.parametrize("n,expected", [
        (4, 4),
        (5, 4),
        (10, 5),
        (100, 8),
        (200, 9),
    ])
    def test_raw(self, n, expected):
        assert sturges_raw(n) == expected

    def test_clamped_low(self):
        assert sturges_raw(1) == 1
        assert sturges_classes(1) == 4

    def test_clamped_high(self):
        assert sturges_raw(1000) == 11
        assert sturges_classes(1000) == 10

    def test_bounds(self):
        for n in range(1, 5000, 37):
            assert 4 <= sturges_classes(n) <= 10


class TestOneToTen:

    def test_five_equal_classes(self, one_to_ten):
        table = frequency_distribution(one_to_ten)
        assert table.n_classes == 5
        assert len(table) == 5
        assert table.sturges_raw == 5
        np.testing.assert_allclose(table.class_width, 1.8)
        assert table.frequencies == (2, 2, 2, 2, 2)
        assert sum(table.frequencies) == 10

    def test_bounds_and_labels(self, one_to_ten):
        table = frequency_distribution(one_to_ten)
        first, last = table.classes[0], table.classes[-1]
        assert first.lower_bound == 1.0
        assert first.label == "1.0 ⊢ 2.8"
        assert last.upper_bound == 10.0
        assert last.closed
        assert not first.closed
        np.testing.assert_allclose(first.midpoint, 1.9)

    def test_cumulative_columns(self, one_to_ten):
        table = frequency_distribution(one_to_ten)
        cumulative = [c.cumulative_frequency for c in table]
        assert cumulative == [2, 4, 6, 8, 10]
        np.testing.assert_allclose(
            [c.relative_cumulative_frequency for c in table],
            [0.2, 0.4, 0.6, 0.8, 1.0],
        )
        assert table.classes[0].relative_frequency_percent == pytest.approx(20.0)

    def test_class_members(self, one_to_ten):
        table = frequency_distribution(one_to_ten)
        assert table.classes[0].values == (1.0, 2.0)
        assert table.classes[-1].values == (9.0, 10.0)


class TestPartition:

    def test_every_value_in_one_class(self, normal_sample):
        table = frequency_distribution(normal_sample)
        for value in normal_sample:
            hits = [c for c in table if c.contains(value)]
            assert len(hits) == 1

    def test_frequencies_sum_to_n(self, rng):
        data = rng.exponential(scale=3.0, size=137)
        table = frequency_distribution(data)
        assert sum(table.frequencies) == 137
        assert table.classes[-1].cumulative_frequency == 137
        assert table.classes[-1].relative_cumulative_frequency == pytest.approx(1.0)

    def test_contiguous(self, normal_sample):
        table = frequency_distribution(normal_sample)
        for left, right in zip(table.classes, table.classes[1:]):
            assert left.upper_bound == right.lower_bound

    def test_outlier_goes_to_last_class(self, one_to_ten):
        table = frequency_distribution(np.append(one_to_ten, 100.0))
        assert table.n_classes == 5
        assert table.frequencies == (10, 0, 0, 0, 1)
        assert table.classes[-1].values == (100.0,)

    def test_maximum_in_last_class(self):
        table = frequency_distribution([0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 10])
        assert table.classes[-1].contains(10.0)
        assert 10.0 in table.classes[-1].values

    def test_span_wider_than_float_range(self):
        data = [-1e308, -1e307, 1e307, 1e308]
        table = frequency_distribution(data)
        assert table.frequencies == (1, 1, 1, 1)
        assert sum(table.frequencies) == 4
        bounds = [c.lower_bound for c in table.classes] + [table.classes[-1].upper_bound]
        assert np.all(np.isfinite(bounds))
        assert bounds[0] == -1e308
        assert bounds[-1] == 1e308
        for left, right in zip(table.classes, table.classes[1:]):
            assert left.upper_bound == right.lower_bound
        assert np.isfinite(table.class_width)
        assert np.all(np.isfinite([c.midpoint for c in table.classes]))


class TestWarnings:

    def test_clamp_warning(self, rng):
        table = frequency_distribution(rng.standard_normal(1000))
        assert table.n_classes == 10
        assert table.sturges_raw == 11
        assert any('clamped to 10' in w for w in table.warnings)

    def test_no_clamp_warning(self, one_to_ten):
        assert frequency_distribution(one_to_ten).warnings == ()

    def test_drop_warning(self):
        table = frequency_distribution([1, 2, np.nan, 3, 4])
        assert table.n == 4
        assert table.info['n_dropped'] == 1
        assert any('ignored' in w for w in table.warnings)


class TestErrors:

    def test_too_few_values(self):
        with pytest.raises(InsufficientDataError) as exc_info:
            frequency_distribution([1, 2, 3])
        assert exc_info.value.required == 4
        assert exc_info.value.actual == 3

    def test_too_few_after_filtering(self):
        with pytest.raises(InsufficientDataError):
            frequency_distribution([1, 2, 3, np.nan])

    def test_zero_range(self):
        with pytest.raises(DegenerateRangeError) as exc_info:
            frequency_distribution([5, 5, 5, 5, 5])
        assert exc_info.value.value == 5.0

    def test_bad_backend(self, one_to_ten):
        with pytest.raises(ValidationError, match="Unknown backend"):
            frequency_distribution(one_to_ten, backend='gpu')


class TestSolution:

    def test_text_input(self):
        table = frequency_distribution("1 2 3 4 5 6 7 8 9 10")
        assert table.frequencies == (2, 2, 2, 2, 2)

    def test_metadata(self, one_to_ten):
        table = frequency_distribution(one_to_ten)
        assert table.backend_name == 'cpu_frequency'
        assert table.info['method'] == 'sturges'
        assert table.info['n_classes'] == 5
        assert 'binning' in table.timing

    def test_summary(self, one_to_ten):
        text = frequency_distribution(one_to_ten).summary()
        assert 'n=10, k=5' in text
        assert '1.0 ⊢ 2.8' in text
        assert 'Fri' in text

    def test_repr(self, one_to_ten):
        assert repr(frequency_distribution(one_to_ten)) == "FrequencySolution(n=10, classes=5)"
