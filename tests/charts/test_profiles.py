"""
Tests for pie_categories(), radar_profile() and line_series().
"""

import math

import numpy as np
import pytest

from pystatlab.core.exceptions import ValidationError
from pystatlab.charts import line_series, pie_categories, radar_profile


class TestPieCategories:

    def test_equal_width_categories(self):
        params = pie_categories(np.arange(0.0, 11.0), categories=5).params
        assert params.labels == ('0.0-2.0', '2.0-4.0', '4.0-6.0', '6.0-8.0', '8.0-10.0')
        np.testing.assert_array_equal(params.counts, [2, 2, 2, 2, 3])

    def test_percentages_sum_to_100(self, normal_sample):
        params = pie_categories(normal_sample, categories=7).params
        assert params.percentages.sum() == pytest.approx(100.0)

    def test_empty_categories_dropped(self):
        params = pie_categories([0.0, 0.0, 0.0, 10.0], categories=5).params
        assert params.labels == ('0.0-2.0', '8.0-10.0')
        np.testing.assert_allclose(params.percentages, [75.0, 25.0])

    def test_records(self):
        records = pie_categories([0.0, 10.0], categories=2).records()
        assert records == [
            {'name': '0.0-5.0', 'value': 1, 'percentage': 50.0},
            {'name': '5.0-10.0', 'value': 1, 'percentage': 50.0},
        ]

    def test_invalid_categories(self):
        with pytest.raises(ValidationError):
            pie_categories([1.0, 2.0], categories=0)


class TestRadarProfile:

    def test_scaled_by_largest_magnitude(self, one_to_five):
        params = radar_profile(one_to_five).params
        assert params.subjects == ('min', 'q1', 'median', 'mean', 'q3', 'max')
        np.testing.assert_allclose(params.raw, [1.0, 2.0, 3.0, 3.0, 4.0, 5.0])
        np.testing.assert_allclose(params.scaled, [0.2, 0.4, 0.6, 0.6, 0.8, 1.0])

    def test_negative_values_use_magnitude(self):
        params = radar_profile([-4.0, 2.0]).params
        assert params.scaled[0] == 1.0
        assert params.scaled[-1] == 0.5

    def test_all_zero(self):
        result = radar_profile([0.0, 0.0, 0.0])
        np.testing.assert_array_equal(result.params.scaled, np.zeros(6))
        assert len(result.warnings) == 1

    def test_records_full_mark(self, one_to_five):
        records = radar_profile(one_to_five).records()
        assert len(records) == 6
        assert all(r['full_mark'] == 1.0 for r in records)
        assert records[-1] == {'subject': 'max', 'value': 1.0, 'full_mark': 1.0}


class TestLineSeries:

    def test_trailing_moving_average(self):
        params = line_series([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], window=3).params
        assert np.isnan(params.moving_average[:2]).all()
        np.testing.assert_allclose(params.moving_average[2:], [2.0, 3.0, 4.0, 5.0])
        np.testing.assert_array_equal(params.index, np.arange(6))

    def test_keeps_input_order(self):
        params = line_series([3.0, 1.0, 2.0], window=1).params
        np.testing.assert_array_equal(params.values, [3.0, 1.0, 2.0])
        np.testing.assert_array_equal(params.moving_average, [3.0, 1.0, 2.0])

    def test_window_longer_than_sample(self):
        result = line_series([1.0, 2.0], window=5)
        assert np.isnan(result.params.moving_average).all()
        assert any("exceeds" in w for w in result.warnings)

    def test_records_use_none_for_missing(self):
        records = line_series([1.0, 2.0, 3.0], window=2).records()
        assert records[0] == {'index': 0, 'value': 1.0, 'moving_average': None}
        assert records[2]['moving_average'] == 2.5
        assert all(r['moving_average'] is None or not math.isnan(r['moving_average'])
                   for r in records)

    def test_invalid_window(self):
        with pytest.raises(ValidationError):
            line_series([1.0, 2.0], window=0)
