"""
Tests for boxplot(): interpolated quartiles and 1.5 * IQR outlier fences.
"""

import numpy as np
import pytest

from pystatlab.charts import boxplot


class TestOutliers:

    def test_far_value_flagged(self, with_outlier):
        params = boxplot(with_outlier).params
        np.testing.assert_array_equal(params.outliers, [100.0])
        assert params.max == 9.0
        assert params.min == 1.0

    def test_interpolated_quartiles(self, with_outlier):
        params = boxplot(with_outlier).params
        assert params.q1 == pytest.approx(3.25)
        assert params.median == pytest.approx(5.5)
        assert params.q3 == pytest.approx(7.75)
        assert params.iqr == pytest.approx(4.5)

    def test_fences(self, with_outlier):
        params = boxplot(with_outlier).params
        assert params.lower_fence == pytest.approx(3.25 - 1.5 * 4.5)
        assert params.upper_fence == pytest.approx(7.75 + 1.5 * 4.5)

    def test_outliers_sorted_both_sides(self):
        data = [-50.0, 10.0, 11.0, 12.0, 13.0, 14.0, 90.0, 80.0]
        np.testing.assert_array_equal(boxplot(data).params.outliers, [-50.0, 80.0, 90.0])

    def test_no_outliers(self, one_to_five):
        params = boxplot(one_to_five).params
        assert params.outliers.shape == (0,)
        assert params.min == 1.0
        assert params.max == 5.0


class TestOrdering:

    def test_five_numbers_ordered(self, rng):
        params = boxplot(rng.lognormal(0.0, 1.0, 250)).params
        assert params.min <= params.q1 <= params.median <= params.q3 <= params.max

    def test_constant_sample(self):
        params = boxplot([2.0, 2.0, 2.0]).params
        assert params.min == params.q1 == params.median == params.q3 == params.max == 2.0
        assert params.outliers.shape == (0,)


class TestRecords:

    def test_single_row(self, with_outlier):
        records = boxplot(with_outlier).records()
        assert len(records) == 1
        assert records[0]['outliers'] == [100.0]
        assert records[0]['median'] == pytest.approx(5.5)
