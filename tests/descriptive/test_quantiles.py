"""
Tests for the two sample-quantile definitions.

interpolated_quantile is Hyndman & Fan type 7, which is numpy's default
'linear' method, so numpy.quantile is the reference.
"""

import numpy as np
import pytest

from pystatlab.core.exceptions import EmptySampleError, ValidationError
from pystatlab.descriptive import interpolated_quantile, order_statistic_quantile


ONE_TO_TEN = np.arange(1.0, 11.0)


class TestOrderStatisticQuantile:

    def test_quartiles_one_to_ten(self):
        assert order_statistic_quantile(ONE_TO_TEN, 0.25) == 3.0
        assert order_statistic_quantile(ONE_TO_TEN, 0.75) == 8.0

    def test_probability_one_is_max(self):
        assert order_statistic_quantile(ONE_TO_TEN, 1.0) == 10.0

    def test_probability_zero_is_min(self):
        assert order_statistic_quantile(ONE_TO_TEN, 0.0) == 1.0

    def test_vector_probs(self):
        result = order_statistic_quantile(ONE_TO_TEN, [0.25, 0.5, 0.75])
        np.testing.assert_array_equal(result, [3.0, 6.0, 8.0])

    def test_scalar_returns_float(self):
        assert isinstance(order_statistic_quantile(ONE_TO_TEN, 0.5), float)


class TestInterpolatedQuantile:

    def test_quartile_one_to_ten(self):
        assert interpolated_quantile(ONE_TO_TEN, 0.25) == pytest.approx(3.25)

    def test_matches_numpy_linear(self, rng):
        x = np.sort(rng.standard_normal(37))
        probs = np.linspace(0.0, 1.0, 21)
        np.testing.assert_allclose(
            interpolated_quantile(x, probs), np.quantile(x, probs), rtol=1e-12
        )

    def test_endpoints(self):
        assert interpolated_quantile(ONE_TO_TEN, 0.0) == 1.0
        assert interpolated_quantile(ONE_TO_TEN, 1.0) == 10.0

    def test_single_observation(self):
        assert interpolated_quantile([4.0], 0.3) == 4.0


class TestDefinitionsDiffer:

    def test_same_data_different_answers(self):
        assert order_statistic_quantile(ONE_TO_TEN, 0.25) != interpolated_quantile(ONE_TO_TEN, 0.25)


class TestQuantileValidation:

    @pytest.mark.parametrize("func", [order_statistic_quantile, interpolated_quantile])
    def test_probability_out_of_range(self, func):
        with pytest.raises(ValidationError, match=r"\[0, 1\]"):
            func(ONE_TO_TEN, 1.5)

    @pytest.mark.parametrize("func", [order_statistic_quantile, interpolated_quantile])
    def test_empty(self, func):
        with pytest.raises(EmptySampleError):
            func([], 0.5)

    @pytest.mark.parametrize("func", [order_statistic_quantile, interpolated_quantile])
    def test_two_dimensional(self, func):
        with pytest.raises(ValidationError, match="1D"):
            func(np.ones((2, 2)), 0.5)
