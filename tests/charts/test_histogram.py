"""
Tests for histogram() and the shared equal-width binning rule.
"""

import numpy as np
import pytest

from pystatlab.core.exceptions import ValidationError
from pystatlab.charts import equal_width_counts, histogram


ZERO_TO_TEN = np.arange(0.0, 11.0)


class TestBinning:

    def test_counts_and_midpoints(self):
        result = histogram(ZERO_TO_TEN, bins=10)
        np.testing.assert_array_equal(result.params.counts, [1] * 9 + [2])
        np.testing.assert_allclose(result.params.midpoints, np.arange(0.5, 10.0, 1.0))
        assert result.params.bin_width == 1.0

    def test_edges(self):
        result = histogram(ZERO_TO_TEN, bins=5)
        np.testing.assert_allclose(result.params.edges, [0, 2, 4, 6, 8, 10])

    def test_max_in_last_bin(self, rng):
        x = rng.uniform(-3.0, 7.0, 200)
        counts = histogram(x, bins=7).params.counts
        assert counts[-1] >= 1

    @pytest.mark.parametrize("bins", [1, 3, 10, 33])
    def test_counts_sum_to_n(self, normal_sample, bins):
        assert histogram(normal_sample, bins=bins).params.counts.sum() == normal_sample.shape[0]

    def test_upper_edge_rounding_clipped(self):
        # (0.3 - 0.1) / ((0.3 - 0.1) / 3) can round to 3.0000000000000004
        x = np.array([0.1, 0.2, 0.3, 0.3])
        counts, _ = equal_width_counts(x, 0.1, 0.3, 3)
        assert counts.sum() == 4
        assert counts[-1] >= 2

    def test_default_bins(self, normal_sample):
        assert histogram(normal_sample).params.counts.shape == (10,)


class TestZeroRange:

    def test_all_in_last_bin(self):
        result = histogram([3.0, 3.0, 3.0], bins=5)
        np.testing.assert_array_equal(result.params.counts, [0, 0, 0, 0, 3])
        np.testing.assert_array_equal(result.params.midpoints, [3.0] * 5)
        assert result.params.bin_width == 0.0

    def test_warning(self):
        result = histogram([3.0, 3.0], bins=2)
        assert any("zero range" in w for w in result.warnings)


class TestRecords:

    def test_rows(self):
        records = histogram([0.0, 1.0, 2.0, 3.0], bins=2).records()
        assert records == [
            {'bin': 0.75, 'frequency': 2},
            {'bin': 2.25, 'frequency': 2},
        ]

    def test_solution_metadata(self):
        result = histogram(ZERO_TO_TEN, bins=4)
        assert result.chart == 'histogram'
        assert result.info['bins'] == 4
        assert result.backend_name == 'cpu_charts'
        assert 'histogram' in result.timing
        assert repr(result) == "ChartSolution(chart='histogram', n=11)"


class TestValidation:

    @pytest.mark.parametrize("bins", [0, -1, 2.5, 'ten'])
    def test_invalid_bins(self, bins):
        with pytest.raises(ValidationError):
            histogram(ZERO_TO_TEN, bins=bins)

    def test_integral_float_bins(self):
        assert histogram(ZERO_TO_TEN, bins=5.0).params.counts.shape == (5,)

    def test_unknown_backend(self):
        with pytest.raises(ValidationError, match="Unknown backend"):
            histogram(ZERO_TO_TEN, backend='gpu')
