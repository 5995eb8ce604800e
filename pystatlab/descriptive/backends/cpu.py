"""
CPU reference backend for descriptive statistics.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pystatlab.core.result import Result
from pystatlab.core.sample import Sample
from pystatlab.core.compute.timing import Timer
from pystatlab.descriptive.solution import DescriptiveParams, Mode
from pystatlab.descriptive._quantiles import order_statistic_quantile


class CPUDescriptiveBackend:
    """CPU reference backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(self, sample: Sample) -> Result[DescriptiveParams]:
        """
        Compute every descriptive statistic for the sample.

        Degenerate samples are not rejected: zero variance gives NaN
        skewness/kurtosis and a zero mean gives a non-finite coefficient
        of variation. Each such case is reported in Result.warnings.
        """
        timer = Timer()
        timer.start()

        x = sample.values
        ordered = sample.sorted
        n = sample.n
        warnings_list: list[str] = []

        with timer.section('location'):
            total = float(np.sum(x))
            lo = float(ordered[0])
            hi = float(ordered[-1])
            # Identical values: the mean is exactly that value
            mean = lo if lo == hi else total / n
            median = self._compute_median(ordered)
            mode = self._compute_mode(x)

        with timer.section('quartiles'):
            q1 = order_statistic_quantile(ordered, 0.25)
            q3 = order_statistic_quantile(ordered, 0.75)

        with timer.section('moments'):
            variance, skewness, kurtosis = self._compute_moments(x, mean)
            sd = float(np.sqrt(variance))
            with np.errstate(divide='ignore', invalid='ignore'):
                cv = float(np.float64(sd) / np.abs(np.float64(mean)))

        if sd == 0.0:
            warnings_list.append(
                "zero variance: skewness and kurtosis are undefined (NaN)"
            )
        if mean == 0.0:
            warnings_list.append(
                "zero mean: coefficient of variation is undefined"
            )

        timer.stop()

        params = DescriptiveParams(
            n=n,
            sum=total,
            mean=mean,
            median=median,
            mode=mode,
            min=lo,
            max=hi,
            range=hi - lo,
            q1=q1,
            q3=q3,
            iqr=q3 - q1,
            variance=variance,
            sd=sd,
            skewness=skewness,
            kurtosis=kurtosis,
            coefficient_of_variation=cv,
        )

        return Result(
            params=params,
            info={'n': n, 'source': sample.source, 'quartile_method': 'order_statistic'},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _compute_median(self, ordered: NDArray) -> float:
        """Central value, or mean of the two central values for even n."""
        n = ordered.shape[0]
        mid = n // 2
        if n % 2 == 0:
            return float((ordered[mid - 1] + ordered[mid]) / 2.0)
        return float(ordered[mid])

    def _compute_mode(self, x: NDArray) -> Mode:
        """
        Most frequent value(s).

        np.unique compares with ==, so numerically equal values
        (including 0.0 and -0.0) share one frequency count.
        """
        values, counts = np.unique(x, return_counts=True)
        tied = values[counts == counts.max()]
        if tied.shape[0] == 1:
            return float(tied[0])
        return tuple(float(v) for v in tied)

    def _compute_moments(self, x: NDArray, mean: float) -> tuple[float, float, float]:
        """Population variance, skewness and excess kurtosis."""
        deviations = x - mean
        variance = float(np.mean(deviations ** 2))
        sd = np.sqrt(variance)
        if sd == 0.0:
            return variance, float('nan'), float('nan')
        z = deviations / sd
        skewness = float(np.mean(z ** 3))
        kurtosis = float(np.mean(z ** 4) - 3.0)
        return variance, skewness, kurtosis
