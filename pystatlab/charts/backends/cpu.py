"""
CPU backend for chart binning.

All computations are single passes over the sample (or over the sample per
grid point for the kernel density) and are re-run in full on every call.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy import stats

from pystatlab.core.defaults import (
    DENSITY_BANDWIDTH_DIVISOR,
    OUTLIER_FENCE,
)
from pystatlab.core.exceptions import NumericalError, ValidationError
from pystatlab.core.result import Result
from pystatlab.core.sample import Sample
from pystatlab.core.compute.timing import Timer
from pystatlab.descriptive._quantiles import interpolated_quantile
from pystatlab.charts._common import (
    HistogramParams,
    BoxplotParams,
    DensityParams,
    CategoryParams,
    RadarParams,
    LineParams,
)


RADAR_SUBJECTS = ('min', 'q1', 'median', 'mean', 'q3', 'max')


def equal_width_counts(x: NDArray, lo: float, hi: float, bins: int) -> tuple[NDArray, float]:
    """
    Count observations in ``bins`` equal-width bins over [lo, hi].

    Bin index is floor((value - lo) / width). The maximum always goes in
    the last bin, as does any value whose index rounds up to ``bins``,
    so the counts sum to len(x). A zero-width range puts everything in
    the last bin.
    """
    width = (hi - lo) / bins
    if width == 0:
        counts = np.zeros(bins, dtype=np.int64)
        counts[-1] = x.shape[0]
        return counts, width

    index = np.floor((x - lo) / width).astype(np.int64)
    index = np.where(x == hi, bins - 1, index)
    index = np.clip(index, 0, bins - 1)
    return np.bincount(index, minlength=bins).astype(np.int64), width


class CPUChartBackend:
    """CPU backend producing chart payloads."""

    @property
    def name(self) -> str:
        return 'cpu_charts'

    def solve(self, sample: Sample, *, chart: str, **options: Any) -> Result:
        """
        Compute the payload for one chart kind.

        Parameters
        ----------
        sample : Sample
        chart : str
            'histogram' (bins), 'boxplot', 'density' (smoothing, points),
            'pie' (categories), 'radar', 'line' (window).
        """
        handlers = {
            'histogram': self._histogram,
            'boxplot': self._boxplot,
            'density': self._density,
            'pie': self._pie,
            'radar': self._radar,
            'line': self._line,
        }
        if chart not in handlers:
            raise ValidationError(
                f"Unknown chart: {chart!r}. Must be one of {tuple(handlers)}."
            )

        timer = Timer()
        timer.start()
        warnings_list: list[str] = []

        with timer.section(chart):
            params, info = handlers[chart](sample, warnings_list, **options)

        timer.stop()

        return Result(
            params=params,
            info={'chart': chart, 'n': sample.n, **info},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    # --- Charts ---

    def _histogram(self, sample: Sample, warnings_list: list[str], *, bins: int):
        lo, hi = sample.min, sample.max
        counts, width = equal_width_counts(sample.values, lo, hi, bins)
        edges = lo + np.arange(bins + 1) * width
        midpoints = edges[:-1] + width / 2.0
        if width == 0:
            warnings_list.append("zero range: all observations placed in the last bin")
        params = HistogramParams(
            midpoints=midpoints,
            counts=counts,
            edges=edges,
            bin_width=float(width),
        )
        return params, {'bins': bins, 'bin_width': float(width)}

    def _boxplot(self, sample: Sample, warnings_list: list[str]):
        ordered = sample.sorted
        q1, median, q3 = interpolated_quantile(ordered, [0.25, 0.5, 0.75])
        iqr = q3 - q1
        lower_fence = q1 - OUTLIER_FENCE * iqr
        upper_fence = q3 + OUTLIER_FENCE * iqr

        outside = (ordered < lower_fence) | (ordered > upper_fence)
        inliers = ordered[~outside]
        params = BoxplotParams(
            min=float(inliers[0]),
            q1=float(q1),
            median=float(median),
            q3=float(q3),
            max=float(inliers[-1]),
            outliers=ordered[outside].copy(),
            lower_fence=float(lower_fence),
            upper_fence=float(upper_fence),
        )
        return params, {'quartile_method': 'interpolated', 'n_outliers': int(np.sum(outside))}

    def _density(self, sample: Sample, warnings_list: list[str], *, smoothing: float, points: int):
        lo, hi = sample.min, sample.max
        span = hi - lo
        if span == 0:
            raise NumericalError(
                "kernel density needs a sample with positive range; "
                "all observations are equal so the bandwidth would be 0"
            )
        bandwidth = span / DENSITY_BANDWIDTH_DIVISOR * smoothing

        grid = lo + span * np.arange(points + 1) / points
        x = sample.values
        density = np.empty(points + 1, dtype=np.float64)
        for i, g in enumerate(grid):
            density[i] = np.mean(stats.norm.pdf((g - x) / bandwidth)) / bandwidth

        params = DensityParams(x=grid, density=density, bandwidth=float(bandwidth))
        return params, {'bandwidth': float(bandwidth), 'smoothing': smoothing, 'points': points + 1}

    def _pie(self, sample: Sample, warnings_list: list[str], *, categories: int):
        lo, hi = sample.min, sample.max
        counts, width = equal_width_counts(sample.values, lo, hi, categories)
        labels = [
            f"{lo + i * width:.1f}-{lo + (i + 1) * width:.1f}"
            for i in range(categories)
        ]
        keep = counts > 0
        params = CategoryParams(
            labels=tuple(label for label, k in zip(labels, keep) if k),
            counts=counts[keep],
            percentages=counts[keep] / sample.n * 100.0,
        )
        return params, {'categories': categories, 'non_empty': int(np.sum(keep))}

    def _radar(self, sample: Sample, warnings_list: list[str]):
        ordered = sample.sorted
        q1, median, q3 = interpolated_quantile(ordered, [0.25, 0.5, 0.75])
        raw = np.array([
            ordered[0], q1, median, float(np.mean(sample.values)), q3, ordered[-1],
        ], dtype=np.float64)
        scale = max(abs(raw[0]), abs(raw[-1]))
        if scale == 0:
            scaled = np.zeros_like(raw)
            warnings_list.append("all observations are zero: radar values set to 0")
        else:
            scaled = np.abs(raw) / scale
        params = RadarParams(subjects=RADAR_SUBJECTS, raw=raw, scaled=scaled)
        return params, {'scale': float(scale)}

    def _line(self, sample: Sample, warnings_list: list[str], *, window: int):
        x = sample.values
        n = sample.n
        moving = np.full(n, np.nan)
        if window <= n:
            moving[window - 1:] = np.convolve(x, np.ones(window), mode='valid') / window
        else:
            warnings_list.append(
                f"window {window} exceeds sample size {n}: no moving average"
            )
        params = LineParams(
            index=np.arange(n),
            values=x.copy(),
            moving_average=moving,
            window=window,
        )
        return params, {'window': window}
