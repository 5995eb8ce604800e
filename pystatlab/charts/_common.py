"""
Payload types for chart binning.

Every payload is a frozen dataclass with a records() method returning the
list-of-dict rows a charting library consumes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray


def _nan_to_none(value: float) -> float | None:
    return None if np.isnan(value) else float(value)


@dataclass(frozen=True)
class HistogramParams:
    """
    Equal-width histogram over [min, max].

    Attributes
    ----------
    midpoints : ndarray, shape (bins,)
        Left edge + bin_width / 2.
    counts : ndarray of int, shape (bins,)
        Observations per bin; sums to n.
    edges : ndarray, shape (bins + 1,)
        Bin edges, min + i * bin_width.
    bin_width : float
        (max - min) / bins. Zero for a constant sample.
    """
    midpoints: NDArray[np.floating[Any]]
    counts: NDArray[np.integer[Any]]
    edges: NDArray[np.floating[Any]]
    bin_width: float

    def records(self) -> list[dict[str, Any]]:
        return [
            {'bin': float(m), 'frequency': int(c)}
            for m, c in zip(self.midpoints, self.counts)
        ]


@dataclass(frozen=True)
class BoxplotParams:
    """
    Five-number summary with Tukey outliers.

    q1, median and q3 are interpolated quantiles. min and max are the
    extremes of the observations inside the fences.
    """
    min: float
    q1: float
    median: float
    q3: float
    max: float
    outliers: NDArray[np.floating[Any]]
    lower_fence: float
    upper_fence: float

    @property
    def iqr(self) -> float:
        return self.q3 - self.q1

    def records(self) -> list[dict[str, Any]]:
        return [{
            'min': self.min,
            'q1': self.q1,
            'median': self.median,
            'q3': self.q3,
            'max': self.max,
            'outliers': [float(v) for v in self.outliers],
        }]


@dataclass(frozen=True)
class DensityParams:
    """Gaussian kernel density evaluated on an even grid over [min, max]."""
    x: NDArray[np.floating[Any]]
    density: NDArray[np.floating[Any]]
    bandwidth: float

    def records(self) -> list[dict[str, Any]]:
        return [{'x': float(a), 'density': float(d)} for a, d in zip(self.x, self.density)]


@dataclass(frozen=True)
class CategoryParams:
    """
    Equal-width value categories for a pie chart. Empty categories are omitted.

    Attributes
    ----------
    labels : tuple of str
        "lower-upper" with one decimal.
    counts : ndarray of int
    percentages : ndarray
        count / n * 100.
    """
    labels: tuple[str, ...]
    counts: NDArray[np.integer[Any]]
    percentages: NDArray[np.floating[Any]]

    def records(self) -> list[dict[str, Any]]:
        return [
            {'name': label, 'value': int(c), 'percentage': float(p)}
            for label, c, p in zip(self.labels, self.counts, self.percentages)
        ]


@dataclass(frozen=True)
class RadarParams:
    """
    Summary statistics scaled by max(|min|, |max|) for a radar chart.

    subjects are ('min', 'q1', 'median', 'mean', 'q3', 'max'); raw holds the
    unscaled statistics and scaled the values in [0, 1].
    """
    subjects: tuple[str, ...]
    raw: NDArray[np.floating[Any]]
    scaled: NDArray[np.floating[Any]]

    def records(self) -> list[dict[str, Any]]:
        return [
            {'subject': s, 'value': float(v), 'full_mark': 1.0}
            for s, v in zip(self.subjects, self.scaled)
        ]


@dataclass(frozen=True)
class LineParams:
    """Observations by index with a trailing moving average (NaN until the window fills)."""
    index: NDArray[np.integer[Any]]
    values: NDArray[np.floating[Any]]
    moving_average: NDArray[np.floating[Any]]
    window: int

    def records(self) -> list[dict[str, Any]]:
        return [
            {'index': int(i), 'value': float(v), 'moving_average': _nan_to_none(m)}
            for i, v, m in zip(self.index, self.values, self.moving_average)
        ]
