"""
Solver dispatch for chart binning.

Each function validates its controls, resolves the backend and returns a
ChartSolution. Nothing is cached; every call recomputes from the sample.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pystatlab.core.defaults import (
    DEFAULT_BINS,
    DEFAULT_SMOOTHING,
    DEFAULT_PIE_CATEGORIES,
    DEFAULT_MOVING_AVERAGE_WINDOW,
    DENSITY_GRID_INTERVALS,
)
from pystatlab.core.exceptions import ValidationError
from pystatlab.core.sample import Sample, as_sample
from pystatlab.core.validation import check_count, check_positive
from pystatlab.charts._common import (
    HistogramParams,
    BoxplotParams,
    DensityParams,
    CategoryParams,
    RadarParams,
    LineParams,
)
from pystatlab.charts.solution import ChartSolution
from pystatlab.charts.backends.cpu import CPUChartBackend


def _get_backend(backend: str):
    if backend in ('auto', 'cpu'):
        return CPUChartBackend()
    raise ValidationError(f"Unknown backend: {backend!r}. Use 'auto' or 'cpu'.")


def _run(data, chart: str, backend: str, **options) -> ChartSolution:
    sample = as_sample(data)
    be = _get_backend(backend)
    result = be.solve(sample, chart=chart, **options)
    return ChartSolution(_result=result, _sample=sample)


def histogram(
    data: ArrayLike | Sample,
    bins: int = DEFAULT_BINS,
    *,
    backend: str = 'auto',
) -> ChartSolution[HistogramParams]:
    """
    Equal-width histogram over [min, max].

    Parameters
    ----------
    data : array-like or Sample
    bins : int
        Number of bins, >= 1.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    ChartSolution[HistogramParams]
        records() rows: {'bin': midpoint, 'frequency': count}.

    Notes
    -----
    The maximum observation is always counted in the last bin, so the
    counts sum to n. A constant sample has bin width 0 and every
    observation lands in the last bin.
    """
    bins = check_count(bins, 'bins')
    return _run(data, 'histogram', backend, bins=bins)


def boxplot(
    data: ArrayLike | Sample,
    *,
    backend: str = 'auto',
) -> ChartSolution[BoxplotParams]:
    """
    Box-and-whisker summary with 1.5 * IQR outlier fences.

    Quartiles use linear interpolation at index q * (n - 1). Whisker
    ends (min, max) are taken over the observations inside the fences.
    """
    return _run(data, 'boxplot', backend)


def density(
    data: ArrayLike | Sample,
    smoothing: float = DEFAULT_SMOOTHING,
    points: int = DENSITY_GRID_INTERVALS,
    *,
    backend: str = 'auto',
) -> ChartSolution[DensityParams]:
    """
    Gaussian kernel density estimate on an even grid over [min, max].

    Parameters
    ----------
    data : array-like or Sample
    smoothing : float
        Bandwidth multiplier, > 0. Bandwidth is range / 20 * smoothing.
    points : int
        Number of grid intervals; the curve has points + 1 values.
    backend : str
        'auto' or 'cpu'.

    Raises
    ------
    ParameterConstraintError
        smoothing <= 0.
    NumericalError
        All observations are equal (zero bandwidth).
    """
    smoothing = check_positive(smoothing, 'smoothing')
    points = check_count(points, 'points')
    return _run(data, 'density', backend, smoothing=smoothing, points=points)


def pie_categories(
    data: ArrayLike | Sample,
    categories: int = DEFAULT_PIE_CATEGORIES,
    *,
    backend: str = 'auto',
) -> ChartSolution[CategoryParams]:
    """
    Group observations into equal-width value categories for a pie chart.

    Categories without observations are left out, so the percentages of
    the returned categories sum to 100.
    """
    categories = check_count(categories, 'categories')
    return _run(data, 'pie', backend, categories=categories)


def radar_profile(
    data: ArrayLike | Sample,
    *,
    backend: str = 'auto',
) -> ChartSolution[RadarParams]:
    """Summary statistics scaled to [0, 1] by max(|min|, |max|)."""
    return _run(data, 'radar', backend)


def line_series(
    data: ArrayLike | Sample,
    window: int = DEFAULT_MOVING_AVERAGE_WINDOW,
    *,
    backend: str = 'auto',
) -> ChartSolution[LineParams]:
    """
    Observations in input order with a trailing moving average.

    The moving average at index i is the mean of observations
    i - window + 1 .. i and is NaN (None in records()) for i < window - 1.
    """
    window = check_count(window, 'window')
    return _run(data, 'line', backend, window=window)
