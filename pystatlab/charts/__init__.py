"""
Chart binning module.

Public API:
    histogram(data, bins)              - Equal-width frequency bins
    boxplot(data)                      - Quartiles, whiskers and outliers
    density(data, smoothing, points)   - Gaussian kernel density curve
    pie_categories(data, categories)   - Equal-width value categories
    radar_profile(data)                - Scaled summary statistics
    line_series(data, window)          - Values with a moving average
"""

from pystatlab.charts.solvers import (
    histogram,
    boxplot,
    density,
    pie_categories,
    radar_profile,
    line_series,
)
from pystatlab.charts._common import (
    HistogramParams,
    BoxplotParams,
    DensityParams,
    CategoryParams,
    RadarParams,
    LineParams,
)
from pystatlab.charts.solution import ChartSolution
from pystatlab.charts.backends.cpu import equal_width_counts

__all__ = [
    "histogram",
    "boxplot",
    "density",
    "pie_categories",
    "radar_profile",
    "line_series",
    "equal_width_counts",
    "HistogramParams",
    "BoxplotParams",
    "DensityParams",
    "CategoryParams",
    "RadarParams",
    "LineParams",
    "ChartSolution",
]
