"""
Descriptive statistics module.

Public API:
    describe(data)                      - All statistics at once
    order_statistic_quantile(x, p)      - x[floor(n p)] of a sorted sample
    interpolated_quantile(x, p)         - Linear interpolation at p (n - 1)
"""

from pystatlab.descriptive.solution import DescriptiveParams, DescriptiveSolution
from pystatlab.descriptive.solvers import describe
from pystatlab.descriptive._quantiles import (
    order_statistic_quantile,
    interpolated_quantile,
)

__all__ = [
    "describe",
    "order_statistic_quantile",
    "interpolated_quantile",
    "DescriptiveParams",
    "DescriptiveSolution",
]
