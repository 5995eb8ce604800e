"""
Solver dispatch for descriptive statistics.

Provides describe() as the single entry point.
"""

from __future__ import annotations

from typing import Literal
from numpy.typing import ArrayLike

from pystatlab.core.exceptions import ValidationError
from pystatlab.core.sample import Sample, as_sample
from pystatlab.descriptive.solution import DescriptiveSolution
from pystatlab.descriptive.backends.cpu import CPUDescriptiveBackend


BackendChoice = Literal['auto', 'cpu']


def _get_backend(backend: str):
    """Select backend based on preference."""
    if backend in ('auto', 'cpu'):
        return CPUDescriptiveBackend()
    raise ValidationError(f"Unknown backend: {backend!r}. Use 'auto' or 'cpu'.")


def describe(
    data: ArrayLike | Sample,
    *,
    backend: BackendChoice = 'auto',
) -> DescriptiveSolution:
    """
    Compute descriptive statistics for a one-dimensional sample.

    Computes: n, sum, mean, median, mode, min, max, range, Q1, Q3, IQR,
    population variance, standard deviation, skewness, excess kurtosis
    and coefficient of variation.

    Parameters
    ----------
    data : array-like or Sample
        Non-empty 1D numeric sample with finite values.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    DescriptiveSolution with all statistics populated.

    Notes
    -----
    Q1 and Q3 are plain order statistics at index floor(0.25 n) and
    floor(0.75 n); the boxplot uses interpolated quartiles instead.
    """
    sample = as_sample(data)
    be = _get_backend(backend)
    result = be.solve(sample)
    return DescriptiveSolution(_result=result, _sample=sample)
