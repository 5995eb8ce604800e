"""
The two sample-quantile definitions used by PyStatLab.

They give different answers on the same data and both are relied upon,
so they are kept as two distinctly named functions:

order_statistic_quantile
    Plain order statistic at index floor(n * p) of the sorted sample, no
    interpolation. Used for the Q1/Q3 reported by describe().

interpolated_quantile
    Linear interpolation between the order statistics around index
    p * (n - 1). This is Hyndman & Fan type 7 (R's default). Used by the
    boxplot and radar charts.

Example, x = 1:10:
    order_statistic_quantile(x, 0.25) -> x[2] = 3
    interpolated_quantile(x, 0.25)    -> x[2] + 0.25 * (x[3] - x[2]) = 3.25

Reference:
    Hyndman, R.J. and Fan, Y. (1996) "Sample Quantiles in Statistical
    Packages", The American Statistician, 50(4), 361-365.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystatlab.core.exceptions import EmptySampleError, ValidationError


def _check_probs(probs: ArrayLike) -> NDArray:
    p = np.asarray(probs, dtype=np.float64)
    if np.any(np.isnan(p)) or np.any((p < 0.0) | (p > 1.0)):
        raise ValidationError(f"Quantile probabilities must be in [0, 1], got {probs}")
    return p


def _check_sorted(x: ArrayLike) -> NDArray:
    arr = np.asarray(x, dtype=np.float64)
    if arr.ndim != 1:
        raise ValidationError(f"Quantiles need a 1D sorted array, got {arr.ndim}D")
    if arr.shape[0] == 0:
        raise EmptySampleError("Cannot compute a quantile of an empty sample")
    return arr


def order_statistic_quantile(sorted_x: ArrayLike, probs: ArrayLike) -> float | NDArray:
    """
    Order-statistic quantile: ``sorted_x[floor(n * p)]``.

    Parameters
    ----------
    sorted_x : array-like
        1D sample sorted ascending.
    probs : float or array-like
        Probabilities in [0, 1]. p = 1 maps to the maximum.

    Returns
    -------
    float for scalar ``probs``, otherwise an array of the same shape.
    """
    x = _check_sorted(sorted_x)
    p = _check_probs(probs)
    n = x.shape[0]

    index = np.minimum(np.floor(n * p).astype(np.intp), n - 1)
    result = x[index]
    return float(result) if np.ndim(result) == 0 else result


def interpolated_quantile(sorted_x: ArrayLike, probs: ArrayLike) -> float | NDArray:
    """
    Linearly interpolated quantile at index ``p * (n - 1)``.

    The value is ``x[lo] * (1 - w) + x[hi] * w`` with ``lo = floor(index)``,
    ``hi = ceil(index)`` and ``w = index - lo``.

    Parameters
    ----------
    sorted_x : array-like
        1D sample sorted ascending.
    probs : float or array-like
        Probabilities in [0, 1].

    Returns
    -------
    float for scalar ``probs``, otherwise an array of the same shape.
    """
    x = _check_sorted(sorted_x)
    p = _check_probs(probs)
    n = x.shape[0]

    index = p * (n - 1)
    lo = np.floor(index).astype(np.intp)
    hi = np.ceil(index).astype(np.intp)
    weight = index - lo
    result = x[lo] * (1.0 - weight) + x[hi] * weight
    return float(result) if np.ndim(result) == 0 else result
