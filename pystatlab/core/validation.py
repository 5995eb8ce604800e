"""
Input validation utilities for PyStatLab.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pystatlab.core.exceptions import (
    ValidationError,
    DimensionError,
    EmptySampleError,
    ParameterConstraintError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Rejects inputs that result in object dtype (mixed types) or in a
    non-numeric dtype (strings, datetimes). Booleans are rejected too:
    a sample of True/False is almost always a caller mistake.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return result.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> NDArray[np.floating[Any]]:
    """
    Verify array is one-dimensional.

    Column and row vectors (shape (n, 1) or (1, n)) are flattened; any
    other multi-dimensional shape is rejected, since a sample is a single
    variable.

    Returns:
        The 1D array

    Raises:
        DimensionError: If array cannot be viewed as a single variable
    """
    if array.ndim == 1:
        return array
    if array.ndim == 2 and 1 in array.shape:
        return array.ravel()
    raise DimensionError(
        f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
    )


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        EmptySampleError: If the array is empty
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n == 0:
        raise EmptySampleError(f"{name}: sample is empty")
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_positive(value: float, name: str) -> float:
    """
    Verify a scalar parameter is finite and strictly positive.

    Raises:
        ParameterConstraintError: If value <= 0 or non-finite
    """
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise ParameterConstraintError(
            f"{name} must be greater than 0, got {value}",
            parameter=name, value=value,
        )
    return value


def check_probability(value: float, name: str) -> float:
    """
    Verify a scalar parameter lies in the closed interval [0, 1].

    Raises:
        ParameterConstraintError: If value is outside [0, 1]
    """
    value = float(value)
    if not (0.0 <= value <= 1.0):
        raise ParameterConstraintError(
            f"{name} must be between 0 and 1, got {value}",
            parameter=name, value=value,
        )
    return value


def check_count(value: int, name: str, *, minimum: int = 1, maximum: int | None = None) -> int:
    """
    Verify a scalar is an integer within [minimum, maximum].

    Used for bin counts, category counts, window lengths and sample sizes.
    Floats with an integral value (10.0) are accepted; 10.5 is not.

    Raises:
        ValidationError: If value is not integral or out of range
    """
    if isinstance(value, (bool, np.bool_)):
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    try:
        as_float = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{name} must be an integer, got {value!r}") from e
    if not as_float.is_integer():
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    count = int(as_float)
    if count < minimum or (maximum is not None and count > maximum):
        bound = f"between {minimum} and {maximum}" if maximum is not None else f">= {minimum}"
        raise ValidationError(f"{name} must be {bound}, got {count}")
    return count
