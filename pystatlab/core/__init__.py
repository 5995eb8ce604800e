"""
Core infrastructure for PyStatLab.

This module provides shared abstractions and utilities used by all
domain-specific submodules (descriptive, estimation, charts, generation).

Key components:
    sample: Sample, the immutable one-dimensional input
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    defaults: Default control values and numeric constants
    compute: Timing utilities
"""

from pystatlab.core.protocols import Backend
from pystatlab.core.result import Result
from pystatlab.core.sample import Sample, as_sample
from pystatlab.core.exceptions import (
    PyStatLabError,
    ValidationError,
    DimensionError,
    EmptySampleError,
    ParameterConstraintError,
    NumericalError,
    ConvergenceError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Input
    "Sample",
    "as_sample",
    # Exceptions
    "PyStatLabError",
    "ValidationError",
    "DimensionError",
    "EmptySampleError",
    "ParameterConstraintError",
    "NumericalError",
    "ConvergenceError",
]
