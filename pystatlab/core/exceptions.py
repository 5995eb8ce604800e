"""
Exception hierarchy for PyStatLab.

All exceptions inherit from PyStatLabError so a caller (a UI layer, a
notebook, the AnalysisSession) can catch any library-specific failure
with a single except clause and show its message to the user.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyStatLabError(Exception):
    """Base exception for all PyStatLab errors."""
    pass


class ValidationError(PyStatLabError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks. The
    computation is aborted and no partial result is returned.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when a sample is not one-dimensional.
    """
    pass


class EmptySampleError(ValidationError):
    """
    No usable observations.

    Raised when a sample is empty, when a file or text response contains
    no parseable numbers, or when an analysis is requested before any
    sample has been loaded.
    """
    pass


class ParameterConstraintError(ValidationError):
    """
    A distribution parameter is outside its valid range.

    Attributes:
        parameter: Name of the offending parameter (e.g. 'std', 'probability')
        value: The value that was supplied
    """

    def __init__(
        self,
        message: str,
        parameter: str | None = None,
        value: float | None = None,
    ):
        super().__init__(message)
        self.parameter = parameter
        self.value = value


class NumericalError(PyStatLabError):
    """
    Numerical computation failed.

    Raised when a degenerate sample makes a result impossible to compute
    (e.g. a kernel density with zero bandwidth).
    """
    pass


class ConvergenceError(NumericalError):
    """
    Iterative algorithm failed to converge.

    Raised when the likelihood-based fitters cannot locate a root or
    optimum for the supplied sample.

    Attributes:
        iterations: Number of iterations completed
        reason: Why convergence failed (e.g. 'no_sign_change', 'max_iterations')
    """

    def __init__(
        self,
        message: str,
        iterations: int = 0,
        reason: str | None = None,
    ):
        super().__init__(message)
        self.iterations = iterations
        self.reason = reason
