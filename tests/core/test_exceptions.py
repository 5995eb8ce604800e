"""
Tests for the PyStatLab exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyStatLabError)
    - Diagnostic attributes on ParameterConstraintError and ConvergenceError
    - Default attribute values (None / 0 for optional attributes)
"""

import pytest

from pystatlab.core.exceptions import (
    ConvergenceError,
    DimensionError,
    EmptySampleError,
    NumericalError,
    ParameterConstraintError,
    PyStatLabError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyStatLabError."""

    @pytest.mark.parametrize("exc", [
        ValidationError, DimensionError, EmptySampleError,
        ParameterConstraintError, NumericalError, ConvergenceError,
    ])
    def test_is_pystatlab_error(self, exc):
        with pytest.raises(PyStatLabError):
            raise exc("failed")

    @pytest.mark.parametrize("exc", [
        DimensionError, EmptySampleError, ParameterConstraintError,
    ])
    def test_input_errors_are_validation_errors(self, exc):
        assert issubclass(exc, ValidationError)

    def test_convergence_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise ConvergenceError("no root")

    def test_numerical_error_is_not_validation_error(self):
        assert not issubclass(NumericalError, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestParameterConstraintError:

    def test_attributes(self):
        e = ParameterConstraintError("std must be greater than 0", parameter='std', value=-1.0)
        assert e.parameter == 'std'
        assert e.value == -1.0
        assert str(e) == "std must be greater than 0"

    def test_defaults(self):
        e = ParameterConstraintError("bad")
        assert e.parameter is None
        assert e.value is None


class TestConvergenceError:

    def test_attributes(self):
        e = ConvergenceError("no root", iterations=12, reason='no_sign_change')
        assert e.iterations == 12
        assert e.reason == 'no_sign_change'

    def test_defaults(self):
        e = ConvergenceError("no root")
        assert e.iterations == 0
        assert e.reason is None
