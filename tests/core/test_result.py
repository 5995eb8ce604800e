"""
Tests for the Result[P] envelope.

Validates:
    - Generic payloads
    - Frozen immutability
    - Default factories (warnings, provenance)
    - has_warning()
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

import pystatlab
from pystatlab.core.result import Result, _default_provenance


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _make(**kwargs):
    defaults = dict(
        params=FakeParams(value=1.5),
        info={'n': 3},
        timing=None,
        backend_name='cpu_test',
    )
    defaults.update(kwargs)
    return Result(**defaults)


class TestResultConstruction:

    def test_fields(self):
        result = _make(timing={'total_seconds': 0.01})
        assert result.params.value == 1.5
        assert result.info == {'n': 3}
        assert result.timing == {'total_seconds': 0.01}
        assert result.backend_name == 'cpu_test'

    def test_default_warnings_empty(self):
        assert _make().warnings == ()

    def test_frozen(self):
        result = _make()
        with pytest.raises(FrozenInstanceError):
            result.backend_name = 'other'


class TestProvenance:

    def test_version_keys(self):
        provenance = _default_provenance()
        assert set(provenance) == {'pystatlab_version', 'numpy_version', 'scipy_version'}

    def test_records_package_version(self):
        assert _make().provenance['pystatlab_version'] == pystatlab.__version__


class TestHasWarning:

    def test_substring_match(self):
        result = _make(warnings=("zero variance: skewness and kurtosis are undefined (NaN)",))
        assert result.has_warning("zero variance")
        assert not result.has_warning("zero mean")

    def test_no_warnings(self):
        assert not _make().has_warning("anything")
