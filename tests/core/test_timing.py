"""
Tests for Timer / timed() and the Backend protocol.
"""

import pytest

from pystatlab.core import Backend
from pystatlab.core.compute import Timer, timed
from pystatlab.descriptive.backends import CPUDescriptiveBackend
from pystatlab.estimation.backends import CPUEstimationBackend
from pystatlab.charts.backends import CPUChartBackend


class TestTimer:

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        for _ in range(3):
            with timer.section('work'):
                sum(range(100))
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'work'}
        assert 0.0 <= result['work'] <= result['total_seconds']

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_timed(self):
        with timed() as timer:
            sum(range(100))
        assert timer.result()['total_seconds'] >= 0.0


class TestBackendProtocol:

    @pytest.mark.parametrize("backend, name", [
        (CPUDescriptiveBackend(), 'cpu_descriptive'),
        (CPUEstimationBackend(), 'cpu_estimation'),
        (CPUChartBackend(), 'cpu_charts'),
    ])
    def test_backends_satisfy_protocol(self, backend, name):
        assert isinstance(backend, Backend)
        assert backend.name == name
