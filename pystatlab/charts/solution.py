"""
Chart solution wrapper.

ChartSolution wraps Result[P] for any of the chart payloads in
pystatlab.charts._common.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, TYPE_CHECKING

from pystatlab.core.result import Result

if TYPE_CHECKING:
    from pystatlab.core.sample import Sample

P = TypeVar('P')


@dataclass
class ChartSolution(Generic[P]):
    """
    User-facing chart data.

    Use ``params`` for typed access (``sol.params.counts``) and
    ``records()`` for the row format chart renderers expect.
    """
    _result: Result[P]
    _sample: 'Sample'

    @property
    def params(self) -> P:
        return self._result.params

    @property
    def chart(self) -> str:
        """Chart kind: 'histogram', 'boxplot', 'density', 'pie', 'radar' or 'line'."""
        return self._result.info['chart']

    @property
    def sample(self) -> 'Sample':
        return self._sample

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def records(self) -> list[dict[str, Any]]:
        return self._result.params.records()

    def __repr__(self) -> str:
        return f"ChartSolution(chart={self.chart!r}, n={self._sample.n})"
