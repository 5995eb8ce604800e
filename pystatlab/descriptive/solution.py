"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, TYPE_CHECKING

from pystatlab.core.result import Result

if TYPE_CHECKING:
    from pystatlab.core.sample import Sample


Mode = float | tuple[float, ...]


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics.

    Moments are population moments (divide by n). q1/q3 are order
    statistics, not interpolated. skewness, kurtosis and
    coefficient_of_variation may be NaN or inf for degenerate samples.
    """
    n: int
    sum: float
    mean: float
    median: float
    mode: Mode
    min: float
    max: float
    range: float
    q1: float
    q3: float
    iqr: float
    variance: float
    sd: float
    skewness: float
    kurtosis: float
    coefficient_of_variation: float


# Row labels for summary(), in display order
_LABELS = {
    'n': 'Sample Size',
    'sum': 'Sum',
    'mean': 'Mean',
    'median': 'Median',
    'mode': 'Mode',
    'min': 'Minimum',
    'max': 'Maximum',
    'range': 'Range',
    'q1': 'First Quartile',
    'q3': 'Third Quartile',
    'iqr': 'Interquartile Range',
    'variance': 'Variance',
    'sd': 'Standard Deviation',
    'skewness': 'Skewness',
    'kurtosis': 'Kurtosis',
    'coefficient_of_variation': 'Coefficient of Variation',
}


def _format_value(value: Any) -> str:
    if isinstance(value, tuple):
        return ", ".join(f"{v:.4f}" for v in value)
    if isinstance(value, int):
        return str(value)
    return f"{value:.4f}"


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _sample: 'Sample'

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def sum(self) -> float:
        return self._result.params.sum

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def median(self) -> float:
        """Average of the two central values for even n."""
        return self._result.params.median

    @property
    def mode(self) -> Mode:
        """Most frequent value, or a tuple of all tied values (ascending)."""
        return self._result.params.mode

    @property
    def min(self) -> float:
        return self._result.params.min

    @property
    def max(self) -> float:
        return self._result.params.max

    @property
    def range(self) -> float:
        return self._result.params.range

    @property
    def q1(self) -> float:
        """Order statistic at index floor(0.25 n)."""
        return self._result.params.q1

    @property
    def q3(self) -> float:
        """Order statistic at index floor(0.75 n)."""
        return self._result.params.q3

    @property
    def iqr(self) -> float:
        return self._result.params.iqr

    @property
    def variance(self) -> float:
        """Population variance (divide by n)."""
        return self._result.params.variance

    @property
    def sd(self) -> float:
        """Population standard deviation."""
        return self._result.params.sd

    @property
    def skewness(self) -> float:
        """Population skewness; NaN when sd == 0."""
        return self._result.params.skewness

    @property
    def kurtosis(self) -> float:
        """Excess kurtosis; NaN when sd == 0."""
        return self._result.params.kurtosis

    @property
    def coefficient_of_variation(self) -> float:
        """sd / |mean|; inf or NaN when mean == 0."""
        return self._result.params.coefficient_of_variation

    # --- Metadata ---

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

    def as_dict(self) -> dict[str, Any]:
        """All statistics as a plain dict, in display order."""
        params = self._result.params
        return {f.name: getattr(params, f.name) for f in fields(params)}

    def summary(self) -> str:
        """Two-column text table of every statistic."""
        values = self.as_dict()
        width = max(len(label) for label in _LABELS.values())
        lines = ["Descriptive Statistics", "-" * (width + 14)]
        for key, label in _LABELS.items():
            lines.append(f"{label.ljust(width)}  {_format_value(values[key]):>12}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"DescriptiveSolution(n={self.n}, mean={self.mean:.6g}, "
            f"sd={self.sd:.6g})"
        )
