"""
Estimation solution types.

EstimationSolution wraps Result[EstimationParams] and renders the
MLE vs MoM comparison table.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, TYPE_CHECKING
import numpy as np

from pystatlab.core.result import Result
from pystatlab.estimation._common import EstimationParams, ParameterEstimate, grade_agreement

if TYPE_CHECKING:
    from pystatlab.core.sample import Sample


_AGREEMENT_MESSAGES = {
    'almost_identical': "MLE and MoM are almost identical; the data fit the chosen family well.",
    'very_close': "MLE and MoM are very close; the difference is acceptable.",
    'some_difference': "MLE and MoM differ somewhat; check whether the data really follow the chosen family.",
    'large_difference': "MLE and MoM differ a lot; check the data or try another family.",
}


@dataclass
class EstimationSolution:
    """
    User-facing parameter estimation results.

    Iterating yields one ParameterEstimate per parameter, in display order.
    """
    _result: Result[EstimationParams]
    _sample: 'Sample'

    @property
    def family(self) -> str:
        return self._result.params.family

    @property
    def label(self) -> str:
        return self._result.params.label

    @property
    def estimates(self) -> tuple[ParameterEstimate, ...]:
        return self._result.params.estimates

    @property
    def parameters(self) -> tuple[str, ...]:
        return tuple(e.name for e in self.estimates)

    @property
    def mle(self) -> dict[str, float]:
        """MLE value per parameter."""
        return {e.name: e.mle for e in self.estimates}

    @property
    def mom(self) -> dict[str, float]:
        """MoM value per parameter."""
        return {e.name: e.mom for e in self.estimates}

    @property
    def mle_is_moment_matching(self) -> bool:
        return self._result.params.mle_is_moment_matching

    @property
    def max_relative_difference(self) -> float:
        """Largest relative difference (percent) over all parameters; NaN if any is NaN."""
        return float(np.max([e.relative_difference_percent for e in self.estimates]))

    @property
    def agreement(self) -> str:
        """
        How closely MLE and MoM agree, graded on max_relative_difference:
        'almost_identical' (< 0.1 %), 'very_close' (< 5 %),
        'some_difference' (< 20 %) or 'large_difference'.
        """
        return grade_agreement(self.max_relative_difference)

    def __getitem__(self, name: str) -> ParameterEstimate:
        for estimate in self.estimates:
            if estimate.name == name:
                return estimate
        raise KeyError(
            f"{self.family} has no parameter '{name}'. Available: {self.parameters}"
        )

    def __iter__(self):
        return iter(self.estimates)

    def __len__(self) -> int:
        return len(self.estimates)

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

    def records(self) -> list[dict[str, Any]]:
        """One dict per parameter, for table renderers."""
        return [asdict(e) for e in self.estimates]

    def summary(self) -> str:
        """MLE vs MoM comparison table."""
        header = f"{'Parameter':<12}{'MLE':>14}{'MoM':>14}{'|Diff|':>14}{'Rel. %':>10}"
        lines = [self.label, header, "-" * len(header)]
        for e in self.estimates:
            lines.append(
                f"{e.name:<12}{e.mle:>14.6g}{e.mom:>14.6g}"
                f"{e.difference:>14.6g}{e.relative_difference_percent:>10.2f}"
            )
        lines.append(f"Agreement: {_AGREEMENT_MESSAGES[self.agreement]}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"EstimationSolution(family={self.family!r}, parameters={self.parameters})"
