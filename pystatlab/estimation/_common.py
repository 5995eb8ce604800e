"""
Common types for parameter estimation.

Defines ParameterEstimate (one row of the MLE vs MoM comparison) and
EstimationParams (the payload carried by Result).
"""

from __future__ import annotations

from dataclasses import dataclass
import numpy as np

from pystatlab.core.defaults import AGREEMENT_LEVELS, AGREEMENT_FALLBACK


@dataclass(frozen=True)
class ParameterEstimate:
    """
    MLE and MoM estimates of one parameter, and how far apart they are.

    Attributes
    ----------
    name : str
        Parameter name, e.g. 'mean', 'lambda', 'alpha'.
    mle : float
        Maximum-likelihood estimate (moment matching for binomial, gamma
        and beta, see DistributionFamily.mle_is_moment_matching).
    mom : float
        Method-of-moments estimate.
    difference : float
        |mle - mom|.
    relative_difference_percent : float
        difference / max(|mle|, |mom|) * 100, or 0 when both are 0.
    """
    name: str
    mle: float
    mom: float
    difference: float
    relative_difference_percent: float

    @classmethod
    def compare(cls, name: str, mle: float, mom: float) -> ParameterEstimate:
        """Build the comparison row for one parameter."""
        mle = float(mle)
        mom = float(mom)
        with np.errstate(invalid='ignore'):
            difference = float(np.abs(np.float64(mle) - np.float64(mom)))
            scale = np.maximum(np.abs(mle), np.abs(mom))
            if scale == 0:
                relative = 0.0
            else:
                relative = float(np.float64(difference) / scale * 100.0)
        return cls(
            name=name,
            mle=mle,
            mom=mom,
            difference=difference,
            relative_difference_percent=relative,
        )


@dataclass(frozen=True)
class EstimationParams:
    """
    Parameter payload for distribution parameter estimation.

    Attributes
    ----------
    family : str
        Family name, e.g. 'gamma'.
    label : str
        Human-readable family label.
    estimates : tuple of ParameterEstimate
        One row per parameter, in the family's display order.
    mle_is_moment_matching : bool
        True when the reported MLE is moment matching.
    """
    family: str
    label: str
    estimates: tuple[ParameterEstimate, ...]
    mle_is_moment_matching: bool


def grade_agreement(max_relative_difference: float) -> str:
    """
    Grade how closely MLE and MoM agree.

    Returns the first level in AGREEMENT_LEVELS whose bound exceeds
    ``max_relative_difference`` (percent), else 'large_difference'.
    A NaN difference never passes a bound.
    """
    for bound, level in AGREEMENT_LEVELS:
        if max_relative_difference < bound:
            return level
    return AGREEMENT_FALLBACK
