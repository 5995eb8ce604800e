"""
Solver dispatch for distribution parameter estimation.

Provides estimate() (MLE vs MoM comparison) and fit_mle() (likelihood fit).
"""

from __future__ import annotations

from typing import Literal
from numpy.typing import ArrayLike

from pystatlab.core.defaults import DEFAULT_FAMILY
from pystatlab.core.exceptions import ValidationError
from pystatlab.core.sample import Sample, as_sample
from pystatlab.estimation.families import DistributionFamily, get_family
from pystatlab.estimation.solution import EstimationSolution
from pystatlab.estimation.backends.cpu import CPUEstimationBackend
from pystatlab.estimation._likelihood import LikelihoodFit, fit_likelihood


FamilyName = Literal[
    'normal', 'uniform', 'exponential', 'poisson', 'binomial', 'gamma', 'beta',
]


def _get_backend(backend: str):
    if backend in ('auto', 'cpu'):
        return CPUEstimationBackend()
    raise ValidationError(f"Unknown backend: {backend!r}. Use 'auto' or 'cpu'.")


def estimate(
    data: ArrayLike | Sample,
    family: FamilyName | DistributionFamily = DEFAULT_FAMILY,
    *,
    backend: str = 'auto',
) -> EstimationSolution:
    """
    Estimate a family's parameters by MLE and by the method of moments.

    Parameters
    ----------
    data : array-like or Sample
        Non-empty 1D numeric sample.
    family : str or DistributionFamily
        'normal', 'uniform', 'exponential', 'poisson', 'binomial',
        'gamma' or 'beta'.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    EstimationSolution
        One ParameterEstimate per parameter: MLE, MoM, absolute
        difference and relative difference in percent.

    Notes
    -----
    For binomial, gamma and beta the reported MLE is moment matching
    (identical to the MoM column); the solution carries a warning saying
    so. Use fit_mle() for the likelihood maximiser.
    """
    sample = as_sample(data)
    fam = get_family(family)
    be = _get_backend(backend)
    result = be.solve(sample, family=fam)
    return EstimationSolution(_result=result, _sample=sample)


def fit_mle(
    data: ArrayLike | Sample,
    family: FamilyName | DistributionFamily,
    *,
    trials: int | None = None,
) -> LikelihoodFit:
    """
    Maximum-likelihood fit by maximising the log-likelihood.

    Parameters
    ----------
    data : array-like or Sample
        Non-empty 1D numeric sample inside the family's support
        (gamma: x > 0; beta: 0 < x < 1; binomial: integers in [0, trials]).
    family : str or DistributionFamily
        Distribution family.
    trials : int, optional
        Number of trials. Required for, and only valid with, 'binomial'.

    Returns
    -------
    LikelihoodFit

    Raises
    ------
    ValidationError
        Data outside the family's support, or missing/extra ``trials``.
    ConvergenceError
        The likelihood has no finite maximiser for this sample.
    """
    sample = as_sample(data)
    fam = get_family(family)
    return fit_likelihood(sample.values, fam, trials=trials)
