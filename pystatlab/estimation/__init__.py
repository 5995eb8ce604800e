"""
Distribution parameter estimation module.

Public API:
    estimate(data, family)   - MLE vs method-of-moments comparison
    fit_mle(data, family)    - Likelihood maximisation (gamma, beta, binomial)
    get_family(name)         - Resolve a family name
    FAMILIES                 - Registry of supported families
"""

from pystatlab.estimation.solvers import estimate, fit_mle
from pystatlab.estimation.families import (
    DistributionFamily,
    FAMILIES,
    get_family,
    estimate_binomial_by_moment_matching,
    estimate_gamma_by_moment_matching,
    estimate_beta_by_moment_matching,
)
from pystatlab.estimation._common import ParameterEstimate, EstimationParams, grade_agreement
from pystatlab.estimation.solution import EstimationSolution
from pystatlab.estimation._likelihood import LikelihoodFit

__all__ = [
    "estimate",
    "fit_mle",
    "get_family",
    "FAMILIES",
    "DistributionFamily",
    "estimate_binomial_by_moment_matching",
    "estimate_gamma_by_moment_matching",
    "estimate_beta_by_moment_matching",
    "ParameterEstimate",
    "EstimationParams",
    "grade_agreement",
    "EstimationSolution",
    "LikelihoodFit",
]
