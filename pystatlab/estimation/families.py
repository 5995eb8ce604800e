"""
Distribution family specifications for parameter estimation.

Each DistributionFamily defines:
- an ordered tuple of named parameters
- a maximum-likelihood estimator estimate_mle(x)
- a method-of-moments estimator estimate_mom(x)
- a log-likelihood, used by the likelihood fitter
- a support check that returns a warning for data outside the family's support

All estimators are closed form. For the binomial, gamma and beta families
the "MLE" reported by estimate_mle() is moment matching, not likelihood
maximisation: the binomial trial count is unknown, and gamma/beta have
no closed-form MLE. Those families set ``mle_is_moment_matching = True``.
fit_mle() in pystatlab.estimation provides true likelihood fits.

References:
    Casella, G., & Berger, R. L. (2002). Statistical Inference (2nd ed.), ch. 7.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import numpy as np
from numpy.typing import NDArray
from scipy import stats

from pystatlab.core.defaults import (
    VARIANCE_FLOOR,
    BETA_VARIANCE_CAP,
    SHAPE_FLOOR,
    BINOMIAL_MIN_TRIALS,
    BINOMIAL_P_BOUNDS,
)
from pystatlab.core.exceptions import ValidationError


# =====================================================================
# Sample moments
# =====================================================================

def _mean_and_variance(x: NDArray) -> tuple[float, float]:
    """Sample mean and population variance (divide by n)."""
    mean = float(np.mean(x))
    variance = float(np.mean((x - mean) ** 2))
    return mean, variance


def _reciprocal(value: float) -> float:
    """1 / value in IEEE arithmetic: 1/0 is inf rather than an exception."""
    with np.errstate(divide='ignore'):
        return float(np.float64(1.0) / np.float64(value))


def _is_integral(x: NDArray) -> bool:
    return bool(np.all(x == np.round(x)))


# =====================================================================
# Moment-matching estimators
# =====================================================================

def estimate_binomial_by_moment_matching(x: NDArray) -> dict[str, float]:
    """
    Binomial(n, p) by moment matching with a guessed trial count.

    The trial count is not observable from the sample, so it is taken as
    max(max(x), 10). p = mean / n, clipped to [0.01, 0.99].
    """
    n_trials = float(max(float(np.max(x)), BINOMIAL_MIN_TRIALS))
    mean = float(np.mean(x))
    p_lo, p_hi = BINOMIAL_P_BOUNDS
    p = min(max(mean / n_trials, p_lo), p_hi)
    return {'n': n_trials, 'p': p}


def estimate_gamma_by_moment_matching(x: NDArray) -> dict[str, float]:
    """
    Gamma(shape k, rate) by matching mean = k/rate and variance = k/rate².

    shape = mean² / var and rate = mean / var, each floored at 0.1.
    scale is 1 / rate computed from the unfloored rate.
    """
    mean, variance = _mean_and_variance(x)
    safe_variance = max(variance, VARIANCE_FLOOR)
    shape = mean ** 2 / safe_variance
    rate = mean / safe_variance
    return {
        'shape': max(shape, SHAPE_FLOOR),
        'rate': max(rate, SHAPE_FLOOR),
        'scale': _reciprocal(rate),
    }


def estimate_beta_by_moment_matching(x: NDArray) -> dict[str, float]:
    """
    Beta(alpha, beta) by moment matching on the sample rescaled to [0, 1].

    The sample is mapped with (x - min) / (max - min); a constant sample
    maps to 0.5 everywhere. With m and v the rescaled mean and variance
    (v clamped to [1e-10, 0.24]):

        factor = m (1 - m) / v - 1
        alpha  = max(m * factor, 0.1)
        beta   = max((1 - m) * factor, 0.1)

    The original min and max are returned alongside, so the fitted
    distribution can be mapped back to the data's scale.
    """
    lo = float(np.min(x))
    hi = float(np.max(x))
    span = hi - lo
    if span > 0:
        unit = (x - lo) / span
    else:
        unit = np.full_like(x, 0.5, dtype=np.float64)

    mean, variance = _mean_and_variance(unit)
    safe_variance = min(max(variance, VARIANCE_FLOOR), BETA_VARIANCE_CAP)
    factor = mean * (1.0 - mean) / safe_variance - 1.0
    return {
        'alpha': max(mean * factor, SHAPE_FLOOR),
        'beta': max((1.0 - mean) * factor, SHAPE_FLOOR),
        'min': lo,
        'max': hi,
    }


# =====================================================================
# Families
# =====================================================================

class DistributionFamily(ABC):
    """Abstract distribution family with MLE and MoM estimators."""

    #: True when estimate_mle() is moment matching rather than a likelihood maximiser
    mle_is_moment_matching: bool = False

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @property
    @abstractmethod
    def label(self) -> str:
        """Human-readable name with parameterisation, e.g. 'Normal N(mu, sigma^2)'."""
        ...

    @property
    @abstractmethod
    def parameters(self) -> tuple[str, ...]:
        """Reported parameter names, in display order."""
        ...

    @abstractmethod
    def estimate_mle(self, x: NDArray) -> dict[str, float]:
        ...

    @abstractmethod
    def estimate_mom(self, x: NDArray) -> dict[str, float]:
        ...

    @abstractmethod
    def log_likelihood(self, x: NDArray, params: dict[str, float]) -> float:
        """Sum of log densities (or log masses) of x under params."""
        ...

    def support_warning(self, x: NDArray) -> str | None:
        """Message describing data outside the family's support, or None."""
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class Normal(DistributionFamily):
    """Normal N(mu, sigma²). MLE and MoM coincide."""

    @property
    def name(self) -> str:
        return 'normal'

    @property
    def label(self) -> str:
        return 'Normal N(mu, sigma^2)'

    @property
    def parameters(self) -> tuple[str, ...]:
        return ('mean', 'variance', 'sd')

    def estimate_mle(self, x: NDArray) -> dict[str, float]:
        mean, variance = _mean_and_variance(x)
        return {'mean': mean, 'variance': variance, 'sd': float(np.sqrt(variance))}

    def estimate_mom(self, x: NDArray) -> dict[str, float]:
        return self.estimate_mle(x)

    def log_likelihood(self, x: NDArray, params: dict[str, float]) -> float:
        return float(np.sum(stats.norm.logpdf(x, loc=params['mean'], scale=params['sd'])))


class Uniform(DistributionFamily):
    """
    Uniform U(a, b).

    MLE is the sample range. MoM solves var = (b - a)² / 12 for an
    interval centred on the sample mean.
    """

    @property
    def name(self) -> str:
        return 'uniform'

    @property
    def label(self) -> str:
        return 'Uniform U(a, b)'

    @property
    def parameters(self) -> tuple[str, ...]:
        return ('a', 'b', 'mean')

    def estimate_mle(self, x: NDArray) -> dict[str, float]:
        a = float(np.min(x))
        b = float(np.max(x))
        return {'a': a, 'b': b, 'mean': (a + b) / 2.0}

    def estimate_mom(self, x: NDArray) -> dict[str, float]:
        mean, variance = _mean_and_variance(x)
        width = float(np.sqrt(12.0 * variance))
        return {'a': mean - width / 2.0, 'b': mean + width / 2.0, 'mean': mean}

    def log_likelihood(self, x: NDArray, params: dict[str, float]) -> float:
        width = params['b'] - params['a']
        return float(np.sum(stats.uniform.logpdf(x, loc=params['a'], scale=width)))


class Exponential(DistributionFamily):
    """Exponential Exp(lambda). lambda = 1 / mean for both estimators."""

    @property
    def name(self) -> str:
        return 'exponential'

    @property
    def label(self) -> str:
        return 'Exponential Exp(lambda)'

    @property
    def parameters(self) -> tuple[str, ...]:
        return ('lambda', 'mean', 'variance')

    def estimate_mle(self, x: NDArray) -> dict[str, float]:
        mean = float(np.mean(x))
        lam = _reciprocal(mean)
        return {'lambda': lam, 'mean': mean, 'variance': _reciprocal(lam * lam)}

    def estimate_mom(self, x: NDArray) -> dict[str, float]:
        return self.estimate_mle(x)

    def log_likelihood(self, x: NDArray, params: dict[str, float]) -> float:
        return float(np.sum(stats.expon.logpdf(x, scale=_reciprocal(params['lambda']))))

    def support_warning(self, x: NDArray) -> str | None:
        if np.any(x < 0) or np.mean(x) <= 0:
            return "exponential family expects non-negative data with a positive mean"
        return None


class Poisson(DistributionFamily):
    """Poisson(lambda). lambda = mean for both estimators."""

    @property
    def name(self) -> str:
        return 'poisson'

    @property
    def label(self) -> str:
        return 'Poisson(lambda)'

    @property
    def parameters(self) -> tuple[str, ...]:
        return ('lambda', 'mean', 'variance')

    def estimate_mle(self, x: NDArray) -> dict[str, float]:
        mean = float(np.mean(x))
        return {'lambda': mean, 'mean': mean, 'variance': mean}

    def estimate_mom(self, x: NDArray) -> dict[str, float]:
        return self.estimate_mle(x)

    def log_likelihood(self, x: NDArray, params: dict[str, float]) -> float:
        return float(np.sum(stats.poisson.logpmf(x, mu=params['lambda'])))

    def support_warning(self, x: NDArray) -> str | None:
        if np.any(x < 0) or not _is_integral(x):
            return "poisson family expects non-negative integer counts"
        return None


class Binomial(DistributionFamily):
    """
    Binomial(n, p) with an unknown trial count.

    Both estimators use estimate_binomial_by_moment_matching(). This is an
    approximation: textbook binomial MLE/MoM assume n is known.
    """

    mle_is_moment_matching = True

    @property
    def name(self) -> str:
        return 'binomial'

    @property
    def label(self) -> str:
        return 'Binomial(n, p)'

    @property
    def parameters(self) -> tuple[str, ...]:
        return ('n', 'p')

    def estimate_mle(self, x: NDArray) -> dict[str, float]:
        return estimate_binomial_by_moment_matching(x)

    def estimate_mom(self, x: NDArray) -> dict[str, float]:
        return estimate_binomial_by_moment_matching(x)

    def log_likelihood(self, x: NDArray, params: dict[str, float]) -> float:
        return float(np.sum(stats.binom.logpmf(x, int(params['n']), params['p'])))

    def support_warning(self, x: NDArray) -> str | None:
        if np.any(x < 0) or not _is_integral(x):
            return "binomial family expects non-negative integer success counts"
        return None


class Gamma(DistributionFamily):
    """
    Gamma(shape k, rate).

    Both estimators use estimate_gamma_by_moment_matching(); the gamma
    MLE has no closed form (see fit_mle for the likelihood solution).
    """

    mle_is_moment_matching = True

    @property
    def name(self) -> str:
        return 'gamma'

    @property
    def label(self) -> str:
        return 'Gamma(k, rate)'

    @property
    def parameters(self) -> tuple[str, ...]:
        return ('shape', 'rate', 'scale')

    def estimate_mle(self, x: NDArray) -> dict[str, float]:
        return estimate_gamma_by_moment_matching(x)

    def estimate_mom(self, x: NDArray) -> dict[str, float]:
        return estimate_gamma_by_moment_matching(x)

    def log_likelihood(self, x: NDArray, params: dict[str, float]) -> float:
        return float(np.sum(stats.gamma.logpdf(x, a=params['shape'], scale=_reciprocal(params['rate']))))

    def support_warning(self, x: NDArray) -> str | None:
        if np.any(x <= 0):
            return "gamma family expects strictly positive data"
        return None


class Beta(DistributionFamily):
    """
    Beta(alpha, beta) fitted on the sample rescaled to [0, 1].

    Both estimators use estimate_beta_by_moment_matching(); the beta MLE
    has no closed form (see fit_mle for the likelihood solution).
    """

    mle_is_moment_matching = True

    @property
    def name(self) -> str:
        return 'beta'

    @property
    def label(self) -> str:
        return 'Beta(alpha, beta)'

    @property
    def parameters(self) -> tuple[str, ...]:
        return ('alpha', 'beta', 'min', 'max')

    def estimate_mle(self, x: NDArray) -> dict[str, float]:
        return estimate_beta_by_moment_matching(x)

    def estimate_mom(self, x: NDArray) -> dict[str, float]:
        return estimate_beta_by_moment_matching(x)

    def log_likelihood(self, x: NDArray, params: dict[str, float]) -> float:
        return float(np.sum(stats.beta.logpdf(x, params['alpha'], params['beta'])))


# =====================================================================
# Registry
# =====================================================================

FAMILIES: dict[str, DistributionFamily] = {
    family.name: family
    for family in (
        Normal(), Uniform(), Exponential(), Poisson(), Binomial(), Gamma(), Beta(),
    )
}


def get_family(family: str | DistributionFamily) -> DistributionFamily:
    """Resolve a family name (case-insensitive) to its DistributionFamily."""
    if isinstance(family, DistributionFamily):
        return family
    key = str(family).strip().lower()
    if key not in FAMILIES:
        raise ValidationError(
            f"Unknown distribution family: {family!r}. "
            f"Must be one of {tuple(FAMILIES)}."
        )
    return FAMILIES[key]
