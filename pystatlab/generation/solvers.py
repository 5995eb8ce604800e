"""
Synthetic sample generation.

Provides generate() as the single entry point.
"""

from __future__ import annotations

from typing import Any
import numpy as np

from pystatlab.core.defaults import DEFAULT_GENERATOR_SIZE
from pystatlab.core.exceptions import ValidationError
from pystatlab.core.sample import Sample
from pystatlab.generation.design import GeneratorDesign


def _draw(rng: np.random.Generator, design: GeneratorDesign) -> np.ndarray:
    p = design.params
    size = design.size
    if design.family == 'normal':
        return rng.normal(p['mean'], p['std'], size)
    if design.family == 'uniform':
        return rng.uniform(p['min'], p['max'], size)
    if design.family == 'exponential':
        return rng.exponential(1.0 / p['lam'], size)
    if design.family == 'poisson':
        return rng.poisson(p['rate'], size)
    if design.family == 'binomial':
        return rng.binomial(p['trials'], p['probability'], size)
    if design.family == 'gamma':
        return rng.gamma(p['shape'], p['scale'], size)
    return rng.beta(p['alpha'], p['beta'], size)


def generate(
    family: str,
    size: int = DEFAULT_GENERATOR_SIZE,
    *,
    rng: np.random.Generator | None = None,
    seed: int | None = None,
    **params: Any,
) -> Sample:
    """
    Draw a synthetic sample from a named distribution.

    Parameters
    ----------
    family : str
        normal(mean=0, std=1), uniform(min=0, max=1), exponential(lam=1),
        poisson(rate=1), binomial(trials=10, probability=0.5),
        gamma(shape=2, scale=1) or beta(alpha=2, beta=2).
    size : int
        Number of observations, between 10 and 1000.
    rng : numpy.random.Generator, optional
        Generator to draw from. Mutually exclusive with ``seed``.
    seed : int, optional
        Seed for a fresh ``numpy.random.default_rng``.
    **params
        Family parameters; omitted ones take the defaults above.

    Returns
    -------
    Sample
        Source is ``'generator:<family>'``.

    Raises
    ------
    ValidationError
        Unknown family or parameter name, or both rng and seed given.
    ParameterConstraintError
        Parameter or size out of range.

    Examples
    --------
    >>> s = generate('normal', 200, seed=1, mean=10, std=2)
    >>> s.n
    200
    """
    if rng is not None and seed is not None:
        raise ValidationError("pass either rng or seed, not both")
    design = GeneratorDesign.for_family(family, size, **params)
    if rng is None:
        rng = np.random.default_rng(seed)
    values = _draw(rng, design).astype(np.float64)
    return Sample.from_array(values, source=f"generator:{design.family}")
