"""
Synthetic sample generation.

Usage:
    from pystatlab.generation import generate
    sample = generate('gamma', 500, seed=42, shape=3.0, scale=2.0)
"""

from pystatlab.generation.solvers import generate
from pystatlab.generation.design import GeneratorDesign, GENERATOR_DEFAULTS

__all__ = [
    "generate",
    "GeneratorDesign",
    "GENERATOR_DEFAULTS",
]
