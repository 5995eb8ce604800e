"""
Estimation backends.

Available backends:
    CPUEstimationBackend: closed-form MLE / MoM estimators
"""

from pystatlab.estimation.backends.cpu import CPUEstimationBackend

__all__ = [
    "CPUEstimationBackend",
]
