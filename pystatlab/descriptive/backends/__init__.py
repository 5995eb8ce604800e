"""
Descriptive statistics backends.

Available backends:
    CPUDescriptiveBackend: CPU reference implementation
"""

from pystatlab.descriptive.backends.cpu import CPUDescriptiveBackend

__all__ = [
    "CPUDescriptiveBackend",
]
