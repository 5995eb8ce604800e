"""
Shared compute infrastructure for PyStatLab.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared infrastructure only.

Submodules:
    timing: Execution timing utilities
"""

from pystatlab.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
