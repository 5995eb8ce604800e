"""
Chart backends.

Available backends:
    CPUChartBackend: histogram, boxplot, density, pie, radar and line payloads
"""

from pystatlab.charts.backends.cpu import CPUChartBackend

__all__ = [
    "CPUChartBackend",
]
