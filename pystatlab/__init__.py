"""
PyStatLab: statistics for a single numeric sample.

Load a one-dimensional sample from an array, a file, a synthetic
generator or AI-generated text, then compute descriptive statistics,
compare MLE and method-of-moments estimates, and bin the data for charts.

Submodules:
    descriptive: Summary statistics and quantiles
    estimation: Distribution parameter estimation
    charts: Histogram, boxplot, density, pie, radar and line payloads
    generation: Synthetic samples from named distributions
    session: Application state and credential store
"""

__version__ = "0.1.0"
__author__ = "Hai-Shuo"
__email__ = "contact@sgcx.org"

from pystatlab import descriptive
from pystatlab import estimation
from pystatlab import charts
from pystatlab import generation
from pystatlab.core import Sample
from pystatlab.descriptive import describe
from pystatlab.estimation import estimate, fit_mle
from pystatlab.charts import (
    histogram,
    boxplot,
    density,
    pie_categories,
    radar_profile,
    line_series,
)
from pystatlab.generation import generate
from pystatlab.session import AnalysisSession, KeyStore

__all__ = [
    "__version__",
    "descriptive",
    "estimation",
    "charts",
    "generation",
    "Sample",
    "describe",
    "estimate",
    "fit_mle",
    "histogram",
    "boxplot",
    "density",
    "pie_categories",
    "radar_profile",
    "line_series",
    "generate",
    "AnalysisSession",
    "KeyStore",
]
