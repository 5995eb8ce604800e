"""
Default control values and numeric constants.

Single place for every tunable default used across PyStatLab. Solver
keyword arguments default to these values; AnalysisSession starts from
them.
"""

# --- Charts ---
DEFAULT_BINS = 10
DEFAULT_SMOOTHING = 1.0
DEFAULT_PIE_CATEGORIES = 5
DEFAULT_MOVING_AVERAGE_WINDOW = 5

# Kernel density: number of grid intervals (grid has DENSITY_GRID_INTERVALS + 1 points)
DENSITY_GRID_INTERVALS = 100
# bandwidth = range / DENSITY_BANDWIDTH_DIVISOR * smoothing
DENSITY_BANDWIDTH_DIVISOR = 20.0

# Tukey fence multiplier for boxplot outliers
OUTLIER_FENCE = 1.5

# --- Estimation ---
DEFAULT_FAMILY = 'normal'

# Lower bound substituted for a zero variance before it is used as a divisor
VARIANCE_FLOOR = 1e-10
# Upper bound on the variance of a sample rescaled to [0, 1] (true max is 0.25)
BETA_VARIANCE_CAP = 0.24
# Moment-matched shape/rate parameters are floored here
SHAPE_FLOOR = 0.1
# Minimum number of trials assumed when estimating a binomial
BINOMIAL_MIN_TRIALS = 10
BINOMIAL_P_BOUNDS = (0.01, 0.99)

# MLE vs MoM agreement: largest relative difference (percent) below each bound
AGREEMENT_LEVELS = (
    (0.1, 'almost_identical'),
    (5.0, 'very_close'),
    (20.0, 'some_difference'),
)
AGREEMENT_FALLBACK = 'large_difference'

# --- Input ---
MAX_FILE_BYTES = 10 * 1024 * 1024
GENERATOR_MIN_SIZE = 10
GENERATOR_MAX_SIZE = 1000
DEFAULT_GENERATOR_SIZE = 100

# --- Credential store ---
API_KEY_NAME = 'dashscopeApiKey'
