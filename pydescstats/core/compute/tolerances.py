"""
Numeric thresholds and tolerance tiers.

Thresholds used by the engines live here so that every subpackage applies
the same cut-offs. The ToleranceTier is what the test suite compares with.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# CPU double precision reference
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision',
)

# |mean| below this makes the coefficient of variation exactly 0
CV_ZERO_MEAN_EPS = 1e-10

# Tukey fences: Q1 - k*IQR, Q3 + k*IQR
OUTLIER_IQR_FACTOR = 1.5

# |mean - median| / sd below this is "approximately symmetric"
SYMMETRY_THRESHOLD = 0.2

# Coefficient of variation bands (percent)
CV_LOW = 15.0
CV_MODERATE = 30.0

# Sturges' rule and its practical clamp
STURGES_COEFFICIENT = 3.322
STURGES_MIN_CLASSES = 4
STURGES_MAX_CLASSES = 10
MIN_FREQUENCY_SAMPLES = 4

# CSV column classification
NUMERIC_COLUMN_RATIO = 0.7
NUMERIC_COLUMN_MIN_COUNT = 2
