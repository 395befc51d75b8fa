"""
Compute infrastructure shared by all engines.

Provides:
    - timing: Timer for per-section execution timing
    - tolerances: Thresholds and the test tolerance tier
    - dispersion: Variance divisor and coefficient of variation
"""

from pydescstats.core.compute.timing import Timer, timed
from pydescstats.core.compute.dispersion import (
    VarianceKind,
    variance_divisor,
    coefficient_of_variation,
)

__all__ = [
    "Timer",
    "timed",
    "VarianceKind",
    "variance_divisor",
    "coefficient_of_variation",
]
