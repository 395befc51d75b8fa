"""
Dispersion helpers shared by the ungrouped and grouped engines.
"""

from typing import Literal
import math

from pydescstats.core.compute.tolerances import CV_ZERO_MEAN_EPS
from pydescstats.core.exceptions import ValidationError

VarianceKind = Literal['sample', 'population']


def variance_divisor(n: int, kind: VarianceKind) -> int:
    """n - 1 for a sample (Bessel's correction), n for a population."""
    if kind == 'sample':
        return n - 1
    if kind == 'population':
        return n
    raise ValidationError(
        f"kind: must be 'sample' or 'population', got {kind!r}"
    )


def coefficient_of_variation(sd: float, mean: float) -> float:
    """
    sd / |mean| * 100, in percent.

    Exactly 0.0 when |mean| < CV_ZERO_MEAN_EPS. NaN sd propagates otherwise.
    """
    if abs(mean) < CV_ZERO_MEAN_EPS:
        return 0.0
    if math.isnan(sd):
        return math.nan
    return sd / abs(mean) * 100.0
