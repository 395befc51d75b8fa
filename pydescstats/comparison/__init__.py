"""
Two-group comparison module.

Public API:
    compare(g1, g2, kind=..., aspect=...)  - n, mean, median, sd, CV side by
                                             side, homogeneity by CV and
                                             central-tendency differences
"""

from pydescstats.comparison.design import ComparisonDesign
from pydescstats.comparison.solution import (
    ComparisonParams,
    ComparisonSolution,
    HomogeneityVerdict,
    MeasureComparison,
)
from pydescstats.comparison.solvers import compare

__all__ = [
    "compare",
    "ComparisonDesign",
    "ComparisonParams",
    "ComparisonSolution",
    "HomogeneityVerdict",
    "MeasureComparison",
]
