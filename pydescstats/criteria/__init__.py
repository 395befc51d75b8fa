"""
Percentage-by-criterion module.

Public API:
    parse_criterion(text)       - Parse "< 25", ">= 20 AND < 30", ...
    percentages(x, criteria)    - Count and percentage of values per criterion
"""

from pydescstats.criteria._grammar import Comparison, Criterion, parse_criterion
from pydescstats.criteria.solution import (
    CriteriaParams,
    CriteriaSolution,
    CriterionCount,
)
from pydescstats.criteria.solvers import percentages

__all__ = [
    "parse_criterion",
    "percentages",
    "Comparison",
    "Criterion",
    "CriteriaParams",
    "CriteriaSolution",
    "CriterionCount",
]
