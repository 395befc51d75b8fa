"""
Frequency distribution module.

Public API:
    frequency_distribution(x)  - Sturges-rule class-interval table
"""

from pydescstats.frequency.solution import (
    FrequencyClass,
    FrequencyParams,
    FrequencySolution,
)
from pydescstats.frequency.solvers import frequency_distribution
from pydescstats.frequency._sturges import sturges_classes

__all__ = [
    "frequency_distribution",
    "sturges_classes",
    "FrequencyClass",
    "FrequencyParams",
    "FrequencySolution",
]
