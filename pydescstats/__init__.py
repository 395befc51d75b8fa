"""
pydescstats: descriptive statistics for teaching.

Computes and explains the standard descriptive measures of numeric series,
CSV columns and grouped (frequency or interval) tables.

Submodules:
    descriptive: Central tendency, dispersion, quartiles, outliers, shape
    frequency: Sturges-rule class-interval frequency tables
    grouped: Estimates from frequency tables and class intervals
    criteria: Percentage of values satisfying comparison criteria
    comparison: Side-by-side description of two groups
"""

__version__ = "0.1.0"

from pydescstats import descriptive
from pydescstats import frequency
from pydescstats import grouped
from pydescstats import criteria
from pydescstats import comparison
from pydescstats.core.datasource import DataSource

__all__ = [
    "__version__",
    "descriptive",
    "frequency",
    "grouped",
    "criteria",
    "comparison",
    "DataSource",
]
