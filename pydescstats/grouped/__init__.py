"""
Grouped-data module.

Estimates for data that arrive already aggregated, either as a discrete
frequency table (value:frequency) or as class intervals (start-end:frequency).

Public API:
    grouped_statistics(data, mode=...)   - Mean, median, mode, variance, table
    GroupedDesign.from_text(text, mode)  - Line parser with per-row errors
"""

from pydescstats.grouped.design import (
    GroupedDesign,
    GroupedDatum,
    FrequencyDatum,
    IntervalDatum,
)
from pydescstats.grouped.solution import (
    GroupedParams,
    GroupedSolution,
    GroupedTableRow,
    ModeEstimate,
)
from pydescstats.grouped.solvers import grouped_statistics

__all__ = [
    "grouped_statistics",
    "GroupedDesign",
    "GroupedDatum",
    "FrequencyDatum",
    "IntervalDatum",
    "GroupedParams",
    "GroupedSolution",
    "GroupedTableRow",
    "ModeEstimate",
]
