"""
Core infrastructure for pydescstats.

This module provides shared abstractions and utilities used by all
domain-specific submodules (descriptive, frequency, grouped, criteria).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    classification: Modal type, symmetry and variability labels
    datasource: CSV ingestion and numeric column detection
    compute: Timing, thresholds, dispersion helpers
"""

from pydescstats.core.result import Result
from pydescstats.core.datasource import DataSource
from pydescstats.core.exceptions import (
    DescStatsError,
    ValidationError,
    DimensionError,
    EmptyDataError,
    InsufficientDataError,
    DegenerateRangeError,
    MalformedRowError,
    InvalidPercentileError,
    MalformedCriterionError,
)

__all__ = [
    # Result
    "Result",
    # Data
    "DataSource",
    # Exceptions
    "DescStatsError",
    "ValidationError",
    "DimensionError",
    "EmptyDataError",
    "InsufficientDataError",
    "DegenerateRangeError",
    "MalformedRowError",
    "InvalidPercentileError",
    "MalformedCriterionError",
]
