"""
Descriptive statistics module.

Central tendency, dispersion, position and shape of a single numeric sample.

Public API:
    describe(data, kind=...)         - All statistics at once
    describe_columns(ds, kind=...)   - describe() per numeric CSV column
    mean(x), median(x), mode(x)      - Central tendency
    variance(x, kind=...), sd(), cv()- Dispersion (sample or population)
    quartiles(x), percentile(x, p)   - Linear-interpolation positions
    outliers(x)                      - IQR (Tukey fence) outlier report
"""

from pydescstats.descriptive.design import SampleDesign
from pydescstats.descriptive.solution import (
    DescriptiveParams,
    DescriptiveSolution,
    OutlierReport,
    Quartiles,
)
from pydescstats.descriptive.solvers import (
    describe,
    describe_columns,
    mean,
    median,
    mode,
    variance,
    sd,
    cv,
    quartiles,
    percentile,
    outliers,
)

__all__ = [
    "describe",
    "describe_columns",
    "mean",
    "median",
    "mode",
    "variance",
    "sd",
    "cv",
    "quartiles",
    "percentile",
    "outliers",
    "SampleDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
    "OutlierReport",
    "Quartiles",
]
