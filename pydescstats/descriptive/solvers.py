"""
Solver dispatch for descriptive statistics.

Provides describe() as the comprehensive entry point, plus individual
functions: mean(), median(), mode(), variance(), sd(), cv(), quartiles(),
percentile(), outliers(), and describe_columns() for tabular input.
"""

from __future__ import annotations

from typing import Literal
from numpy.typing import ArrayLike

from pydescstats.core.compute.dispersion import VarianceKind
from pydescstats.core.exceptions import ValidationError
from pydescstats.core.validation import check_percentiles
from pydescstats.descriptive.design import SampleDesign
from pydescstats.descriptive.solution import DescriptiveSolution
from pydescstats.descriptive.backends.cpu import CPUDescriptiveBackend


BackendChoice = Literal['auto', 'cpu']


def _ensure_design(data: ArrayLike | str | SampleDesign) -> SampleDesign:
    """Convert raw input to SampleDesign if needed."""
    if isinstance(data, SampleDesign):
        return data
    if isinstance(data, str):
        return SampleDesign.from_text(data)
    return SampleDesign.from_array(data)


def _get_backend(backend: BackendChoice):
    """Select backend based on preference."""
    if backend in ('auto', 'cpu'):
        return CPUDescriptiveBackend()
    raise ValidationError(f"Unknown backend: {backend!r}")


def _solve(data, compute: set[str], backend: BackendChoice, **kwargs) -> DescriptiveSolution:
    design = _ensure_design(data)
    be = _get_backend(backend)
    result = be.solve(design, compute=compute, **kwargs)
    return DescriptiveSolution(_result=result, _design=design)


def describe(
    data: ArrayLike | str | SampleDesign,
    *,
    kind: VarianceKind,
    backend: BackendChoice = 'auto',
) -> DescriptiveSolution:
    """
    Compute comprehensive descriptive statistics.

    Computes: count, minimum, maximum, range, mean, median, mode, variance,
    standard deviation, coefficient of variation, quartiles, IQR outliers,
    modal type, symmetry and variability level.

    Parameters
    ----------
    data : array-like, str or SampleDesign
        Raw values. Non-finite entries are dropped; at least one finite
        value must remain (EmptyDataError otherwise). A string is parsed as
        comma/whitespace separated values.
    kind : {'sample', 'population'}
        Variance divisor: n - 1 for 'sample', n for 'population'. There is
        no default; the caller decides what the data represents.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    DescriptiveSolution with all statistics populated.
    """
    compute = {
        'extremes', 'mean', 'median', 'mode', 'var', 'sd', 'cv',
        'quartiles', 'outliers', 'shape',
    }
    return _solve(data, compute, backend, kind=kind)


def describe_columns(
    source,
    *,
    kind: VarianceKind,
    backend: BackendChoice = 'auto',
) -> dict[str, DescriptiveSolution]:
    """
    Describe every numeric column of a DataSource.

    Columns are classified with DataSource.numeric_columns(); text columns
    are skipped. Keys follow the column order of the source.
    """
    return {
        name: describe(SampleDesign.from_array(values, name=name), kind=kind, backend=backend)
        for name, values in source.numeric_columns().items()
    }


def mean(
    data: ArrayLike | str | SampleDesign,
    *,
    backend: BackendChoice = 'auto',
) -> DescriptiveSolution:
    """Arithmetic mean."""
    return _solve(data, {'mean'}, backend)


def median(
    data: ArrayLike | str | SampleDesign,
    *,
    backend: BackendChoice = 'auto',
) -> DescriptiveSolution:
    """Median of the ordered sample."""
    return _solve(data, {'median'}, backend)


def mode(
    data: ArrayLike | str | SampleDesign,
    *,
    backend: BackendChoice = 'auto',
) -> DescriptiveSolution:
    """
    Modal value(s).

    Returns every value tied for the highest count, ascending. When all
    distinct values share one count the sample is amodal and mode is ().
    """
    return _solve(data, {'mode'}, backend)


def variance(
    data: ArrayLike | str | SampleDesign,
    *,
    kind: VarianceKind,
    backend: BackendChoice = 'auto',
) -> DescriptiveSolution:
    """
    Variance with divisor n - 1 (kind='sample') or n (kind='population').

    A sample variance of a single observation is NaN and carries a warning.
    """
    return _solve(data, {'var'}, backend, kind=kind)


def sd(
    data: ArrayLike | str | SampleDesign,
    *,
    kind: VarianceKind,
    backend: BackendChoice = 'auto',
) -> DescriptiveSolution:
    """Standard deviation, the square root of variance()."""
    return _solve(data, {'sd'}, backend, kind=kind)


def cv(
    data: ArrayLike | str | SampleDesign,
    *,
    kind: VarianceKind,
    backend: BackendChoice = 'auto',
) -> DescriptiveSolution:
    """
    Coefficient of variation, sd / |mean| * 100.

    Exactly 0 when |mean| is below 1e-10.
    """
    return _solve(data, {'cv'}, backend, kind=kind)


def quartiles(
    data: ArrayLike | str | SampleDesign,
    *,
    backend: BackendChoice = 'auto',
) -> DescriptiveSolution:
    """Q1, Q2 and Q3 by linear interpolation between order statistics."""
    return _solve(data, {'quartiles'}, backend)


def percentile(
    data: ArrayLike | str | SampleDesign,
    p: float | ArrayLike,
    *,
    backend: BackendChoice = 'auto',
) -> DescriptiveSolution:
    """
    Percentile(s) on the 0-100 scale, same interpolation as quartiles().

    The solution also reports, per rank, how many values are <= the
    percentile value (percentile_at_or_below) and how many are above it
    (percentile_above).

    Parameters
    ----------
    data : array-like, str or SampleDesign
    p : float or array-like
        Percentile rank(s) in [0, 100]; InvalidPercentileError otherwise.
    """
    ranks = check_percentiles(p, 'p')
    return _solve(data, {'percentiles'}, backend, percentile_ranks=ranks)


def outliers(
    data: ArrayLike | str | SampleDesign,
    *,
    backend: BackendChoice = 'auto',
) -> DescriptiveSolution:
    """IQR-rule outlier report (Tukey fences at 1.5 * IQR)."""
    return _solve(data, {'outliers'}, backend)
