"""
Solver dispatch for frequency distributions.
"""

from __future__ import annotations

from typing import Literal
from numpy.typing import ArrayLike

from pydescstats.core.exceptions import ValidationError
from pydescstats.descriptive.design import SampleDesign
from pydescstats.frequency.solution import FrequencySolution
from pydescstats.frequency.backends.cpu import CPUFrequencyBackend


BackendChoice = Literal['auto', 'cpu']


def _ensure_design(data: ArrayLike | str | SampleDesign) -> SampleDesign:
    if isinstance(data, SampleDesign):
        return data
    if isinstance(data, str):
        return SampleDesign.from_text(data)
    return SampleDesign.from_array(data)


def frequency_distribution(
    data: ArrayLike | str | SampleDesign,
    *,
    backend: BackendChoice = 'auto',
) -> FrequencySolution:
    """
    Build a class-interval frequency table with Sturges' rule.

    Parameters
    ----------
    data : array-like, str or SampleDesign
        Raw values; non-finite entries are dropped first.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    FrequencySolution whose classes partition [min, max]: every class is
    [lower, upper) except the last, which is [lower, max]. Frequencies sum
    to n.

    Raises
    ------
    InsufficientDataError
        Fewer than 4 finite values.
    DegenerateRangeError
        All values identical.
    """
    if backend not in ('auto', 'cpu'):
        raise ValidationError(f"Unknown backend: {backend!r}")

    design = _ensure_design(data)
    result = CPUFrequencyBackend().solve(design)
    return FrequencySolution(_result=result, _design=design)
