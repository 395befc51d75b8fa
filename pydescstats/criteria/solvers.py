"""
Percentage-by-criterion analysis.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np
from numpy.typing import ArrayLike

from pydescstats.core.result import Result
from pydescstats.core.compute.timing import Timer
from pydescstats.core.validation import check_array, check_1d, drop_non_finite
from pydescstats.criteria._grammar import Criterion, parse_criterion
from pydescstats.criteria.solution import (
    CriteriaParams,
    CriteriaSolution,
    CriterionCount,
)


def percentages(
    data: ArrayLike,
    criteria: Iterable[str | Criterion],
) -> CriteriaSolution:
    """
    Share of values satisfying each criterion.

    Parameters
    ----------
    data : array-like
        Raw values; non-finite entries are dropped first.
    criteria : iterable of str or Criterion
        e.g. ``["< 25", ">= 20 AND < 30"]``. Strings are parsed with
        parse_criterion(); all are parsed before any counting.

    Returns
    -------
    CriteriaSolution with count and percentage (count * 100 / n) per
    criterion, in input order.

    Raises
    ------
    MalformedCriterionError
        A criterion does not match the grammar.
    EmptyDataError
        No finite values.
    """
    parsed = [c if isinstance(c, Criterion) else parse_criterion(c) for c in criteria]

    array = check_array(data, 'data')
    check_1d(array, 'data')
    values, n_dropped = drop_non_finite(array, 'data')
    n = int(values.size)

    timer = Timer()
    timer.start()
    with timer.section('count'):
        counts = []
        for criterion in parsed:
            count = int(np.count_nonzero(criterion.matches(values)))
            counts.append(CriterionCount(
                criterion=criterion,
                count=count,
                percentage=count * 100.0 / n,
            ))
    timer.stop()

    warnings_list = []
    if n_dropped:
        warnings_list.append(f"{n_dropped} non-finite or non-numeric value(s) ignored")

    return CriteriaSolution(_result=Result(
        params=CriteriaParams(n=n, counts=tuple(counts)),
        info={'n_criteria': len(counts), 'n_dropped': n_dropped},
        timing=timer.result(),
        backend_name='cpu_criteria',
        warnings=tuple(warnings_list),
    ))
