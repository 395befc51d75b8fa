"""
Two-group descriptive comparison.
"""

from __future__ import annotations

import math
from typing import Literal
from numpy.typing import ArrayLike

from pydescstats.core.result import Result
from pydescstats.core.compute.timing import Timer
from pydescstats.core.compute.dispersion import VarianceKind
from pydescstats.descriptive.design import SampleDesign
from pydescstats.descriptive.solvers import describe
from pydescstats.comparison.design import ComparisonAspect, ComparisonDesign
from pydescstats.comparison.solution import (
    ComparisonParams,
    ComparisonSolution,
    HomogeneityVerdict,
    MeasureComparison,
)

BackendChoice = Literal['auto', 'cpu']

# (name, label) of the measures shown side by side
_MEASURES = (
    ('count', 'n'),
    ('mean', 'Mean'),
    ('median', 'Median'),
    ('sd', 'Std. dev.'),
    ('cv', 'CV (%)'),
)


def compare(
    group1: ArrayLike | str | SampleDesign,
    group2: ArrayLike | str | SampleDesign,
    *,
    kind: VarianceKind,
    aspect: ComparisonAspect = 'complete',
    backend: BackendChoice = 'auto',
) -> ComparisonSolution:
    """
    Compare two samples descriptively.

    Parameters
    ----------
    group1, group2 : array-like, str or SampleDesign
        Raw values of each group; non-finite entries are dropped per group.
    kind : {'sample', 'population'}
        Variance divisor used for both groups.
    aspect : {'complete', 'variability', 'central'}
        'variability' adds the homogeneity verdict (smaller CV is more
        homogeneous), 'central' adds the absolute mean and median
        differences, 'complete' adds both. The measures table is always
        computed.
    backend : str
        'auto' or 'cpu', passed on to describe().

    Returns
    -------
    ComparisonSolution
    """
    design = ComparisonDesign.from_samples(group1, group2, kind=kind, aspect=aspect)

    timer = Timer()
    timer.start()

    with timer.section('group1'):
        sol1 = describe(design.group1, kind=design.kind, backend=backend)
    with timer.section('group2'):
        sol2 = describe(design.group2, kind=design.kind, backend=backend)

    with timer.section('compare'):
        measures = tuple(
            MeasureComparison(
                name=name,
                label=label,
                group1=getattr(sol1, name),
                group2=getattr(sol2, name),
                difference=abs(getattr(sol1, name) - getattr(sol2, name)),
            )
            for name, label in _MEASURES
        )

        homogeneity = None
        if design.aspect in ('variability', 'complete'):
            homogeneity = _homogeneity(sol1.cv, sol2.cv)

        mean_difference = median_difference = None
        if design.aspect in ('central', 'complete'):
            mean_difference = abs(sol1.mean - sol2.mean)
            median_difference = abs(sol1.median - sol2.median)

    timer.stop()

    warnings_list = [f"group 1: {w}" for w in sol1.warnings]
    warnings_list.extend(f"group 2: {w}" for w in sol2.warnings)

    result = Result(
        params=ComparisonParams(
            aspect=design.aspect,
            kind=design.kind,
            measures=measures,
            homogeneity=homogeneity,
            mean_difference=mean_difference,
            median_difference=median_difference,
        ),
        info={
            'aspect': design.aspect,
            'kind': design.kind,
            'n1': design.group1.n,
            'n2': design.group2.n,
        },
        timing=timer.result(),
        backend_name='cpu_comparison',
        warnings=tuple(warnings_list),
    )
    return ComparisonSolution(_result=result, _design=design, _group1=sol1, _group2=sol2)


def _homogeneity(cv1: float, cv2: float) -> HomogeneityVerdict:
    if math.isnan(cv1) or math.isnan(cv2):
        return HomogeneityVerdict(
            outcome='undetermined',
            cv1=cv1,
            cv2=cv2,
            description='Homogeneity cannot be judged: a CV is undefined.',
        )
    if cv1 < cv2:
        return HomogeneityVerdict(
            outcome='group1',
            cv1=cv1,
            cv2=cv2,
            description=f'Group 1 is more homogeneous (CV {cv1:.2f}% < {cv2:.2f}%).',
        )
    if cv2 < cv1:
        return HomogeneityVerdict(
            outcome='group2',
            cv1=cv1,
            cv2=cv2,
            description=f'Group 2 is more homogeneous (CV {cv2:.2f}% < {cv1:.2f}%).',
        )
    return HomogeneityVerdict(
        outcome='similar',
        cv1=cv1,
        cv2=cv2,
        description=f'Both groups have similar variability (CV {cv1:.2f}%).',
    )
