"""
Two-group comparison solution types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, TYPE_CHECKING

from pydescstats.core.result import Result

if TYPE_CHECKING:
    from pydescstats.comparison.design import ComparisonDesign
    from pydescstats.descriptive.solution import DescriptiveSolution

HomogeneityOutcome = Literal['group1', 'group2', 'similar', 'undetermined']


@dataclass(frozen=True)
class MeasureComparison:
    """One measure for both groups and their absolute difference."""
    name: str
    label: str
    group1: float
    group2: float
    difference: float


@dataclass(frozen=True)
class HomogeneityVerdict:
    """
    Which group is more homogeneous, judged by the smaller CV.

    'similar' when both CVs are equal, 'undetermined' when either is NaN
    (a single-observation sample variance).
    """
    outcome: HomogeneityOutcome
    cv1: float
    cv2: float
    description: str


@dataclass(frozen=True)
class ComparisonParams:
    """
    Parameter payload for a two-group comparison.

    homogeneity is set for aspect 'variability' or 'complete'; the mean and
    median differences for 'central' or 'complete'.
    """
    aspect: str
    kind: str
    measures: tuple[MeasureComparison, ...]
    homogeneity: HomogeneityVerdict | None = None
    mean_difference: float | None = None
    median_difference: float | None = None


@dataclass
class ComparisonSolution:
    """
    User-facing comparison of two samples.

    Wraps Result[ComparisonParams] together with the describe() result of
    each group.
    """
    _result: Result[ComparisonParams]
    _design: 'ComparisonDesign'
    _group1: 'DescriptiveSolution'
    _group2: 'DescriptiveSolution'

    @property
    def group1(self) -> 'DescriptiveSolution':
        return self._group1

    @property
    def group2(self) -> 'DescriptiveSolution':
        return self._group2

    @property
    def aspect(self) -> str:
        return self._result.params.aspect

    @property
    def kind(self) -> str:
        return self._result.params.kind

    @property
    def measures(self) -> tuple[MeasureComparison, ...]:
        """n, mean, median, sd and CV side by side, in that order."""
        return self._result.params.measures

    def measure(self, name: str) -> MeasureComparison:
        """Look up a row of measures by name ('count', 'mean', 'median', 'sd', 'cv')."""
        for row in self.measures:
            if row.name == name:
                return row
        available = [row.name for row in self.measures]
        raise KeyError(f"No measure {name!r}. Available: {available}")

    @property
    def homogeneity(self) -> HomogeneityVerdict | None:
        return self._result.params.homogeneity

    @property
    def mean_difference(self) -> float | None:
        return self._result.params.mean_difference

    @property
    def median_difference(self) -> float | None:
        return self._result.params.median_difference

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Side-by-side table followed by the interpretation."""
        p = self._result.params
        name1 = self._group1.name or 'group 1'
        name2 = self._group2.name or 'group 2'
        header = ("Measure", name1, name2, "Difference")
        body = []
        for row in p.measures:
            if row.name == 'count':
                cells = (str(int(row.group1)), str(int(row.group2)), str(int(row.difference)))
            else:
                digits = 2 if row.name == 'cv' else 4
                cells = tuple(f"{v:.{digits}f}" for v in (row.group1, row.group2, row.difference))
            body.append((row.label, *cells))
        widths = [
            max(len(r[j]) for r in [header, *body])
            for j in range(len(header))
        ]

        lines = [f"Group comparison ({p.aspect}, {p.kind} variance)"]
        lines.append("  ".join(h.ljust(w) for h, w in zip(header, widths)))
        for r in body:
            lines.append("  ".join(c.ljust(w) for c, w in zip(r, widths)))

        if p.homogeneity is not None:
            lines.append(f"Variability: {p.homogeneity.description}")
        if p.mean_difference is not None:
            lines.append(f"Central tendency: |mean difference| = {p.mean_difference:.4f}, "
                         f"|median difference| = {p.median_difference:.4f}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        outcome = self.homogeneity.outcome if self.homogeneity else None
        return (
            f"ComparisonSolution(n1={self._group1.count}, n2={self._group2.count}, "
            f"aspect={self.aspect!r}, homogeneity={outcome!r})"
        )
