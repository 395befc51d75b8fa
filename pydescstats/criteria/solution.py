"""
Criteria solution types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydescstats.core.result import Result
from pydescstats.criteria._grammar import Criterion


@dataclass(frozen=True)
class CriterionCount:
    """How many values satisfy one criterion."""
    criterion: Criterion
    count: int
    percentage: float

    @property
    def text(self) -> str:
        return self.criterion.text


@dataclass(frozen=True)
class CriteriaParams:
    n: int
    counts: tuple[CriterionCount, ...]


@dataclass
class CriteriaSolution:
    """User-facing percentage-by-criterion results."""
    _result: Result[CriteriaParams]

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def counts(self) -> tuple[CriterionCount, ...]:
        return self._result.params.counts

    @property
    def percentages(self) -> dict[str, float]:
        """Criterion text -> percentage of values satisfying it."""
        return {c.text: c.percentage for c in self.counts}

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
        width = max((len(c.text) for c in self.counts), default=0)
        lines = [f"Percentages (n={self.n})"]
        for c in self.counts:
            lines.append(f"  {c.text.ljust(width)}  {c.count:>6}  {c.percentage:6.2f}%")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"CriteriaSolution(n={self.n}, criteria={len(self.counts)})"
