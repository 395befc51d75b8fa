"""
Frequency distribution solution types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pydescstats.core.result import Result

if TYPE_CHECKING:
    from pydescstats.descriptive.design import SampleDesign


@dataclass(frozen=True)
class FrequencyClass:
    """
    One class interval of a frequency distribution.

    The interval is [lower_bound, upper_bound) except for the last class,
    which is closed on both ends.
    """
    label: str
    lower_bound: float
    upper_bound: float
    midpoint: float
    frequency: int
    relative_frequency: float
    cumulative_frequency: int
    relative_cumulative_frequency: float
    values: tuple[float, ...]
    closed: bool = False

    @property
    def relative_frequency_percent(self) -> float:
        return self.relative_frequency * 100.0

    def contains(self, value: float) -> bool:
        """Whether value falls in this class under the half-open policy."""
        if self.closed:
            return self.lower_bound <= value <= self.upper_bound
        return self.lower_bound <= value < self.upper_bound


@dataclass(frozen=True)
class FrequencyParams:
    """Parameter payload for a class-interval frequency table."""
    classes: tuple[FrequencyClass, ...]
    n: int
    minimum: float
    maximum: float
    range: float
    class_width: float
    sturges_raw: int


@dataclass
class FrequencySolution:
    """
    User-facing frequency distribution.

    Wraps Result[FrequencyParams]; iterating yields the class rows.
    """
    _result: Result[FrequencyParams]
    _design: 'SampleDesign'

    @property
    def classes(self) -> tuple[FrequencyClass, ...]:
        return self._result.params.classes

    @property
    def n_classes(self) -> int:
        return len(self._result.params.classes)

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def range(self) -> float:
        return self._result.params.range

    @property
    def class_width(self) -> float:
        return self._result.params.class_width

    @property
    def sturges_raw(self) -> int:
        """Class count from Sturges' rule before clamping to [4, 10]."""
        return self._result.params.sturges_raw

    @property
    def frequencies(self) -> tuple[int, ...]:
        return tuple(c.frequency for c in self.classes)

    @property
    def midpoints(self) -> tuple[float, ...]:
        return tuple(c.midpoint for c in self.classes)

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

    def __iter__(self):
        return iter(self.classes)

    def __len__(self) -> int:
        return self.n_classes

    def summary(self) -> str:
        """Plain-text frequency table."""
        p = self._result.params
        header = ("Class", "xi", "fi", "fri", "Fi", "Fri")
        body = [
            (
                c.label,
                f"{c.midpoint:.2f}",
                str(c.frequency),
                f"{c.relative_frequency:.4f}",
                str(c.cumulative_frequency),
                f"{c.relative_cumulative_frequency:.4f}",
            )
            for c in p.classes
        ]
        widths = [
            max(len(row[j]) for row in [header, *body])
            for j in range(len(header))
        ]

        lines = [
            f"Frequency distribution: n={p.n}, k={len(p.classes)} "
            f"(Sturges {p.sturges_raw}), h={p.class_width:.4f}",
            "  ".join(h.rjust(w) for h, w in zip(header, widths)),
        ]
        for row in body:
            lines.append("  ".join(cell.rjust(w) for cell, w in zip(row, widths)))
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"FrequencySolution(n={self.n}, classes={self.n_classes})"
