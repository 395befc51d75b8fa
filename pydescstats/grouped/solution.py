"""
Grouped-data solution types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, TYPE_CHECKING

from pydescstats.core.result import Result
from pydescstats.core.classification import ModalType, VariabilityLevel

if TYPE_CHECKING:
    from pydescstats.grouped.design import GroupedDesign, GroupedDatum

ModeEstimateKind = Literal['exact', 'estimated', 'multimodal']


@dataclass(frozen=True)
class ModeEstimate:
    """
    Mode of grouped data.

    kind is 'exact' for frequency tables, 'estimated' for a single modal
    class interpolated with Pearson's formula, and 'multimodal' when several
    interval classes tie (values are then their midpoints).
    """
    values: tuple[float, ...]
    frequency: int
    kind: ModeEstimateKind
    modal_classes: tuple[str, ...]


@dataclass(frozen=True)
class GroupedTableRow:
    """One row of the grouped frequency table, in the caller's order."""
    datum: 'GroupedDatum'
    frequency: int
    relative_frequency: float
    cumulative_frequency: int
    relative_cumulative_frequency: float

    @property
    def label(self) -> str:
        return self.datum.label

    @property
    def representative(self) -> float:
        return self.datum.representative

    @property
    def relative_frequency_percent(self) -> float:
        return self.relative_frequency * 100.0

    @property
    def relative_cumulative_frequency_percent(self) -> float:
        return self.relative_cumulative_frequency * 100.0


@dataclass(frozen=True)
class GroupedParams:
    """Parameter payload for grouped-data estimates."""
    mode_tag: str
    total_frequency: int
    mean: float
    median: float
    median_class: str
    mode: ModeEstimate
    variance: float
    sd: float
    cv: float
    table: tuple[GroupedTableRow, ...]
    modal_type: ModalType
    variability: VariabilityLevel


@dataclass
class GroupedSolution:
    """
    User-facing grouped-data results.

    Wraps Result[GroupedParams] and provides convenient accessors.
    """
    _result: Result[GroupedParams]
    _design: 'GroupedDesign'

    @property
    def mode_tag(self) -> str:
        """'frequency' or 'intervals'."""
        return self._result.params.mode_tag

    @property
    def is_estimate(self) -> bool:
        """Interval results are estimates built from class midpoints."""
        return self.mode_tag == 'intervals'

    @property
    def count(self) -> int:
        """Total frequency."""
        return self._result.params.total_frequency

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def median_class(self) -> str:
        """Label of the row that contains the median."""
        return self._result.params.median_class

    @property
    def mode(self) -> ModeEstimate:
        return self._result.params.mode

    @property
    def variance(self) -> float:
        """Sample variance (divisor total frequency - 1)."""
        return self._result.params.variance

    @property
    def sd(self) -> float:
        return self._result.params.sd

    @property
    def cv(self) -> float:
        return self._result.params.cv

    @property
    def table(self) -> tuple[GroupedTableRow, ...]:
        return self._result.params.table

    @property
    def modal_type(self) -> ModalType:
        return self._result.params.modal_type

    @property
    def variability(self) -> VariabilityLevel:
        return self._result.params.variability

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
        """Plain-text frequency table followed by the estimates."""
        p = self._result.params
        rep_header = "xi" if p.mode_tag == 'frequency' else "midpoint"
        header = ("Class", rep_header, "fi", "fri %", "Fi", "Fri %")
        body = [
            (
                row.label,
                f"{row.representative:g}",
                str(row.frequency),
                f"{row.relative_frequency_percent:.2f}",
                str(row.cumulative_frequency),
                f"{row.relative_cumulative_frequency_percent:.2f}",
            )
            for row in p.table
        ]
        widths = [
            max(len(row[j]) for row in [header, *body])
            for j in range(len(header))
        ]

        kind = "frequency table" if p.mode_tag == 'frequency' else "class intervals (estimates)"
        lines = [f"Grouped data: {kind}, N={p.total_frequency}"]
        lines.append("  ".join(h.rjust(w) for h, w in zip(header, widths)))
        for row in body:
            lines.append("  ".join(cell.rjust(w) for cell, w in zip(row, widths)))

        modes = ", ".join(f"{v:.4f}" for v in p.mode.values)
        lines.extend([
            f"  Mean      {p.mean:.6f}",
            f"  Median    {p.median:.6f}  (class {p.median_class})",
            f"  Mode      {modes}  ({p.mode.kind}, f={p.mode.frequency})",
            f"  Variance  {p.variance:.6f}",
            f"  Std. dev. {p.sd:.6f}",
            f"  CV (%)    {p.cv:.4f}  ({p.variability.level})",
        ])
        for w in self.warnings:
            lines.append(f"  Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"GroupedSolution(mode={self.mode_tag!r}, rows={len(self.table)}, "
            f"N={self.count})"
        )
