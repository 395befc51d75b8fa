"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pydescstats.core.result import Result
from pydescstats.core.classification import (
    ModalType,
    SymmetryAnalysis,
    VariabilityLevel,
)

if TYPE_CHECKING:
    from pydescstats.descriptive.design import SampleDesign


@dataclass(frozen=True)
class Quartiles:
    """Q1, Q2 (median) and Q3 by linear interpolation."""
    q1: float
    q2: float
    q3: float

    @property
    def iqr(self) -> float:
        """Interquartile range Q3 - Q1."""
        return self.q3 - self.q1


@dataclass(frozen=True)
class OutlierReport:
    """
    Tukey-fence outlier report derived from one sample's quartiles.

    Values strictly below lower_bound or strictly above upper_bound are
    outliers; both lists are in ascending order.
    """
    lower_bound: float
    upper_bound: float
    iqr: float
    lower_outliers: tuple[float, ...]
    upper_outliers: tuple[float, ...]
    method: str
    interpretation: str

    @property
    def has_outliers(self) -> bool:
        return bool(self.lower_outliers or self.upper_outliers)

    @property
    def n_outliers(self) -> int:
        return len(self.lower_outliers) + len(self.upper_outliers)


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for descriptive statistics.

    All fields are optional (None if not computed). describe() populates all
    except the percentile query fields; individual functions populate only
    their specific fields.
    """
    count: int | None = None
    minimum: float | None = None
    maximum: float | None = None
    range: float | None = None

    # Central tendency
    mean: float | None = None
    median: float | None = None
    mode: tuple[float, ...] | None = None

    # Dispersion
    kind: str | None = None
    variance: float | None = None
    sd: float | None = None
    cv: float | None = None

    # Position
    quartiles: Quartiles | None = None
    percentiles: NDArray[np.floating[Any]] | None = None
    percentile_ranks: NDArray[np.floating[Any]] | None = None
    percentile_at_or_below: tuple[int, ...] | None = None
    percentile_above: tuple[int, ...] | None = None
    outliers: OutlierReport | None = None

    # Shape
    modal_type: ModalType | None = None
    symmetry: SymmetryAnalysis | None = None
    variability: VariabilityLevel | None = None


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _design: 'SampleDesign'

    # --- Counts and extremes ---

    @property
    def count(self) -> int | None:
        return self._result.params.count

    @property
    def minimum(self) -> float | None:
        return self._result.params.minimum

    @property
    def maximum(self) -> float | None:
        return self._result.params.maximum

    @property
    def range(self) -> float | None:
        """maximum - minimum."""
        return self._result.params.range

    # --- Central tendency ---

    @property
    def mean(self) -> float | None:
        return self._result.params.mean

    @property
    def median(self) -> float | None:
        return self._result.params.median

    @property
    def mode(self) -> tuple[float, ...] | None:
        """Modal values in ascending order; empty tuple when amodal."""
        return self._result.params.mode

    # --- Dispersion ---

    @property
    def kind(self) -> str | None:
        """'sample' (n-1 divisor) or 'population' (n divisor)."""
        return self._result.params.kind

    @property
    def variance(self) -> float | None:
        return self._result.params.variance

    @property
    def sd(self) -> float | None:
        return self._result.params.sd

    @property
    def cv(self) -> float | None:
        """Coefficient of variation in percent."""
        return self._result.params.cv

    # --- Position ---

    @property
    def quartiles(self) -> Quartiles | None:
        return self._result.params.quartiles

    @property
    def percentiles(self) -> NDArray[np.floating[Any]] | None:
        """Values at the requested percentile ranks."""
        return self._result.params.percentiles

    @property
    def percentile_ranks(self) -> NDArray[np.floating[Any]] | None:
        """Percentile ranks (0-100) that were requested."""
        return self._result.params.percentile_ranks

    @property
    def percentile_at_or_below(self) -> tuple[int, ...] | None:
        """Number of values <= each percentile value."""
        return self._result.params.percentile_at_or_below

    @property
    def percentile_above(self) -> tuple[int, ...] | None:
        """Number of values > each percentile value."""
        return self._result.params.percentile_above

    @property
    def outliers(self) -> OutlierReport | None:
        return self._result.params.outliers

    # --- Shape ---

    @property
    def modal_type(self) -> ModalType | None:
        return self._result.params.modal_type

    @property
    def symmetry(self) -> SymmetryAnalysis | None:
        return self._result.params.symmetry

    @property
    def variability(self) -> VariabilityLevel | None:
        return self._result.params.variability

    # --- Metadata ---

    @property
    def name(self) -> str | None:
        """Sample label from the design."""
        return self._design.name

    @property
    def sorted_data(self) -> NDArray[np.floating[Any]]:
        """The ordered sample (read-only)."""
        return self._design.sorted

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
        """Plain-text report of every computed measure."""
        p = self._result.params
        title = f"Descriptive Statistics: {self.name}" if self.name else "Descriptive Statistics"
        lines = [title]

        rows: list[tuple[str, str]] = []
        if p.count is not None:
            rows.append(("n", str(p.count)))
        if p.minimum is not None:
            rows.append(("Min.", f"{p.minimum:.6f}"))
            rows.append(("Max.", f"{p.maximum:.6f}"))
            rows.append(("Range", f"{p.range:.6f}"))
        if p.mean is not None:
            rows.append(("Mean", f"{p.mean:.6f}"))
        if p.median is not None:
            rows.append(("Median", f"{p.median:.6f}"))
        if p.mode is not None:
            modes = ", ".join(f"{m:g}" for m in p.mode) if p.mode else "none"
            rows.append(("Mode", modes))
        if p.variance is not None:
            rows.append((f"Variance ({p.kind})", f"{p.variance:.6f}"))
        if p.sd is not None:
            rows.append((f"Std. dev. ({p.kind})", f"{p.sd:.6f}"))
        if p.cv is not None:
            rows.append(("CV (%)", f"{p.cv:.4f}"))
        if p.quartiles is not None:
            rows.append(("1st Qu.", f"{p.quartiles.q1:.6f}"))
            rows.append(("3rd Qu.", f"{p.quartiles.q3:.6f}"))
            rows.append(("IQR", f"{p.quartiles.iqr:.6f}"))
        if p.percentiles is not None:
            for rank, value, below, above in zip(
                p.percentile_ranks, p.percentiles,
                p.percentile_at_or_below, p.percentile_above,
            ):
                rows.append((f"P{rank:g}", f"{value:.6f} ({below} <=, {above} >)"))
        if p.modal_type is not None:
            rows.append(("Modal type", p.modal_type))
        if p.symmetry is not None:
            rows.append(("Symmetry", p.symmetry.kind))
        if p.variability is not None:
            rows.append(("Variability", p.variability.level))

        label_width = max((len(label) for label, _ in rows), default=0)
        for label, value in rows:
            lines.append(f"  {label.ljust(label_width)}  {value}")

        if p.outliers is not None:
            lines.append(f"  Outliers: {p.outliers.interpretation}")

        for w in self.warnings:
            lines.append(f"  Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        computed = []
        params = self._result.params
        if params.mean is not None:
            computed.append("mean")
        if params.median is not None:
            computed.append("median")
        if params.mode is not None:
            computed.append("mode")
        if params.variance is not None:
            computed.append("var")
        if params.sd is not None:
            computed.append("sd")
        if params.cv is not None:
            computed.append("cv")
        if params.quartiles is not None:
            computed.append("quartiles")
        if params.percentiles is not None:
            computed.append("percentiles")
        if params.outliers is not None:
            computed.append("outliers")

        stats_str = ", ".join(computed) if computed else "none"
        return f"DescriptiveSolution(n={self._design.n}, computed=[{stats_str}])"
