"""
CPU backend for descriptive statistics of one sample.
"""

from __future__ import annotations

import math
import numpy as np
from numpy.typing import NDArray

from pydescstats.core.result import Result
from pydescstats.core.compute.timing import Timer
from pydescstats.core.compute.dispersion import (
    VarianceKind,
    variance_divisor,
    coefficient_of_variation,
)
from pydescstats.core.compute.tolerances import OUTLIER_IQR_FACTOR
from pydescstats.core.classification import (
    modal_type,
    analyze_symmetry,
    variability_level,
)
from pydescstats.descriptive.design import SampleDesign
from pydescstats.descriptive.solution import (
    DescriptiveParams,
    OutlierReport,
    Quartiles,
)
from pydescstats.descriptive._percentile import linear_percentile

VALID_COMPUTE = frozenset({
    'extremes', 'mean', 'median', 'mode', 'var', 'sd', 'cv',
    'quartiles', 'percentiles', 'outliers', 'shape',
})

# Measures each entry needs computed first
_DEPENDENCIES = {
    'sd': {'var'},
    'cv': {'mean', 'sd'},
    'outliers': {'quartiles'},
    'shape': {'mean', 'median', 'mode', 'sd', 'cv'},
}


def _resolve(compute: set[str]) -> set[str]:
    """Close the requested set under _DEPENDENCIES."""
    resolved = set(compute)
    pending = list(compute)
    while pending:
        for dep in _DEPENDENCIES.get(pending.pop(), ()):
            if dep not in resolved:
                resolved.add(dep)
                pending.append(dep)
    if 'var' in resolved:
        resolved.add('mean')
    return resolved


class CPUDescriptiveBackend:
    """CPU backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(
        self,
        design: SampleDesign,
        *,
        compute: set[str],
        kind: VarianceKind | None = None,
        percentile_ranks: NDArray | None = None,
    ) -> Result[DescriptiveParams]:
        """
        Compute requested descriptive statistics.

        Parameters
        ----------
        design : SampleDesign
        compute : set of str
            Which statistics to compute. Valid entries:
            'extremes', 'mean', 'median', 'mode', 'var', 'sd', 'cv',
            'quartiles', 'percentiles', 'outliers', 'shape'.
            Prerequisites (e.g. 'var' for 'sd') are computed as well.
        kind : {'sample', 'population'}
            Variance divisor. Required whenever a dispersion measure is requested.
        percentile_ranks : NDArray or None
            Validated percentile ranks (0-100) for 'percentiles'.
        """
        unknown = set(compute) - VALID_COMPUTE
        if unknown:
            raise ValueError(f"Unknown statistics requested: {sorted(unknown)}")

        needed = _resolve(compute)
        if 'var' in needed:
            # Raises ValidationError for a bad kind before any work is done
            variance_divisor(design.n, kind)

        timer = Timer()
        timer.start()

        values = design.values
        ordered = design.sorted
        n = design.n
        warnings_list: list[str] = []
        drop_warning = design.drop_warning()
        if drop_warning:
            warnings_list.append(drop_warning)

        fields: dict[str, object] = {'count': n}

        if 'extremes' in needed:
            with timer.section('extremes'):
                minimum = float(ordered[0])
                maximum = float(ordered[-1])
                fields.update(minimum=minimum, maximum=maximum, range=maximum - minimum)

        if 'mean' in needed:
            with timer.section('mean'):
                fields['mean'] = self._compute_mean(values)

        if 'median' in needed:
            with timer.section('median'):
                fields['median'] = self._compute_median(ordered)

        if 'mode' in needed:
            with timer.section('mode'):
                fields['mode'] = self._compute_mode(ordered)

        if 'var' in needed:
            with timer.section('variance'):
                variance = self._compute_variance(values, fields['mean'], kind)
                if math.isnan(variance):
                    warnings_list.append(
                        "Sample variance is undefined for a single observation (n - 1 = 0)"
                    )
                fields['variance'] = variance
                fields['kind'] = kind

        if 'sd' in needed:
            with timer.section('sd'):
                fields['sd'] = math.sqrt(fields['variance'])

        if 'cv' in needed:
            with timer.section('cv'):
                fields['cv'] = coefficient_of_variation(fields['sd'], fields['mean'])

        if 'quartiles' in needed:
            with timer.section('quartiles'):
                q1, q2, q3 = linear_percentile(ordered, np.array([25.0, 50.0, 75.0]))
                fields['quartiles'] = Quartiles(q1=float(q1), q2=float(q2), q3=float(q3))

        if 'percentiles' in needed:
            with timer.section('percentiles'):
                ranks = np.asarray(percentile_ranks, dtype=np.float64)
                pct = linear_percentile(ordered, ranks)
                pct.flags.writeable = False
                ranks = ranks.copy()
                ranks.flags.writeable = False
                at_or_below = np.searchsorted(ordered, pct, side='right')
                fields['percentiles'] = pct
                fields['percentile_ranks'] = ranks
                fields['percentile_at_or_below'] = tuple(int(c) for c in at_or_below)
                fields['percentile_above'] = tuple(int(n - c) for c in at_or_below)

        if 'outliers' in needed:
            with timer.section('outliers'):
                fields['outliers'] = self._detect_outliers(ordered, fields['quartiles'])

        if 'shape' in needed:
            with timer.section('shape'):
                fields['modal_type'] = modal_type(len(fields['mode']))
                fields['symmetry'] = analyze_symmetry(
                    fields['mean'], fields['median'], fields['sd'],
                )
                fields['variability'] = variability_level(fields['cv'])

        timer.stop()

        return Result(
            params=DescriptiveParams(**fields),
            info={
                'kind': kind,
                'computed': sorted(needed),
                'n_dropped': design.n_dropped,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    # --- Central tendency ---

    def _compute_mean(self, values: NDArray) -> float:
        """Arithmetic mean, sum / n."""
        return float(np.sum(values) / values.size)

    def _compute_median(self, ordered: NDArray) -> float:
        """Middle value for odd n, mean of the two central values for even n."""
        n = ordered.size
        middle = n // 2
        if n % 2 == 0:
            return float((ordered[middle - 1] + ordered[middle]) / 2.0)
        return float(ordered[middle])

    def _compute_mode(self, ordered: NDArray) -> tuple[float, ...]:
        """
        All values attaining the highest count, ascending.

        When every distinct value occurs equally often (including a single
        distinct value) there is no mode and the result is empty.
        """
        distinct, counts = np.unique(ordered, return_counts=True)
        max_count = counts.max()
        if max_count == counts.min():
            return ()
        return tuple(float(v) for v in distinct[counts == max_count])

    # --- Dispersion ---

    def _compute_variance(self, values: NDArray, mean: float, kind: VarianceKind) -> float:
        """Sum of squared deviations over n - 1 (sample) or n (population)."""
        divisor = variance_divisor(values.size, kind)
        if divisor == 0:
            return math.nan
        squared = (values - mean) ** 2
        return float(np.sum(squared) / divisor)

    # --- Outliers ---

    def _detect_outliers(self, ordered: NDArray, quartiles: Quartiles) -> OutlierReport:
        """Tukey fences at Q1 - 1.5*IQR and Q3 + 1.5*IQR."""
        iqr = quartiles.iqr
        lower_bound = quartiles.q1 - OUTLIER_IQR_FACTOR * iqr
        upper_bound = quartiles.q3 + OUTLIER_IQR_FACTOR * iqr

        lower = tuple(float(v) for v in ordered[ordered < lower_bound])
        upper = tuple(float(v) for v in ordered[ordered > upper_bound])

        return OutlierReport(
            lower_bound=lower_bound,
            upper_bound=upper_bound,
            iqr=iqr,
            lower_outliers=lower,
            upper_outliers=upper,
            method=f'IQR (Q1 - {OUTLIER_IQR_FACTOR:g}*IQR, Q3 + {OUTLIER_IQR_FACTOR:g}*IQR)',
            interpretation=_interpret_outliers(lower, upper),
        )


def _interpret_outliers(lower: tuple[float, ...], upper: tuple[float, ...]) -> str:
    total = len(lower) + len(upper)
    if total == 0:
        return 'No outliers: every value lies within the expected range.'

    parts = []
    if lower:
        parts.append(f"{len(lower)} lower outlier(s) [{', '.join(f'{v:g}' for v in lower)}]")
    if upper:
        parts.append(f"{len(upper)} upper outlier(s) [{', '.join(f'{v:g}' for v in upper)}]")

    return (
        f"Detected {total} outlier(s): {' and '.join(parts)}. "
        "These values may indicate measurement errors, special cases or "
        "extreme natural variability."
    )
