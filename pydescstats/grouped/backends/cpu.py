"""
CPU backend for grouped-data estimation.

Weighted sums over class representatives replace the raw-data formulas:

    mean     = sum(x_i * f_i) / N
    median   = L + ((N/2 - F) / f) * h                     (intervals)
    mode     = L + ((f1 - f0) / (2*f1 - f0 - f2)) * h       (Pearson, intervals)
    variance = sum((x_i - mean)^2 * f_i) / (N - 1)
"""

from __future__ import annotations

import math

import numpy as np

from pydescstats.core.result import Result
from pydescstats.core.compute.timing import Timer
from pydescstats.core.compute.dispersion import coefficient_of_variation
from pydescstats.core.classification import modal_type, variability_level
from pydescstats.grouped.design import GroupedDesign
from pydescstats.grouped.solution import (
    GroupedParams,
    GroupedTableRow,
    ModeEstimate,
)


class CPUGroupedBackend:
    """CPU backend for grouped-data estimates."""

    @property
    def name(self) -> str:
        return 'cpu_grouped'

    def solve(self, design: GroupedDesign) -> Result[GroupedParams]:
        timer = Timer()
        timer.start()

        items = design.items
        reps = design.representatives
        freqs = design.frequencies
        total = design.total_frequency
        warnings_list = [str(err) for err in design.row_errors]

        with timer.section('mean'):
            mean = float(np.sum(reps * freqs) / total)

        with timer.section('median'):
            median, median_index = self._compute_median(design, total)

        with timer.section('mode'):
            mode = self._compute_mode(design)

        with timer.section('variance'):
            if total > 1:
                variance = float(np.sum((reps - mean) ** 2 * freqs) / (total - 1))
            else:
                variance = math.nan
                warnings_list.append(
                    "Sample variance is undefined for a total frequency of 1 (N - 1 = 0)"
                )
            sd = math.sqrt(variance)
            cv = coefficient_of_variation(sd, mean)

        with timer.section('table'):
            table = self._frequency_table(design, total)

        timer.stop()

        params = GroupedParams(
            mode_tag=design.mode,
            total_frequency=total,
            mean=mean,
            median=median,
            median_class=items[median_index].label,
            mode=mode,
            variance=variance,
            sd=sd,
            cv=cv,
            table=table,
            modal_type=modal_type(len(mode.values)),
            variability=variability_level(cv),
        )

        return Result(
            params=params,
            info={
                'mode': design.mode,
                'n_rows': len(items),
                'n_skipped_rows': len(design.row_errors),
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

    def _compute_median(self, design: GroupedDesign, total: int) -> tuple[float, int]:
        """
        First row whose cumulative frequency reaches N/2.

        Frequency tables return that row's value; intervals interpolate
        linearly inside the median class.
        """
        position = total / 2.0
        cumulative = 0
        for i, datum in enumerate(design.items):
            cumulative += datum.frequency
            if cumulative >= position:
                if design.mode == 'frequency':
                    return datum.value, i
                before = cumulative - datum.frequency
                return datum.start + ((position - before) / datum.frequency) * datum.width, i
        # Unreachable for positive frequencies: the last cumulative equals N
        raise AssertionError("median position beyond total frequency")

    def _compute_mode(self, design: GroupedDesign) -> ModeEstimate:
        items = design.items
        freqs = [d.frequency for d in items]
        max_freq = max(freqs)
        modal = [i for i, f in enumerate(freqs) if f == max_freq]
        labels = tuple(items[i].label for i in modal)

        if design.mode == 'frequency':
            return ModeEstimate(
                values=tuple(items[i].value for i in modal),
                frequency=max_freq,
                kind='exact',
                modal_classes=labels,
            )

        if len(modal) > 1:
            return ModeEstimate(
                values=tuple(items[i].midpoint for i in modal),
                frequency=max_freq,
                kind='multimodal',
                modal_classes=labels,
            )

        i = modal[0]
        modal_class = items[i]
        f1 = modal_class.frequency
        f0 = items[i - 1].frequency if i > 0 else 0
        f2 = items[i + 1].frequency if i < len(items) - 1 else 0
        # unique modal class: f1 > f0 and f1 > f2, so the denominator is >= 2
        denominator = 2 * f1 - f0 - f2
        value = modal_class.start + ((f1 - f0) / denominator) * modal_class.width

        return ModeEstimate(
            values=(value,),
            frequency=max_freq,
            kind='estimated',
            modal_classes=labels,
        )

    def _frequency_table(self, design: GroupedDesign, total: int) -> tuple[GroupedTableRow, ...]:
        """Running cumulative scan in the caller's row order."""
        rows = []
        cumulative = 0
        for datum in design.items:
            cumulative += datum.frequency
            rows.append(GroupedTableRow(
                datum=datum,
                frequency=datum.frequency,
                relative_frequency=datum.frequency / total,
                cumulative_frequency=cumulative,
                relative_cumulative_frequency=cumulative / total,
            ))
        return tuple(rows)
