"""
CPU backend for Sturges-rule frequency distributions.
"""

from __future__ import annotations

import math

import numpy as np

from pydescstats.core.result import Result
from pydescstats.core.compute.timing import Timer
from pydescstats.core.compute.tolerances import MIN_FREQUENCY_SAMPLES
from pydescstats.core.exceptions import DegenerateRangeError
from pydescstats.core.validation import check_min_samples
from pydescstats.descriptive.design import SampleDesign
from pydescstats.frequency.solution import FrequencyClass, FrequencyParams
from pydescstats.frequency._sturges import sturges_raw, sturges_classes


class CPUFrequencyBackend:
    """CPU backend for class-interval frequency tables."""

    @property
    def name(self) -> str:
        return 'cpu_frequency'

    def solve(self, design: SampleDesign) -> Result[FrequencyParams]:
        """
        Bin the sample into Sturges classes.

        Raises
        ------
        InsufficientDataError
            Fewer than 4 finite values.
        DegenerateRangeError
            All values are equal.
        """
        ordered = design.sorted
        check_min_samples(ordered, MIN_FREQUENCY_SAMPLES, design.name or 'data')

        minimum = float(ordered[0])
        maximum = float(ordered[-1])
        value_range = maximum - minimum
        if value_range == 0:
            raise DegenerateRangeError(
                f"All {ordered.size} values equal {minimum:g}; "
                "a zero range cannot be split into class intervals",
                value=minimum,
            )

        timer = Timer()
        timer.start()

        n = design.n
        k_raw = sturges_raw(n)
        k = sturges_classes(n)
        if math.isfinite(value_range):
            width = value_range / k
        else:
            width = maximum / k - minimum / k
        edges = _class_edges(minimum, maximum, k)

        warnings_list: list[str] = []
        drop_warning = design.drop_warning()
        if drop_warning:
            warnings_list.append(drop_warning)
        if k != k_raw:
            warnings_list.append(
                f"Sturges' rule gives {k_raw} classes for n={n}; clamped to {k}"
            )

        classes: list[FrequencyClass] = []
        cumulative = 0

        with timer.section('binning'):
            for i in range(k):
                last = i == k - 1
                lower = edges[i]
                upper = edges[i + 1]

                if last:
                    mask = (ordered >= lower) & (ordered <= upper)
                else:
                    mask = (ordered >= lower) & (ordered < upper)
                members = ordered[mask]

                frequency = int(members.size)
                cumulative += frequency
                classes.append(FrequencyClass(
                    label=f"{lower:.1f} ⊢ {upper:.1f}",
                    lower_bound=lower,
                    upper_bound=upper,
                    midpoint=lower / 2.0 + upper / 2.0,
                    frequency=frequency,
                    relative_frequency=frequency / n,
                    cumulative_frequency=cumulative,
                    relative_cumulative_frequency=cumulative / n,
                    values=tuple(float(v) for v in members),
                    closed=last,
                ))

        timer.stop()

        params = FrequencyParams(
            classes=tuple(classes),
            n=n,
            minimum=minimum,
            maximum=maximum,
            range=value_range,
            class_width=width,
            sturges_raw=k_raw,
        )

        return Result(
            params=params,
            info={'method': 'sturges', 'n_classes': k, 'n_dropped': design.n_dropped},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )


def _class_edges(minimum: float, maximum: float, k: int) -> list[float]:
    """
    k + 1 class boundaries from minimum to maximum.

    maximum - minimum overflows to inf for spans wider than the float64
    range; the boundaries are then interpolated between the extremes so
    every one stays finite.
    """
    value_range = maximum - minimum
    if math.isfinite(value_range):
        width = value_range / k
        inner = [minimum + i * width for i in range(1, k)]
    else:
        inner = [minimum * ((k - i) / k) + maximum * (i / k) for i in range(1, k)]
    return [minimum, *inner, maximum]
