"""
Linear-interpolation percentile on sorted data.

For percentile p (0-100) on n sorted values:

    idx  = (p / 100) * (n - 1)
    q(p) = s[floor(idx)] * (1 - frac) + s[ceil(idx)] * frac

with indices clamped to [0, n-1]. This is Hyndman & Fan type 7 (the
default of R's quantile() and numpy.percentile), so q(50) equals the
median. Quartiles and arbitrary percentile queries all go through here.
"""

from __future__ import annotations

import math
import numpy as np
from numpy.typing import NDArray


def linear_percentile(sorted_values: NDArray, percentiles: NDArray) -> NDArray:
    """
    Compute percentiles of an ascending, non-empty, NaN-free array.

    Parameters
    ----------
    sorted_values : NDArray
        1D sorted array.
    percentiles : NDArray
        1D array of percentiles already validated to lie in [0, 100].

    Returns
    -------
    NDArray
        One value per requested percentile.
    """
    n = len(sorted_values)
    result = np.empty(len(percentiles), dtype=np.float64)

    for i, p in enumerate(percentiles):
        idx = (p / 100.0) * (n - 1)
        lower = math.floor(idx)
        upper = math.ceil(idx)
        weight = idx - lower

        if upper >= n:
            result[i] = sorted_values[n - 1]
        elif lower < 0:
            result[i] = sorted_values[0]
        else:
            result[i] = (
                sorted_values[lower] * (1.0 - weight)
                + sorted_values[upper] * weight
            )

    return result
