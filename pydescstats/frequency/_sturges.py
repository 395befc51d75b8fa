"""
Sturges' rule with practical bounds.

    k_raw = ceil(1 + 3.322 * log10(n))
    k     = max(4, min(10, k_raw))

Pure Sturges gives 1-3 classes for tiny samples and ever more classes for
large ones; the clamp keeps tables readable.
"""

from __future__ import annotations

import math

from pydescstats.core.compute.tolerances import (
    STURGES_COEFFICIENT,
    STURGES_MIN_CLASSES,
    STURGES_MAX_CLASSES,
)


def sturges_raw(n: int) -> int:
    """Unclamped Sturges class count for n observations."""
    return math.ceil(1 + STURGES_COEFFICIENT * math.log10(n))


def sturges_classes(n: int) -> int:
    """Sturges class count clamped to [4, 10]."""
    return max(STURGES_MIN_CLASSES, min(STURGES_MAX_CLASSES, sturges_raw(n)))
