"""
Distribution shape classifications.

Turns computed measures into the labels an explanatory report needs:
modal type, symmetry and variability level.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal
import math

from pydescstats.core.compute.tolerances import (
    SYMMETRY_THRESHOLD,
    CV_LOW,
    CV_MODERATE,
)

ModalType = Literal['amodal', 'unimodal', 'bimodal', 'multimodal']
SymmetryType = Literal['approximately symmetric', 'positive skew', 'negative skew']
VariabilityLabel = Literal['low', 'moderate', 'high', 'undefined']


@dataclass(frozen=True)
class SymmetryAnalysis:
    """Symmetry judged from the mean-median gap in standard deviations."""
    kind: SymmetryType
    description: str
    relative_skew: float


@dataclass(frozen=True)
class VariabilityLevel:
    """Variability band of a coefficient of variation."""
    level: VariabilityLabel
    description: str
    cv: float


def modal_type(n_modes: int) -> ModalType:
    """Classify by the number of modal values."""
    if n_modes == 0:
        return 'amodal'
    if n_modes == 1:
        return 'unimodal'
    if n_modes == 2:
        return 'bimodal'
    return 'multimodal'


def analyze_symmetry(mean: float, median: float, sd: float) -> SymmetryAnalysis:
    """
    Compare |mean - median| / sd with SYMMETRY_THRESHOLD.

    With zero or undefined sd the gap is taken as 0 (constant or
    single-value data is symmetric).
    """
    if sd > 0 and math.isfinite(sd):
        relative_skew = abs(mean - median) / sd
    else:
        relative_skew = 0.0

    if relative_skew < SYMMETRY_THRESHOLD:
        return SymmetryAnalysis(
            kind='approximately symmetric',
            description='Mean and median are close; the distribution is balanced.',
            relative_skew=relative_skew,
        )
    if mean > median:
        return SymmetryAnalysis(
            kind='positive skew',
            description='Mean exceeds the median; the right tail is longer.',
            relative_skew=relative_skew,
        )
    return SymmetryAnalysis(
        kind='negative skew',
        description='Mean is below the median; the left tail is longer.',
        relative_skew=relative_skew,
    )


def variability_level(cv: float) -> VariabilityLevel:
    """Band a coefficient of variation (percent): <15 low, <30 moderate, else high."""
    if math.isnan(cv):
        return VariabilityLevel(
            level='undefined',
            description='Variability cannot be assessed from a single observation.',
            cv=cv,
        )
    if cv < CV_LOW:
        return VariabilityLevel(
            level='low',
            description='Homogeneous data with little dispersion.',
            cv=cv,
        )
    if cv < CV_MODERATE:
        return VariabilityLevel(
            level='moderate',
            description='Data with medium dispersion.',
            cv=cv,
        )
    return VariabilityLevel(
        level='high',
        description='Heterogeneous data with large dispersion.',
        cv=cv,
    )
