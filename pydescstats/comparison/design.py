"""
ComparisonDesign: two samples compared side by side.

Each group is an ordinary SampleDesign, so non-finite entries are dropped
per group exactly as in describe(). The variance kind and the comparison
aspect are validated here, before any statistic is computed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal
from numpy.typing import ArrayLike

from pydescstats.core.exceptions import ValidationError
from pydescstats.core.compute.dispersion import VarianceKind
from pydescstats.descriptive.design import SampleDesign

ComparisonAspect = Literal['complete', 'variability', 'central']

VALID_ASPECTS = ('complete', 'variability', 'central')
VALID_KINDS = ('sample', 'population')


def _validate_aspect(aspect: str) -> str:
    if aspect not in VALID_ASPECTS:
        raise ValidationError(
            f"aspect must be one of {VALID_ASPECTS}, got {aspect!r}"
        )
    return aspect


def _validate_kind(kind: str) -> str:
    if kind not in VALID_KINDS:
        raise ValidationError(
            f"kind: must be 'sample' or 'population', got {kind!r}"
        )
    return kind


def _to_sample(data: ArrayLike | str | SampleDesign, default_name: str) -> SampleDesign:
    if isinstance(data, SampleDesign):
        return data
    if isinstance(data, str):
        return SampleDesign.from_text(data, name=default_name)
    if getattr(data, 'name', None) is not None and hasattr(data, 'to_numpy'):
        return SampleDesign.from_array(data)
    return SampleDesign.from_array(data, name=default_name)


@dataclass(frozen=True)
class ComparisonDesign:
    """
    Design for a two-group descriptive comparison.

    Do not construct directly; use from_samples().
    """
    _group1: SampleDesign
    _group2: SampleDesign
    _kind: VarianceKind
    _aspect: ComparisonAspect

    @classmethod
    def from_samples(
        cls,
        group1: ArrayLike | str | SampleDesign,
        group2: ArrayLike | str | SampleDesign,
        *,
        kind: VarianceKind,
        aspect: ComparisonAspect = 'complete',
    ) -> ComparisonDesign:
        """
        Build from two raw samples (arrays, text or SampleDesigns).

        Unnamed groups are labelled 'group 1' and 'group 2'.

        Raises
        ------
        ValidationError
            Unknown kind or aspect.
        EmptyDataError
            A group has no finite values.
        """
        _validate_kind(kind)
        _validate_aspect(aspect)
        return cls(
            _group1=_to_sample(group1, 'group 1'),
            _group2=_to_sample(group2, 'group 2'),
            _kind=kind,
            _aspect=aspect,
        )

    @property
    def group1(self) -> SampleDesign:
        return self._group1

    @property
    def group2(self) -> SampleDesign:
        return self._group2

    @property
    def kind(self) -> VarianceKind:
        return self._kind

    @property
    def aspect(self) -> ComparisonAspect:
        return self._aspect

    def __repr__(self) -> str:
        return (
            f"ComparisonDesign(n1={self._group1.n}, n2={self._group2.n}, "
            f"kind={self._kind!r}, aspect={self._aspect!r})"
        )
