"""
Solver dispatch for grouped-data estimation.
"""

from __future__ import annotations

from typing import Literal, Sequence

from pydescstats.core.exceptions import ValidationError
from pydescstats.grouped.design import GroupedDesign, GroupedDatum, GroupedMode
from pydescstats.grouped.solution import GroupedSolution
from pydescstats.grouped.backends.cpu import CPUGroupedBackend


BackendChoice = Literal['auto', 'cpu']


def _ensure_design(
    data: GroupedDesign | str | Sequence[GroupedDatum],
    mode: GroupedMode | None,
    strict: bool,
) -> GroupedDesign:
    if isinstance(data, GroupedDesign):
        if mode is not None and mode != data.mode:
            raise ValidationError(
                f"mode={mode!r} does not match the design's mode {data.mode!r}"
            )
        return data
    if isinstance(data, str):
        if mode is None:
            raise ValidationError("mode is required when parsing grouped data from text")
        return GroupedDesign.from_text(data, mode, strict=strict)
    design = GroupedDesign.from_datums(data)
    if mode is not None and mode != design.mode:
        raise ValidationError(
            f"mode={mode!r} does not match the supplied rows ({design.mode!r})"
        )
    return design


def grouped_statistics(
    data: GroupedDesign | str | Sequence[GroupedDatum],
    *,
    mode: GroupedMode | None = None,
    strict: bool = False,
    backend: BackendChoice = 'auto',
) -> GroupedSolution:
    """
    Estimate mean, median, mode, variance, sd and CV from grouped data.

    Parameters
    ----------
    data : GroupedDesign, str or sequence of datums
        Rows in ascending order. Text is parsed with GroupedDesign.from_text
        and requires `mode`.
    mode : {'frequency', 'intervals'}, optional
        Row kind. Inferred from a design or datum list.
    strict : bool
        For text input: raise on the first malformed row instead of
        skipping it (skipped rows are reported in `warnings`).
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    GroupedSolution. Variance uses the sample divisor N - 1.
    """
    if backend not in ('auto', 'cpu'):
        raise ValidationError(f"Unknown backend: {backend!r}")

    design = _ensure_design(data, mode, strict)
    result = CPUGroupedBackend().solve(design)
    return GroupedSolution(_result=result, _design=design)
