"""
GroupedDesign: pre-aggregated frequency data.

Two shapes are supported, selected by a mode tag:

    'frequency'  value:frequency rows (discrete frequency table)
    'intervals'  start-end:frequency rows (class intervals)

Rows are kept in the order given. The estimators assume ascending order;
that is the caller's contract and is not re-checked here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Sequence, Union
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydescstats.core.exceptions import (
    ValidationError,
    EmptyDataError,
    MalformedRowError,
)
from pydescstats.core.validation import (
    check_array,
    check_1d,
    check_consistent_length,
    check_positive_frequencies,
)
from pydescstats.grouped._parse import parse_rows

GroupedMode = Literal['frequency', 'intervals']


@dataclass(frozen=True)
class FrequencyDatum:
    """A discrete value observed `frequency` times."""
    value: float
    frequency: int

    @property
    def representative(self) -> float:
        return self.value

    @property
    def label(self) -> str:
        return f"{self.value:g}"


@dataclass(frozen=True)
class IntervalDatum:
    """A class interval [start, end) holding `frequency` observations."""
    start: float
    end: float
    frequency: int

    @property
    def midpoint(self) -> float:
        return (self.start + self.end) / 2.0

    @property
    def width(self) -> float:
        return self.end - self.start

    @property
    def representative(self) -> float:
        return self.midpoint

    @property
    def label(self) -> str:
        return f"{self.start:g} ⊢ {self.end:g}"


GroupedDatum = Union[FrequencyDatum, IntervalDatum]


@dataclass(frozen=True)
class GroupedDesign:
    """
    Design for grouped-data estimation.

    Construction:
        GroupedDesign.from_frequencies(values=[1, 2, 3], frequencies=[4, 6, 2])
        GroupedDesign.from_intervals(starts=[0, 10], ends=[10, 20], frequencies=[2, 8])
        GroupedDesign.from_text("0-10:2\\n10-20:8", mode='intervals')
        GroupedDesign.from_datums([IntervalDatum(0, 10, 2), ...])
    """
    _items: tuple[GroupedDatum, ...]
    _mode: GroupedMode
    _row_errors: tuple[MalformedRowError, ...] = field(default_factory=tuple)

    @classmethod
    def from_frequencies(cls, values: ArrayLike, frequencies: ArrayLike) -> GroupedDesign:
        """Build a discrete frequency table from parallel value/frequency arrays."""
        v = _finite_1d(values, 'values')
        f = check_positive_frequencies(np.asarray(frequencies), 'frequencies')
        check_consistent_length(v, f, names=('values', 'frequencies'))
        items = tuple(FrequencyDatum(float(x), int(n)) for x, n in zip(v, f))
        return cls._build(items, 'frequency')

    @classmethod
    def from_intervals(
        cls,
        starts: ArrayLike,
        ends: ArrayLike,
        frequencies: ArrayLike,
    ) -> GroupedDesign:
        """Build an interval table from parallel start/end/frequency arrays."""
        s = _finite_1d(starts, 'starts')
        e = _finite_1d(ends, 'ends')
        f = check_positive_frequencies(np.asarray(frequencies), 'frequencies')
        check_consistent_length(s, e, f, names=('starts', 'ends', 'frequencies'))
        bad = np.flatnonzero(s >= e)
        if bad.size:
            i = int(bad[0])
            raise ValidationError(
                f"Interval {i + 1}: start ({s[i]:g}) must be less than end ({e[i]:g})"
            )
        items = tuple(
            IntervalDatum(float(a), float(b), int(n)) for a, b, n in zip(s, e, f)
        )
        return cls._build(items, 'intervals')

    @classmethod
    def from_datums(cls, items: Sequence[GroupedDatum]) -> GroupedDesign:
        """Build from datum objects; all must be of the same kind."""
        items = tuple(items)
        if not items:
            raise EmptyDataError("Grouped data needs at least one row")
        if all(isinstance(d, FrequencyDatum) for d in items):
            mode: GroupedMode = 'frequency'
        elif all(isinstance(d, IntervalDatum) for d in items):
            mode = 'intervals'
        else:
            raise ValidationError(
                "Grouped data mixes frequency rows and interval rows"
            )
        for i, d in enumerate(items, start=1):
            if not isinstance(d.frequency, (int, np.integer)) or d.frequency < 1:
                raise ValidationError(
                    f"Row {i}: frequency must be a positive integer, got {d.frequency!r}"
                )
            if isinstance(d, IntervalDatum) and not d.start < d.end:
                raise ValidationError(
                    f"Row {i}: start ({d.start:g}) must be less than end ({d.end:g})"
                )
        return cls._build(items, mode)

    @classmethod
    def from_text(
        cls,
        text: str,
        mode: GroupedMode,
        *,
        strict: bool = False,
    ) -> GroupedDesign:
        """
        Parse ``value:frequency`` or ``start-end:frequency`` rows.

        Rows are separated by newlines or commas. With strict=False bad rows
        are kept on row_errors and the remaining rows are used; with
        strict=True the first bad row is raised.

        Raises
        ------
        MalformedRowError
            strict=True and a row does not match the grammar.
        EmptyDataError
            No row could be parsed (carries the collected row errors).
        """
        _check_mode(mode)
        parsed, errors = parse_rows(text, mode)
        if strict and errors:
            raise errors[0]
        if not parsed:
            raise EmptyDataError(
                f"No valid {mode} rows found ({len(errors)} malformed)",
                row_errors=tuple(errors),
            )
        if mode == 'frequency':
            items = tuple(FrequencyDatum(value, freq) for value, freq in parsed)
        else:
            items = tuple(IntervalDatum(start, end, freq) for start, end, freq in parsed)
        return cls._build(items, mode, row_errors=tuple(errors))

    @classmethod
    def _build(
        cls,
        items: tuple[GroupedDatum, ...],
        mode: GroupedMode,
        row_errors: tuple[MalformedRowError, ...] = (),
    ) -> GroupedDesign:
        if not items:
            raise EmptyDataError("Grouped data needs at least one row")
        return cls(_items=items, _mode=mode, _row_errors=row_errors)

    @property
    def items(self) -> tuple[GroupedDatum, ...]:
        return self._items

    @property
    def mode(self) -> GroupedMode:
        return self._mode

    @property
    def row_errors(self) -> tuple[MalformedRowError, ...]:
        """Rows skipped by a non-strict text parse."""
        return self._row_errors

    @property
    def representatives(self) -> NDArray[np.floating[Any]]:
        """Value (frequency mode) or midpoint (interval mode) per row."""
        return np.array([d.representative for d in self._items], dtype=np.float64)

    @property
    def frequencies(self) -> NDArray[np.int64]:
        return np.array([d.frequency for d in self._items], dtype=np.int64)

    @property
    def total_frequency(self) -> int:
        return int(sum(d.frequency for d in self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        skipped = f", skipped={len(self._row_errors)}" if self._row_errors else ""
        return (
            f"GroupedDesign(mode={self._mode!r}, rows={len(self._items)}, "
            f"total={self.total_frequency}{skipped})"
        )


def _check_mode(mode: str) -> None:
    if mode not in ('frequency', 'intervals'):
        raise ValidationError(
            f"mode: must be 'frequency' or 'intervals', got {mode!r}"
        )


def _finite_1d(values: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    array = check_array(values, name)
    check_1d(array, name)
    if not np.all(np.isfinite(array)):
        raise ValidationError(f"{name}: contains non-finite or non-numeric values")
    return array
