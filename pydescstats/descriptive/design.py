"""
SampleDesign: data wrapper for descriptive statistics.

Wraps a single numeric series, drops non-finite entries, and keeps both the
original-order values and an ascending-sorted copy. Both arrays are private
copies marked read-only, so the caller's input is never touched.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydescstats.core.exceptions import EmptyDataError
from pydescstats.core.validation import check_array, check_1d, drop_non_finite

_TOKEN_SEPARATORS = re.compile(r'[,;\s]+')


@dataclass(frozen=True)
class SampleDesign:
    """
    Design for descriptive statistics of one sample.

    Construction:
        SampleDesign.from_array([1, 2, 3])
        SampleDesign.from_text("1, 2, 3")
        SampleDesign.from_datasource(ds, column='score')
    """
    _values: NDArray[np.floating[Any]]
    _sorted: NDArray[np.floating[Any]]
    _n_dropped: int
    _name: str | None

    @classmethod
    def from_array(cls, data: ArrayLike, *, name: str | None = None) -> SampleDesign:
        """
        Build SampleDesign from array-like data.

        Parameters
        ----------
        data : array-like
            1D sequence of raw values. Entries that are NaN, infinite or not
            numbers are dropped; at least one finite value must remain.
        name : str, optional
            Label for reports (e.g. the CSV column name).
        """
        if hasattr(data, 'to_numpy'):
            if name is None and getattr(data, 'name', None) is not None:
                name = str(data.name)
            data = data.to_numpy()
        array = check_array(data, name or 'data')
        check_1d(array, name or 'data')
        return cls._build(array, name=name)

    @classmethod
    def from_text(cls, text: str, *, name: str | None = None) -> SampleDesign:
        """
        Build SampleDesign from typed-in text such as ``"12, 15.5, 9"``.

        Values are separated by commas, semicolons or whitespace. Tokens that
        are not numbers are dropped and counted in n_dropped.
        """
        tokens = [t for t in _TOKEN_SEPARATORS.split(text.strip()) if t]
        if not tokens:
            raise EmptyDataError(f"{name or 'data'}: no values supplied")
        array = check_array(np.array(tokens, dtype=object), name or 'data')
        return cls._build(array, name=name)

    @classmethod
    def from_datasource(cls, source, *, column: str) -> SampleDesign:
        """
        Build SampleDesign from one column of a DataSource.

        Cells that do not parse as numbers are dropped.
        """
        return cls._build(source.parsed_column(column), name=column)

    @classmethod
    def _build(
        cls,
        array: NDArray[np.floating[Any]],
        name: str | None = None,
    ) -> SampleDesign:
        """Internal builder with validation."""
        values, n_dropped = drop_non_finite(array, name or 'data')
        values = values.copy()
        ordered = np.sort(values)
        values.flags.writeable = False
        ordered.flags.writeable = False
        return cls(_values=values, _sorted=ordered, _n_dropped=n_dropped, _name=name)

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Finite values in input order (read-only)."""
        return self._values

    @property
    def sorted(self) -> NDArray[np.floating[Any]]:
        """Finite values in ascending order (read-only)."""
        return self._sorted

    @property
    def n(self) -> int:
        """Number of finite values."""
        return int(self._values.size)

    @property
    def n_dropped(self) -> int:
        """Number of entries dropped as non-finite or non-numeric."""
        return self._n_dropped

    @property
    def name(self) -> str | None:
        return self._name

    def drop_warning(self) -> str | None:
        """Warning text for dropped entries, or None if nothing was dropped."""
        if self._n_dropped == 0:
            return None
        return f"{self._n_dropped} non-finite or non-numeric value(s) ignored"

    def __repr__(self) -> str:
        dropped = f", dropped={self._n_dropped}" if self._n_dropped else ""
        label = f"name={self._name!r}, " if self._name else ""
        return f"SampleDesign({label}n={self.n}{dropped})"
