"""
DataSource: tabular input for pydescstats.

DataSource is the "I have a table" abstraction. It keeps every column as
raw cells and decides on request which columns are numeric, so the
engines only ever see clean float arrays.

Usage:
    from pydescstats.core import DataSource

    ds = DataSource.from_file("grades.csv")
    ds = DataSource.from_text("name,score\\nana,7.5\\nbia,8\\n")
    ds = DataSource.from_dataframe(df)

    ds.keys()               # frozenset({'name', 'score'})
    ds.numeric_columns()    # {'score': array([7.5, 8. ])}
    ds.text_columns()       # ('name',)
"""

from __future__ import annotations

import io
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TYPE_CHECKING

import numpy as np
import pandas as pd
from numpy.typing import NDArray

from pydescstats.core.exceptions import ValidationError, EmptyDataError
from pydescstats.core.compute.tolerances import (
    NUMERIC_COLUMN_RATIO,
    NUMERIC_COLUMN_MIN_COUNT,
)

if TYPE_CHECKING:
    from typing import IO

_FORBIDDEN_HEADER_CHARS = re.compile(r'[<>{}\[\]\\|]')
_SEPARATORS = {'.csv': ',', '.tsv': '\t'}


@dataclass
class DataSource:
    """
    Column container for uploaded tables.

    Construct via factory classmethods, not directly. Cells are stored as
    they were read; numeric interpretation happens in numeric_columns().
    """
    _data: dict[str, NDArray[Any]]
    _metadata: dict[str, Any] = field(default_factory=dict)

    # === Column Access ===

    def keys(self) -> frozenset[str]:
        """
        Return the names of all available columns.

        Example:
            >>> ds = DataSource.from_text("a,b\\n1,2\\n")
            >>> ds.keys()
            frozenset({'a', 'b'})
        """
        return frozenset(self._data.keys())

    def __getitem__(self, key: str) -> NDArray[Any]:
        """
        Access the raw cells of a column.

        Raises:
            KeyError: If key not found, with helpful message listing available keys
        """
        if key not in self._data:
            available = self.keys()
            raise KeyError(
                f"DataSource has no column '{key}'. Available: {available}"
            )
        return self._data[key]

    def __contains__(self, key: str) -> bool:
        """Check if a column exists."""
        return key in self._data

    # === Properties ===

    @property
    def n_observations(self) -> int:
        """Number of data rows."""
        return self._metadata.get('n_observations', 0)

    @property
    def columns(self) -> tuple[str, ...]:
        """Column names in file order."""
        return tuple(self._metadata.get('columns', self._data.keys()))

    @property
    def metadata(self) -> dict[str, Any]:
        """Source metadata (row count, columns, skipped lines, path)."""
        return self._metadata.copy()

    # === Column classification ===

    def parsed_column(self, key: str) -> NDArray[np.floating[Any]]:
        """
        Parse a column's cells to floats, NaN where a cell is not a number.

        Text cells are trimmed, a decimal comma becomes a dot and characters
        other than digits, '.' and '-' are stripped before parsing.
        """
        cells = self[key]
        if np.issubdtype(cells.dtype, np.number):
            return cells.astype(np.float64)
        text = (
            pd.Series(cells, dtype=object)
            .astype(str)
            .str.strip()
            .str.replace(',', '.', regex=False)
            .str.replace(r'[^\d.\-]', '', regex=True)
        )
        return pd.to_numeric(text, errors='coerce').to_numpy(dtype=np.float64)

    def numeric_ratio(self, key: str) -> float:
        """Share of the column's cells that parse as finite numbers."""
        parsed = self.parsed_column(key)
        if parsed.size == 0:
            return 0.0
        return float(np.count_nonzero(np.isfinite(parsed)) / parsed.size)

    def numeric_columns(
        self,
        *,
        threshold: float = NUMERIC_COLUMN_RATIO,
        min_count: int = NUMERIC_COLUMN_MIN_COUNT,
    ) -> dict[str, NDArray[np.floating[Any]]]:
        """
        Columns whose cells are mostly numbers, as arrays of their finite values.

        A column qualifies when at least `threshold` of its cells parse as
        finite numbers and at least `min_count` cells do.
        """
        result: dict[str, NDArray[np.floating[Any]]] = {}
        for name in self.columns:
            parsed = self.parsed_column(name)
            finite = parsed[np.isfinite(parsed)]
            if parsed.size == 0:
                continue
            if finite.size / parsed.size >= threshold and finite.size >= min_count:
                result[name] = finite
        return result

    def text_columns(
        self,
        *,
        threshold: float = NUMERIC_COLUMN_RATIO,
        min_count: int = NUMERIC_COLUMN_MIN_COUNT,
    ) -> tuple[str, ...]:
        """Columns that numeric_columns() does not classify as numeric."""
        numeric = self.numeric_columns(threshold=threshold, min_count=min_count)
        return tuple(name for name in self.columns if name not in numeric)

    # === Factory Methods ===

    @classmethod
    def from_file(cls, path: str | Path) -> DataSource:
        """Construct from a delimited text file (CSV, TSV)."""
        path = Path(path)
        suffix = path.suffix.lower()
        if suffix not in _SEPARATORS:
            raise ValidationError(f"Unknown file format: {suffix}")
        with path.open(encoding='utf-8') as handle:
            return cls._read(handle, sep=_SEPARATORS[suffix], source_path=str(path))

    @classmethod
    def from_text(cls, text: str, *, sep: str = ',') -> DataSource:
        """Construct from CSV content held in memory."""
        normalized = text.replace('\r\n', '\n').replace('\r', '\n')
        return cls._read(io.StringIO(normalized), sep=sep)

    @classmethod
    def from_dataframe(
        cls,
        df: pd.DataFrame,
        *,
        source_path: str | None = None,
        n_skipped_lines: int = 0,
    ) -> DataSource:
        """Construct from pandas DataFrame."""
        headers = [str(c) for c in df.columns]
        _check_headers(headers)

        storage: dict[str, NDArray[Any]] = {}
        for name, col in zip(headers, df.columns):
            series = df[col]
            if pd.api.types.is_numeric_dtype(series):
                storage[name] = series.to_numpy(dtype=np.float64)
            else:
                storage[name] = series.to_numpy(dtype=object)

        metadata = {
            'n_observations': len(df),
            'source': 'dataframe',
            'columns': headers,
            'n_skipped_lines': n_skipped_lines,
        }
        if source_path:
            metadata['source_path'] = source_path

        return cls(_data=storage, _metadata=metadata)

    @classmethod
    def build(cls, source: Any, **kwargs) -> DataSource:
        """
        Convenience factory that dispatches to the appropriate from_* method.

        Examples:
            DataSource.build("data.csv")   # from_file
            DataSource.build(df)           # from_dataframe
        """
        if isinstance(source, pd.DataFrame):
            return cls.from_dataframe(source, **kwargs)
        if isinstance(source, Path):
            return cls.from_file(source)
        if isinstance(source, str):
            if '\n' in source:
                return cls.from_text(source, **kwargs)
            return cls.from_file(source)
        raise ValidationError(
            f"Cannot build a DataSource from {type(source).__name__}"
        )

    @classmethod
    def _read(
        cls,
        handle: 'IO[str]',
        *,
        sep: str,
        source_path: str | None = None,
    ) -> DataSource:
        """Tokenize with pandas; rows with a wrong field count are skipped."""
        bad_lines: list[list[str]] = []

        def _skip(fields: list[str]) -> None:
            bad_lines.append(fields)
            return None

        try:
            raw = pd.read_csv(
                handle,
                sep=sep,
                header=None,
                dtype=str,
                keep_default_na=False,
                skipinitialspace=True,
                skip_blank_lines=True,
                engine='python',
                on_bad_lines=_skip,
            )
        except pd.errors.EmptyDataError as e:
            raise EmptyDataError("CSV input is empty") from e

        if len(raw) < 2:
            raise ValidationError(
                "CSV must have a header line and at least one data line, "
                f"got {len(raw)} line(s)"
            )

        headers = [str(h).strip() for h in raw.iloc[0]]
        body = raw.iloc[1:]

        # Short rows come back padded with NaN
        short = body.isna().any(axis=1)
        body = body[~short].reset_index(drop=True)
        n_skipped = len(bad_lines) + int(short.sum())

        if len(body) == 0:
            raise EmptyDataError("CSV has no valid data lines")

        _check_headers(headers)
        body = body.apply(lambda col: col.str.strip())
        body.columns = headers

        return cls.from_dataframe(
            body, source_path=source_path, n_skipped_lines=n_skipped,
        )


def _check_headers(headers: list[str]) -> None:
    """Headers must be non-empty, unique and free of markup characters."""
    if any(not h.strip() for h in headers):
        raise ValidationError("CSV has empty column headers; every column needs a name")
    if len(set(headers)) != len(headers):
        duplicates = sorted({h for h in headers if headers.count(h) > 1})
        raise ValidationError(f"CSV has duplicate column headers: {duplicates}")
    invalid = [h for h in headers if _FORBIDDEN_HEADER_CHARS.search(h)]
    if invalid:
        raise ValidationError(f"CSV headers contain invalid characters: {invalid}")
