"""
Line grammar for grouped-data text.

    frequency rows:  value ':' count          e.g. 5:3, 2.5:4, -1:2
    interval rows:   start ('-' | '|') end ':' count   e.g. 10-20:5, 10|20:5

Rows are separated by newlines or commas. count is a positive integer;
interval bounds are unsigned decimals with start < end.
"""

from __future__ import annotations

import re

from pydescstats.core.exceptions import MalformedRowError

_NUMBER = r'\d+(?:\.\d+)?'
_FREQUENCY_ROW = re.compile(rf'^(-?{_NUMBER})\s*:\s*(\d+)$')
_INTERVAL_ROW = re.compile(rf'^({_NUMBER})\s*[|-]\s*({_NUMBER})\s*:\s*(\d+)$')
_ROW_SEPARATORS = re.compile(r'[,\n]')

_USAGE = {
    'frequency': 'use value:frequency (e.g. 5:3)',
    'intervals': 'use start-end:frequency (e.g. 10-20:5)',
}


def split_rows(text: str) -> list[str]:
    """Non-empty, stripped rows of the input."""
    normalized = text.replace('\r\n', '\n').replace('\r', '\n')
    return [row.strip() for row in _ROW_SEPARATORS.split(normalized) if row.strip()]


def _row_error(number: int, row: str, reason: str) -> MalformedRowError:
    return MalformedRowError(
        f"Line {number}: {reason}: {row!r}",
        line_number=number,
        line=row,
        reason=reason,
    )


def parse_rows(
    text: str,
    mode: str,
) -> tuple[list[tuple], list[MalformedRowError]]:
    """
    Parse every row, collecting failures instead of stopping at the first.

    Returns
    -------
    rows : list of tuple
        (value, frequency) or (start, end, frequency) per valid row.
    errors : list of MalformedRowError
        One per invalid row, numbered from 1 in input order.
    """
    rows: list[tuple] = []
    errors: list[MalformedRowError] = []

    for number, row in enumerate(split_rows(text), start=1):
        if mode == 'frequency':
            match = _FREQUENCY_ROW.match(row)
            if not match:
                errors.append(_row_error(number, row, f"invalid format, {_USAGE[mode]}"))
                continue
            value, frequency = float(match.group(1)), int(match.group(2))
            if frequency < 1:
                errors.append(_row_error(number, row, "frequency must be a positive integer"))
                continue
            rows.append((value, frequency))
        else:
            match = _INTERVAL_ROW.match(row)
            if not match:
                errors.append(_row_error(number, row, f"invalid format, {_USAGE[mode]}"))
                continue
            start, end = float(match.group(1)), float(match.group(2))
            frequency = int(match.group(3))
            if start >= end:
                errors.append(_row_error(
                    number, row, "lower bound must be less than upper bound",
                ))
                continue
            if frequency < 1:
                errors.append(_row_error(number, row, "frequency must be a positive integer"))
                continue
            rows.append((start, end, frequency))

    return rows, errors
