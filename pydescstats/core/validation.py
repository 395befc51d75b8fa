"""
Input validation utilities for pydescstats.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. The one deliberate exception is
finite filtering: a sample drops NaN/Inf entries and reports how many.

Design principles:
    - No silent type coercion beyond numeric parsing of raw values
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import Any

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike, NDArray

from pydescstats.core.exceptions import (
    ValidationError,
    DimensionError,
    EmptyDataError,
    InsufficientDataError,
    InvalidPercentileError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Convert raw values to a float64 numpy array.

    Numeric input converts directly. Mixed or textual input (object or
    string dtype) is parsed element-wise; entries that are not numbers
    become NaN so that finite filtering can drop them.

    Args:
        array: Input to convert
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of float64

    Raises:
        ValidationError: If input cannot be interpreted as a sequence
    """
    if isinstance(array, (str, bytes)):
        raise ValidationError(
            f"{name}: expected a sequence of values, got {type(array).__name__}"
        )

    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.ndim == 0:
        raise DimensionError(f"{name}: expected a sequence, got a scalar")

    if np.issubdtype(result.dtype, np.number) or result.dtype == bool:
        return result.astype(np.float64)

    # Object, string or bytes dtype: parse each entry, unparseable -> NaN
    flat = pd.to_numeric(pd.Series(result.ravel(), dtype=object), errors='coerce')
    return flat.to_numpy(dtype=np.float64).reshape(result.shape)


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def drop_non_finite(
    array: NDArray[np.floating[Any]],
    name: str,
) -> tuple[NDArray[np.floating[Any]], int]:
    """
    Remove NaN and Inf entries.

    Args:
        array: 1D array to filter
        name: Parameter name for error messages

    Returns:
        (finite values in original order, number of dropped entries)

    Raises:
        EmptyDataError: If no finite values remain
    """
    mask = np.isfinite(array)
    n_dropped = int(array.size - np.count_nonzero(mask))
    clean = array[mask]
    if clean.size == 0:
        raise EmptyDataError(
            f"{name}: no finite numeric values "
            f"({array.size} entries supplied, {n_dropped} dropped)",
            n_dropped=n_dropped,
        )
    return clean, n_dropped


def check_consistent_length(
    *arrays: NDArray[Any],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        InsufficientDataError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise InsufficientDataError(
            f"{name}: requires at least {min_samples} values, got {n}",
            required=min_samples,
            actual=n,
        )


def check_percentiles(percentiles: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate percentiles expressed on the 0-100 scale.

    Returns:
        1D float64 array of percentiles

    Raises:
        InvalidPercentileError: If any percentile is NaN or outside [0, 100]
    """
    p = np.atleast_1d(np.asarray(percentiles, dtype=np.float64))
    check_1d(p, name)
    for value in p:
        if not (0.0 <= value <= 100.0):
            raise InvalidPercentileError(
                f"{name}: percentile must be within [0, 100], got {value}",
                percentile=float(value),
            )
    return p


def check_positive_frequencies(frequencies: NDArray[Any], name: str) -> NDArray[np.int64]:
    """
    Verify frequencies are positive integers.

    Float input is accepted when every entry is integral (e.g. 3.0).

    Returns:
        1D int64 array

    Raises:
        ValidationError: If any frequency is non-integral or < 1
    """
    f = np.asarray(frequencies)
    if not np.issubdtype(f.dtype, np.number):
        raise ValidationError(f"{name}: non-numeric dtype {f.dtype}, expected integers")
    f = f.astype(np.float64)
    bad = ~np.isfinite(f) | (f != np.round(f)) | (f < 1)
    if np.any(bad):
        idx = int(np.argmax(bad))
        raise ValidationError(
            f"{name}: frequencies must be positive integers, got {f[idx]} at position {idx}"
        )
    return f.astype(np.int64)
