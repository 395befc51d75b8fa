"""
Exception hierarchy for pydescstats.

All exceptions inherit from DescStatsError to allow catching any
library-specific error. Every input problem is a ValidationError subclass
so callers can catch "bad data" separately from programming errors.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class DescStatsError(Exception):
    """Base exception for all pydescstats errors."""
    pass


class ValidationError(DescStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.

    Raised when a sample is not one-dimensional or when paired arrays
    (values and frequencies) have different lengths.
    """
    pass


class EmptyDataError(ValidationError):
    """
    No usable values remain after filtering.

    Raised when a sample has no finite numeric values, or when a grouped-data
    text contains no parseable rows.

    Attributes:
        n_dropped: Number of entries discarded as non-finite or non-numeric
        row_errors: Per-row parse failures collected before giving up
    """

    def __init__(
        self,
        message: str,
        n_dropped: int = 0,
        row_errors: tuple['MalformedRowError', ...] = (),
    ):
        super().__init__(message)
        self.n_dropped = n_dropped
        self.row_errors = tuple(row_errors)


class InsufficientDataError(ValidationError):
    """
    Too few values for the requested computation.

    Attributes:
        required: Minimum number of values needed
        actual: Number of values supplied
    """

    def __init__(self, message: str, required: int, actual: int):
        super().__init__(message)
        self.required = required
        self.actual = actual


class DegenerateRangeError(ValidationError):
    """
    All values are identical, so the range is zero and cannot be binned.

    Attributes:
        value: The single repeated value
    """

    def __init__(self, message: str, value: float | None = None):
        super().__init__(message)
        self.value = value


class MalformedRowError(ValidationError):
    """
    A single grouped-data line does not match its grammar.

    Attributes:
        line_number: 1-based position of the item in the input
        line: The offending text
        reason: Short description of what is wrong
    """

    def __init__(self, message: str, line_number: int, line: str, reason: str):
        super().__init__(message)
        self.line_number = line_number
        self.line = line
        self.reason = reason


class InvalidPercentileError(ValidationError):
    """
    A requested percentile lies outside [0, 100].

    Attributes:
        percentile: The rejected percentile
    """

    def __init__(self, message: str, percentile: float):
        super().__init__(message)
        self.percentile = percentile


class MalformedCriterionError(ValidationError):
    """
    A comparison criterion such as ``">= 20 AND < 30"`` could not be parsed.

    Attributes:
        criterion: The full criterion text
        reason: Short description of what is wrong
    """

    def __init__(self, message: str, criterion: str, reason: str):
        super().__init__(message)
        self.criterion = criterion
        self.reason = reason
