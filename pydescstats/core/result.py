"""
Shared result envelope.

Every engine returns a Result wrapping its own frozen payload
(DescriptiveParams, FrequencyParams, GroupedParams, CriteriaParams). The
user-facing Solution classes read from it.

Design decisions:
    - Generic over the payload type P
    - info holds small per-engine facts (variance kind, class count, skipped rows)
    - timing may be None so payloads can be built by hand in tests
    - Non-fatal problems travel as warning strings, never as log output
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Frozen envelope around one engine's payload.

    Attributes:
        params: Engine payload
        info: Per-engine metadata
        timing: Section timings from core.compute.Timer, or None
        backend_name: e.g. 'cpu_descriptive', 'cpu_grouped'
        warnings: Dropped values, clamped class counts, skipped rows, ...

    Example:
        >>> Result(
        ...     params=FrequencyParams(classes=(...), n=10, ...),
        ...     info={'method': 'sturges', 'n_classes': 5, 'n_dropped': 0},
        ...     timing={'total_seconds': 6e-05, 'binning': 4e-05},
        ...     backend_name='cpu_frequency',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """True if some warning contains `substring`."""
        return any(substring in w for w in self.warnings)
