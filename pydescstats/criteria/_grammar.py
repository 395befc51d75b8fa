"""
Grammar for comparison criteria.

    criterion  := comparison ( AND comparison )*
    comparison := op number
    op         := '<' | '<=' | '>' | '>=' | '=' | '=='

'≤' and '≥' are accepted for '<=' and '>='; AND is case-insensitive.
Examples: "< 25", ">= 20 AND < 30", "= 7".
"""

from __future__ import annotations

import operator
import re
from dataclasses import dataclass
from typing import Any, Callable
import numpy as np
from numpy.typing import NDArray

from pydescstats.core.exceptions import MalformedCriterionError

_OPERATORS: dict[str, Callable[[Any, Any], Any]] = {
    '<=': operator.le,
    '>=': operator.ge,
    '==': operator.eq,
    '<': operator.lt,
    '>': operator.gt,
    '=': operator.eq,
}

_TOKEN = re.compile(
    r'\s*(?:'
    r'(?P<op><=|>=|==|<|>|=)'
    r'|(?P<number>[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)'
    r'|(?P<and>(?i:and)\b)'
    r')'
)


@dataclass(frozen=True)
class Comparison:
    """value <op> threshold."""
    op: str
    threshold: float

    def matches(self, values: NDArray[np.floating[Any]]) -> NDArray[np.bool_]:
        return _OPERATORS[self.op](values, self.threshold)

    def __str__(self) -> str:
        return f"{self.op} {self.threshold:g}"


@dataclass(frozen=True)
class Criterion:
    """A conjunction of comparisons."""
    text: str
    comparisons: tuple[Comparison, ...]

    def matches(self, values: NDArray[np.floating[Any]]) -> NDArray[np.bool_]:
        """Element-wise: True where every comparison holds."""
        values = np.asarray(values, dtype=np.float64)
        mask = np.ones(values.shape, dtype=bool)
        for comparison in self.comparisons:
            mask &= comparison.matches(values)
        return mask

    def describe(self) -> str:
        return "values " + " and ".join(str(c) for c in self.comparisons)


def _tokenize(text: str) -> list[tuple[str, str]]:
    tokens: list[tuple[str, str]] = []
    pos = 0
    stripped = text.rstrip()
    while pos < len(stripped):
        match = _TOKEN.match(stripped, pos)
        if match is None:
            raise MalformedCriterionError(
                f"Criterion {text!r}: unexpected input at position {pos}: "
                f"{stripped[pos:].strip()!r}",
                criterion=text,
                reason=f"unexpected input at position {pos}",
            )
        kind = match.lastgroup
        tokens.append((kind, match.group(kind)))
        pos = match.end()
    return tokens


def parse_criterion(text: str) -> Criterion:
    """
    Parse a criterion string.

    Raises
    ------
    MalformedCriterionError
        Empty input, unknown characters, or tokens out of grammar order.
    """
    normalized = text.replace('≤', '<=').replace('≥', '>=')
    tokens = _tokenize(normalized)
    if not tokens:
        raise MalformedCriterionError(
            "Criterion is empty", criterion=text, reason="empty criterion",
        )

    comparisons: list[Comparison] = []
    i = 0
    while True:
        if i >= len(tokens) or tokens[i][0] != 'op':
            found = tokens[i][1] if i < len(tokens) else 'end of input'
            raise MalformedCriterionError(
                f"Criterion {text!r}: expected a comparison operator, found {found!r}",
                criterion=text,
                reason="expected operator",
            )
        if i + 1 >= len(tokens):
            raise MalformedCriterionError(
                f"Criterion {text!r}: operator {tokens[i][1]!r} has no threshold",
                criterion=text,
                reason="missing threshold",
            )
        if tokens[i + 1][0] != 'number':
            raise MalformedCriterionError(
                f"Criterion {text!r}: expected a number after {tokens[i][1]!r}, "
                f"found {tokens[i + 1][1]!r}",
                criterion=text,
                reason="expected number",
            )
        comparisons.append(Comparison(op=tokens[i][1], threshold=float(tokens[i + 1][1])))
        i += 2

        if i == len(tokens):
            break
        if tokens[i][0] != 'and':
            raise MalformedCriterionError(
                f"Criterion {text!r}: expected AND, found {tokens[i][1]!r}",
                criterion=text,
                reason="expected AND",
            )
        i += 1

    return Criterion(text=text.strip(), comparisons=tuple(comparisons))
