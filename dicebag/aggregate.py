"""Aggregate functions that reduce a roll set to a single value."""

from __future__ import annotations

import enum
from collections.abc import Sequence


class AggregateKind(str, enum.Enum):
    sum = "sum"
    avg = "avg"
    max = "max"
    min = "min"


AGGREGATE_NAMES: tuple[str, ...] = tuple(kind.value for kind in AggregateKind)


class AggregateError(ValueError):
    """Raised when an aggregate cannot be computed."""


class EmptyInputError(AggregateError):
    """Raised when asked to aggregate no outcomes."""


class UnknownAggregateError(ValueError):
    """Raised when an aggregate name is not one of AGGREGATE_NAMES.

    Attributes:
        name: The rejected aggregate name, as given.
    """

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Unknown aggregate function {name!r} (expected one of: {', '.join(AGGREGATE_NAMES)})"
        )
        self.name = name


def parse_aggregate(name: str | None) -> AggregateKind | None:
    """Map an aggregate name to its AggregateKind.

    Matching is exact and case-sensitive. ``None`` means no aggregation.

    Raises:
        UnknownAggregateError: If name is not a known aggregate.
    """
    if name is None:
        return None
    if name not in AGGREGATE_NAMES:
        raise UnknownAggregateError(name)
    return AggregateKind(name)


def aggregate(kind: AggregateKind, outcomes: Sequence[int]) -> int | float:
    """Reduce outcomes with the given aggregate.

    Args:
        kind: Which aggregate to apply.
        outcomes: Non-empty die outcomes.

    Returns:
        The sum, maximum or minimum as an int; the mean as a float.

    Raises:
        EmptyInputError: If outcomes is empty.
    """
    if not outcomes:
        raise EmptyInputError(f"Cannot compute {kind.value} of no outcomes")
    if kind is AggregateKind.sum:
        return sum(outcomes)
    if kind is AggregateKind.avg:
        return sum(outcomes) / len(outcomes)
    if kind is AggregateKind.max:
        return max(outcomes)
    return min(outcomes)
