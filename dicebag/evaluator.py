"""Per-token evaluation: parse, roll, then optionally aggregate.

Each token is handled on its own. A token that fails to parse is reported in
its own :class:`TokenResult` and never stops the remaining tokens.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from dicebag.aggregate import AggregateKind, aggregate, parse_aggregate
from dicebag.dice import DiceError, RollSet, parse, roll
from dicebag.random_source import RandomSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenResult:
    """Outcome of evaluating one token.

    Exactly one of ``roll_set`` and ``error`` is set. ``aggregate`` is only
    set for a successful roll when an aggregate was requested.
    """

    token: str
    roll_set: RollSet | None = None
    error: DiceError | None = None
    aggregate: int | float | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def evaluate(
    tokens: Iterable[str],
    aggregate_kind: AggregateKind | None,
    rng: RandomSource,
    *,
    accept_uppercase: bool = False,
    strip_whitespace: bool = False,
) -> list[TokenResult]:
    """Evaluate each token in order.

    Args:
        tokens: Dice notation strings.
        aggregate_kind: Aggregate applied to every successful roll, or None.
        rng: Random source shared by all tokens, drawn once per die.
        accept_uppercase: Passed through to :func:`dicebag.dice.parse`.
        strip_whitespace: Passed through to :func:`dicebag.dice.parse`.

    Returns:
        One TokenResult per token, in input order.
    """
    results: list[TokenResult] = []
    for token in tokens:
        try:
            spec = parse(
                token,
                accept_uppercase=accept_uppercase,
                strip_whitespace=strip_whitespace,
            )
        except DiceError as exc:
            logger.warning("Rejected dice token %r: %s", token, exc)
            results.append(TokenResult(token=token, error=exc))
            continue

        roll_set = roll(spec, rng)
        value = None
        if aggregate_kind is not None:
            value = aggregate(aggregate_kind, roll_set.outcomes)
        results.append(TokenResult(token=token, roll_set=roll_set, aggregate=value))

    logger.info(
        "Evaluated %d tokens (%d failed)",
        len(results),
        sum(1 for r in results if not r.ok),
    )
    return results


def evaluate_run(
    tokens: Iterable[str],
    aggregate_name: str | None,
    rng: RandomSource,
    *,
    accept_uppercase: bool = False,
    strip_whitespace: bool = False,
) -> list[TokenResult]:
    """Validate the aggregate name, then evaluate tokens.

    Raises:
        UnknownAggregateError: If aggregate_name is not recognised. Raised
            before any die is rolled.
    """
    kind = parse_aggregate(aggregate_name)
    return evaluate(
        tokens,
        kind,
        rng,
        accept_uppercase=accept_uppercase,
        strip_whitespace=strip_whitespace,
    )


def exit_status(results: Iterable[TokenResult]) -> int:
    """Return 0 when every token succeeded, 1 otherwise."""
    return 0 if all(r.ok for r in results) else 1
