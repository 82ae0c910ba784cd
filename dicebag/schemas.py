"""Pydantic response models for the HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from dicebag.aggregate import AggregateKind
from dicebag.evaluator import TokenResult


class TokenErrorOut(BaseModel):
    kind: str = Field(description="Machine-readable failure, e.g. 'missing_separator'.")
    message: str


class TokenResultOut(BaseModel):
    token: str = Field(description="The dice notation exactly as submitted.")
    notation: str | None = Field(
        default=None, description="Canonical '<count>d<sides>' form; null on error."
    )
    outcomes: list[int] = Field(
        default_factory=list, description="Per-die outcomes in draw order."
    )
    aggregate: int | float | None = None
    error: TokenErrorOut | None = None

    @classmethod
    def from_result(cls, result: TokenResult) -> TokenResultOut:
        if result.roll_set is None:
            return cls(
                token=result.token,
                error=TokenErrorOut(kind=result.error.kind, message=str(result.error)),
            )
        return cls(
            token=result.token,
            notation=str(result.roll_set.spec),
            outcomes=list(result.roll_set.outcomes),
            aggregate=result.aggregate,
        )


class RollResponse(BaseModel):
    aggregate: AggregateKind | None = None
    ok: bool = Field(description="False when any token failed to parse.")
    results: list[TokenResultOut]
