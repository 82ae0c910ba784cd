"""Dice roll routes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from dicebag.aggregate import UnknownAggregateError
from dicebag.config import settings
from dicebag.dependencies import get_rng
from dicebag.evaluator import evaluate_run, exit_status
from dicebag.random_source import RandomSource
from dicebag.schemas import RollResponse, TokenResultOut

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/roll", response_model=RollResponse)
async def roll_dice(
    dice: list[str] = Query(default=[], description='Dice to roll, e.g. "5d6".'),
    aggregate: str | None = Query(default=None, description="One of sum, avg, max, min."),
    rng: RandomSource = Depends(get_rng),
) -> RollResponse:
    try:
        results = evaluate_run(
            dice,
            aggregate,
            rng,
            accept_uppercase=settings.accept_uppercase,
            strip_whitespace=settings.strip_whitespace,
        )
    except UnknownAggregateError as exc:
        logger.info("Rejected roll request with aggregate %r", exc.name)
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return RollResponse(
        aggregate=aggregate,
        ok=exit_status(results) == 0,
        results=[TokenResultOut.from_result(r) for r in results],
    )
