"""Dice notation parser and roll engine.

Supports the notation ``[count]d<sides>``: ``d20``, ``2d6``, ``10d50``.
The count defaults to 1 when omitted; both numbers must be positive and fit
in an unsigned 32-bit integer.
"""

from __future__ import annotations

import logging
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dicebag.random_source import RandomSource

logger = logging.getLogger(__name__)

SEPARATOR = "d"
MAX_VALUE = 2**32 - 1
_MAX_DIGITS = len(str(MAX_VALUE))


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class DiceError(ValueError):
    """Raised when a dice notation is invalid.

    Attributes:
        token: The literal text that failed to parse.
        kind: Stable machine-readable name of the failure, set by each subclass.
    """

    kind: ClassVar[str]

    def __init__(self, token: str, message: str) -> None:
        super().__init__(message)
        self.token = token


class MissingSeparatorError(DiceError):
    kind = "missing_separator"


class InvalidCountError(DiceError):
    kind = "invalid_count"


class InvalidSidesError(DiceError):
    kind = "invalid_sides"


class DiceOverflowError(DiceError):
    kind = "overflow"


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class DiceSpec(BaseModel):
    """A validated ``count`` x ``sides`` dice group."""

    model_config = ConfigDict(frozen=True)

    count: int = Field(ge=1, le=MAX_VALUE)
    sides: int = Field(ge=1, le=MAX_VALUE)

    def __str__(self) -> str:
        return format_notation(self)


class RollSet(BaseModel):
    """Outcomes of rolling one DiceSpec, in draw order."""

    model_config = ConfigDict(frozen=True)

    spec: DiceSpec
    outcomes: tuple[int, ...]

    @model_validator(mode="after")
    def _check_outcomes(self) -> RollSet:
        if len(self.outcomes) != self.spec.count:
            raise ValueError(
                f"Expected {self.spec.count} outcomes for {self.spec}, got {len(self.outcomes)}"
            )
        for outcome in self.outcomes:
            if not 1 <= outcome <= self.spec.sides:
                raise ValueError(f"Outcome {outcome} outside [1, {self.spec.sides}]")
        return self


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def _to_number(text: str) -> int | None:
    """Return text as an int if it is a non-empty run of ASCII digits.

    Digit runs too long to be in range come back as ``MAX_VALUE + 1`` without
    being converted.
    """
    if not text or not (text.isascii() and text.isdigit()):
        return None
    digits = text.lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        return MAX_VALUE + 1
    return int(digits)


def parse(
    notation: str,
    *,
    accept_uppercase: bool = False,
    strip_whitespace: bool = False,
) -> DiceSpec:
    """Parse dice notation into a DiceSpec.

    Args:
        notation: Dice notation string, e.g. "2d6" or "d20".
        accept_uppercase: Also accept "D" as the separator.
        strip_whitespace: Ignore leading and trailing whitespace.

    Returns:
        The parsed DiceSpec.

    Raises:
        MissingSeparatorError: If there is no "d" in the notation.
        InvalidCountError: If the count is present but not a positive integer.
        InvalidSidesError: If the sides are missing or not a positive integer.
        DiceOverflowError: If either number exceeds the 32-bit unsigned range.
    """
    text = notation.strip() if strip_whitespace else notation
    if accept_uppercase:
        text = text.lower()

    count_text, separator, sides_text = text.partition(SEPARATOR)
    if not separator:
        raise MissingSeparatorError(notation, f"Missing 'd' separator in {notation!r}")

    if count_text:
        count = _to_number(count_text)
        if count is None or count == 0:
            raise InvalidCountError(
                notation, f"Invalid dice count {count_text!r} in {notation!r}"
            )
    else:
        count = 1

    sides = _to_number(sides_text)
    if sides is None or sides == 0:
        if not sides_text:
            raise InvalidSidesError(notation, f"Missing dice sides in {notation!r}")
        raise InvalidSidesError(notation, f"Invalid dice sides {sides_text!r} in {notation!r}")

    if count > MAX_VALUE:
        raise DiceOverflowError(notation, f"Too many dice in {notation!r} (max {MAX_VALUE})")
    if sides > MAX_VALUE:
        raise DiceOverflowError(notation, f"Too many sides in {notation!r} (max {MAX_VALUE})")

    return DiceSpec(count=count, sides=sides)


def format_notation(spec: DiceSpec) -> str:
    """Return the canonical ``<count>d<sides>`` form, e.g. ``1d6`` for ``d6``."""
    return f"{spec.count}{SEPARATOR}{spec.sides}"


# ---------------------------------------------------------------------------
# Rolling
# ---------------------------------------------------------------------------


def roll(spec: DiceSpec, rng: RandomSource) -> RollSet:
    """Roll every die in spec.

    Args:
        spec: The dice to roll.
        rng: Source of uniform draws; called once per die, in order.

    Returns:
        RollSet with one outcome per die, first draw first.
    """
    outcomes = tuple(rng.randint(1, spec.sides) for _ in range(spec.count))
    logger.debug("Rolled %s: %s", spec, outcomes)
    return RollSet(spec=spec, outcomes=outcomes)
