"""Random number providers for the roll engine.

The roll engine never reaches for a global generator. Callers pass a
:class:`RandomSource` explicitly; production code gets one from
:func:`get_random_source`, tests use :class:`ScriptedRandomSource` to replay
known draws.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable
from typing import Protocol

from dicebag.config import settings

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Interface for uniform integer draws."""

    def randint(self, low: int, high: int) -> int:
        """Return a uniformly distributed integer in ``[low, high]``.

        Args:
            low: Smallest value that may be returned.
            high: Largest value that may be returned.
        """
        ...


class RandomSourceExhausted(RuntimeError):
    """Raised when a scripted source is asked for more draws than it holds."""


class SystemRandomSource:
    """Mersenne Twister provider backed by :mod:`random`.

    Args:
        generator: Generator to draw from. Defaults to the module-level
            generator shared by the process.
    """

    def __init__(self, generator: random.Random | None = None) -> None:
        self._generator = generator

    def randint(self, low: int, high: int) -> int:
        if self._generator is None:
            return random.randint(low, high)
        return self._generator.randint(low, high)


class SecureRandomSource:
    """Provider that draws from the operating system's CSPRNG."""

    def __init__(self) -> None:
        self._generator = random.SystemRandom()

    def randint(self, low: int, high: int) -> int:
        return self._generator.randint(low, high)


class ScriptedRandomSource:
    """Replays a fixed sequence of draws, first value first.

    Args:
        draws: Values handed out by successive :meth:`randint` calls.

    Raises:
        RandomSourceExhausted: From :meth:`randint` once every draw is used.
        ValueError: From :meth:`randint` when the next scripted value falls
            outside the requested range.
    """

    def __init__(self, draws: Iterable[int]) -> None:
        self._draws = list(draws)
        self._position = 0
        self.calls: list[tuple[int, int]] = []

    @property
    def remaining(self) -> int:
        return len(self._draws) - self._position

    def randint(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        if self._position >= len(self._draws):
            raise RandomSourceExhausted(
                f"Scripted source exhausted after {len(self._draws)} draws"
            )
        value = self._draws[self._position]
        if not low <= value <= high:
            raise ValueError(f"Scripted draw {value} outside range [{low}, {high}]")
        self._position += 1
        return value


def get_random_source() -> SystemRandomSource | SecureRandomSource:
    """Return the configured random source.

    Returns a :class:`SecureRandomSource` when ``random_source`` is
    ``"secure"``, otherwise a :class:`SystemRandomSource`.
    """
    if settings.random_source == "secure":
        logger.debug("Using OS CSPRNG for dice rolls")
        return SecureRandomSource()
    return SystemRandomSource()
