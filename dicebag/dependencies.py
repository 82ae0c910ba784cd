"""FastAPI dependencies for dicebag."""

from __future__ import annotations

from dicebag.random_source import RandomSource, get_random_source


def get_rng() -> RandomSource:
    """Return the random source for a request.

    Tests override this dependency with a ScriptedRandomSource.
    """
    return get_random_source()
