"""Shared test fixtures for the dicebag test suite.

scripted_rng
    Factory for ScriptedRandomSource instances, for tests that need to know
    exactly which values the dice will show.

async_client  (function scope)
    AsyncClient wired to the FastAPI app via ASGITransport.

override_rng
    Installs a ScriptedRandomSource as the app's get_rng dependency and
    removes the override after the test.

For tests of the pure core (parse, roll, aggregate, evaluate) no fixture is
needed beyond scripted_rng.
"""

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from dicebag.dependencies import get_rng
from dicebag.main import app
from dicebag.random_source import ScriptedRandomSource


@pytest.fixture
def scripted_rng():
    def _make(*draws: int) -> ScriptedRandomSource:
        return ScriptedRandomSource(draws)

    return _make


@pytest.fixture
def override_rng():
    def _install(*draws: int) -> ScriptedRandomSource:
        source = ScriptedRandomSource(draws)
        app.dependency_overrides[get_rng] = lambda: source
        return source

    yield _install

    app.dependency_overrides.pop(get_rng, None)


@pytest_asyncio.fixture
async def async_client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
