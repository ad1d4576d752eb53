"""Test configuration and fixtures.

Unit tests call the engine directly. Integration tests drive the FastAPI
application in-process through httpx's ASGITransport (no server, no lifespan).

Settings are cached with ``lru_cache``; the autouse fixture clears the cache
around every test so tests that monkeypatch ``NUMIFY_*`` variables never leak.
"""
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from numify.config.settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:  # noqa: D401
    from numify.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
