"""API test fixtures — FastAPI test client over ASGI.

Invariants:
    - No network: httpx talks to the app in-process via ASGITransport
    - Settings cache cleared around each test so env overrides apply

Design Decisions:
    - Lifespan not entered: the baseline table is lazily built on first use,
      so routes work without startup hooks
"""

import pytest
from httpx import ASGITransport, AsyncClient

from esm_target.config import get_settings
from esm_target.main import app


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
async def client():
    """FastAPI test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
