"""Service test fixtures — FastAPI test client.

Invariants:
    - Every test gets a fresh AsyncClient bound to the app over ASGI (no network)
    - Settings cache cleared around each test so env overrides take effect

Design Decisions:
    - ASGITransport over TestClient: async tests, same transport the routes run on
    - No lifespan: logging setup is global and not needed for route assertions
"""

import pytest
from httpx import ASGITransport, AsyncClient

from leaps.config import get_settings
from leaps.main import app


@pytest.fixture
async def client():
    """FastAPI test client."""
    get_settings.cache_clear()
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    get_settings.cache_clear()
