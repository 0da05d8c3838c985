"""API test fixtures: app built by create_app with the stubbed upstream injected.

Invariants:
    - Every test gets a fresh app (no shared state across tests)
    - The injected upstream client is owned by the fixture, not the app lifespan
"""

import pytest
from httpx import ASGITransport, AsyncClient

from jokes_api.main import create_app


@pytest.fixture
def app(settings, upstream_client):
    return create_app(settings, joke_source=upstream_client)


@pytest.fixture
async def client(app):
    """HTTP client talking to the app in-process."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
