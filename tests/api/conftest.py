"""API test fixtures — FastAPI app over an in-process httpx client.

Invariants:
    - Every test gets a fresh AsyncClient bound to the ASGI app
    - App exceptions are turned into responses, not re-raised into the test
"""

import pytest
from httpx import ASGITransport, AsyncClient

from object_tasks.main import app


@pytest.fixture
async def client():
    """FastAPI test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
