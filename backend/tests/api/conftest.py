"""API test fixtures — FastAPI app served through httpx's ASGI transport.

Invariants:
    - Every test gets a fresh AsyncClient bound to the module-level app
    - No network: requests go straight into the ASGI app
"""

import pytest
from httpx import ASGITransport, AsyncClient

from contextkit.main import app


@pytest.fixture
async def client():
    """FastAPI test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
