"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.api.main import app

ORG_ID = "org-test"


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client.

    The ASGI transport does not run the lifespan, so no migrations or pool
    are started; tests override the use case dependencies they hit.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def org_headers() -> dict[str, str]:
    """Request identity headers."""
    return {"X-Organization-Id": ORG_ID, "X-User-Id": "user-1"}


@pytest.fixture(autouse=True)
def clear_dependency_overrides():
    """Drop any dependency overrides a test left behind."""
    yield
    app.dependency_overrides.clear()
