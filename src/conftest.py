import contextlib

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.main import app


@pytest.fixture
def client_factory():
    """
    Build a test client with dependency overrides applied for its lifetime.

    Usage:
        async with client_factory({get_guest_read_model: lambda: read_model}) as client:
            ...
    """

    @contextlib.asynccontextmanager
    async def factory(overrides: dict | None = None):
        app.dependency_overrides.update(overrides or {})
        try:
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as ac:
                yield ac
        finally:
            app.dependency_overrides.clear()

    return factory


@pytest_asyncio.fixture
async def client(client_factory):
    """Create a test client without overrides."""
    async with client_factory() as ac:
        yield ac
