"""Smoke tests for application startup and liveness."""

import pytest
from httpx import ASGITransport, AsyncClient


def test_app_imports() -> None:
    """Verify the app can be imported without errors."""
    from pixelcaster.main import app

    assert app.title == "PixelCaster"


class TestHealthEndpoint:
    @pytest.fixture
    async def client(self):
        from pixelcaster.main import app

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client

    async def test_health_returns_healthy(self, client: AsyncClient) -> None:
        """Liveness probe returns healthy."""
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
