"""Tests for the daily fortune endpoint."""

from datetime import UTC, date, datetime

import pytest
from httpx import ASGITransport, AsyncClient

from pixelcaster.engine import daily_fortune, tier_color
from pixelcaster.main import app


@pytest.fixture
async def client():
    """Provide an async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


class TestDailyFortuneEndpoint:
    async def test_given_day(self, client: AsyncClient, sample_address: str) -> None:
        """The endpoint matches the engine's draw for that day."""
        response = await client.get(f"/fortune/{sample_address}", params={"day": "2024-03-01"})

        assert response.status_code == 200
        data = response.json()
        expected = daily_fortune(sample_address, date(2024, 3, 1))
        assert data["day"] == "2024-03-01"
        assert data["tier"] == expected.tier.value
        assert data["message"] == expected.message
        assert data["bonus_percent"] == expected.bonus_percent
        assert data["color"] == tier_color(expected.tier)

    async def test_address_normalized(self, client: AsyncClient, sample_address: str) -> None:
        """Mixed-case addresses draw the same fortune."""
        upper = "0x" + sample_address[2:].upper()
        response = await client.get(f"/fortune/{upper}", params={"day": "2024-03-01"})

        data = response.json()
        assert data["address"] == sample_address
        assert data["tier"] == daily_fortune(sample_address, date(2024, 3, 1)).tier.value

    async def test_defaults_to_today(self, client: AsyncClient, other_address: str) -> None:
        """Without a day the draw is for today (UTC)."""
        before = datetime.now(UTC).date()
        response = await client.get(f"/fortune/{other_address}")
        after = datetime.now(UTC).date()

        assert response.status_code == 200
        assert response.json()["day"] in {before.isoformat(), after.isoformat()}

    async def test_malformed_address(self, client: AsyncClient) -> None:
        """A malformed address is a known failure."""
        response = await client.get("/fortune/0xnothex")

        assert response.status_code == 400
        assert response.json()["failure"]["kind"] == "invalid_input"
