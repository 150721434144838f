"""Tests for NFT metadata and artwork endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from pixelcaster.config import Settings, get_settings
from pixelcaster.engine import generate_artifact, hash_address
from pixelcaster.main import app

TEST_BASE_URL = "https://pixels.example"


@pytest.fixture
async def client():
    """Provide an async test client with fixed settings."""

    def override_get_settings() -> Settings:
        return Settings(_env_file=None, base_url=TEST_BASE_URL, metadata_cache_seconds=120)

    app.dependency_overrides[get_settings] = override_get_settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


class TestMetadataEndpoint:
    async def test_fid_metadata(self, client: AsyncClient) -> None:
        """FID requests return deterministic ERC-721 metadata."""
        response = await client.get("/nft/metadata", params={"fid": "12345"})

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "PixelCaster AI #12346"
        assert data["rarity"] == generate_artifact(12345).tier.value
        assert data["image"] == f"{TEST_BASE_URL}/api/nft-image?fid=12345"
        assert "generated_at" in data

    async def test_deterministic_headers(self, client: AsyncClient) -> None:
        """Deterministic metadata is cacheable and open to any origin."""
        response = await client.get("/nft/metadata", params={"fid": "12345"})

        assert response.headers["cache-control"] == "public, max-age=120"
        assert response.headers["access-control-allow-origin"] == "*"

    async def test_random_not_cached(self, client: AsyncClient) -> None:
        """Random metadata must not be cached."""
        response = await client.get("/nft/metadata", params={"random": "true"})

        assert response.status_code == 200
        assert response.headers["cache-control"] == "no-store"
        assert response.json()["randomness"]["is_deterministic"] is False

    async def test_address_metadata(self, client: AsyncClient, sample_address: str) -> None:
        """Address requests use the address hash as the seed."""
        response = await client.get("/nft/metadata", params={"address": sample_address})

        assert response.status_code == 200
        data = response.json()
        assert data["randomness"]["seed"] == hash_address(sample_address)
        assert data["created_by"] == sample_address

    async def test_token_metadata(self, client: AsyncClient) -> None:
        """Token requests are named after the token ID."""
        response = await client.get("/nft/metadata", params={"tokenId": "42"})

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "PixelCaster AI #42"
        assert data["external_url"] == f"{TEST_BASE_URL}/nft/42"

    async def test_missing_identifier_is_known_failure(self, client: AsyncClient) -> None:
        """No identifier returns a classified 400."""
        response = await client.get("/nft/metadata")

        assert response.status_code == 400
        data = response.json()
        assert data["outcome"] == "known_failure"
        assert data["failure"]["kind"] == "missing_required"

    async def test_malformed_address_is_known_failure(self, client: AsyncClient) -> None:
        """A malformed address returns 400, never a random artifact."""
        response = await client.get("/nft/metadata", params={"address": "0xnothex"})

        assert response.status_code == 400
        data = response.json()
        assert data["outcome"] == "known_failure"
        assert data["failure"]["kind"] == "invalid_input"
        assert "hex" in data["failure"]["message"]

    @pytest.mark.parametrize("param", ["fid", "tokenId"])
    async def test_overlong_id_is_known_failure(self, client: AsyncClient, param: str) -> None:
        """Thousands of digits are rejected as input, not a server error."""
        response = await client.get("/nft/metadata", params={param: "9" * 5000})

        assert response.status_code == 400
        data = response.json()
        assert data["outcome"] == "known_failure"
        assert data["failure"]["kind"] == "invalid_input"
        assert "too long" in data["failure"]["message"]

    async def test_malformed_fid_is_known_failure(self, client: AsyncClient) -> None:
        """A non-numeric FID returns 400."""
        response = await client.get("/nft/metadata", params={"fid": "abc"})

        assert response.status_code == 400
        assert response.json()["failure"]["kind"] == "invalid_input"


class TestArtworkEndpoint:
    async def test_artwork_payload(self, client: AsyncClient) -> None:
        """Artwork carries everything a renderer needs."""
        response = await client.get("/nft/artwork", params={"fid": "12345"})

        assert response.status_code == 200
        data = response.json()
        artifact = generate_artifact(12345)
        assert data["seed"] == 12345
        assert data["source"] == "fid"
        assert data["is_deterministic"] is True
        assert data["tier"] == artifact.tier.value
        assert data["serial"] == "#12346/20000"
        assert data["grid_size"] == len(artifact.pattern)
        assert data["pattern"] == [list(row) for row in artifact.pattern]
        assert data["palette"]["primary"] == artifact.palette.primary
        assert data["properties"]["color"] == artifact.properties.color
        assert data["message"] == artifact.message

    async def test_artwork_is_stable(self, client: AsyncClient) -> None:
        """Two requests for the same FID return the same artwork."""
        first = await client.get("/nft/artwork", params={"fid": "777"})
        second = await client.get("/nft/artwork", params={"fid": "777"})

        assert first.json() == second.json()

    async def test_artwork_requires_identifier(self, client: AsyncClient) -> None:
        """Missing identifier is a 400."""
        response = await client.get("/nft/artwork")

        assert response.status_code == 400
