"""
NFT endpoints.

Serves ERC-721 metadata and renderer-ready artwork for an identifier.
Identifier validation errors propagate as KnownError and are turned
into 400 responses by the application's exception handler.
"""

import logging
from datetime import UTC, datetime
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, Response

from pixelcaster.api.schemas import ArtworkResponse
from pixelcaster.config import Settings, get_settings
from pixelcaster.engine import generate_artifact, resolve_seed
from pixelcaster.services.metadata import build_metadata

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/nft", tags=["nft"])

FidParam = Annotated[str | None, Query(description="Numeric Farcaster ID")]
AddressParam = Annotated[str | None, Query(description="0x-prefixed wallet address")]
TokenIdParam = Annotated[str | None, Query(alias="tokenId", description="Minted token ID")]
RandomParam = Annotated[bool, Query(alias="random", description="Use a fresh random seed")]


@router.get("/metadata")
async def get_metadata(
    response: Response,
    app_settings: Annotated[Settings, Depends(get_settings)],
    fid: FidParam = None,
    address: AddressParam = None,
    token_id: TokenIdParam = None,
    randomize: RandomParam = False,
) -> dict[str, Any]:
    """
    ERC-721 metadata for a FID, wallet address, or token ID.

    Deterministic unless random=true is passed.
    """
    resolution = resolve_seed(fid=fid, address=address, token_id=token_id, randomize=randomize)
    artifact = generate_artifact(resolution.seed)

    logger.info(
        "Generated metadata: source=%s tier=%s serial=%s",
        resolution.origin.value,
        artifact.tier.value,
        artifact.serial,
    )

    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Cache-Control"] = (
        f"public, max-age={app_settings.metadata_cache_seconds}"
        if resolution.is_deterministic
        else "no-store"
    )

    return build_metadata(
        artifact,
        resolution,
        base_url=app_settings.base_url,
        collection_name=app_settings.collection_name,
        token_id=token_id,
        fid=fid,
        address=address,
        generated_at=datetime.now(UTC),
    )


@router.get("/artwork", response_model=ArtworkResponse)
async def get_artwork(
    fid: FidParam = None,
    address: AddressParam = None,
    token_id: TokenIdParam = None,
    randomize: RandomParam = False,
) -> ArtworkResponse:
    """Pixel grid, palette, serial and tier properties for rendering."""
    resolution = resolve_seed(fid=fid, address=address, token_id=token_id, randomize=randomize)
    artifact = generate_artifact(resolution.seed)

    return ArtworkResponse.from_artifact(
        artifact,
        source=resolution.origin.value,
        is_deterministic=resolution.is_deterministic,
    )
