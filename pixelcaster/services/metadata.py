"""
ERC-721 metadata.

Turns an artifact into the JSON document marketplaces fetch from the
token URI. URLs point back at this service so the image can be rebuilt
from the same identifier.
"""

from datetime import datetime
from typing import Any
from urllib.parse import urlencode

from pixelcaster.engine.attributes import attributes_to_dicts
from pixelcaster.engine.serial import serial_number
from pixelcaster.models.artwork import NftArtifact, SeedResolution

COLLECTION_FAMILY_SUFFIX = "Collection"
GENERATOR_NAME = "PixelCaster AI Generator v1.0"
RANDOMNESS_ALGORITHM = "murmur3-fmix32 integer mixing"


def _query_for(token_id: str | None, fid: str | None, address: str | None) -> dict[str, str]:
    if token_id:
        return {"tokenId": token_id}
    if fid:
        return {"fid": fid}
    if address:
        return {"address": address}
    return {}


def token_name(collection_name: str, artifact: NftArtifact, token_id: str | None = None) -> str:
    """Display name: the token ID if minted, otherwise the padded serial number."""
    number = token_id or f"{serial_number(artifact.seed):05d}"
    return f"{collection_name} #{number}"


def build_metadata(
    artifact: NftArtifact,
    resolution: SeedResolution,
    *,
    base_url: str,
    collection_name: str,
    token_id: str | None = None,
    fid: str | None = None,
    address: str | None = None,
    generated_at: datetime | None = None,
) -> dict[str, Any]:
    """
    Build ERC-721 compliant metadata.

    Args:
        artifact: Generated artifact
        resolution: How the seed was obtained
        base_url: Public origin of this service
        collection_name: Collection display name
        token_id: Minted token ID, if any
        fid: Farcaster ID the seed came from, if any
        address: Wallet address the seed came from (also the creator)
        generated_at: Timestamp to stamp on the document; omitted when None

    Returns:
        JSON-serializable metadata dict
    """
    base = base_url.rstrip("/")
    query = urlencode(_query_for(token_id, fid, address))
    image_url = f"{base}/api/nft-image?{query}" if query else f"{base}/api/nft-image"
    if token_id:
        external_url = f"{base}/nft/{token_id}"
    else:
        external_url = f"{base}?{urlencode({'fid': fid or '', 'address': address or ''})}"

    background = artifact.properties.color.removeprefix("#")
    attributes = attributes_to_dicts(artifact.attributes)

    metadata: dict[str, Any] = {
        "name": token_name(collection_name, artifact, token_id),
        "description": artifact.properties.description,
        "image": image_url,
        "image_url": image_url,
        "external_url": external_url,
        "animation_url": None,
        "background_color": background,
        "attributes": attributes,
        "collection": {
            "name": collection_name,
            "family": f"{collection_name} {COLLECTION_FAMILY_SUFFIX}",
        },
        "dna": format(artifact.seed, "x"),
        "serial": artifact.serial,
        "rarity": artifact.tier.value,
        "compiler": GENERATOR_NAME,
        "randomness": {
            "algorithm": RANDOMNESS_ALGORITHM,
            "seed": artifact.seed,
            "source": resolution.origin.value,
            "is_deterministic": resolution.is_deterministic,
        },
        "created_by": address or "unknown",
    }
    if generated_at is not None:
        metadata["generated_at"] = generated_at.isoformat()
    return metadata
