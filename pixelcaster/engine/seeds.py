"""
Seed sources.

A seed is either derived from an identifier (deterministic) or drawn
fresh from OS entropy for "surprise me" mints.
"""

import secrets

from pixelcaster.engine.hasher import MAX_ID_DIGITS, hash_address, hash_fid
from pixelcaster.models.artwork import SeedOrigin, SeedResolution
from pixelcaster.models.failure import InvalidIdentifierError, MissingIdentifierError

# Random seeds and gallery seeds live in [0, SEED_SPACE)
SEED_SPACE = 1_000_000

# Gallery seed weight per token ID
_TOKEN_SEED_MULTIPLIER = 9999


def random_seed() -> int:
    """Return a fresh seed in [0, 999999]. Not reproducible."""
    return secrets.randbelow(SEED_SPACE)


def token_seed(token_id: int, owner: str) -> int:
    """
    Seed for a minted token in the gallery.

    Combines the token ID with the owner address so the same token shows
    the same artwork for as long as it has the same owner.
    """
    owner_sum = sum(ord(ch) for ch in owner.lower())
    return (token_id * _TOKEN_SEED_MULTIPLIER + owner_sum) % SEED_SPACE


def _parse_token_id(raw: str) -> int:
    if not (raw.isascii() and raw.isdigit()):
        raise InvalidIdentifierError(raw, "token ID must be a non-negative integer")
    if len(raw) > MAX_ID_DIGITS:
        raise InvalidIdentifierError(raw, "token ID is too long")
    return int(raw)


def resolve_seed(
    *,
    fid: str | None = None,
    address: str | None = None,
    token_id: str | None = None,
    randomize: bool = False,
) -> SeedResolution:
    """
    Pick the seed for a metadata or artwork request.

    Precedence: token_id, then randomize, then fid, then address.

    Args:
        fid: Numeric Farcaster ID
        address: Wallet address
        token_id: Minted token ID; its value is the seed
        randomize: Draw a fresh random seed instead of hashing

    Returns:
        SeedResolution with the seed and its origin

    Raises:
        MissingIdentifierError: If no identifier was given and randomize is False
        InvalidIdentifierError: If the chosen identifier is malformed
    """
    if token_id:
        return SeedResolution(seed=_parse_token_id(token_id), origin=SeedOrigin.TOKEN)
    if randomize:
        return SeedResolution(seed=random_seed(), origin=SeedOrigin.RANDOM)
    if fid:
        return SeedResolution(seed=hash_fid(fid), origin=SeedOrigin.FID)
    if address:
        return SeedResolution(seed=hash_address(address), origin=SeedOrigin.ADDRESS)
    raise MissingIdentifierError()
