from pixelcaster.models.artwork import (
    Attribute,
    ColorSet,
    FortuneReading,
    NftArtifact,
    PixelGrid,
    SeedOrigin,
    SeedResolution,
)
from pixelcaster.models.failure import (
    STANDARD_MESSAGES,
    STANDARD_SUGGESTIONS,
    ApiResponse,
    FailureDetail,
    FailureKind,
    InvalidIdentifierError,
    KnownError,
    MissingIdentifierError,
    OutcomeType,
    create_known_failure,
    create_unknown_failure,
    finalize_response,
)
from pixelcaster.models.tier import TIER_ORDER, RarityTier, TierProperties

__all__ = [
    "ApiResponse",
    "Attribute",
    "ColorSet",
    "FailureDetail",
    "FailureKind",
    "FortuneReading",
    "InvalidIdentifierError",
    "KnownError",
    "MissingIdentifierError",
    "NftArtifact",
    "OutcomeType",
    "PixelGrid",
    "RarityTier",
    "STANDARD_MESSAGES",
    "STANDARD_SUGGESTIONS",
    "SeedOrigin",
    "SeedResolution",
    "TIER_ORDER",
    "TierProperties",
    "create_known_failure",
    "create_unknown_failure",
    "finalize_response",
]
