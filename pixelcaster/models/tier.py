from dataclasses import dataclass
from enum import Enum


class RarityTier(str, Enum):
    """
    The five rarity tiers, declared from most to least common.

    Values equal the names so tiers serialize as "GOLD", "PLATINUM", etc.
    """

    COMMON = "COMMON"
    UNCOMMON = "UNCOMMON"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"

    @property
    def rank(self) -> int:
        """Position in ascending rarity (COMMON is 0, PLATINUM is 4)."""
        return TIER_ORDER.index(self)

    @property
    def display_name(self) -> str:
        """Capitalized form used in NFT traits ("Gold", not "GOLD")."""
        return self.value.capitalize()


TIER_ORDER: tuple[RarityTier, ...] = (
    RarityTier.COMMON,
    RarityTier.UNCOMMON,
    RarityTier.SILVER,
    RarityTier.GOLD,
    RarityTier.PLATINUM,
)


@dataclass(frozen=True, slots=True)
class TierProperties:
    """
    Static visual and metadata properties of a tier.

    Attributes:
        tier: The tier these properties describe
        name: Upper-case tier name (e.g., "GOLD")
        display_name: Capitalized name (e.g., "Gold")
        color: Six-digit hex color including the leading '#'
        rate: Declared drop rate in percent
        glow_intensity: Glow strength, strictly increasing with rarity
        border_width: Frame border width in pixels
        has_sparkles: Whether renderers draw sparkles (GOLD and PLATINUM)
        has_halo: Whether renderers draw a halo (PLATINUM only)
        description: NFT metadata description
        icon: Badge icon shown next to the tier name
    """

    tier: RarityTier
    name: str
    display_name: str
    color: str
    rate: float
    glow_intensity: float
    border_width: int
    has_sparkles: bool
    has_halo: bool
    description: str
    icon: str
