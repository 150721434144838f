"""
Tier catalog.

Static, read-only properties for each rarity tier. Renderers read colors,
glow and border settings from here; metadata reads the description.
"""

from types import MappingProxyType

from pixelcaster.models.tier import TIER_ORDER, RarityTier, TierProperties


def _entry(
    tier: RarityTier,
    color: str,
    rate: float,
    glow_intensity: float,
    border_width: int,
    description: str,
    icon: str,
) -> TierProperties:
    return TierProperties(
        tier=tier,
        name=tier.value,
        display_name=tier.display_name,
        color=color,
        rate=rate,
        glow_intensity=glow_intensity,
        border_width=border_width,
        has_sparkles=tier in (RarityTier.GOLD, RarityTier.PLATINUM),
        has_halo=tier == RarityTier.PLATINUM,
        description=description,
        icon=icon,
    )


CATALOG: MappingProxyType[RarityTier, TierProperties] = MappingProxyType(
    {
        RarityTier.COMMON: _entry(
            RarityTier.COMMON,
            color="#6B7280",
            rate=80,
            glow_intensity=0.2,
            border_width=1,
            description="A Common PixelCaster. Every journey begins with a single pixel.",
            icon="⚫",
        ),
        RarityTier.UNCOMMON: _entry(
            RarityTier.UNCOMMON,
            color="#10B981",
            rate=15,
            glow_intensity=0.3,
            border_width=1,
            description="An Uncommon PixelCaster, found by 15% of minters.",
            icon="🔥",
        ),
        RarityTier.SILVER: _entry(
            RarityTier.SILVER,
            color="#94A3B8",
            rate=4,
            glow_intensity=0.4,
            border_width=2,
            description="A Silver PixelCaster with a shimmering grid. Only 4% of mints.",
            icon="⭐",
        ),
        RarityTier.GOLD: _entry(
            RarityTier.GOLD,
            color="#F59E0B",
            rate=0.99,
            glow_intensity=0.6,
            border_width=3,
            description="A Gold PixelCaster wrapped in sparkles. Fewer than 1 in 100.",
            icon="👑",
        ),
        RarityTier.PLATINUM: _entry(
            RarityTier.PLATINUM,
            color="#E5E7EB",
            rate=0.01,
            glow_intensity=0.8,
            border_width=4,
            description="A Platinum PixelCaster crowned with a halo. 1 in 10,000.",
            icon="💎",
        ),
    }
)


def tier_properties(tier: RarityTier) -> TierProperties:
    """Properties for a tier. An unknown tier raises KeyError."""
    return CATALOG[tier]


def tier_color(tier: RarityTier) -> str:
    """Hex color for a tier, including the leading '#'."""
    return CATALOG[tier].color


def all_tier_properties() -> tuple[TierProperties, ...]:
    """Every tier's properties, most common first."""
    return tuple(CATALOG[tier] for tier in TIER_ORDER)
