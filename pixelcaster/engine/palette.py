"""
Palette generation.

COMMON, UNCOMMON and SILVER palettes are derived from the seed: the hue
steps around the color wheel by a fixed constant, the secondary hue sits
opposite it, and saturation/lightness rise with the tier.

GOLD and PLATINUM ignore the seed and use fixed palettes. Their primary
colors (#F59E0B and #E5E7EB) are relied on by every renderer and by
existing marketplace listings.
"""

from pixelcaster.models.artwork import ColorSet
from pixelcaster.models.tier import RarityTier

HUE_STEP = 137

GOLD_PRIMARY = "#F59E0B"
PLATINUM_PRIMARY = "#E5E7EB"

FIXED_PALETTES: dict[RarityTier, ColorSet] = {
    RarityTier.GOLD: ColorSet(
        primary=f"linear-gradient(135deg, {GOLD_PRIMARY}, #D97706)",
        secondary=f"linear-gradient(135deg, #FCD34D, {GOLD_PRIMARY})",
        accent="#FEF3C7",
        background_gradient="linear-gradient(135deg, #FFFBEB 0%, #FEF3C7 50%, #FDE68A 100%)",
    ),
    RarityTier.PLATINUM: ColorSet(
        primary=f"linear-gradient(135deg, {PLATINUM_PRIMARY}, #9CA3AF)",
        secondary="linear-gradient(135deg, #D1D5DB, #6B7280)",
        accent="#FFFFFF",
        background_gradient="linear-gradient(135deg, #F9FAFB 0%, #E5E7EB 50%, #D1D5DB 100%)",
    ),
}

# Saturation boost for seed-derived tiers; lightness rises by half of it
_RARITY_BOOST: dict[RarityTier, int] = {
    RarityTier.COMMON: 0,
    RarityTier.UNCOMMON: 10,
    RarityTier.SILVER: 20,
}

# (exclusive upper hue, family name)
_HUE_FAMILIES: tuple[tuple[int, str], ...] = (
    (20, "Crimson"),
    (50, "Amber"),
    (90, "Lime"),
    (160, "Emerald"),
    (200, "Cyan"),
    (250, "Azure"),
    (290, "Violet"),
    (340, "Magenta"),
    (360, "Crimson"),
)


def _hsl(hue: int, saturation: int, lightness: int) -> str:
    return f"hsl({hue}, {saturation}%, {lightness}%)"


def base_hue(seed: int) -> int:
    """Primary hue in degrees for a seed-derived palette."""
    return (seed * HUE_STEP) % 360


def generate_palette(seed: int, tier: RarityTier) -> ColorSet:
    """
    Generate the palette for a seed and tier.

    Args:
        seed: Artifact seed
        tier: Rarity tier

    Returns:
        ColorSet of CSS color strings
    """
    fixed = FIXED_PALETTES.get(tier)
    if fixed is not None:
        return fixed

    boost = _RARITY_BOOST[tier]
    hue = base_hue(seed)
    opposite = (hue + 180) % 360
    saturation = min(60 + (seed % 20) * 2 + boost, 100)
    lightness = 55 + boost // 2

    return ColorSet(
        primary=_hsl(hue, saturation, lightness),
        secondary=_hsl(opposite, saturation, lightness - 10),
        accent=_hsl((hue + 60) % 360, min(saturation + 20, 100), min(lightness + 15, 80)),
        background_gradient=(
            f"linear-gradient(135deg, {_hsl(hue, saturation, 98)} 0%, "
            f"{_hsl(opposite, saturation, 96)} 100%)"
        ),
    )


def color_scheme_label(seed: int, tier: RarityTier) -> str:
    """Human-readable name for the palette, used as an NFT trait."""
    if tier in FIXED_PALETTES:
        return tier.display_name
    hue = base_hue(seed)
    for upper, family in _HUE_FAMILIES:
        if hue < upper:
            return family
    return _HUE_FAMILIES[-1][1]
