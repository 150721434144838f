"""
Pixel pattern generation.

Each cell is the low bit of combine(seed, row, col). Rarer tiers get a
larger grid.
"""

from pixelcaster.engine.mixing import PATTERN_STREAM, combine
from pixelcaster.models.artwork import PixelGrid
from pixelcaster.models.tier import RarityTier

GRID_SIZES: dict[RarityTier, int] = {
    RarityTier.COMMON: 12,
    RarityTier.UNCOMMON: 12,
    RarityTier.SILVER: 12,
    RarityTier.GOLD: 14,
    RarityTier.PLATINUM: 16,
}


def grid_size(tier: RarityTier) -> int:
    """Side length of the grid for a tier."""
    return GRID_SIZES[tier]


def generate_pattern(seed: int, tier: RarityTier) -> PixelGrid:
    """
    Generate the pixel grid for a seed and tier.

    Args:
        seed: Artifact seed (any int)
        tier: Rarity tier, which fixes the grid size

    Returns:
        Square grid of booleans; True means the pixel is lit
    """
    size = GRID_SIZES[tier]
    return tuple(
        tuple((combine(PATTERN_STREAM, seed, row, col) & 1) == 1 for col in range(size))
        for row in range(size)
    )


def pattern_density(grid: PixelGrid) -> int:
    """Percentage of lit pixels, rounded to the nearest integer."""
    total = sum(len(row) for row in grid)
    if total == 0:
        return 0
    lit = sum(sum(row) for row in grid)
    return round(100 * lit / total)
