"""
Rarity classification.

Maps a seed to one of five tiers using integer bucket boundaries over a
working modulus of 1,000,000:

    [0, 800_000)         COMMON     80%
    [800_000, 950_000)   UNCOMMON   15%
    [950_000, 990_000)   SILVER      4%
    [990_000, 999_900)   GOLD        0.99%
    [999_900, 1_000_000) PLATINUM    0.01%

This is the only bucket table in the codebase. Minting, gallery, daily
fortune and burn upgrades all classify through it.
"""

from bisect import bisect_right

from pixelcaster.engine.mixing import RARITY_STREAM, combine
from pixelcaster.models.tier import RarityTier

RARITY_MODULUS = 1_000_000

# (upper bound exclusive, tier), ascending
RARITY_BUCKETS: tuple[tuple[int, RarityTier], ...] = (
    (800_000, RarityTier.COMMON),
    (950_000, RarityTier.UNCOMMON),
    (990_000, RarityTier.SILVER),
    (999_900, RarityTier.GOLD),
    (1_000_000, RarityTier.PLATINUM),
)

_UPPER_BOUNDS = tuple(bound for bound, _ in RARITY_BUCKETS)


def classify_roll(roll: int) -> RarityTier:
    """
    Look up the tier for a roll.

    Rolls outside [0, RARITY_MODULUS) are reduced first, so this never raises.
    """
    index = bisect_right(_UPPER_BOUNDS, roll % RARITY_MODULUS)
    return RARITY_BUCKETS[index][1]


def rarity_roll(seed: int) -> int:
    """
    Disperse a seed into [0, RARITY_MODULUS).

    The seed is reduced into the working modulus, then mixed, so that
    consecutive seeds land in unrelated buckets.
    """
    reduced = seed % RARITY_MODULUS
    return combine(RARITY_STREAM, reduced) % RARITY_MODULUS


def classify_rarity(seed: int) -> RarityTier:
    """Classify any integer seed. Pure and total."""
    return classify_roll(rarity_roll(seed))
