"""
Fortune messages.

Flavor text keyed by tier, plus the daily fortune: one deterministic
tier per (address, calendar day), classified through the same bucket
table as minting.
"""

from datetime import date
from types import MappingProxyType

from pixelcaster.engine.classifier import RARITY_MODULUS, classify_roll
from pixelcaster.engine.hasher import hash_address
from pixelcaster.engine.mixing import FORTUNE_STREAM, combine
from pixelcaster.models.artwork import FortuneReading
from pixelcaster.models.tier import RarityTier

FORTUNE_MESSAGES: MappingProxyType[RarityTier, tuple[str, ...]] = MappingProxyType(
    {
        RarityTier.COMMON: (
            "Every journey begins with a step!",
            "Small pixels build great pictures.",
            "Today is a good day to start something.",
        ),
        RarityTier.UNCOMMON: (
            "Good fortune blows in the wind!",
            "Something a little special is coming your way.",
            "Luck is warming up.",
        ),
        RarityTier.SILVER: (
            "A shimmering path lies ahead!",
            "Silver linings are easy to find today.",
            "You stand out from the crowd.",
        ),
        RarityTier.GOLD: (
            "Golden rays of opportunity await you!",
            "Fortune favors you. Seize the moment.",
            "A rare glow surrounds your every move.",
        ),
        RarityTier.PLATINUM: (
            "The stars align in your favor today!",
            "One in ten thousand. The universe noticed you.",
            "Legends are minted on days like this.",
        ),
    }
)

# Mint bonus chance granted by a daily fortune, in percent
FORTUNE_BONUS_PERCENT: MappingProxyType[RarityTier, int] = MappingProxyType(
    {
        RarityTier.COMMON: 0,
        RarityTier.UNCOMMON: 1,
        RarityTier.SILVER: 1,
        RarityTier.GOLD: 3,
        RarityTier.PLATINUM: 5,
    }
)


def message_for(tier: RarityTier, seed: int | None = None) -> str:
    """
    Pick a fortune message for a tier.

    Without a seed the first (canonical) message is returned; with a
    seed the pick rotates through the tier's pool.
    """
    messages = FORTUNE_MESSAGES[tier]
    if seed is None:
        return messages[0]
    return messages[seed % len(messages)]


def daily_fortune(address: str, day: date) -> FortuneReading:
    """
    Draw the fortune for an address on a given day.

    Args:
        address: Wallet address (validated by the address hasher)
        day: Calendar day of the draw

    Returns:
        FortuneReading, identical for every draw on the same day

    Raises:
        InvalidIdentifierError: If the address is malformed
    """
    roll = combine(FORTUNE_STREAM, hash_address(address), day.toordinal()) % RARITY_MODULUS
    tier = classify_roll(roll)
    return FortuneReading(
        tier=tier,
        message=message_for(tier, day.toordinal()),
        bonus_percent=FORTUNE_BONUS_PERCENT[tier],
        day=day,
    )
