"""
Burn-to-upgrade rules.

Burning two tokens of a tier gives a chance at one token of the next
tier. The roll itself comes from the caller; this module only decides
what a roll means.

INVARIANT: PLATINUM has no upgrade. Asking for one is a known failure.
"""

from dataclasses import dataclass

from pixelcaster.models.failure import FailureKind, KnownError
from pixelcaster.models.tier import RarityTier

ROLL_RANGE = 100


@dataclass(frozen=True, slots=True)
class BurnRule:
    """Upgrade path for one tier."""

    source: RarityTier
    target: RarityTier
    cost: int  # tokens burned
    chance: int  # percent


@dataclass(frozen=True, slots=True)
class BurnOutcome:
    """Result of one upgrade attempt."""

    rule: BurnRule
    roll: int
    upgraded: bool

    @property
    def resulting_tier(self) -> RarityTier:
        return self.rule.target if self.upgraded else self.rule.source


BURN_RULES: tuple[BurnRule, ...] = (
    BurnRule(RarityTier.COMMON, RarityTier.UNCOMMON, cost=2, chance=25),
    BurnRule(RarityTier.UNCOMMON, RarityTier.SILVER, cost=2, chance=15),
    BurnRule(RarityTier.SILVER, RarityTier.GOLD, cost=2, chance=10),
    BurnRule(RarityTier.GOLD, RarityTier.PLATINUM, cost=2, chance=5),
)

_RULES_BY_SOURCE = {rule.source: rule for rule in BURN_RULES}


class UpgradeNotAvailableError(KnownError):
    """Raised when a tier has no upgrade path."""

    def __init__(self, tier: RarityTier):
        self.tier = tier
        super().__init__(
            kind=FailureKind.INVALID_INPUT,
            message=f"Cannot upgrade {tier.value} NFTs. You've reached the maximum tier!",
            status_code=400,
        )


def burn_rule_for(tier: RarityTier) -> BurnRule | None:
    """Upgrade rule for a tier, or None for the top tier."""
    return _RULES_BY_SOURCE.get(tier)


def evaluate_burn(tier: RarityTier, roll: int) -> BurnOutcome:
    """
    Decide an upgrade attempt.

    Args:
        tier: Tier of the tokens being burned
        roll: Integer in [0, ROLL_RANGE); reduced into range if outside

    Returns:
        BurnOutcome; upgraded when roll < chance

    Raises:
        UpgradeNotAvailableError: If the tier has no upgrade path
    """
    rule = burn_rule_for(tier)
    if rule is None:
        raise UpgradeNotAvailableError(tier)
    roll = roll % ROLL_RANGE
    return BurnOutcome(rule=rule, roll=roll, upgraded=roll < rule.chance)
