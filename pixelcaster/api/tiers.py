"""Tier catalog and upgrade rule endpoints."""

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from pixelcaster.api.schemas import TierResponse
from pixelcaster.engine import all_tier_properties, evaluate_burn
from pixelcaster.engine.upgrade import UpgradeNotAvailableError, burn_rule_for
from pixelcaster.models.tier import RarityTier

router = APIRouter(prefix="/tiers", tags=["tiers"])


class UpgradeRuleResponse(BaseModel):
    """Burn-to-upgrade path for one tier."""

    source: str
    target: str
    cost: int
    chance: int


class UpgradeAttemptResponse(BaseModel):
    """Outcome of evaluating a roll against an upgrade rule."""

    source: str
    roll: int
    upgraded: bool
    resulting_tier: str


def _parse_tier(raw: str) -> RarityTier:
    try:
        return RarityTier(raw.upper())
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown tier '{raw}'",
        ) from e


@router.get("", response_model=list[TierResponse])
async def list_tiers() -> list[TierResponse]:
    """All tiers, most common first."""
    return [TierResponse.from_properties(props) for props in all_tier_properties()]


@router.get("/{tier}/upgrade", response_model=UpgradeRuleResponse)
async def get_upgrade_rule(tier: str) -> UpgradeRuleResponse:
    """Upgrade rule for a tier. PLATINUM has none and returns 400."""
    parsed = _parse_tier(tier)
    rule = burn_rule_for(parsed)
    if rule is None:
        raise UpgradeNotAvailableError(parsed)
    return UpgradeRuleResponse(
        source=rule.source.value,
        target=rule.target.value,
        cost=rule.cost,
        chance=rule.chance,
    )


@router.get("/{tier}/upgrade/{roll}", response_model=UpgradeAttemptResponse)
async def evaluate_upgrade(tier: str, roll: int) -> UpgradeAttemptResponse:
    """Decide whether a roll in [0, 100) upgrades the tier."""
    outcome = evaluate_burn(_parse_tier(tier), roll)
    return UpgradeAttemptResponse(
        source=outcome.rule.source.value,
        roll=outcome.roll,
        upgraded=outcome.upgraded,
        resulting_tier=outcome.resulting_tier.value,
    )
