"""
Achievement endpoints.

Counts arrive as query parameters; this service keeps no mint history, so
the caller (the mini app, backed by its profile store) supplies them.
"""

import logging
from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel

from pixelcaster.engine import (
    ACHIEVEMENTS,
    AchievementId,
    CollectorStats,
    achievement_progress,
    check_achievements,
    rarity_bonus,
)
from pixelcaster.engine.achievements import ACHIEVEMENT_RANK_COLORS, Achievement, AchievementProgress

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/achievements", tags=["achievements"])


class AchievementResponse(BaseModel):
    """One achievement definition."""

    id: str
    name: str
    description: str
    icon: str
    rank: str
    color: str
    requirement: str
    reward_type: str | None = None
    reward_value: int | str | None = None

    @classmethod
    def from_achievement(cls, achievement: Achievement) -> "AchievementResponse":
        reward = achievement.reward
        return cls(
            id=achievement.id.value,
            name=achievement.name,
            description=achievement.description,
            icon=achievement.icon,
            rank=achievement.rank.value,
            color=ACHIEVEMENT_RANK_COLORS[achievement.rank],
            requirement=achievement.requirement,
            reward_type=reward.type.value if reward else None,
            reward_value=reward.value if reward else None,
        )


class ProgressResponse(BaseModel):
    """Progress toward one achievement."""

    id: str
    current: int
    target: int
    percentage: float
    unlocked: bool

    @classmethod
    def from_progress(cls, progress: AchievementProgress) -> "ProgressResponse":
        return cls(
            id=progress.achievement_id.value,
            current=progress.current,
            target=progress.target,
            percentage=progress.percentage,
            unlocked=progress.unlocked,
        )


class AchievementCheckResponse(BaseModel):
    """Unlocked achievements, their combined bonus, and progress on all of them."""

    unlocked: list[str]
    rarity_bonus: int
    progress: list[ProgressResponse]


def collector_stats(
    total_mints: Annotated[int | None, Query(alias="totalMints", ge=0)] = None,
    platinum_count: Annotated[int, Query(alias="platinumCount", ge=0)] = 0,
    gold_count: Annotated[int, Query(alias="goldCount", ge=0)] = 0,
    silver_count: Annotated[int, Query(alias="silverCount", ge=0)] = 0,
    uncommon_count: Annotated[int, Query(alias="uncommonCount", ge=0)] = 0,
    common_count: Annotated[int, Query(alias="commonCount", ge=0)] = 0,
    referral_count: Annotated[int, Query(alias="referralCount", ge=0)] = 0,
    first_minted_at: Annotated[datetime | None, Query(alias="mintedAt")] = None,
    launched_at: Annotated[datetime | None, Query(alias="launchedAt")] = None,
) -> CollectorStats:
    """Collector stats from query parameters. totalMints defaults to the sum of tier counts."""
    if total_mints is None:
        total_mints = platinum_count + gold_count + silver_count + uncommon_count + common_count
    return CollectorStats(
        total_mints=total_mints,
        platinum_count=platinum_count,
        gold_count=gold_count,
        silver_count=silver_count,
        uncommon_count=uncommon_count,
        common_count=common_count,
        referral_count=referral_count,
        first_minted_at=first_minted_at,
        launched_at=launched_at,
    )


StatsDep = Annotated[CollectorStats, Depends(collector_stats)]


def _parse_achievement_id(raw: str) -> AchievementId:
    try:
        return AchievementId(raw.lower())
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown achievement '{raw}'",
        ) from e


@router.get("", response_model=list[AchievementResponse])
async def list_achievements() -> list[AchievementResponse]:
    """All achievements in display order."""
    return [AchievementResponse.from_achievement(a) for a in ACHIEVEMENTS.values()]


@router.get("/check", response_model=AchievementCheckResponse)
async def check(stats: StatsDep) -> AchievementCheckResponse:
    """Evaluate every achievement against the given counts."""
    unlocked = check_achievements(stats)
    bonus = rarity_bonus(unlocked)

    logger.info("Achievement check: unlocked=%d bonus=%d%%", len(unlocked), bonus)

    return AchievementCheckResponse(
        unlocked=[achievement_id.value for achievement_id in unlocked],
        rarity_bonus=bonus,
        progress=[
            ProgressResponse.from_progress(achievement_progress(achievement_id, stats))
            for achievement_id in ACHIEVEMENTS
        ],
    )


@router.get("/{achievement_id}/progress", response_model=ProgressResponse)
async def get_progress(achievement_id: str, stats: StatsDep) -> ProgressResponse:
    """Progress toward one achievement. Unknown IDs return 404."""
    parsed = _parse_achievement_id(achievement_id)
    return ProgressResponse.from_progress(achievement_progress(parsed, stats))
