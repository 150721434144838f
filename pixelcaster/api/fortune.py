"""
Daily fortune endpoint.

One draw per address per UTC day. Streak tracking lives with the profile
store, not here.
"""

from datetime import UTC, date, datetime
from typing import Annotated

from fastapi import APIRouter, Query
from pydantic import BaseModel

from pixelcaster.engine import daily_fortune, tier_color

router = APIRouter(prefix="/fortune", tags=["fortune"])


class FortuneResponse(BaseModel):
    """A daily fortune reading."""

    address: str
    day: date
    tier: str
    color: str
    message: str
    bonus_percent: int


@router.get("/{address}", response_model=FortuneResponse)
async def get_daily_fortune(
    address: str,
    day: Annotated[date | None, Query(description="Draw date (YYYY-MM-DD), default today UTC")] = None,
) -> FortuneResponse:
    """Today's (or the given day's) fortune for a wallet address."""
    draw_day = day or datetime.now(UTC).date()
    reading = daily_fortune(address, draw_day)
    return FortuneResponse(
        address=address.lower(),
        day=reading.day,
        tier=reading.tier.value,
        color=tier_color(reading.tier),
        message=reading.message,
        bonus_percent=reading.bonus_percent,
    )
