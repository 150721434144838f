"""
Health check endpoint.

The engine has no external dependencies, so liveness is all there is.
"""

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness probe. Returns healthy if the service is running."""
    return HealthResponse(status="healthy")
