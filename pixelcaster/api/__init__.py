from pixelcaster.api.achievements import router as achievements_router
from pixelcaster.api.fortune import router as fortune_router
from pixelcaster.api.health import router as health_router
from pixelcaster.api.nft import router as nft_router
from pixelcaster.api.tiers import router as tiers_router

__all__ = [
    "achievements_router",
    "fortune_router",
    "health_router",
    "nft_router",
    "tiers_router",
]
