import logging

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://farcaster-fixel.vercel.app"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "PixelCaster"
    debug: bool = False

    # Public origin used in image and external URLs inside metadata
    base_url: str = DEFAULT_BASE_URL

    collection_name: str = "PixelCaster AI"

    # Cache-Control max-age for metadata responses
    metadata_cache_seconds: int = 3600


settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency; overridden in tests."""
    return settings


def warn_if_default_base_url(current: Settings) -> bool:
    """
    Log a warning when metadata would point at the fallback origin.

    Returns:
        True if a warning was logged
    """
    if current.base_url == DEFAULT_BASE_URL and not current.debug:
        logger.warning(
            "NFT metadata is using the default BASE_URL (%s). "
            "Set BASE_URL for production use.",
            DEFAULT_BASE_URL,
        )
        return True
    return False
