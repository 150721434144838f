import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pixelcaster.api import (
    achievements_router,
    fortune_router,
    health_router,
    nft_router,
    tiers_router,
)
from pixelcaster.config import settings, warn_if_default_base_url
from pixelcaster.models.failure import KnownError, create_known_failure, create_unknown_failure

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    warn_if_default_base_url(settings)
    yield


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("pixelcaster"),
    lifespan=lifespan,
)

app.include_router(achievements_router)
app.include_router(fortune_router)
app.include_router(health_router)
app.include_router(nft_router)
app.include_router(tiers_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type"],
)


@app.exception_handler(KnownError)
async def known_error_handler(_request: Request, exc: KnownError) -> JSONResponse:
    """Classified failures keep their status code (400 for bad identifiers)."""
    response = create_known_failure(exc)
    return JSONResponse(status_code=exc.status_code, content=response.model_dump(mode="json"))


@app.exception_handler(Exception)
async def unknown_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything else is an unknown failure, never a bare 500."""
    logger.exception("Unhandled error on %s", request.url.path)
    response = create_unknown_failure(exc)
    return JSONResponse(status_code=500, content=response.model_dump(mode="json"))
