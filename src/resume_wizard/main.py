import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from resume_wizard.api.v1.router import api_v1_router
from resume_wizard.core.config import get_settings
from resume_wizard.services.pipeline import GenerationGuard

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Startup
    settings = get_settings()
    if not settings.google_ai_api_key:
        logger.warning("GOOGLE_AI_API_KEY is not set; resume generation will fail")
    yield
    # Shutdown


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.generation_guard = GenerationGuard()
    app.include_router(api_v1_router, prefix="/api/v1")
    return app
