from fastapi import APIRouter, Depends

from resume_wizard.api.deps import get_registry
from resume_wizard.core.config import get_settings
from resume_wizard.rendering.registry import TemplateRegistry
from resume_wizard.schemas.health import HealthResponse, StatusResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    registry: TemplateRegistry = Depends(get_registry),
) -> HealthResponse:
    """Report whether generation can run; rendering and export work without a key."""
    settings = get_settings()
    configured = bool(settings.google_ai_api_key)
    return HealthResponse(
        status="healthy" if configured else "degraded",
        gemini="configured" if configured else "missing_api_key",
        model=settings.gemini_model,
        templates=registry.list_templates(),
        version=settings.app_version,
    )


@router.get("/status", response_model=StatusResponse)
async def liveness() -> StatusResponse:
    return StatusResponse(status="ok")
