import logging
from enum import StrEnum
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import HTMLResponse
from google import genai

from resume_wizard.api.deps import (
    get_generation_guard,
    get_llm_client,
    get_profile,
    get_registry,
)
from resume_wizard.core.config import get_settings
from resume_wizard.core.exceptions import (
    AIServiceError,
    ExportError,
    ExportFailedError,
    GenerationInProgressError,
    NotFoundError,
    PreconditionError,
    ServiceError,
    TemplateNotFoundError,
)
from resume_wizard.rendering.registry import TemplateRegistry, TemplateStyle
from resume_wizard.rendering.view import build_view
from resume_wizard.schemas.generation import (
    ExportRequest,
    GenerationResponse,
    MergeRequest,
    ParseRequest,
    PromptResponse,
)
from resume_wizard.schemas.parsed_sections import ParsedAISections
from resume_wizard.schemas.profile import ResumeProfile
from resume_wizard.services import export as export_svc
from resume_wizard.services.form_merger import merge_sections
from resume_wizard.services.markdown_parser import parse_markdown
from resume_wizard.services.pipeline import GenerationBusyError, GenerationGuard, enhance_resume
from resume_wizard.services.prompt_builder import build_prompt

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/resumes", tags=["resumes"])


class ExportFormat(StrEnum):
    TEXT = "text"
    PDF = "pdf"
    DOCX = "docx"


def _content_disposition(filename: str) -> str:
    ascii_name = filename.encode("ascii", "ignore").decode() or "resume"
    return f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(filename)}"


def _resolve_style(
    registry: TemplateRegistry, profile: ResumeProfile, template: str | None
) -> tuple[str, TemplateStyle]:
    name = template or str(profile.template)
    try:
        return name, registry.get_style(name)
    except TemplateNotFoundError as e:
        raise NotFoundError("Template", name) from e


@router.post("/validate", response_model=ResumeProfile)
async def validate_profile(
    profile: ResumeProfile = Depends(get_profile),
) -> ResumeProfile:
    """Full-profile validation; violations come back field by field as a 422."""
    return profile


@router.post("/prompt", response_model=PromptResponse)
async def preview_prompt(
    profile: ResumeProfile = Depends(get_profile),
) -> PromptResponse:
    return PromptResponse(prompt=build_prompt(profile))


@router.post("/generate", response_model=GenerationResponse)
async def generate_resume(
    profile: ResumeProfile = Depends(get_profile),
    llm_client: genai.Client = Depends(get_llm_client),
    guard: GenerationGuard = Depends(get_generation_guard),
) -> GenerationResponse:
    """Enhance the profile with Gemini and return the Markdown plus the merged profile."""
    settings = get_settings()
    try:
        result = await enhance_resume(
            llm_client,
            profile,
            settings.gemini_model,
            guard,
            temperature=settings.gemini_temperature,
        )
    except GenerationBusyError as e:
        raise GenerationInProgressError() from e
    except ServiceError as e:
        raise AIServiceError(str(e)) from e

    return GenerationResponse(
        markdown=result.markdown,
        sections=result.sections,
        profile=result.profile,
    )


@router.post(
    "/parse",
    response_model=ParsedAISections,
    response_model_exclude_none=True,
)
async def parse_generated_markdown(req: ParseRequest) -> ParsedAISections:
    return parse_markdown(req.markdown)


@router.post("/merge", response_model=ResumeProfile)
async def merge_generated_sections(req: MergeRequest) -> ResumeProfile:
    return merge_sections(req.profile, req.sections)


@router.post("/render", response_class=HTMLResponse)
async def render_resume(
    req: ExportRequest,
    template: str | None = Query(None),
    registry: TemplateRegistry = Depends(get_registry),
) -> HTMLResponse:
    name, _ = _resolve_style(registry, req.profile, template)
    html = registry.render(name, build_view(req.profile, req.markdown))
    return HTMLResponse(content=html)


@router.post("/export/{export_format}")
async def export_resume(
    export_format: ExportFormat,
    req: ExportRequest,
    template: str | None = Query(None),
    registry: TemplateRegistry = Depends(get_registry),
) -> Response:
    """Download the resume as plain text (raw Markdown), PDF or Word."""
    if export_format == ExportFormat.TEXT:
        if not req.markdown:
            raise PreconditionError("No generated resume to export. Generate one first.")
        artifact = export_svc.export_text(req.markdown, req.profile.full_name)
    else:
        _, style = _resolve_style(registry, req.profile, template)
        view = build_view(req.profile, req.markdown)
        try:
            if export_format == ExportFormat.PDF:
                artifact = await export_svc.export_pdf_async(
                    view, style, get_settings().pdf_page_size
                )
            else:
                artifact = await export_svc.export_docx_async(view, style)
        except ExportError as e:
            raise ExportFailedError(str(e)) from e

    logger.info("Exported %s as %s", artifact.filename, export_format)
    return Response(
        content=artifact.content,
        media_type=artifact.media_type,
        headers={"Content-Disposition": _content_disposition(artifact.filename)},
    )
