from typing import Any

from fastapi import Body, Request
from fastapi.exceptions import RequestValidationError
from google import genai
from pydantic import ValidationError

from resume_wizard.core.exceptions import AIServiceError, ServiceError
from resume_wizard.core.llm import get_gemini_client
from resume_wizard.rendering.registry import TemplateRegistry, get_template_registry
from resume_wizard.schemas.profile import ResumeProfile
from resume_wizard.services.pipeline import GenerationGuard
from resume_wizard.services.wizard import load_profile

__all__ = [
    "get_generation_guard",
    "get_llm_client",
    "get_profile",
    "get_registry",
]


def get_llm_client() -> genai.Client:
    try:
        return get_gemini_client()
    except ServiceError as e:
        raise AIServiceError(str(e)) from e


def get_generation_guard(request: Request) -> GenerationGuard:
    return request.app.state.generation_guard


def get_registry() -> TemplateRegistry:
    return get_template_registry()


def get_profile(payload: dict[str, Any] = Body(...)) -> ResumeProfile:
    """Strip blank wizard rows, then validate; errors come back as a 422 per field."""
    try:
        return load_profile(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False)) from e
