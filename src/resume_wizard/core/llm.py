from google import genai

from resume_wizard.core.config import Settings, get_settings
from resume_wizard.core.exceptions import ServiceError


def get_gemini_client(settings: Settings | None = None) -> genai.Client:
    """Create a Gemini API client using the configured API key."""
    settings = settings or get_settings()
    if not settings.google_ai_api_key:
        raise ServiceError("GOOGLE_AI_API_KEY is not configured")
    return genai.Client(api_key=settings.google_ai_api_key)
