import logging

import httpx
from google import genai
from google.genai import errors, types

from resume_wizard.core.exceptions import ServiceError

logger = logging.getLogger(__name__)


def _first_candidate_text(response: types.GenerateContentResponse) -> str:
    candidates = response.candidates or []
    if not candidates:
        raise ServiceError("Gemini API returned no candidates")

    content = candidates[0].content
    parts = (content.parts if content else None) or []
    if not parts or parts[0].text is None:
        raise ServiceError("Gemini API returned a candidate without text")
    return parts[0].text


async def generate_content(
    client: genai.Client,
    prompt: str,
    model: str,
    temperature: float | None = None,
) -> str:
    """Send one prompt to Gemini and return the first candidate's text.

    Exactly one round trip is made. Any non-success status or malformed
    response raises ServiceError; nothing is retried.
    """
    config = None
    if temperature is not None:
        config = types.GenerateContentConfig(temperature=temperature)
    try:
        response = await client.aio.models.generate_content(
            model=model,
            contents=prompt,
            config=config,
        )
    except errors.APIError as e:
        description = e.status or str(e.code)
        logger.error("Gemini API error %s: %s", e.code, e.message)
        raise ServiceError(f"Gemini API error: {description}") from e
    except httpx.HTTPError as e:
        logger.error("Gemini API request failed: %s", e)
        raise ServiceError(f"Gemini API request failed: {e}") from e

    return _first_candidate_text(response)
