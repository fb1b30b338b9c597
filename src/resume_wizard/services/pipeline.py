import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from google import genai

from resume_wizard.core.exceptions import ServiceError
from resume_wizard.schemas.parsed_sections import ParsedAISections
from resume_wizard.schemas.profile import ResumeProfile
from resume_wizard.services.completion_client import generate_content
from resume_wizard.services.form_merger import merge_sections
from resume_wizard.services.markdown_parser import parse_markdown
from resume_wizard.services.prompt_builder import build_prompt

logger = logging.getLogger(__name__)


class GenerationBusyError(Exception):
    """Raised when a generation is requested while another is in flight."""


class GenerationGuard:
    """Busy flag allowing a single outstanding generation request."""

    def __init__(self) -> None:
        self.busy = False

    @contextmanager
    def hold(self) -> Iterator[None]:
        if self.busy:
            raise GenerationBusyError("A resume generation is already in progress")
        self.busy = True
        try:
            yield
        finally:
            self.busy = False


@dataclass
class GenerationResult:
    markdown: str
    sections: ParsedAISections
    profile: ResumeProfile


async def enhance_resume(
    client: genai.Client,
    profile: ResumeProfile,
    model: str,
    guard: GenerationGuard,
    temperature: float | None = None,
) -> GenerationResult:
    """Full pipeline: prompt -> Gemini -> parse Markdown -> merge into a new profile.

    The caller's profile is never modified; on ServiceError nothing is merged.
    """
    with guard.hold():
        prompt = build_prompt(profile)
        try:
            markdown = await generate_content(client, prompt, model, temperature=temperature)
        except ServiceError as e:
            logger.error("Resume generation for %s failed: %s", profile.full_name, e)
            raise

    sections = parse_markdown(markdown)
    merged = merge_sections(profile, sections)
    logger.info("Generated resume for %s (%d characters)", profile.full_name, len(markdown))
    return GenerationResult(markdown=markdown, sections=sections, profile=merged)
