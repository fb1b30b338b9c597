import logging
import re

from resume_wizard.schemas.parsed_sections import ParsedAISections, ParsedProject
from resume_wizard.schemas.profile import (
    MAX_ACHIEVEMENTS,
    MAX_EXTRA_CURRICULAR,
    MAX_PROJECTS,
    Project,
    ResumeProfile,
    TechnicalSkill,
)

logger = logging.getLogger(__name__)

SKILL_LEVEL_RE = re.compile(r"^(.+?)\s*\(([^)]+)\)")


def split_skill(skill: str) -> TechnicalSkill:
    """Split ``"Python (Advanced)"`` into name and level; plain names get no level."""
    skill = skill.strip()
    match = SKILL_LEVEL_RE.match(skill)
    if match and match.group(1).strip():
        return TechnicalSkill(name=match.group(1).strip(), level=match.group(2).strip())
    return TechnicalSkill(name=skill, level="")


def _non_blank(items: list[str]) -> list[str]:
    return [item.strip() for item in items if item.strip()]


def _to_project(parsed: ParsedProject) -> Project | None:
    if not parsed.title.strip() or not parsed.description.strip():
        return None
    return Project(
        title=parsed.title,
        description=parsed.description,
        technologies=parsed.technologies or None,
        challenges=parsed.challenges or None,
        results=parsed.results or None,
    )


def merge_sections(profile: ResumeProfile, sections: ParsedAISections) -> ResumeProfile:
    """Return a copy of ``profile`` with every parsed section written over it.

    Sections that are missing or empty leave the profile's value in place.
    The name and contact line are not merged.
    """
    update: dict[str, object] = {}

    if sections.objective:
        update["career_objective"] = sections.objective

    if sections.technical_skills:
        skills = [split_skill(s) for s in sections.technical_skills if s.strip()]
        if skills:
            update["technical_skills"] = skills

    # model_copy skips validation, so blank entries are dropped here.
    other_skills = _non_blank(sections.other_skills or [])
    if other_skills:
        update["other_skills"] = other_skills

    if sections.projects:
        projects = [p for p in map(_to_project, sections.projects) if p is not None]
        if projects:
            update["projects"] = projects[:MAX_PROJECTS]

    achievements = _non_blank(sections.achievements or [])
    if achievements:
        update["achievements"] = achievements[:MAX_ACHIEVEMENTS]

    extra_curricular = _non_blank(sections.extra_curricular or [])
    if extra_curricular:
        update["extra_curricular"] = extra_curricular[:MAX_EXTRA_CURRICULAR]

    if update:
        logger.info("Merging generated sections into profile: %s", ", ".join(sorted(update)))
    return profile.model_copy(update=update, deep=True)
