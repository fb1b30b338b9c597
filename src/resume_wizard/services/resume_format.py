"""Section vocabulary shared by the prompt builder and the Markdown parser.

The prompt asks the model for bold-labelled sections in ``OUTPUT_SECTIONS``
order, and the parser classifies the labels it finds with ``classify_label``.
Both sides read from this module so the two stay in step.
"""

from enum import StrEnum


class SectionKind(StrEnum):
    OBJECTIVE = "objective"
    EDUCATION = "education"
    TECHNICAL_SKILLS = "technical_skills"
    OTHER_SKILLS = "other_skills"
    PROJECTS = "projects"
    ACHIEVEMENTS = "achievements"
    EXTRA_CURRICULAR = "extra_curricular"
    UNRECOGNIZED = "unrecognized"


# Labels the prompt requests, in output order.
OUTPUT_SECTIONS: tuple[str, ...] = (
    "Career Objective",
    "Education",
    "Technical Skills",
    "Projects",
    "Achievements",
    "Extra Curricular",
)

SECTION_LABELS: dict[str, SectionKind] = {
    "objective": SectionKind.OBJECTIVE,
    "career objective": SectionKind.OBJECTIVE,
    "education": SectionKind.EDUCATION,
    "technical skills": SectionKind.TECHNICAL_SKILLS,
    "other skills": SectionKind.OTHER_SKILLS,
    "projects": SectionKind.PROJECTS,
    "achievements": SectionKind.ACHIEVEMENTS,
    "extra curricular": SectionKind.EXTRA_CURRICULAR,
    "extracurricular": SectionKind.EXTRA_CURRICULAR,
    "extra-curricular": SectionKind.EXTRA_CURRICULAR,
}


def classify_label(label: str) -> SectionKind:
    """Map a bold section label to its kind, case-insensitively."""
    key = label.strip().rstrip(":").strip().lower()
    return SECTION_LABELS.get(key, SectionKind.UNRECOGNIZED)
