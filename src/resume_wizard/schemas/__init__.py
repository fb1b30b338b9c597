from resume_wizard.schemas.parsed_sections import ParsedAISections, ParsedProject
from resume_wizard.schemas.profile import (
    Education,
    Gender,
    Project,
    ResumeProfile,
    TechnicalSkill,
    TemplateName,
)

__all__ = [
    "Education",
    "Gender",
    "ParsedAISections",
    "ParsedProject",
    "Project",
    "ResumeProfile",
    "TechnicalSkill",
    "TemplateName",
]
