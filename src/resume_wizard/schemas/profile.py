from enum import StrEnum
from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel

MAX_PROJECTS = 5
MAX_ACHIEVEMENTS = 5
MAX_EXTRA_CURRICULAR = 5

_http_url = TypeAdapter(HttpUrl)


def _check_url(value: str) -> str:
    # Validate, but keep the user's spelling of the URL.
    try:
        _http_url.validate_python(value)
    except ValidationError as e:
        raise ValueError("Invalid URL") from e
    return value


NonEmptyStr = Annotated[str, Field(min_length=1)]
UrlStr = Annotated[str, AfterValidator(_check_url)]


class Gender(StrEnum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class TemplateName(StrEnum):
    MODERN = "modern"
    CREATIVE = "creative"
    CLASSIC = "classic"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Education(_CamelModel):
    institution: NonEmptyStr
    degree: NonEmptyStr
    field: str | None = None
    year: NonEmptyStr
    gpa: str | None = None
    coursework: str | None = None
    honors: str | None = None


class TechnicalSkill(_CamelModel):
    name: NonEmptyStr
    level: str = ""


class Project(_CamelModel):
    title: NonEmptyStr
    description: NonEmptyStr
    technologies: str | None = None
    challenges: str | None = None
    results: str | None = None


class ResumeProfile(_CamelModel):
    """The canonical record collected by the wizard."""

    full_name: NonEmptyStr
    email: EmailStr
    phone_number: NonEmptyStr
    father_name: NonEmptyStr
    date_of_birth: NonEmptyStr
    gender: Gender
    address: str | None = None
    languages: list[NonEmptyStr] = Field(..., min_length=1)
    highest_qualification: NonEmptyStr
    education: list[Education] = Field(..., min_length=1)
    technical_skills: list[TechnicalSkill] = Field(..., min_length=1)
    other_skills: list[str] = []
    projects: list[Project] = Field(..., min_length=1, max_length=MAX_PROJECTS)
    achievements: list[NonEmptyStr] = Field(default_factory=list, max_length=MAX_ACHIEVEMENTS)
    extra_curricular: list[NonEmptyStr] = Field(
        default_factory=list, max_length=MAX_EXTRA_CURRICULAR
    )
    career_objective: NonEmptyStr
    portfolio: UrlStr | None = None
    linkedin: UrlStr | None = None
    github: UrlStr | None = None
    template: TemplateName = TemplateName.MODERN

    @field_validator("address", "portfolio", "linkedin", "github", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value
