from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ParsedProject(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = ""
    description: str = ""
    technologies: str = ""
    challenges: str = ""
    results: str = ""


class ParsedAISections(BaseModel):
    """Best-effort extraction from the generated Markdown.

    Every field is optional; a section missing from the reply stays None.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    objective: str | None = None
    technical_skills: list[str] | None = None
    other_skills: list[str] | None = None
    projects: list[ParsedProject] | None = None
    achievements: list[str] | None = None
    extra_curricular: list[str] | None = None
