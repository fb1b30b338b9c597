from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from resume_wizard.schemas.parsed_sections import ParsedAISections
from resume_wizard.schemas.profile import ResumeProfile


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PromptResponse(BaseModel):
    prompt: str


class GenerationResponse(_CamelModel):
    markdown: str
    sections: ParsedAISections
    profile: ResumeProfile


class ParseRequest(BaseModel):
    markdown: str


class MergeRequest(BaseModel):
    profile: ResumeProfile
    sections: ParsedAISections = Field(default_factory=ParsedAISections)


class ExportRequest(BaseModel):
    profile: ResumeProfile
    markdown: str | None = None


class FieldError(BaseModel):
    field: str
    message: str


class StepValidationResponse(BaseModel):
    step: str
    valid: bool
    errors: list[FieldError] = []
    next_step: int
    previous_step: int


class WizardStepRead(BaseModel):
    index: int
    name: str
    fields: list[str]
