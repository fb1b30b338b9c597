from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from resume_wizard.schemas.generation import FieldError
from resume_wizard.schemas.profile import ResumeProfile


@dataclass(frozen=True)
class WizardStep:
    name: str
    fields: tuple[str, ...]


WIZARD_STEPS: tuple[WizardStep, ...] = (
    WizardStep(
        "Contact",
        (
            "full_name",
            "father_name",
            "career_objective",
            "date_of_birth",
            "gender",
            "languages",
            "email",
            "phone_number",
            "address",
            "linkedin",
            "github",
            "portfolio",
        ),
    ),
    WizardStep("Education", ("highest_qualification", "education")),
    WizardStep("Skills", ("technical_skills", "other_skills")),
    WizardStep("Projects", ("projects",)),
    WizardStep("Achievements", ("achievements",)),
    WizardStep("Extra Curricular", ("extra_curricular",)),
    WizardStep("Review", ()),
)

# Blank rows the form leaves behind are dropped before validation.
_BLANK_FILTERS: dict[str, Callable[[Any], Any]] = {
    "languages": lambda v: isinstance(v, str) and v.strip(),
    "otherSkills": lambda v: isinstance(v, str) and v.strip(),
    "achievements": lambda v: isinstance(v, str) and v.strip(),
    "extraCurricular": lambda v: isinstance(v, str) and v.strip(),
    "technicalSkills": lambda v: isinstance(v, dict) and str(v.get("name") or "").strip(),
    "projects": lambda v: isinstance(v, dict)
    and (str(v.get("title") or "").strip() or str(v.get("description") or "").strip()),
    "education": lambda v: isinstance(v, dict)
    and (str(v.get("institution") or "").strip() or str(v.get("degree") or "").strip()),
}


def get_step(step: str | int) -> WizardStep | None:
    """Look a step up by index or case-insensitive name."""
    if isinstance(step, int) or str(step).isdigit():
        index = int(step)
        return WIZARD_STEPS[index] if 0 <= index < len(WIZARD_STEPS) else None
    wanted = str(step).strip().lower().replace("-", " ").replace("_", " ")
    for candidate in WIZARD_STEPS:
        if candidate.name.lower() == wanted:
            return candidate
    return None


def step_index(step: WizardStep) -> int:
    return WIZARD_STEPS.index(step)


def next_step(index: int) -> int:
    return min(index + 1, len(WIZARD_STEPS) - 1)


def previous_step(index: int) -> int:
    return max(index - 1, 0)


def clean_profile_payload(payload: dict[str, Any]) -> dict[str, Any]:
    """Drop blank list entries, accepting camelCase or snake_case keys."""
    cleaned = dict(payload)
    for alias, keep in _BLANK_FILTERS.items():
        for key in {alias, _to_snake(alias)}:
            value = cleaned.get(key)
            if isinstance(value, list):
                cleaned[key] = [item for item in value if keep(item)]
    return cleaned


def _to_snake(alias: str) -> str:
    return "".join(f"_{c.lower()}" if c.isupper() else c for c in alias)


def load_profile(payload: dict[str, Any]) -> ResumeProfile:
    """Clean and validate a raw wizard payload; raises pydantic.ValidationError."""
    return ResumeProfile.model_validate(clean_profile_payload(payload))


def _field_name(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc)


def _step_aliases(step: WizardStep) -> set[str]:
    aliases = set(step.fields)
    for name in step.fields:
        alias = ResumeProfile.model_fields[name].alias
        if alias:
            aliases.add(alias)
    return aliases


def validate_step(step: WizardStep, payload: dict[str, Any]) -> list[FieldError]:
    """Validate the fields owned by ``step``; other steps' errors are ignored."""
    try:
        load_profile(payload)
    except ValidationError as e:
        owned = _step_aliases(step)
        return [
            FieldError(field=_field_name(err["loc"]), message=err["msg"])
            for err in e.errors()
            if err["loc"] and err["loc"][0] in owned
        ]
    return []
