from typing import Any

from fastapi import APIRouter, Body

from resume_wizard.core.exceptions import NotFoundError
from resume_wizard.schemas.generation import StepValidationResponse, WizardStepRead
from resume_wizard.services import wizard

router = APIRouter(prefix="/wizard", tags=["wizard"])


@router.get("/steps", response_model=list[WizardStepRead])
async def list_steps() -> list[WizardStepRead]:
    return [
        WizardStepRead(index=i, name=step.name, fields=list(step.fields))
        for i, step in enumerate(wizard.WIZARD_STEPS)
    ]


@router.post("/steps/{step}/validate", response_model=StepValidationResponse)
async def validate_step(
    step: str,
    payload: dict[str, Any] = Body(...),
) -> StepValidationResponse:
    """Validate only the fields the given step collects, as the Next button does."""
    wizard_step = wizard.get_step(step)
    if wizard_step is None:
        raise NotFoundError("Wizard step", step)

    errors = wizard.validate_step(wizard_step, payload)
    index = wizard.step_index(wizard_step)
    return StepValidationResponse(
        step=wizard_step.name,
        valid=not errors,
        errors=errors,
        next_step=index if errors else wizard.next_step(index),
        previous_step=wizard.previous_step(index),
    )
