from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: Literal["healthy", "degraded"]
    gemini: Literal["configured", "missing_api_key"]
    model: str
    templates: list[str]
    version: str


class StatusResponse(BaseModel):
    status: str
