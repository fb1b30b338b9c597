from fastapi import APIRouter

from resume_wizard.api.v1 import health, resumes, wizard

api_v1_router = APIRouter()
api_v1_router.include_router(health.router)
api_v1_router.include_router(wizard.router)
api_v1_router.include_router(resumes.router)
