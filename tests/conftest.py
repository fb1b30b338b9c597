from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from resume_wizard.api.deps import get_llm_client
from resume_wizard.main import create_app
from resume_wizard.schemas.profile import ResumeProfile

JANE_REPLY = "# Jane Doe\njane@x.com | 555-1234\n**Objective**\nRewritten text\n"

FULL_REPLY = """# Jane Doe

jane@x.com | 555-1234

**Career Objective**
Seeking a backend engineering role where I can apply Python and distributed systems skills.

**Education**
- State University, BSc Computer Science, 2024

**Technical Skills**
- Python (Advanced)
- FastAPI (Intermediate)
- Communication

**Projects**
- Resume Wizard: A multi-step resume builder
  Technologies: Python, FastAPI
  Challenges: Parsing free-form model output
  Results: Cut resume writing time by 50%
- Chat Bot: Support assistant for a campus library
  Technologies: Node.js

**Achievements**
- Won the university hackathon
- Dean's list for 4 semesters

**Extra Curricular**
• Captain of the chess club
• Volunteer tutor
"""


def _make_gemini_response(text: str | None) -> MagicMock:
    """Create a mock Gemini generate_content response with one candidate."""
    part = MagicMock()
    part.text = text

    candidate = MagicMock()
    candidate.content.parts = [part]

    response = MagicMock()
    response.candidates = [candidate]
    response.text = text
    return response


def make_profile_payload(**overrides) -> dict:
    """Helper to create a valid wizard payload using the form's camelCase keys."""
    data = {
        "fullName": "Jane Doe",
        "email": "jane@x.com",
        "phoneNumber": "555-1234",
        "fatherName": "John Doe",
        "dateOfBirth": "1999-04-01",
        "gender": "female",
        "languages": ["English", "Spanish"],
        "highestQualification": "Bachelor's degree",
        "education": [
            {
                "institution": "State University",
                "degree": "BSc",
                "field": "Computer Science",
                "year": "2024",
            }
        ],
        "technicalSkills": [{"name": "Python", "level": "Advanced"}],
        "otherSkills": [],
        "projects": [
            {
                "title": "Resume Wizard",
                "description": "A multi-step resume builder",
            }
        ],
        "achievements": [],
        "extraCurricular": [],
        "careerObjective": "Build reliable backend systems",
        "template": "modern",
    }
    data.update(overrides)
    return data


def make_profile(**overrides) -> ResumeProfile:
    return ResumeProfile.model_validate(make_profile_payload(**overrides))


@pytest.fixture
def profile() -> ResumeProfile:
    return make_profile()


@pytest.fixture
def mock_gemini_client() -> MagicMock:
    """Return a mocked google.genai.Client answering with the Jane Doe reply."""
    client = MagicMock()
    client.aio.models.generate_content = AsyncMock(return_value=_make_gemini_response(JANE_REPLY))
    return client


@pytest.fixture
def app(mock_gemini_client) -> FastAPI:
    app = create_app()
    app.dependency_overrides[get_llm_client] = lambda: mock_gemini_client
    return app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test", follow_redirects=True
    ) as ac:
        yield ac
