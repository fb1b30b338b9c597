"""Unit tests for ResumeProfile validation."""

import pytest
from pydantic import ValidationError

from resume_wizard.schemas.profile import Gender, ResumeProfile, TemplateName
from tests.conftest import make_profile, make_profile_payload


def _error_locs(exc_info: pytest.ExceptionInfo[ValidationError]) -> set[tuple]:
    return {tuple(e["loc"]) for e in exc_info.value.errors()}


@pytest.mark.unit
class TestResumeProfile:
    def test_valid_profile(self) -> None:
        profile = make_profile()
        assert profile.full_name == "Jane Doe"
        assert profile.gender == Gender.FEMALE
        assert profile.template == TemplateName.MODERN
        assert profile.technical_skills[0].level == "Advanced"
        assert profile.education[0].gpa is None

    def test_snake_case_keys_accepted(self) -> None:
        payload = make_profile_payload()
        payload["full_name"] = payload.pop("fullName")
        assert ResumeProfile.model_validate(payload).full_name == "Jane Doe"

    def test_dump_by_alias_uses_camel_case(self) -> None:
        data = make_profile().model_dump(by_alias=True)
        assert "careerObjective" in data
        assert "extraCurricular" in data

    def test_five_achievements_accepted(self) -> None:
        profile = make_profile(achievements=[f"Award {i}" for i in range(5)])
        assert len(profile.achievements) == 5

    def test_six_achievements_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            make_profile(achievements=[f"Award {i}" for i in range(6)])
        assert ("achievements",) in _error_locs(exc_info)

    def test_six_extra_curricular_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            make_profile(extraCurricular=[f"Club {i}" for i in range(6)])
        assert ("extraCurricular",) in _error_locs(exc_info)

    def test_six_projects_rejected(self) -> None:
        projects = [{"title": f"P{i}", "description": "d"} for i in range(6)]
        with pytest.raises(ValidationError) as exc_info:
            make_profile(projects=projects)
        assert ("projects",) in _error_locs(exc_info)

    def test_invalid_email(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            make_profile(email="not-an-email")
        assert ("email",) in _error_locs(exc_info)

    @pytest.mark.parametrize("field", ["fullName", "phoneNumber", "careerObjective"])
    def test_required_fields_must_be_non_empty(self, field: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            make_profile(**{field: ""})
        assert (field,) in _error_locs(exc_info)

    def test_at_least_one_language(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            make_profile(languages=[])
        assert ("languages",) in _error_locs(exc_info)

    def test_empty_achievement_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            make_profile(achievements=["Valid", ""])
        assert ("achievements", 1) in _error_locs(exc_info)

    def test_blank_links_become_none(self) -> None:
        profile = make_profile(linkedin="", github="  ", portfolio="")
        assert profile.linkedin is None
        assert profile.github is None
        assert profile.portfolio is None

    def test_link_keeps_original_spelling(self) -> None:
        profile = make_profile(github="https://github.com")
        assert profile.github == "https://github.com"

    def test_invalid_link_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            make_profile(portfolio="not a url")
        assert ("portfolio",) in _error_locs(exc_info)

    def test_unknown_template_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            make_profile(template="fancy")
        assert ("template",) in _error_locs(exc_info)

    def test_unknown_gender_rejected(self) -> None:
        with pytest.raises(ValidationError):
            make_profile(gender="unknown")
