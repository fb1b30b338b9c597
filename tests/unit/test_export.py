"""Unit tests for text, PDF and Word export."""

import io
from unittest.mock import patch

import pytest
from docx import Document

from resume_wizard.core.exceptions import ExportError
from resume_wizard.rendering.registry import TEMPLATE_STYLES
from resume_wizard.rendering.view import build_view
from resume_wizard.services.export import (
    DOCX_MEDIA_TYPE,
    PDF_MEDIA_TYPE,
    export_docx,
    export_docx_async,
    export_pdf,
    export_pdf_async,
    export_text,
    sanitize_filename,
)
from tests.conftest import FULL_REPLY, make_profile

pytestmark = pytest.mark.unit


@pytest.fixture
def view():
    profile = make_profile(
        achievements=["Won the hackathon"],
        extraCurricular=["Chess club"],
        otherSkills=["Leadership"],
        github="https://github.com/jane",
    )
    return build_view(profile)


class TestSanitizeFilename:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Jane Doe", "jane_doe"),
            ("José O'Neil", "jos__o_neil"),
            ("a.b-c", "a_b_c"),
            ("", "resume"),
        ],
    )
    def test_sanitize(self, name: str, expected: str) -> None:
        assert sanitize_filename(name) == expected


class TestExportText:
    def test_bytes_match_markdown(self) -> None:
        artifact = export_text(FULL_REPLY, "Jane Doe")
        assert artifact.content == FULL_REPLY.encode("utf-8")
        assert artifact.filename == "jane_doe_resume.txt"
        assert artifact.media_type.startswith("text/plain")

    def test_unicode_preserved(self) -> None:
        artifact = export_text("# Zoë • ünïcode\n", "Zoë")
        assert artifact.content.decode("utf-8") == "# Zoë • ünïcode\n"


class TestExportPdf:
    @pytest.mark.parametrize("template", list(TEMPLATE_STYLES))
    def test_pdf_document(self, view, template: str) -> None:
        artifact = export_pdf(view, TEMPLATE_STYLES[template])

        assert artifact.content.startswith(b"%PDF")
        assert artifact.filename == "Jane Doe_resume.pdf"
        assert artifact.media_type == PDF_MEDIA_TYPE

    def test_letter_page_size(self, view) -> None:
        artifact = export_pdf(view, TEMPLATE_STYLES["modern"], page_size="letter")
        assert artifact.content.startswith(b"%PDF")

    def test_markup_characters_are_escaped(self) -> None:
        view = build_view(make_profile(careerObjective="Ship <fast> & reliable code"))
        artifact = export_pdf(view, TEMPLATE_STYLES["classic"])
        assert artifact.content.startswith(b"%PDF")

    def test_layout_failure_raises_export_error(self, view) -> None:
        with patch(
            "resume_wizard.services.export.SimpleDocTemplate.build",
            side_effect=RuntimeError("layout error"),
        ):
            with pytest.raises(ExportError, match="PDF export failed"):
                export_pdf(view, TEMPLATE_STYLES["modern"])

    async def test_async_wrapper(self, view) -> None:
        artifact = await export_pdf_async(view, TEMPLATE_STYLES["modern"])
        assert artifact.content.startswith(b"%PDF")


class TestExportDocx:
    def test_docx_headings_in_order(self, view) -> None:
        artifact = export_docx(view, TEMPLATE_STYLES["modern"])

        assert artifact.filename == "Jane Doe_resume.docx"
        assert artifact.media_type == DOCX_MEDIA_TYPE

        doc = Document(io.BytesIO(artifact.content))
        headings = [p.text for p in doc.paragraphs if p.style.name == "Heading 1"]
        assert headings == [
            "Summary",
            "Education",
            "Technical Skills",
            "Other Skills",
            "Projects",
            "Achievements",
            "Extra Curricular",
            "Personal Information",
        ]

    def test_docx_skips_empty_optional_sections(self) -> None:
        view = build_view(make_profile())
        doc = Document(io.BytesIO(export_docx(view, TEMPLATE_STYLES["modern"]).content))

        headings = [p.text for p in doc.paragraphs if p.style.name == "Heading 1"]
        assert headings == [
            "Summary",
            "Education",
            "Technical Skills",
            "Projects",
            "Personal Information",
        ]

    def test_docx_content(self, view) -> None:
        doc = Document(io.BytesIO(export_docx(view, TEMPLATE_STYLES["creative"]).content))
        texts = [p.text for p in doc.paragraphs]

        assert texts[0] == "Jane Doe"
        assert texts[1] == "jane@x.com | 555-1234"
        assert "Python (Advanced)" in texts
        assert "Resume Wizard: A multi-step resume builder" in texts
        assert "Won the hackathon" in texts
        assert "GitHub: https://github.com/jane" in texts

    def test_save_failure_raises_export_error(self, view) -> None:
        with patch("resume_wizard.services.export.Document", side_effect=OSError("disk")):
            with pytest.raises(ExportError, match="Word export failed"):
                export_docx(view, TEMPLATE_STYLES["modern"])

    async def test_async_wrapper(self, view) -> None:
        artifact = await export_docx_async(view, TEMPLATE_STYLES["classic"])
        assert artifact.content.startswith(b"PK")
