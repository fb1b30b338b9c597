import asyncio
import io
import logging
import re
from dataclasses import dataclass
from xml.sax.saxutils import escape

from docx import Document
from docx.document import Document as DocxDocument
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt, RGBColor
from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import A4, LETTER
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import ListFlowable, ListItem, Paragraph, SimpleDocTemplate, Spacer

from resume_wizard.core.exceptions import ExportError
from resume_wizard.rendering.registry import TemplateStyle
from resume_wizard.rendering.view import (
    ResumeView,
    education_line,
    project_details,
    skill_label,
)

logger = logging.getLogger(__name__)

PAGE_SIZES = {"A4": A4, "LETTER": LETTER}

TEXT_MEDIA_TYPE = "text/plain; charset=utf-8"
PDF_MEDIA_TYPE = "application/pdf"
DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@dataclass
class ExportArtifact:
    content: bytes
    filename: str
    media_type: str


def sanitize_filename(full_name: str) -> str:
    """Replace every non-alphanumeric character with ``_`` and lower-case."""
    cleaned = re.sub(r"[^a-z0-9]", "_", full_name or "", flags=re.IGNORECASE).lower()
    return cleaned or "resume"


def _display_name(full_name: str) -> str:
    return full_name.strip() or "resume"


def export_text(markdown: str, full_name: str) -> ExportArtifact:
    """The model's Markdown exactly as returned."""
    return ExportArtifact(
        content=markdown.encode("utf-8"),
        filename=f"{sanitize_filename(full_name)}_resume.txt",
        media_type=TEXT_MEDIA_TYPE,
    )


# ── PDF ──────────────────────────────────────────────────────────────────


def _paragraph_style(name: str, font: str, size: float, color: str, **kwargs) -> ParagraphStyle:
    return ParagraphStyle(
        name,
        fontName=font,
        fontSize=size,
        leading=size * 1.3,
        textColor=HexColor(color),
        **kwargs,
    )


def _pdf_styles(style: TemplateStyle) -> dict[str, ParagraphStyle]:
    heading, body = style.pdf_heading_font, style.pdf_body_font
    return {
        "name": _paragraph_style("name", heading, 24, style.accent_color, spaceAfter=6),
        "contact": _paragraph_style("contact", body, 10, style.muted_color, spaceAfter=10),
        "heading": _paragraph_style(
            "heading", heading, 14, style.accent_color, spaceBefore=10, spaceAfter=4
        ),
        "body": _paragraph_style("body", body, 10.5, style.text_color),
        "strong": _paragraph_style("strong", heading, 10.5, style.text_color),
        "detail": _paragraph_style("detail", body, 9.5, style.muted_color),
    }


def _bullets(items: list[str], body: ParagraphStyle) -> ListFlowable:
    return ListFlowable(
        [ListItem(Paragraph(escape(item), body), leftIndent=12) for item in items],
        bulletType="bullet",
        leftIndent=12,
    )


def _pdf_story(view: ResumeView, style: TemplateStyle) -> list:
    s = _pdf_styles(style)
    contact = escape(view.contact_line)
    for label, url in view.links:
        contact += f' | <link href="{escape(url)}">{escape(label)}</link>'

    story: list = [
        Paragraph(escape(view.full_name), s["name"]),
        Paragraph(contact, s["contact"]),
        Paragraph("Objective", s["heading"]),
        Paragraph(escape(view.objective), s["body"]),
        Paragraph("Education", s["heading"]),
    ]
    story += [Paragraph(escape(education_line(edu)), s["body"]) for edu in view.education]

    story.append(Paragraph("Technical Skills", s["heading"]))
    story.append(_bullets([skill_label(skill) for skill in view.technical_skills], s["body"]))
    if view.other_skills:
        story.append(Paragraph("Other Skills", s["heading"]))
        story.append(_bullets(view.other_skills, s["body"]))

    story.append(Paragraph("Projects", s["heading"]))
    for project in view.projects:
        story.append(Paragraph(escape(project.title), s["strong"]))
        story.append(Paragraph(escape(project.description), s["body"]))
        for label, value in project_details(project):
            story.append(Paragraph(f"{label}: {escape(value)}", s["detail"]))
        story.append(Spacer(1, 4))

    if view.achievements:
        story.append(Paragraph("Achievements", s["heading"]))
        story.append(_bullets(view.achievements, s["body"]))
    if view.extra_curricular:
        story.append(Paragraph("Extra Curricular", s["heading"]))
        story.append(_bullets(view.extra_curricular, s["body"]))

    story.append(Paragraph("Personal Information", s["heading"]))
    for label, value in view.personal:
        story.append(Paragraph(f"<b>{escape(label)}:</b> {escape(value)}", s["body"]))
    return story


def export_pdf(view: ResumeView, style: TemplateStyle, page_size: str = "A4") -> ExportArtifact:
    """Lay the resume out on fixed-size pages; any failure aborts the whole file."""
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=PAGE_SIZES.get(page_size.upper(), A4),
        leftMargin=0.6 * inch,
        rightMargin=0.6 * inch,
        topMargin=0.6 * inch,
        bottomMargin=0.6 * inch,
        title=f"{view.full_name} - Resume",
    )
    try:
        doc.build(_pdf_story(view, style))
    except Exception as e:
        logger.error("PDF export for %s failed: %s", view.full_name, e)
        raise ExportError(f"PDF export failed: {e}") from e

    return ExportArtifact(
        content=buffer.getvalue(),
        filename=f"{_display_name(view.full_name)}_resume.pdf",
        media_type=PDF_MEDIA_TYPE,
    )


# ── Word ─────────────────────────────────────────────────────────────────


def _rgb(hex_color: str) -> RGBColor:
    return RGBColor.from_string(hex_color.lstrip("#").upper())


def _docx_document(view: ResumeView, style: TemplateStyle) -> DocxDocument:
    doc = Document()

    title = doc.add_heading(level=0)
    run = title.add_run(view.full_name)
    run.bold = True
    run.font.size = Pt(24)
    run.font.color.rgb = _rgb(style.accent_color)

    contact = doc.add_paragraph()
    contact_run = contact.add_run(view.contact_line)
    contact_run.font.size = Pt(12)
    contact_run.font.color.rgb = _rgb(style.muted_color)
    contact.alignment = WD_ALIGN_PARAGRAPH.LEFT

    doc.add_heading("Summary", level=1)
    doc.add_paragraph(view.objective)

    doc.add_heading("Education", level=1)
    for edu in view.education:
        doc.add_paragraph(education_line(edu))

    doc.add_heading("Technical Skills", level=1)
    for skill in view.technical_skills:
        doc.add_paragraph(skill_label(skill), style="List Bullet")

    if view.other_skills:
        doc.add_heading("Other Skills", level=1)
        for skill in view.other_skills:
            doc.add_paragraph(skill, style="List Bullet")

    doc.add_heading("Projects", level=1)
    for project in view.projects:
        text = f"{project.title}: {project.description}"
        for label, value in project_details(project):
            text += f" | {label}: {value}"
        doc.add_paragraph(text)

    if view.achievements:
        doc.add_heading("Achievements", level=1)
        for item in view.achievements:
            doc.add_paragraph(item, style="List Bullet")

    if view.extra_curricular:
        doc.add_heading("Extra Curricular", level=1)
        for item in view.extra_curricular:
            doc.add_paragraph(item, style="List Bullet")

    doc.add_heading("Personal Information", level=1)
    for label, value in view.personal:
        doc.add_paragraph(f"{label}: {value}")
    for label, url in view.links:
        doc.add_paragraph(f"{label}: {url}")
    return doc


def export_docx(view: ResumeView, style: TemplateStyle) -> ExportArtifact:
    """Heading/paragraph document mirroring the template's section order."""
    try:
        doc = _docx_document(view, style)
        buffer = io.BytesIO()
        doc.save(buffer)
    except Exception as e:
        logger.error("Word export for %s failed: %s", view.full_name, e)
        raise ExportError(f"Word export failed: {e}") from e

    return ExportArtifact(
        content=buffer.getvalue(),
        filename=f"{_display_name(view.full_name)}_resume.docx",
        media_type=DOCX_MEDIA_TYPE,
    )


async def export_pdf_async(
    view: ResumeView, style: TemplateStyle, page_size: str = "A4"
) -> ExportArtifact:
    return await asyncio.to_thread(export_pdf, view, style, page_size)


async def export_docx_async(view: ResumeView, style: TemplateStyle) -> ExportArtifact:
    return await asyncio.to_thread(export_docx, view, style)
