from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, Template, select_autoescape

from resume_wizard.core.exceptions import TemplateNotFoundError
from resume_wizard.rendering.view import (
    ResumeView,
    education_line,
    project_details,
    skill_label,
)

TEMPLATES_DIR = Path(__file__).parent / "templates"


@dataclass(frozen=True)
class TemplateStyle:
    """Visual settings of a template, reused by the PDF and Word exporters."""

    name: str
    accent_color: str
    text_color: str
    muted_color: str
    heading_font: str
    body_font: str
    pdf_heading_font: str
    pdf_body_font: str


TEMPLATE_STYLES: dict[str, TemplateStyle] = {
    "modern": TemplateStyle(
        name="modern",
        accent_color="#008080",
        text_color="#222222",
        muted_color="#555555",
        heading_font="Montserrat, Arial, sans-serif",
        body_font="Roboto, Arial, sans-serif",
        pdf_heading_font="Helvetica-Bold",
        pdf_body_font="Helvetica",
    ),
    "creative": TemplateStyle(
        name="creative",
        accent_color="#7C3AED",
        text_color="#374151",
        muted_color="#6366F1",
        heading_font="Poppins, Arial, sans-serif",
        body_font="Poppins, Arial, sans-serif",
        pdf_heading_font="Helvetica-Bold",
        pdf_body_font="Helvetica",
    ),
    "classic": TemplateStyle(
        name="classic",
        accent_color="#444444",
        text_color="#222222",
        muted_color="#888888",
        heading_font="Georgia, 'Times New Roman', serif",
        body_font="Georgia, 'Times New Roman', serif",
        pdf_heading_font="Times-Bold",
        pdf_body_font="Times-Roman",
    ),
}


class TemplateRegistry:
    """Loads and caches the Jinja2 resume templates by name."""

    def __init__(self, templates_dir: Path = TEMPLATES_DIR) -> None:
        self.templates_dir = templates_dir
        self._cache: dict[str, Template] = {}
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["education_line"] = education_line
        self.env.filters["skill_label"] = skill_label
        self.env.filters["project_details"] = project_details

    def list_templates(self) -> list[str]:
        return list(TEMPLATE_STYLES)

    def get_style(self, name: str) -> TemplateStyle:
        try:
            return TEMPLATE_STYLES[name]
        except KeyError as e:
            raise TemplateNotFoundError(f"Unknown resume template '{name}'") from e

    def get_template(self, name: str) -> Template:
        self.get_style(name)
        if name not in self._cache:
            self._cache[name] = self.env.get_template(f"{name}.html.jinja")
        return self._cache[name]

    def render(self, name: str, view: ResumeView) -> str:
        """Render ``view`` as a standalone HTML document with template ``name``."""
        template = self.get_template(name)
        return template.render(resume=view, style=self.get_style(name))


@lru_cache
def get_template_registry() -> TemplateRegistry:
    return TemplateRegistry()
