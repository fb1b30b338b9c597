from dataclasses import dataclass, field

from resume_wizard.schemas.profile import Education, Project, ResumeProfile, TechnicalSkill
from resume_wizard.services.markdown_parser import parse_markdown


@dataclass
class ResumeView:
    """Display-ready resume content shared by HTML, PDF and Word output."""

    full_name: str
    email: str
    phone: str
    objective: str
    education: list[Education]
    technical_skills: list[TechnicalSkill]
    other_skills: list[str]
    projects: list[Project]
    achievements: list[str]
    extra_curricular: list[str]
    links: list[tuple[str, str]] = field(default_factory=list)
    personal: list[tuple[str, str]] = field(default_factory=list)

    @property
    def contact_line(self) -> str:
        return " | ".join(part for part in (self.email, self.phone) if part)


def education_line(edu: Education) -> str:
    line = f"{edu.institution} - {edu.degree}"
    if edu.field:
        line += f" ({edu.field})"
    line += f", {edu.year}"
    if edu.gpa:
        line += f" | GPA: {edu.gpa}"
    if edu.coursework:
        line += f" | Coursework: {edu.coursework}"
    if edu.honors:
        line += f" | Honors: {edu.honors}"
    return line


def skill_label(skill: TechnicalSkill) -> str:
    return f"{skill.name} ({skill.level})" if skill.level else skill.name


def project_details(project: Project) -> list[tuple[str, str]]:
    details = [
        ("Tech", project.technologies),
        ("Challenges", project.challenges),
        ("Results", project.results),
    ]
    return [(label, value) for label, value in details if value]


def build_view(profile: ResumeProfile, markdown: str | None = None) -> ResumeView:
    """Assemble the view; header and objective from the Markdown win when present."""
    parsed = parse_markdown(markdown) if markdown else None

    links = [
        (label, url)
        for label, url in (
            ("LinkedIn", profile.linkedin),
            ("GitHub", profile.github),
            ("Portfolio", profile.portfolio),
        )
        if url
    ]
    personal = [
        ("Father's Name", profile.father_name),
        ("Date of Birth", profile.date_of_birth),
        ("Gender", str(profile.gender)),
        ("Languages", ", ".join(profile.languages)),
    ]
    if profile.address:
        personal.append(("Address", profile.address))

    return ResumeView(
        full_name=(parsed and parsed.name) or profile.full_name,
        email=(parsed and parsed.email) or str(profile.email),
        phone=(parsed and parsed.phone) or profile.phone_number,
        objective=(parsed and parsed.objective) or profile.career_objective,
        education=profile.education,
        technical_skills=profile.technical_skills,
        other_skills=[s for s in profile.other_skills if s.strip()],
        projects=profile.projects,
        achievements=profile.achievements,
        extra_curricular=profile.extra_curricular,
        links=links,
        personal=personal,
    )
