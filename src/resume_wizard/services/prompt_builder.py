import logging

from resume_wizard.schemas.profile import Education, Project, ResumeProfile, TechnicalSkill
from resume_wizard.services.resume_format import OUTPUT_SECTIONS

logger = logging.getLogger(__name__)

ENHANCEMENT_DIRECTIVES = """\
You are a professional resume writer and ATS optimization expert. Your task is \
to ENHANCE and EXPAND the provided resume content, not just format it. For each section:

1. Career Objective (MOST IMPORTANT):
   - Completely rewrite the provided objective to be more professional and specific
   - Add industry-specific goals and measurable career objectives
   - Include relevant skills and experience, using action verbs

2. Education:
   - For each entry, add key coursework, academic honors, relevant projects \
and skills developed during studies

3. Projects:
   - For each project, expand with objectives and scope, technologies and tools \
used, technical challenges and solutions, and quantifiable results

4. Technical Skills:
   - Group related skills and add proficiency levels

5. Achievements and Extra Curricular:
   - Add quantifiable results, leadership roles and impact
"""

CLOSING_RULES = """\
IMPORTANT: For each section, you MUST:
1. Add new, relevant details that enhance the original content
2. Add quantifiable results where possible
3. Maintain a professional tone
4. Keep the original information while expanding it
"""

SECTION_PLACEHOLDERS = {
    "Career Objective": "[Rewritten objective with specific goals]",
    "Education": "[Enhanced education entries]",
    "Technical Skills": "[One skill per line as: - Skill (Level)]",
    "Projects": (
        "[One project per bullet as: - Title: Description, followed by lines "
        "Technologies: ..., Challenges: ..., Results: ...]"
    ),
    "Achievements": "[One achievement per bullet]",
    "Extra Curricular": "[One activity per bullet]",
}


def _format_education(edu: Education) -> str:
    line = f"- {edu.institution}, {edu.degree}"
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


def _format_skill(skill: TechnicalSkill) -> str:
    return f"{skill.name} ({skill.level})" if skill.level else skill.name


def _format_project(project: Project) -> str:
    line = f"- {project.title}: {project.description}"
    if project.technologies:
        line += f" (Technologies: {project.technologies})"
    if project.challenges:
        line += f" (Challenges: {project.challenges})"
    if project.results:
        line += f" (Results: {project.results})"
    return line


def _output_structure() -> str:
    lines = ["# [Full Name]", "", "[Email] | [Phone]"]
    for label in OUTPUT_SECTIONS:
        lines += ["", f"**{label}**", SECTION_PLACEHOLDERS[label]]
    return "\n".join(lines)


def build_prompt(profile: ResumeProfile) -> str:
    """Serialize a validated profile into the enhancement instruction for Gemini."""
    lines: list[str] = [
        ENHANCEMENT_DIRECTIVES,
        "Generate a resume in Markdown format for:",
        f"Name: {profile.full_name}",
        f"Father's Name: {profile.father_name}",
        f"Date of Birth: {profile.date_of_birth}",
        f"Gender: {profile.gender}",
        f"Languages: {', '.join(profile.languages)}",
        f"Email: {profile.email}",
        f"Phone: {profile.phone_number}",
        f"Highest Qualification: {profile.highest_qualification}",
    ]
    if profile.address:
        lines.append(f"Address: {profile.address}")
    if profile.linkedin:
        lines.append(f"LinkedIn: {profile.linkedin}")
    if profile.github:
        lines.append(f"GitHub: {profile.github}")
    if profile.portfolio:
        lines.append(f"Portfolio: {profile.portfolio}")

    lines += [
        "",
        "Career Objective: COMPLETELY REWRITE this objective to be more professional and specific:",
        profile.career_objective,
        "",
        "Education: EXPAND each entry with detailed information:",
        *(_format_education(edu) for edu in profile.education),
        "",
        "Technical Skills: ENHANCE with proficiency levels and groupings:",
        ", ".join(_format_skill(skill) for skill in profile.technical_skills),
    ]
    other_skills = [s for s in profile.other_skills if s.strip()]
    if other_skills:
        lines.append(f"Other Skills: {', '.join(other_skills)}")

    lines += [
        "",
        "Projects: EXPAND each project with detailed information:",
        *(_format_project(project) for project in profile.projects),
    ]
    if profile.achievements:
        lines += [
            "",
            "Achievements: ENHANCE with quantifiable results:",
            *(f"- {a}" for a in profile.achievements),
        ]
    if profile.extra_curricular:
        lines += [
            "",
            "Extra Curricular: EXPAND with leadership roles and impact:",
            *(f"- {e}" for e in profile.extra_curricular),
        ]

    lines += [
        "",
        CLOSING_RULES,
        "Format the response in exactly the following structure:",
        _output_structure(),
    ]
    prompt = "\n".join(lines)
    logger.debug("Built prompt of %d characters for %s", len(prompt), profile.full_name)
    return prompt
