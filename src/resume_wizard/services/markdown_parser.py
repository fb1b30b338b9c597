"""Heuristic extraction of resume sections from the model's Markdown reply.

The reply is expected to follow the layout requested by the prompt builder:
a ``# Name`` line, an ``email | phone`` line, then ``**Label**`` blocks.
Anything that does not fit is dropped rather than reported; the parser never
raises for malformed input.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum

from resume_wizard.schemas.parsed_sections import ParsedAISections, ParsedProject
from resume_wizard.services.resume_format import SectionKind, classify_label

logger = logging.getLogger(__name__)

NAME_RE = re.compile(r"^#(?!#)[ \t]*(\S.*?)[ \t]*$", re.MULTILINE)
CONTACT_RE = re.compile(r"^([\w.+-]+@[\w.-]+)[ \t]*\|[ \t]*([\d\-+ ()]+)", re.MULTILINE)
BOLD_LABEL_RE = re.compile(r"^\*\*([^*]+?)\*\*:?$")
MARKDOWN_HEADING_RE = re.compile(r"^#{1,6}\s")
ITEM_START_RE = re.compile(r"^(?:[•\-*]|\d+\.(?=\s|$))")
ITEM_MARKER_RE = re.compile(r"^(?:[•\-*]\s*|\d+\.(?:\s+|$))")

PROJECT_DETAIL_KEYS = {
    "tech": "technologies",
    "challenge": "challenges",
    "result": "results",
}


class ScanState(StrEnum):
    SEEKING_HEADING = "seeking_heading"
    IN_SECTION_BODY = "in_section_body"
    IN_LIST_ITEM = "in_list_item"


@dataclass
class SectionBlock:
    label: str
    kind: SectionKind
    lines: list[str] = field(default_factory=list)

    @property
    def body(self) -> str:
        return "\n".join(self.lines).strip()


def scan_sections(text: str) -> list[SectionBlock]:
    """Split Markdown into bold-labelled blocks.

    A block runs from a line that is entirely ``**Label**`` up to the next
    such line, a Markdown ``#`` heading, or the end of the text.
    """
    blocks: list[SectionBlock] = []
    state = ScanState.SEEKING_HEADING
    current: SectionBlock | None = None

    for raw_line in text.splitlines():
        line = raw_line.strip()
        label_match = BOLD_LABEL_RE.match(line)
        if label_match:
            label = label_match.group(1)
            current = SectionBlock(label=label, kind=classify_label(label))
            blocks.append(current)
            state = ScanState.IN_SECTION_BODY
            continue

        if state == ScanState.IN_SECTION_BODY and current is not None:
            if MARKDOWN_HEADING_RE.match(line):
                current = None
                state = ScanState.SEEKING_HEADING
            else:
                current.lines.append(raw_line)

    return blocks


def _list_items(body: str) -> list[str]:
    lines = (line.strip() for line in body.splitlines())
    items = (ITEM_MARKER_RE.sub("", line, count=1).strip() for line in lines)
    return [item for item in items if item]


def _split_project_items(body: str) -> list[list[str]]:
    """Group body lines into items; a new item starts at a bullet or ``N.`` line."""
    items: list[list[str]] = []
    state = ScanState.IN_SECTION_BODY
    for line in body.splitlines():
        if not line.strip():
            continue
        if ITEM_START_RE.match(line) or state != ScanState.IN_LIST_ITEM:
            items.append([line])
            state = ScanState.IN_LIST_ITEM
        else:
            items[-1].append(line)
    return items


def _parse_project(lines: list[str]) -> ParsedProject | None:
    title_line = ITEM_MARKER_RE.sub("", lines[0].strip(), count=1)
    title, _, description = title_line.partition(":")
    if not title.strip():
        return None

    project = ParsedProject(title=title.strip(), description=description.strip())
    for line in lines[1:]:
        key, sep, value = line.partition(":")
        key, value = key.strip().lower(), value.strip()
        if not sep or not key or not value:
            continue
        for needle, attr in PROJECT_DETAIL_KEYS.items():
            if needle in key:
                setattr(project, attr, value)
    return project


def _projects(body: str) -> list[ParsedProject]:
    projects = []
    for item in _split_project_items(body):
        project = _parse_project(item)
        if project is not None:
            projects.append(project)
    return projects


SECTION_EXTRACTORS: dict[SectionKind, tuple[str, Callable[[str], object]]] = {
    SectionKind.OBJECTIVE: ("objective", str.strip),
    SectionKind.TECHNICAL_SKILLS: ("technical_skills", _list_items),
    SectionKind.OTHER_SKILLS: ("other_skills", _list_items),
    SectionKind.PROJECTS: ("projects", _projects),
    SectionKind.ACHIEVEMENTS: ("achievements", _list_items),
    SectionKind.EXTRA_CURRICULAR: ("extra_curricular", _list_items),
}


def parse_markdown(text: str) -> ParsedAISections:
    """Extract whatever sections can be recognized from generated Markdown."""
    if not text or not text.strip():
        return ParsedAISections()

    fields: dict[str, object] = {}

    name_match = NAME_RE.search(text)
    if name_match:
        fields["name"] = name_match.group(1)

    contact_match = CONTACT_RE.search(text)
    if contact_match:
        fields["email"] = contact_match.group(1)
        fields["phone"] = contact_match.group(2).strip()

    for block in scan_sections(text):
        extractor = SECTION_EXTRACTORS.get(block.kind)
        if extractor is None:
            # Education is recognized but not extracted; unknown labels are dropped.
            logger.debug("Skipping section %r (%s)", block.label, block.kind)
            continue
        attr, extract = extractor
        value = extract(block.body)
        if value:
            fields[attr] = value
        else:
            logger.debug("Section %r yielded nothing", block.label)

    return ParsedAISections(**fields)
