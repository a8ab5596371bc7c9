from __future__ import annotations

import re

from ats_scoring.schemas.ats import DetectedSection
from ats_scoring.standards.sections import get_recommended_section_header, normalize_section_header

MAX_HEADER_CHARS = 50

_HEADER_PATTERNS = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"(professional\s+)?experiences?",
        r"work\s+experience",
        r"employment(\s+history)?",
        r"career\s+history",
        r"expériences?(\s+professionnelles?)?",
        r"education",
        r"(academic|educational)\s+background",
        r"formations?",
        r"études",
        r"skills",
        r"technical\s+skills",
        r"core\s+competencies",
        r"competencies",
        r"compétences(\s+techniques)?",
        r"(professional\s+)?summary",
        r"(professional\s+)?profile",
        r"profil",
        r"about",
        r"objective",
        r"résumé",
        r"(professional\s+)?certifications?",
        r"certificates",
        r"certifications\s+et\s+formations",
        r"languages?",
        r"language\s+skills",
        r"langues",
        r"(personal\s+|side\s+)?projects?",
        r"projets?",
        r"achievements?",
        r"awards?",
        r"publications?",
        r"interests?",
        r"hobbies",
        r"references?",
    )
)


def is_section_header(line: str) -> bool:
    stripped = line.strip()
    if not stripped or len(stripped) >= MAX_HEADER_CHARS:
        return False
    return any(pattern.fullmatch(stripped) for pattern in _HEADER_PATTERNS)


def _new_section(header: str, start_line: int, last_line: int) -> DetectedSection:
    canonical = normalize_section_header(header)
    return DetectedSection(
        name=header,
        normalized_name=canonical or header.lower(),
        start_line=start_line,
        end_line=last_line,
        content="",
        is_standard=canonical is not None,
        suggested_name=get_recommended_section_header(canonical) if canonical else None,
    )


def detect_sections(text: str) -> list[DetectedSection]:
    """Split plain resume text into header-delimited sections.

    Lines before the first recognised header belong to no section. A
    section ends on the line before the next header, or at the last line.
    """
    lines = text.split("\n")
    last_line = max(0, len(lines) - 1)
    sections: list[DetectedSection] = []
    current: DetectedSection | None = None
    content: list[str] = []

    for index, line in enumerate(lines):
        if is_section_header(line):
            if current is not None:
                sections.append(
                    current.model_copy(
                        update={"end_line": max(current.start_line, index - 1), "content": "".join(content)}
                    )
                )
            current = _new_section(line.strip(), index, last_line)
            content = []
        elif current is not None:
            content.append(line + "\n")

    if current is not None:
        sections.append(current.model_copy(update={"content": "".join(content)}))
    return sections
