from __future__ import annotations

import re

from .catalog import get_default_catalog

_ACCENTED_RE = re.compile(r"[àâäéèêëïîôùûüç]", re.IGNORECASE)


def normalize_section_header(header: str) -> str | None:
    """Map raw header text to its canonical section key.

    Exact (trimmed, case-insensitive) match only: "Professional Experiences"
    does not resolve unless it is listed as a variant.
    """
    return get_default_catalog().canonical_section(header)


def get_recommended_section_header(section: str, language: str = "en") -> str:
    headers = get_default_catalog().section_headers.get(section.lower())
    if not headers:
        return section

    if language == "fr":
        for header in headers:
            if _ACCENTED_RE.search(header):
                return header
    return headers[0]
