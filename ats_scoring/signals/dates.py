from __future__ import annotations

import re

# Longer layouts first so the year inside "01/2020" is not reported on its own.
_DATE_RE = re.compile(
    r"\b(?:"
    r"\d{2}/\d{4}"
    r"|\d{4}/\d{2}"
    r"|\d{2}-\d{4}"
    r"|\d{4}-\d{2}"
    r"|(?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)[a-z]*\.?\s*\d{4}"
    r"|(?:janvier|février|mars|avril|mai|juin|juillet|août|septembre|octobre|novembre|décembre)\s*\d{4}"
    r"|(?:19|20)\d{2}"
    r")\b",
    re.IGNORECASE,
)


def detect_date_formats(text: str) -> list[str]:
    """Distinct date tokens in first-seen order, e.g. ["01/2020", "Jan 2021", "2019"]."""
    return list(dict.fromkeys(match.group(0) for match in _DATE_RE.finditer(text)))
