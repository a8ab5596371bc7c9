from __future__ import annotations

import re

from ats_scoring.schemas.ats import FontSizeStats, FormattingCheckResult, Margins

# Plain text carries no font or page geometry; these stand in for a typical export.
ASSUMED_FONTS = ("Arial",)
ASSUMED_FONT_SIZE = FontSizeStats(min=10, max=12, average=11)
ASSUMED_MARGINS = Margins(top=1, bottom=1, left=1, right=1)

_ALIGNED_ROW_RE = re.compile(r"^[ \t]{4,}\S+[ \t]{4,}\S+", re.MULTILINE)
_COLUMN_GAP_RE = re.compile(r"\S {10,}\S")
# ASCII, Latin-1 supplement, Latin extended and general punctuation (bullets, dashes, quotes).
_UNUSUAL_CHAR_RE = re.compile(r"[^\x00-\x7F\u00A0-\u024F\u1E00-\u1EFF\u2000-\u206F]")
_MIN_EDGE_LINE_CHARS = 10


def _is_pipe_row(line: str) -> bool:
    stripped = line.strip()
    if stripped.count("|") < 2:
        return False
    segments = [segment.strip() for segment in stripped.split("|") if segment.strip()]
    return len(segments) >= 3


def detect_tables(text: str) -> bool:
    if "\t\t" in text or _ALIGNED_ROW_RE.search(text):
        return True
    return sum(1 for line in text.splitlines() if _is_pipe_row(line)) >= 2


def detect_multiple_columns(text: str) -> bool:
    return any(_COLUMN_GAP_RE.search(line) for line in text.splitlines())


def detect_headers_footers(text: str) -> bool:
    """True when one of the first or last three lines repeats in the body."""
    lines = [line.strip() for line in text.split("\n")]
    if len(lines) <= 6:
        return False
    body = set(lines[3:-3])
    edges = [line for line in lines[:3] + lines[-3:] if len(line) > _MIN_EDGE_LINE_CHARS]
    return any(line in body for line in edges)


def detect_unusual_characters(text: str) -> bool:
    return bool(_UNUSUAL_CHAR_RE.search(text))


def analyze_formatting(text: str, file_size: int, page_count: int) -> FormattingCheckResult:
    return FormattingCheckResult(
        has_tables=detect_tables(text),
        has_multiple_columns=detect_multiple_columns(text),
        has_images=False,
        has_headers_footers=detect_headers_footers(text),
        has_text_boxes=False,
        has_unusual_fonts=detect_unusual_characters(text),
        fonts=list(ASSUMED_FONTS),
        font_size=ASSUMED_FONT_SIZE.model_copy(),
        margins=ASSUMED_MARGINS.model_copy(),
        page_count=page_count,
        file_size=file_size,
    )
