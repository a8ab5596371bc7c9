from __future__ import annotations

import math
import re
from collections.abc import Sequence

from ats_scoring.core.config.scoring import get_scoring_value
from ats_scoring.schemas.ats import ATSCategoryScore, FormattingCheckResult
from ats_scoring.standards.sections import normalize_section_header

_MM_YYYY_RE = re.compile(r"\d{2}/\d{4}")
_DIGIT_RE = re.compile(r"\d")
_MONTH_NAMES = (
    # English
    "january", "february", "march", "april", "may", "june", "july", "august",
    "september", "october", "november", "december",
    "jan", "feb", "mar", "apr", "jun", "jul", "aug", "sep", "sept", "oct", "nov", "dec",
    # French
    "janvier", "février", "fevrier", "mars", "avril", "mai", "juin", "juillet",
    "août", "aout", "septembre", "octobre", "novembre", "décembre", "decembre",
    "janv", "févr", "fevr", "avr", "juil", "déc",
)
_MONTH_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(name) for name in sorted(set(_MONTH_NAMES), key=lambda n: (-len(n), n))) + r")\b\.?"
)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (0.5 -> 1, 32.5 -> 33)."""
    return int(math.floor(value + 0.5))


def date_format_shape(token: str) -> str:
    """Reduce a date token to its layout: "Jan 2020" -> "month 9999", "01/2020" -> "99/9999"."""
    shape = _MONTH_RE.sub("month", token.lower())
    shape = _DIGIT_RE.sub("9", shape)
    return " ".join(shape.split())


def _penalty(category: str, key: str, default: int) -> int:
    return int(get_scoring_value(f"penalties.{category}.{key}", default))


def _threshold(path: str, default: float) -> float:
    return float(get_scoring_value(f"thresholds.{path}", default))


def _category_score(score: float, issues: list[str], improvements: list[str]) -> ATSCategoryScore:
    bounded = max(0, min(100, int(score)))
    return ATSCategoryScore(
        score=bounded,
        max_score=100,
        percentage=bounded,
        issues=issues,
        improvements=improvements,
    )


def score_formatting(check: FormattingCheckResult) -> ATSCategoryScore:
    max_file_size = _threshold("formatting.max_file_size_bytes", 5 * 1024 * 1024)
    checks: list[tuple[str, int, bool, str, str]] = [
        (
            "tables",
            30,
            check.has_tables,
            "Tables detected - many ATS cannot parse tables correctly",
            "Convert tables to simple bullet-point lists",
        ),
        (
            "multiple_columns",
            25,
            check.has_multiple_columns,
            "Multiple columns detected - disrupts reading order",
            "Use a single-column layout",
        ),
        (
            "images",
            20,
            check.has_images,
            "Images detected - ATS cannot read image content",
            "Remove images or replace with text",
        ),
        (
            "headers_footers",
            15,
            check.has_headers_footers,
            "Headers/footers may not be parsed correctly",
            "Move important info to main content area",
        ),
        (
            "text_boxes",
            20,
            check.has_text_boxes,
            "Text boxes detected - content may be skipped",
            "Remove text boxes and use normal paragraphs",
        ),
        (
            "unusual_fonts",
            10,
            check.has_unusual_fonts,
            "Unusual fonts may not render correctly",
            "Use standard fonts: Arial, Calibri, or Times New Roman",
        ),
        (
            "small_font",
            5,
            check.font_size.min < _threshold("formatting.min_font_size", 10),
            "Font size too small (< 10pt) - hard to read",
            "Use minimum 10pt font size",
        ),
        (
            "large_font",
            5,
            check.font_size.max > _threshold("formatting.max_font_size", 16),
            "Excessive font size variation",
            "Keep font sizes between 10-14pt for body text",
        ),
        (
            "page_count",
            10,
            check.page_count > _threshold("formatting.max_pages", 3),
            "CV too long - ideally 1-2 pages",
            "Condense content to 2 pages maximum",
        ),
        (
            "file_size",
            10,
            check.file_size > max_file_size,
            f"File too large (> {round_half_up(max_file_size / 1024 / 1024)}MB)",
            "Optimize PDF to reduce file size",
        ),
    ]

    score = 100
    issues: list[str] = []
    improvements: list[str] = []
    for key, default_penalty, triggered, issue, improvement in checks:
        if not triggered:
            continue
        score -= _penalty("formatting", key, default_penalty)
        issues.append(issue)
        improvements.append(improvement)
    return _category_score(score, issues, improvements)


def score_keywords(cv_keywords: Sequence[str], target_keywords: Sequence[str] | None = None) -> ATSCategoryScore:
    issues: list[str] = []
    improvements: list[str] = []
    cv_lower = {keyword.lower() for keyword in cv_keywords}

    if not target_keywords:
        points = int(get_scoring_value("thresholds.keywords.points_per_keyword", 5))
        score = min(100, len(cv_lower) * points)
        if len(cv_lower) < int(get_scoring_value("thresholds.keywords.min_distinct_keywords", 10)):
            issues.append("Low keyword density")
            improvements.append("Add more relevant industry keywords")
        return _category_score(score, issues, improvements)

    missing = [keyword.lower() for keyword in target_keywords if keyword.lower() not in cv_lower]
    matched = len(target_keywords) - len(missing)
    score = round_half_up(100 * matched / len(target_keywords))

    if missing:
        listed = int(get_scoring_value("thresholds.keywords.max_listed_missing", 5))
        issues.append(f"Missing {len(missing)} target keywords")
        improvements.append(f"Consider adding: {', '.join(missing[:listed])}")
    return _category_score(score, issues, improvements)


def score_structure(detected_sections: Sequence[str], date_formats: Sequence[str]) -> ATSCategoryScore:
    score = 100
    issues: list[str] = []
    improvements: list[str] = []

    normalized = [normalize_section_header(header) for header in detected_sections]
    present = {section for section in normalized if section is not None}
    required = get_scoring_value("structure.required_sections", ["experience", "education", "skills"])
    missing = [section for section in required if section not in present]
    if missing:
        score -= len(missing) * _penalty("structure", "missing_section", 15)
        issues.append(f"Missing sections: {', '.join(missing)}")
        improvements.append(f"Add clear section headers: {', '.join(section.capitalize() for section in missing)}")

    non_standard = [header for header, section in zip(detected_sections, normalized) if section is None]
    if non_standard:
        score -= len(non_standard) * _penalty("structure", "non_standard_header", 5)
        issues.append(f"Non-standard section headers: {', '.join(non_standard)}")
        improvements.append('Use standard section headers like "Experience", "Education"')

    if len({date_format_shape(token) for token in date_formats}) > 1:
        score -= _penalty("structure", "inconsistent_dates", 10)
        issues.append("Inconsistent date formats")
        improvements.append("Use consistent date format: MM/YYYY")

    if date_formats and not any(_MM_YYYY_RE.search(token) for token in date_formats):
        score -= _penalty("structure", "date_format", 10)
        issues.append("Date format not optimal for ATS")
        improvements.append("Use MM/YYYY format (e.g., 01/2020 - 06/2023)")

    return _category_score(score, issues, improvements)


def score_readability(text_length: int, check: FormattingCheckResult) -> ATSCategoryScore:
    score = 100
    issues: list[str] = []
    improvements: list[str] = []

    if text_length < _threshold("readability.min_text_length", 500):
        score -= _penalty("readability", "too_short", 30)
        issues.append("CV content too short")
        improvements.append("Add more detail about your experience and skills")
    elif text_length > _threshold("readability.max_text_length", 5000):
        score -= _penalty("readability", "too_long", 15)
        issues.append("CV content may be too long")
        improvements.append("Be more concise - focus on relevant experience")

    if len(set(check.fonts)) > _threshold("readability.max_fonts", 3):
        score -= _penalty("readability", "too_many_fonts", 10)
        issues.append("Too many different fonts")
        improvements.append("Use maximum 2 fonts for consistency")

    min_margin = _threshold("readability.min_side_margin_inches", 0.5)
    if check.margins.left < min_margin or check.margins.right < min_margin:
        score -= _penalty("readability", "narrow_margins", 5)
        issues.append("Margins too narrow")
        improvements.append("Use at least 0.5 inch margins")

    return _category_score(score, issues, improvements)
