from __future__ import annotations

from collections.abc import Mapping

from ats_scoring.core.config.scoring import get_scoring_value
from ats_scoring.schemas.ats import (
    ATSCompatibilityEntry,
    ATSCompatibilityMatrix,
    ATSStandard,
    FormattingCheckResult,
)
from ats_scoring.standards.catalog import get_default_catalog

from .categories import round_half_up


def _penalty(key: str, default: int) -> int:
    return int(get_scoring_value(f"penalties.compatibility.{key}", default))


def score_vendor(check: FormattingCheckResult, ats: ATSStandard) -> ATSCompatibilityEntry:
    capabilities = ats.parsing_capabilities
    preferences = ats.preferences
    limit_mb = round_half_up(preferences.max_file_size / 1024 / 1024)

    # (penalty key, default, triggered, issue, optimization)
    checks: list[tuple[str, int, bool, str, str | None]] = [
        (
            "tables",
            30,
            check.has_tables and not capabilities.parses_tables,
            f"{ats.name} cannot parse tables",
            "Remove tables for better compatibility",
        ),
        (
            "columns",
            25,
            check.has_multiple_columns and not capabilities.parses_columns,
            f"{ats.name} cannot parse multiple columns",
            "Use single-column layout",
        ),
        (
            "images",
            20,
            check.has_images and not capabilities.parses_images,
            f"{ats.name} ignores images",
            None,
        ),
        (
            "file_size",
            15,
            check.file_size > preferences.max_file_size,
            f"File exceeds {ats.name} size limit",
            f"Reduce file size to under {limit_mb}MB",
        ),
        (
            "page_count",
            10,
            bool(preferences.max_pages) and check.page_count > (preferences.max_pages or 0),
            f"{ats.name} prefers max {preferences.max_pages} pages",
            None,
        ),
    ]

    score = 100
    issues: list[str] = []
    optimizations: list[str] = []
    for key, default_penalty, triggered, issue, optimization in checks:
        if not triggered:
            continue
        score -= _penalty(key, default_penalty)
        issues.append(issue)
        if optimization:
            optimizations.append(optimization)

    compatible_score = int(get_scoring_value("thresholds.compatibility.compatible_score", 70))
    return ATSCompatibilityEntry(
        score=max(0, score),
        compatible=score >= compatible_score,
        issues=issues,
        optimizations=optimizations,
    )


def calculate_compatibility_matrix(
    check: FormattingCheckResult,
    vendors: Mapping[str, ATSStandard] | None = None,
) -> ATSCompatibilityMatrix:
    """Score the formatting signals against every vendor, in table order."""
    table = get_default_catalog().vendors if vendors is None else vendors
    return {ats_id: score_vendor(check, ats) for ats_id, ats in table.items()}
