from __future__ import annotations

import hashlib
import json
import logging
import time
from collections.abc import Sequence

from ats_scoring.core.config.scoring import get_scoring_value
from ats_scoring.schemas.ats import (
    ATSAnalysisConfig,
    ATSAnalysisReport,
    ATSScoreResult,
    ATSScoreWeights,
    KeywordGap,
    ScoringInput,
)
from ats_scoring.scoring.engine import calculate_ats_score
from ats_scoring.scoring.labels import get_score_color, get_score_label, get_supported_ats_list
from ats_scoring.signals.builder import extract_signals
from ats_scoring.standards.catalog import get_default_catalog
from ats_scoring.taxonomy.keywords import (
    detect_sector_from_keywords,
    get_all_sectors,
    get_missing_keywords,
)

logger = logging.getLogger(__name__)


class ATSAnalysisError(RuntimeError):
    def __init__(self, message: str, *, status_code: int = 422):
        super().__init__(message)
        self.status_code = status_code


def _short_hash(value: str | None) -> str:
    normalized = (value or "").strip()
    if not normalized:
        return ""
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()[:12]


def _validate_config(config: ATSAnalysisConfig) -> None:
    if config.target_ats:
        catalog = get_default_catalog()
        unknown = [ats_id for ats_id in config.target_ats if catalog.vendor(ats_id) is None]
        if unknown:
            raise ATSAnalysisError(f"Unknown ATS id(s): {', '.join(unknown)}")
    if config.target_sector and config.target_sector not in get_all_sectors():
        raise ATSAnalysisError(f"Unknown sector: {config.target_sector}")


def score_input(scoring_input: ScoringInput, weights: ATSScoreWeights | None = None) -> ATSScoreResult:
    started_at = time.perf_counter()
    result = calculate_ats_score(scoring_input, weights)
    logger.info(
        json.dumps(
            {
                "event": "ats_score",
                "overall": result.overall,
                "text_length": scoring_input.text_length,
                "sections": len(scoring_input.detected_sections),
                "keywords": len(scoring_input.keywords),
                "targets": len(scoring_input.target_keywords or []),
                "duration_ms": int((time.perf_counter() - started_at) * 1000),
            }
        )
    )
    return result


def analyze_resume_text(
    text: str,
    *,
    file_size: int,
    page_count: int,
    target_keywords: Sequence[str] | None = None,
    config: ATSAnalysisConfig | None = None,
    weights: ATSScoreWeights | None = None,
) -> ATSAnalysisReport:
    """Score already-extracted resume text and attach sector and vendor context."""
    started_at = time.perf_counter()
    config = config or ATSAnalysisConfig()

    min_chars = int(get_scoring_value("analysis.min_text_chars", 50))
    if len(text.strip()) < min_chars:
        raise ATSAnalysisError(f"Resume text is too short to analyze (minimum {min_chars} characters).")
    _validate_config(config)

    signals = extract_signals(text, file_size=file_size, page_count=page_count)
    result = calculate_ats_score(signals.to_scoring_input(target_keywords), weights)

    sector = config.target_sector or detect_sector_from_keywords(signals.keywords)
    keyword_gap: KeywordGap | None = None
    if sector:
        keyword_gap = get_missing_keywords(signals.keywords, sector)
        if not config.include_keyword_suggestions:
            keyword_gap = keyword_gap.model_copy(update={"suggestions": []})

    if config.target_ats:
        matrix = {ats_id: result.compatibility_matrix[ats_id] for ats_id in config.target_ats}
        result = result.model_copy(update={"compatibility_matrix": matrix})

    report = ATSAnalysisReport(
        score=result,
        label=get_score_label(result.overall),
        color=get_score_color(result.overall),
        sector=sector,
        keywords=signals.keywords,
        keyword_gap=keyword_gap,
        detected_sections=signals.sections,
        date_formats=signals.date_formats,
        supported_ats=get_supported_ats_list(result.compatibility_matrix),
    )

    logger.info(
        json.dumps(
            {
                "event": "ats_analysis",
                "text_hash": _short_hash(text),
                "text_length": signals.text_length,
                "file_size": file_size,
                "page_count": page_count,
                "overall": result.overall,
                "sector": sector,
                "sections": len(signals.sections),
                "target_ats": config.target_ats or [],
                "duration_ms": int((time.perf_counter() - started_at) * 1000),
            }
        )
    )
    return report
