from __future__ import annotations

from functools import lru_cache

from ats_scoring.core.config.scoring import get_scoring_value
from ats_scoring.schemas.ats import ATSScoreBreakdown, ATSScoreResult, ATSScoreWeights, ScoringInput

from .categories import round_half_up, score_formatting, score_keywords, score_readability, score_structure
from .compatibility import calculate_compatibility_matrix
from .optimizations import generate_optimizations

DEFAULT_WEIGHTS = ATSScoreWeights()


@lru_cache(maxsize=1)
def get_default_weights() -> ATSScoreWeights:
    """Weights from scoring.yaml, falling back to DEFAULT_WEIGHTS per missing key."""
    configured = get_scoring_value("weights", {}) or {}
    return ATSScoreWeights.model_validate({**DEFAULT_WEIGHTS.model_dump(), **configured})


def calculate_ats_score(scoring_input: ScoringInput, weights: ATSScoreWeights | None = None) -> ATSScoreResult:
    weights = weights or get_default_weights()
    check = scoring_input.formatting_check

    breakdown = ATSScoreBreakdown(
        formatting=score_formatting(check),
        keywords=score_keywords(scoring_input.keywords, scoring_input.target_keywords),
        structure=score_structure(scoring_input.detected_sections, scoring_input.date_formats),
        readability=score_readability(scoring_input.text_length, check),
    )

    weighted = (
        breakdown.formatting.percentage * weights.formatting
        + breakdown.keywords.percentage * weights.keywords
        + breakdown.structure.percentage * weights.structure
        + breakdown.readability.percentage * weights.readability
    )
    overall = max(0, min(100, round_half_up(weighted)))

    return ATSScoreResult(
        overall=overall,
        breakdown=breakdown,
        compatibility_matrix=calculate_compatibility_matrix(check),
        optimizations=generate_optimizations(breakdown),
    )
