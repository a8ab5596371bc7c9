from __future__ import annotations

from ats_scoring.core.config.scoring import get_scoring_value
from ats_scoring.schemas.ats import (
    ATSCategoryScore,
    ATSOptimization,
    ATSScoreBreakdown,
    Effort,
    Impact,
    OptimizationType,
)

_IMPACT_RANK: dict[str, int] = {"high": 0, "medium": 1, "low": 2}


def generate_optimizations(breakdown: ATSScoreBreakdown) -> list[ATSOptimization]:
    """One action per category improvement, most impactful first.

    Priorities are numbered across all categories in generation order and
    the impact sort is stable, so equal-impact items keep that order.
    """
    high_below = int(get_scoring_value("thresholds.optimizations.high_impact_below", 50))
    # (category, type, id prefix, title, impact when not high, effort, auto fixable)
    category_specs: list[tuple[ATSCategoryScore, OptimizationType, str, str, Impact, Effort, bool]] = [
        (breakdown.formatting, "formatting", "opt-format", "Format Optimization", "medium", "easy", False),
        (breakdown.keywords, "keywords", "opt-keyword", "Keyword Optimization", "medium", "medium", False),
        (breakdown.structure, "structure", "opt-structure", "Structure Optimization", "medium", "easy", True),
        (breakdown.readability, "content", "opt-read", "Readability Improvement", "low", "medium", False),
    ]

    optimizations: list[ATSOptimization] = []
    priority = 1
    for category, opt_type, id_prefix, title, default_impact, effort, auto_fixable in category_specs:
        impact: Impact = "high" if category.percentage < high_below else default_impact
        for improvement in category.improvements:
            optimizations.append(
                ATSOptimization(
                    id=f"{id_prefix}-{priority}",
                    type=opt_type,
                    priority=priority,
                    title=title,
                    description=improvement,
                    impact=impact,
                    effort=effort,
                    auto_fixable=auto_fixable,
                )
            )
            priority += 1

    return sorted(optimizations, key=lambda item: _IMPACT_RANK[item.impact])
