from __future__ import annotations

from ats_scoring.core.config.scoring import get_scoring_value
from ats_scoring.schemas.ats import ATSCompatibilityMatrix
from ats_scoring.standards.catalog import get_default_catalog


def _band(name: str, default: int) -> int:
    return int(get_scoring_value(f"labels.{name}", default))


def get_score_label(score: float) -> str:
    if score >= _band("excellent", 90):
        return "Excellent"
    if score >= _band("good", 75):
        return "Good"
    if score >= _band("fair", 60):
        return "Fair"
    if score >= _band("needs_improvement", 40):
        return "Needs Improvement"
    return "Poor"


def get_score_color(score: float) -> str:
    if score >= _band("good", 75):
        return "success"
    if score >= _band("needs_improvement", 40):
        return "warning"
    return "danger"


def get_supported_ats_list(matrix: ATSCompatibilityMatrix) -> list[str]:
    """Display names of compatible vendors; ids missing from the catalog are kept as-is."""
    catalog = get_default_catalog()
    supported: list[str] = []
    for ats_id, entry in matrix.items():
        if not entry.compatible:
            continue
        standard = catalog.vendor(ats_id)
        supported.append(standard.name if standard else ats_id)
    return supported
