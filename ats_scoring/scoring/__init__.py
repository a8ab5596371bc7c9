from .categories import (
    date_format_shape,
    round_half_up,
    score_formatting,
    score_keywords,
    score_readability,
    score_structure,
)
from .compatibility import calculate_compatibility_matrix, score_vendor
from .engine import DEFAULT_WEIGHTS, calculate_ats_score, get_default_weights
from .labels import get_score_color, get_score_label, get_supported_ats_list
from .optimizations import generate_optimizations

__all__ = [
    "DEFAULT_WEIGHTS",
    "calculate_ats_score",
    "get_default_weights",
    "score_formatting",
    "score_keywords",
    "score_structure",
    "score_readability",
    "calculate_compatibility_matrix",
    "score_vendor",
    "generate_optimizations",
    "get_score_label",
    "get_score_color",
    "get_supported_ats_list",
    "round_half_up",
    "date_format_shape",
]
