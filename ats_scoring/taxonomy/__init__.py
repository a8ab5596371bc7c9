from .industry_taxonomy import IndustryTaxonomy
from .keywords import (
    detect_sector_from_keywords,
    extract_keywords_from_text,
    get_all_sectors,
    get_default_taxonomy,
    get_industry_keywords,
    get_missing_keywords,
    get_required_keywords_for_sector,
)

__all__ = [
    "IndustryTaxonomy",
    "get_default_taxonomy",
    "get_industry_keywords",
    "get_all_sectors",
    "extract_keywords_from_text",
    "get_required_keywords_for_sector",
    "get_missing_keywords",
    "detect_sector_from_keywords",
]
