from .catalog import ATSCatalog, get_default_catalog
from .sections import get_recommended_section_header, normalize_section_header
from .vendors import (
    get_all_ats_standards,
    get_ats_by_strictness,
    get_ats_for_job_board,
    get_ats_standard,
    get_job_board_mappings,
)

__all__ = [
    "ATSCatalog",
    "get_default_catalog",
    "get_ats_standard",
    "get_all_ats_standards",
    "get_ats_by_strictness",
    "get_job_board_mappings",
    "get_ats_for_job_board",
    "normalize_section_header",
    "get_recommended_section_header",
]
