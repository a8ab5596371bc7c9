from __future__ import annotations

from ats_scoring.schemas.ats import ATSStandard, JobBoardATSMapping, Strictness

from .catalog import get_default_catalog


def get_ats_standard(ats_id: str) -> ATSStandard | None:
    return get_default_catalog().vendor(ats_id)


def get_all_ats_standards() -> list[ATSStandard]:
    return list(get_default_catalog().vendors.values())


def get_ats_by_strictness(strictness: Strictness) -> list[ATSStandard]:
    return [ats for ats in get_default_catalog().vendors.values() if ats.strictness == strictness]


def get_job_board_mappings() -> list[JobBoardATSMapping]:
    return list(get_default_catalog().job_boards)


def get_ats_for_job_board(job_board: str) -> list[ATSStandard]:
    """Vendors commonly behind a job board; empty when the board is unknown."""
    catalog = get_default_catalog()
    wanted = job_board.strip().lower()
    for mapping in catalog.job_boards:
        if mapping.job_board.lower() != wanted:
            continue
        standards = (catalog.vendor(ats_id) for ats_id in mapping.common_ats)
        return [standard for standard in standards if standard is not None]
    return []
