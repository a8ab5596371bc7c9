from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache

from ats_scoring.schemas.ats import IndustryKeywords, KeywordGap

from .industry_taxonomy import IndustryTaxonomy


@lru_cache(maxsize=1)
def get_default_taxonomy() -> IndustryTaxonomy:
    return IndustryTaxonomy()


def get_industry_keywords(sector: str) -> IndustryKeywords | None:
    return get_default_taxonomy().get(sector)


def get_all_sectors() -> list[str]:
    return get_default_taxonomy().sectors()


def extract_keywords_from_text(text: str) -> list[str]:
    return get_default_taxonomy().extract_keywords(text)


def get_required_keywords_for_sector(sector: str) -> list[str]:
    return get_default_taxonomy().required_keywords(sector)


def get_missing_keywords(cv_keywords: Iterable[str], sector: str) -> KeywordGap:
    return get_default_taxonomy().missing_keywords(cv_keywords, sector)


def detect_sector_from_keywords(cv_keywords: Iterable[str]) -> str | None:
    return get_default_taxonomy().detect_sector(cv_keywords)
