from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from pydantic import ValidationError

from ats_scoring.core.config.scoring import get_scoring_value
from ats_scoring.schemas.ats import IndustryKeywords, KeywordEntry, KeywordGap

logger = logging.getLogger(__name__)


def _lowered(values: Iterable[str]) -> set[str]:
    return {value.lower() for value in values}


class IndustryTaxonomy:
    """Per-sector keyword knowledge base loaded once from JSON.

    Sector iteration order is the order of the JSON object, which keeps
    sector detection tie-breaking reproducible.
    """

    def __init__(self, keywords_path: str | Path | None = None) -> None:
        path = Path(keywords_path) if keywords_path else Path(__file__).with_name("industry_keywords.json")
        self._industries = MappingProxyType(self._load_industries(path))

    @staticmethod
    def _load_industries(path: Path) -> dict[str, IndustryKeywords]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        if not isinstance(raw, dict):
            raise RuntimeError(f"Invalid keyword taxonomy '{path}': expected a top-level mapping.")

        industries: dict[str, IndustryKeywords] = {}
        for sector_id, payload in raw.items():
            key = str(sector_id)
            if key != key.strip().lower():
                raise RuntimeError(f"Sector id '{key}' in '{path}' must be lowercase.")
            try:
                industries[key] = IndustryKeywords.model_validate(payload)
            except ValidationError as exc:
                raise RuntimeError(f"Invalid sector '{key}' in keyword taxonomy '{path}': {exc}") from exc

        logger.info("industry_taxonomy_loaded sectors=%s path=%s", len(industries), path.name)
        return industries

    @property
    def industries(self) -> Mapping[str, IndustryKeywords]:
        return self._industries

    def sectors(self) -> list[str]:
        return list(self._industries)

    def get(self, sector: str) -> IndustryKeywords | None:
        return self._industries.get(sector.lower())

    @staticmethod
    def _entries(industry: IndustryKeywords) -> Iterable[KeywordEntry]:
        for category in industry.categories:
            yield from category.keywords

    def extract_keywords(self, text: str) -> list[str]:
        """Return every taxonomy term found in ``text``, deduplicated in first-seen order.

        Matching is a case-insensitive substring search. A hit on a variant
        records the entry's main term; tools and certifications are recorded
        as written in the table. Terms from every sector are collected.
        """
        text_lower = text.lower()
        found: list[str] = []

        for industry in self._industries.values():
            for entry in self._entries(industry):
                candidates = (entry.term, *entry.variants)
                if any(candidate.lower() in text_lower for candidate in candidates):
                    found.append(entry.term)

            for tool in industry.common_tools:
                if tool.lower() in text_lower:
                    found.append(tool)

            for certification in industry.certifications:
                if certification.lower() in text_lower:
                    found.append(certification)

        return list(dict.fromkeys(found))

    def required_keywords(self, sector: str) -> list[str]:
        industry = self.get(sector)
        if industry is None:
            return []
        return [entry.term for entry in self._entries(industry) if entry.importance == "required"]

    def missing_keywords(self, cv_keywords: Iterable[str], sector: str) -> KeywordGap:
        industry = self.get(sector)
        if industry is None:
            return KeywordGap()

        cv_lower = _lowered(cv_keywords)
        missing = [term for term in self.required_keywords(sector) if term.lower() not in cv_lower]

        max_suggestions = int(get_scoring_value("keyword_gap.max_suggestions", 10))
        suggestions = [
            entry.term
            for entry in self._entries(industry)
            if entry.importance == "preferred" and entry.term.lower() not in cv_lower
        ]
        return KeywordGap(missing=missing, suggestions=suggestions[:max_suggestions])

    def sector_scores(self, cv_keywords: Iterable[str]) -> dict[str, int]:
        required_weight = int(get_scoring_value("sector_detection.required_weight", 3))
        other_weight = int(get_scoring_value("sector_detection.other_weight", 1))
        tool_weight = int(get_scoring_value("sector_detection.tool_weight", 1))

        cv_lower = _lowered(cv_keywords)
        scores: dict[str, int] = {}
        for sector_id, industry in self._industries.items():
            score = 0
            for entry in self._entries(industry):
                if entry.term.lower() in cv_lower:
                    score += required_weight if entry.importance == "required" else other_weight
            for tool in industry.common_tools:
                if tool.lower() in cv_lower:
                    score += tool_weight
            scores[sector_id] = score
        return scores

    def detect_sector(self, cv_keywords: Iterable[str]) -> str | None:
        min_score = int(get_scoring_value("sector_detection.min_score", 5))

        best_sector: str | None = None
        best_score = 0
        for sector_id, score in self.sector_scores(cv_keywords).items():
            # strictly greater: the first sector in table order keeps a tie
            if best_sector is None or score > best_score:
                best_sector, best_score = sector_id, score

        if best_sector is None or best_score < min_score:
            return None
        return best_sector
