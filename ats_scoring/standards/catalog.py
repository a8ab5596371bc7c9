from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from ats_scoring.schemas.ats import ATSStandard, JobBoardATSMapping

logger = logging.getLogger(__name__)


class ATSCatalog:
    """Static ATS vendor reference data: vendors, job boards and section headers."""

    def __init__(self, standards_path: str | Path | None = None) -> None:
        path = Path(standards_path) if standards_path else Path(__file__).with_name("ats_standards.json")
        raw = self._load_raw(path)
        self._vendors = MappingProxyType(self._parse_vendors(raw.get("vendors"), path))
        self._job_boards = tuple(self._parse_job_boards(raw.get("job_boards"), path))
        self._section_headers = MappingProxyType(self._parse_section_headers(raw.get("section_headers"), path))
        self._header_lookup = MappingProxyType(
            {
                variant.lower(): canonical
                for canonical, variants in self._section_headers.items()
                for variant in variants
            }
        )
        logger.info(
            "ats_catalog_loaded vendors=%s job_boards=%s sections=%s",
            len(self._vendors),
            len(self._job_boards),
            len(self._section_headers),
        )

    @staticmethod
    def _load_raw(path: Path) -> dict[str, Any]:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        if not isinstance(raw, dict):
            raise RuntimeError(f"Invalid ATS standards '{path}': expected a top-level mapping.")
        return raw

    @staticmethod
    def _parse_vendors(raw: Any, path: Path) -> dict[str, ATSStandard]:
        if not isinstance(raw, dict):
            raise RuntimeError(f"Invalid ATS standards '{path}': 'vendors' must be a mapping.")
        vendors: dict[str, ATSStandard] = {}
        for ats_id, payload in raw.items():
            key = str(ats_id)
            if key != key.strip().lower():
                raise RuntimeError(f"ATS id '{key}' in '{path}' must be lowercase.")
            try:
                vendors[key] = ATSStandard.model_validate(payload)
            except ValidationError as exc:
                raise RuntimeError(f"Invalid ATS standard '{key}' in '{path}': {exc}") from exc
        return vendors

    @staticmethod
    def _parse_job_boards(raw: Any, path: Path) -> list[JobBoardATSMapping]:
        if not isinstance(raw, list):
            raise RuntimeError(f"Invalid ATS standards '{path}': 'job_boards' must be a list.")
        try:
            return [JobBoardATSMapping.model_validate(item) for item in raw]
        except ValidationError as exc:
            raise RuntimeError(f"Invalid job board mapping in '{path}': {exc}") from exc

    @staticmethod
    def _parse_section_headers(raw: Any, path: Path) -> dict[str, tuple[str, ...]]:
        if not isinstance(raw, dict):
            raise RuntimeError(f"Invalid ATS standards '{path}': 'section_headers' must be a mapping.")
        return {str(key).lower(): tuple(str(item) for item in values) for key, values in raw.items()}

    @property
    def vendors(self) -> Mapping[str, ATSStandard]:
        return self._vendors

    @property
    def job_boards(self) -> tuple[JobBoardATSMapping, ...]:
        return self._job_boards

    @property
    def section_headers(self) -> Mapping[str, tuple[str, ...]]:
        return self._section_headers

    def vendor(self, ats_id: str) -> ATSStandard | None:
        return self._vendors.get(ats_id.lower())

    def canonical_section(self, header: str) -> str | None:
        return self._header_lookup.get(header.strip().lower())


@lru_cache(maxsize=1)
def get_default_catalog() -> ATSCatalog:
    return ATSCatalog()
