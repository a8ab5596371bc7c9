from __future__ import annotations

import math
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

Importance = Literal["required", "preferred", "nice-to-have"]
Strictness = Literal["low", "medium", "high"]
OptimizationType = Literal["formatting", "content", "structure", "keywords"]
Impact = Literal["high", "medium", "low"]
Effort = Literal["easy", "medium", "hard"]

_WEIGHTS_TOLERANCE = 1e-6


class _StaticModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class KeywordEntry(_StaticModel):
    term: str
    variants: tuple[str, ...] = ()
    importance: Importance
    context: str | None = None


class KeywordCategory(_StaticModel):
    name: str
    keywords: tuple[KeywordEntry, ...]


class IndustryKeywords(_StaticModel):
    sector: str
    categories: tuple[KeywordCategory, ...]
    common_tools: tuple[str, ...] = ()
    soft_skills: tuple[str, ...] = ()
    certifications: tuple[str, ...] = ()


class ATSPreferences(_StaticModel):
    date_format: str
    section_headers: tuple[str, ...]
    avoid_elements: tuple[str, ...]
    max_file_size: int = Field(gt=0)
    supported_fonts: tuple[str, ...]
    preferred_file_types: tuple[str, ...]
    max_pages: int | None = None


class ATSParsingCapabilities(_StaticModel):
    parses_tables: bool
    parses_columns: bool
    parses_images: bool
    parses_headers: bool
    parses_footers: bool
    parses_links: bool
    parses_custom_fonts: bool


class ATSStandard(_StaticModel):
    id: str
    name: str
    vendor: str
    market_share: float
    strictness: Strictness
    preferences: ATSPreferences
    common_in: tuple[str, ...] = ()
    parsing_capabilities: ATSParsingCapabilities
    tips: tuple[str, ...] = ()


class JobBoardATSMapping(_StaticModel):
    job_board: str
    common_ats: tuple[str, ...]
    recommended_format: str
    tips: tuple[str, ...] = ()


class FontSizeStats(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    min: float = Field(ge=0)
    max: float = Field(ge=0)
    average: float = Field(ge=0)


class Margins(BaseModel):
    """Page margins in inches."""

    model_config = ConfigDict(allow_inf_nan=False)

    top: float = Field(ge=0)
    bottom: float = Field(ge=0)
    left: float = Field(ge=0)
    right: float = Field(ge=0)


class FormattingCheckResult(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    has_tables: bool = False
    has_multiple_columns: bool = False
    has_images: bool = False
    has_headers_footers: bool = False
    has_text_boxes: bool = False
    has_unusual_fonts: bool = False
    fonts: list[str] = Field(default_factory=list)
    font_size: FontSizeStats
    margins: Margins
    page_count: int = Field(ge=0)
    file_size: int = Field(ge=0)


class ScoringInput(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    formatting_check: FormattingCheckResult
    detected_sections: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list)
    target_keywords: list[str] | None = None
    date_formats: list[str] = Field(default_factory=list)
    text_length: int = Field(ge=0)


class ATSScoreWeights(BaseModel):
    """Category weights for the overall score; components must sum to 1."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    formatting: float = Field(default=0.4, ge=0.0)
    keywords: float = Field(default=0.3, ge=0.0)
    structure: float = Field(default=0.2, ge=0.0)
    readability: float = Field(default=0.1, ge=0.0)

    @model_validator(mode="after")
    def _validate_sum(self) -> ATSScoreWeights:
        total = self.formatting + self.keywords + self.structure + self.readability
        if not math.isclose(total, 1.0, abs_tol=_WEIGHTS_TOLERANCE):
            raise ValueError(f"weights must sum to 1.0 (got {total:.6f})")
        return self


class ATSCategoryScore(BaseModel):
    score: int = Field(ge=0, le=100)
    max_score: int = 100
    percentage: int = Field(ge=0, le=100)
    issues: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)


class ATSScoreBreakdown(BaseModel):
    formatting: ATSCategoryScore
    keywords: ATSCategoryScore
    structure: ATSCategoryScore
    readability: ATSCategoryScore


class ATSCompatibilityEntry(BaseModel):
    score: int = Field(ge=0, le=100)
    compatible: bool
    issues: list[str] = Field(default_factory=list)
    optimizations: list[str] = Field(default_factory=list)


ATSCompatibilityMatrix = dict[str, ATSCompatibilityEntry]


class ATSOptimization(BaseModel):
    id: str
    type: OptimizationType
    priority: int = Field(ge=1)
    title: str
    description: str
    impact: Impact
    effort: Effort
    before: str | None = None
    after: str | None = None
    auto_fixable: bool = False


class ATSScoreResult(BaseModel):
    overall: int = Field(ge=0, le=100)
    breakdown: ATSScoreBreakdown
    compatibility_matrix: ATSCompatibilityMatrix = Field(default_factory=dict)
    optimizations: list[ATSOptimization] = Field(default_factory=list)


class DetectedSection(BaseModel):
    name: str
    normalized_name: str
    start_line: int = Field(ge=0)
    end_line: int = Field(ge=0)
    content: str = ""
    is_standard: bool
    suggested_name: str | None = None


class KeywordGap(BaseModel):
    missing: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)


class ATSAnalysisConfig(BaseModel):
    target_ats: list[str] | None = None
    target_sector: str | None = None
    include_keyword_suggestions: bool = True

    @field_validator("target_ats")
    @classmethod
    def _normalize_target_ats(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return None
        cleaned = [item.strip().lower() for item in value if item and item.strip()]
        return cleaned or None

    @field_validator("target_sector")
    @classmethod
    def _normalize_target_sector(cls, value: str | None) -> str | None:
        if value is None:
            return None
        cleaned = value.strip().lower()
        return cleaned or None


class ATSAnalysisReport(BaseModel):
    score: ATSScoreResult
    label: str
    color: str
    sector: str | None = None
    keywords: list[str] = Field(default_factory=list)
    keyword_gap: KeywordGap | None = None
    detected_sections: list[DetectedSection] = Field(default_factory=list)
    date_formats: list[str] = Field(default_factory=list)
    supported_ats: list[str] = Field(default_factory=list)
