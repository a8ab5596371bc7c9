from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from .ats import ATSAnalysisConfig, ATSScoreWeights, ScoringInput

LanguageCode = Literal["en", "fr"]


class ScoreRequest(BaseModel):
    input: ScoringInput
    weights: ATSScoreWeights | None = None


class AnalyzeRequest(BaseModel):
    text: str = Field(min_length=1, max_length=100000)
    file_size: int = Field(ge=0)
    page_count: int = Field(default=1, ge=0, le=100)
    target_keywords: list[str] | None = Field(default=None, max_length=200)
    config: ATSAnalysisConfig = Field(default_factory=ATSAnalysisConfig)
    weights: ATSScoreWeights | None = None


class KeywordGapRequest(BaseModel):
    keywords: list[str] = Field(default_factory=list, max_length=500)


class SectionNormalizeRequest(BaseModel):
    headers: list[str] = Field(min_length=1, max_length=50)
    language: LanguageCode = "en"


class NormalizedSectionHeader(BaseModel):
    header: str
    canonical: str | None = None
    recommended: str | None = None


class SectionNormalizeResponse(BaseModel):
    sections: list[NormalizedSectionHeader]
