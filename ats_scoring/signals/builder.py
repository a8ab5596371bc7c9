from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ats_scoring.schemas.ats import DetectedSection, FormattingCheckResult, ScoringInput
from ats_scoring.taxonomy.keywords import extract_keywords_from_text

from .dates import detect_date_formats
from .formatting import analyze_formatting
from .sections import detect_sections


@dataclass(frozen=True)
class ResumeSignals:
    sections: list[DetectedSection]
    date_formats: list[str]
    keywords: list[str]
    formatting: FormattingCheckResult
    text_length: int

    def to_scoring_input(self, target_keywords: Sequence[str] | None = None) -> ScoringInput:
        return ScoringInput(
            formatting_check=self.formatting,
            detected_sections=[section.name for section in self.sections],
            keywords=list(self.keywords),
            target_keywords=list(target_keywords) if target_keywords is not None else None,
            date_formats=list(self.date_formats),
            text_length=self.text_length,
        )


def extract_signals(text: str, *, file_size: int, page_count: int) -> ResumeSignals:
    return ResumeSignals(
        sections=detect_sections(text),
        date_formats=detect_date_formats(text),
        keywords=extract_keywords_from_text(text),
        formatting=analyze_formatting(text, file_size, page_count),
        text_length=len(text),
    )


def build_scoring_input(
    text: str,
    *,
    file_size: int,
    page_count: int,
    target_keywords: Sequence[str] | None = None,
) -> ScoringInput:
    signals = extract_signals(text, file_size=file_size, page_count=page_count)
    return signals.to_scoring_input(target_keywords)
