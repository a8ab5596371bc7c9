from .api import (
    AnalyzeRequest,
    KeywordGapRequest,
    NormalizedSectionHeader,
    ScoreRequest,
    SectionNormalizeRequest,
    SectionNormalizeResponse,
)
from .ats import (
    ATSAnalysisConfig,
    ATSAnalysisReport,
    ATSCategoryScore,
    ATSCompatibilityEntry,
    ATSCompatibilityMatrix,
    ATSOptimization,
    ATSParsingCapabilities,
    ATSPreferences,
    ATSScoreBreakdown,
    ATSScoreResult,
    ATSScoreWeights,
    ATSStandard,
    DetectedSection,
    FontSizeStats,
    FormattingCheckResult,
    IndustryKeywords,
    JobBoardATSMapping,
    KeywordCategory,
    KeywordEntry,
    KeywordGap,
    Margins,
    ScoringInput,
)

__all__ = [
    "KeywordEntry",
    "KeywordCategory",
    "IndustryKeywords",
    "ATSPreferences",
    "ATSParsingCapabilities",
    "ATSStandard",
    "JobBoardATSMapping",
    "FontSizeStats",
    "Margins",
    "FormattingCheckResult",
    "ScoringInput",
    "ATSScoreWeights",
    "ATSCategoryScore",
    "ATSScoreBreakdown",
    "ATSCompatibilityEntry",
    "ATSCompatibilityMatrix",
    "ATSOptimization",
    "ATSScoreResult",
    "DetectedSection",
    "KeywordGap",
    "ATSAnalysisConfig",
    "ATSAnalysisReport",
    "ScoreRequest",
    "AnalyzeRequest",
    "KeywordGapRequest",
    "SectionNormalizeRequest",
    "NormalizedSectionHeader",
    "SectionNormalizeResponse",
]
