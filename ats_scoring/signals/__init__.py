from .builder import ResumeSignals, build_scoring_input, extract_signals
from .dates import detect_date_formats
from .formatting import analyze_formatting
from .sections import detect_sections, is_section_header

__all__ = [
    "ResumeSignals",
    "extract_signals",
    "build_scoring_input",
    "detect_sections",
    "is_section_header",
    "detect_date_formats",
    "analyze_formatting",
]
