from fastapi import APIRouter, HTTPException, Request, status

from ats_scoring.core.rate_limit import rate_limit
from ats_scoring.schemas.api import (
    AnalyzeRequest,
    KeywordGapRequest,
    NormalizedSectionHeader,
    ScoreRequest,
    SectionNormalizeRequest,
    SectionNormalizeResponse,
)
from ats_scoring.schemas.ats import ATSAnalysisReport, ATSScoreResult, ATSStandard, KeywordGap, Strictness
from ats_scoring.services.ats_service import ATSAnalysisError, analyze_resume_text, score_input
from ats_scoring.standards.sections import get_recommended_section_header, normalize_section_header
from ats_scoring.standards.vendors import (
    get_all_ats_standards,
    get_ats_by_strictness,
    get_ats_for_job_board,
    get_ats_standard,
)
from ats_scoring.taxonomy.keywords import get_all_sectors, get_industry_keywords, get_missing_keywords

router = APIRouter()


def _raise_analysis_http_error(exc: ATSAnalysisError) -> None:
    raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc


@router.post("/ats/score", response_model=ATSScoreResult)
@rate_limit()
async def ats_score(request: Request, payload: ScoreRequest):
    _ = request
    return score_input(payload.input, payload.weights)


@router.post("/ats/analyze", response_model=ATSAnalysisReport)
@rate_limit()
async def ats_analyze(request: Request, payload: AnalyzeRequest):
    _ = request
    try:
        return analyze_resume_text(
            payload.text,
            file_size=payload.file_size,
            page_count=payload.page_count,
            target_keywords=payload.target_keywords,
            config=payload.config,
            weights=payload.weights,
        )
    except ATSAnalysisError as exc:
        _raise_analysis_http_error(exc)


@router.get("/ats/standards", response_model=list[ATSStandard])
@rate_limit()
async def ats_standards(request: Request, strictness: Strictness | None = None):
    _ = request
    if strictness is None:
        return get_all_ats_standards()
    return get_ats_by_strictness(strictness)


@router.get("/ats/standards/{ats_id}", response_model=ATSStandard)
@rate_limit()
async def ats_standard(request: Request, ats_id: str):
    _ = request
    standard = get_ats_standard(ats_id)
    if standard is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown ATS: {ats_id}")
    return standard


@router.get("/ats/job-boards/{job_board}", response_model=list[ATSStandard])
@rate_limit()
async def ats_job_board(request: Request, job_board: str):
    _ = request
    standards = get_ats_for_job_board(job_board)
    if not standards:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown job board: {job_board}")
    return standards


@router.get("/ats/sectors", response_model=list[str])
@rate_limit()
async def ats_sectors(request: Request):
    _ = request
    return get_all_sectors()


@router.post("/ats/sectors/{sector}/keyword-gap", response_model=KeywordGap)
@rate_limit()
async def ats_keyword_gap(request: Request, sector: str, payload: KeywordGapRequest):
    _ = request
    if get_industry_keywords(sector) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown sector: {sector}")
    return get_missing_keywords(payload.keywords, sector)


@router.post("/ats/sections/normalize", response_model=SectionNormalizeResponse)
@rate_limit()
async def ats_normalize_sections(request: Request, payload: SectionNormalizeRequest):
    _ = request
    sections = []
    for header in payload.headers:
        canonical = normalize_section_header(header)
        sections.append(
            NormalizedSectionHeader(
                header=header,
                canonical=canonical,
                recommended=get_recommended_section_header(canonical, payload.language) if canonical else None,
            )
        )
    return SectionNormalizeResponse(sections=sections)
