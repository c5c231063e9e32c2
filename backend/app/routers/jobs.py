"""Job analysis endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from shared.models import (
    ErrorResponse,
    JobAnalysisRequest,
    JobAnalysisResponse,
    SkillReportRequest,
    SkillReportResponse,
)
from app.core.config import settings
from app.core.errors import InvalidInputError, MissingInputError
from app.services.analysis_store import AnalysisStore, get_analysis_store
from app.services.llm_client import get_llm
from app.services.report_builder import build_report, render_summary
from app.services.skill_extraction import SkillExtractor
from app.services.skill_matcher import split_skill_input

logger = logging.getLogger(__name__)
router = APIRouter()

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Blank, too long or malformed input"},
    500: {"model": ErrorResponse, "description": "Skill extraction failed"},
}


def get_skill_extractor(
    store: AnalysisStore = Depends(get_analysis_store),
) -> SkillExtractor:
    # get_llm runs on first extraction, after the request has been validated
    return SkillExtractor(llm_factory=get_llm, store=store)


def _check_length(job_description: str) -> None:
    if len(job_description) > settings.MAX_DESCRIPTION_LENGTH:
        raise InvalidInputError("Job description too long")


@router.post(
    "/jobs",
    response_model=JobAnalysisResponse,
    responses=_ERROR_RESPONSES,
)
async def analyze_job(
    request: JobAnalysisRequest,
    extractor: SkillExtractor = Depends(get_skill_extractor),
) -> JobAnalysisResponse:
    """Extract the skills a job description asks for.

    ``missingSkills`` are the extracted skills not exactly present in
    ``userSkills``. Fails with ``{"error": "Failed to analyze job"}`` and
    status 500 if the language model call fails.
    """
    _check_length(request.job_description)
    return await extractor.analyze(request.job_description, request.user_skills)


@router.post(
    "/jobs/report",
    response_model=SkillReportResponse,
    responses=_ERROR_RESPONSES,
)
async def job_report(
    request: SkillReportRequest,
    extractor: SkillExtractor = Depends(get_skill_extractor),
) -> SkillReportResponse:
    """Full readiness report for a job description and raw skill text.

    Runs the extraction gateway, then scores the result with the fuzzy
    matching policy: match percentages, readiness score and tip, the top
    missing skills and a learning roadmap, plus a plain-text summary.
    """
    if not request.job_description.strip() or not request.user_skills.strip():
        raise MissingInputError()
    _check_length(request.job_description)

    extracted = await extractor.analyze(
        request.job_description, split_skill_input(request.user_skills)
    )
    report = build_report(
        extracted.required_skills, request.user_skills, request.job_description
    )
    logger.info(
        "Report built: match=%d%% readiness=%d",
        report.match_percentage, report.readiness_score,
        extra={"readiness_score": report.readiness_score},
    )
    return SkillReportResponse(
        **report.model_dump(),
        summary=render_summary(report),
    )
