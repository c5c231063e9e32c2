"""Shared Pydantic models used by the gateway, the scoring engine and the client.

Wire format is camelCase (``jobDescription``, ``requiredSkills`` ...);
Python code uses snake_case attribute names.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys; fields cannot be reassigned."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ---------------------------------------------------------------------------
# Gateway contract: POST /api/jobs
# ---------------------------------------------------------------------------

class JobAnalysisRequest(CamelModel):
    """Job description plus the user's skills, already split and trimmed."""
    job_description: str = ""
    user_skills: list[str] = Field(default_factory=list)


class JobAnalysisResponse(CamelModel):
    """Skills extracted by the language model.

    ``missing_skills`` is the exact-match difference against the submitted
    user skills. Reports recompute it with the fuzzy matching policy.
    """
    required_skills: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)


class ErrorResponse(CamelModel):
    error: str


# ---------------------------------------------------------------------------
# Report contract: POST /api/jobs/report
# ---------------------------------------------------------------------------

class SkillReportRequest(CamelModel):
    """Raw form input: the user's skills are one comma-separated string."""
    job_description: str = ""
    user_skills: str = ""


class AnalysisResult(CamelModel):
    """Snapshot of one analysis. Replaced wholesale by the next analysis.

    ``technical_skills`` and ``soft_skills`` partition ``required_skills``
    in their original order.
    """
    required_skills: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)
    technical_skills: list[str] = Field(default_factory=list)
    soft_skills: list[str] = Field(default_factory=list)


class SkillReport(CamelModel):
    """Everything the readiness dashboard shows for one analysis."""
    analysis: AnalysisResult
    matched_skills: list[str] = Field(default_factory=list)
    match_percentage: int = Field(0, ge=0, le=100)
    technical_match_percentage: int = Field(0, ge=0, le=100)
    soft_match_percentage: int = Field(0, ge=0, le=100)
    readiness_score: int = Field(0, ge=0, le=100)
    readiness_tip: str = ""
    top_missing_skills: list[str] = Field(default_factory=list)
    roadmap: list[str] = Field(default_factory=list)


class SkillReportResponse(SkillReport):
    """Report plus its plain-text summary, ready to paste elsewhere."""
    summary: str = ""


# ---------------------------------------------------------------------------
# Diagnostic store entry
# ---------------------------------------------------------------------------

class AnalysisRecord(CamelModel):
    """One gateway analysis as kept by the analysis store."""
    job_title: str = "Unknown"
    description: str
    required_skills: list[str] = Field(default_factory=list)
    missing_skills: list[str] = Field(default_factory=list)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
