"""Skill report assembly, the pure core of SkillLens.

Takes the gateway's required-skill list, the user's raw skill text and the
job description and derives every number and list on the dashboard.
No I/O, no shared state: the same inputs always give an equal report.

Matching policy: the fuzzy substring match of ``skill_matcher`` decides
which skills are missing. The gateway's exact-match list is not consulted.
"""

from __future__ import annotations

from typing import Optional

from shared.models import AnalysisResult, SkillReport
from app.core.skill_rules import SkillRules, get_skill_rules
from app.services.readiness_scorer import (
    category_match_percentage,
    percentage,
    readiness_score,
    readiness_tip,
)
from app.services.roadmap import build_roadmap
from app.services.skill_matcher import classify_skills, match_skills
from app.services.skill_ranker import top_missing_skills

SUMMARY_TITLE = "SkillLens analysis for job (summary)"


def analyze_skills(
    required_skills: list[str],
    user_skills_text: str,
    rules: SkillRules,
) -> AnalysisResult:
    """Fuzzy-match and categorise *required_skills* into an AnalysisResult."""
    _, missing = match_skills(required_skills, user_skills_text)
    technical, soft = classify_skills(required_skills, rules)
    return AnalysisResult(
        required_skills=list(required_skills),
        missing_skills=missing,
        technical_skills=technical,
        soft_skills=soft,
    )


def build_report(
    required_skills: list[str],
    user_skills_text: str,
    job_description: str,
    rules: Optional[SkillRules] = None,
) -> SkillReport:
    rules = rules or get_skill_rules()
    analysis = analyze_skills(required_skills, user_skills_text, rules)

    missing = set(analysis.missing_skills)
    matched = [s for s in analysis.required_skills if s not in missing]

    match_pct = percentage(len(matched), len(analysis.required_skills))
    technical_pct = category_match_percentage(analysis.technical_skills, matched)
    soft_pct = category_match_percentage(analysis.soft_skills, matched)
    score = readiness_score(match_pct, technical_pct, soft_pct, rules)

    return SkillReport(
        analysis=analysis,
        matched_skills=matched,
        match_percentage=match_pct,
        technical_match_percentage=technical_pct,
        soft_match_percentage=soft_pct,
        readiness_score=score,
        readiness_tip=readiness_tip(score, rules),
        top_missing_skills=top_missing_skills(
            analysis.missing_skills, job_description, rules
        ),
        roadmap=build_roadmap(analysis.missing_skills, rules),
    )


def render_summary(report: SkillReport) -> str:
    """Plain-text version of *report* for pasting into notes or email."""
    lines = [
        SUMMARY_TITLE,
        f"Match: {report.match_percentage}% | Readiness score: {report.readiness_score}/100",
        "",
        "Matched skills:",
        *(f" - {skill}" for skill in report.matched_skills),
        "",
        "Top missing skills (important):",
        *(f" - {skill}" for skill in report.top_missing_skills),
        "",
        "Suggested roadmap:",
        *(f" - {step}" for step in report.roadmap),
    ]
    return "\n".join(lines)
