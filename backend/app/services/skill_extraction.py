"""Extraction gateway: job description → list of required skills.

One LLM call per analysis. The model is asked for the skills in free text
and its answer is treated as a single comma-separated list; there is no
schema and no retry. Any failure becomes an ExtractionError carrying the
generic gateway message.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from llama_index.core.llms import LLM

from shared.models import AnalysisRecord, JobAnalysisResponse
from app.core.errors import ExtractionError
from app.services.analysis_store import AnalysisStore
from app.services.skill_matcher import exact_missing_skills

logger = logging.getLogger(__name__)

EXTRACTION_PROMPT = (
    'Extract all technical and soft skills from this job description: "{job_description}"'
)


def build_extraction_prompt(job_description: str) -> str:
    return EXTRACTION_PROMPT.format(job_description=job_description)


def parse_skill_list(text: str | None) -> list[str]:
    """Split the model's reply on commas, trim, drop empty entries.

    Order, case and duplicates are preserved as the model wrote them.
    """
    return [part.strip() for part in (text or "").split(",") if part.strip()]


class SkillExtractor:
    """Calls the LLM and turns its reply into required/missing skill lists.

    The LLM comes from *llm_factory* on first use, so a misconfigured
    provider only surfaces once a request has passed input validation.
    """

    def __init__(self, llm_factory: Callable[[], LLM], store: AnalysisStore) -> None:
        self._llm_factory = llm_factory
        self._store = store

    async def extract(self, job_description: str) -> list[str]:
        """Return the skills the model finds in *job_description*."""
        prompt = build_extraction_prompt(job_description)
        llm = self._llm_factory()
        start = time.perf_counter()

        response = await llm.acomplete(prompt)

        latency_ms = (time.perf_counter() - start) * 1000
        skills = parse_skill_list(response.text)
        logger.info(
            "Skill extraction: %d skills latency=%.1f ms",
            len(skills), latency_ms,
            extra={"latency_ms": latency_ms, "skill_count": len(skills)},
        )
        return skills

    async def analyze(
        self, job_description: str, user_skills: list[str]
    ) -> JobAnalysisResponse:
        """Extract required skills and diff them exactly against *user_skills*.

        Raises:
            ExtractionError: the LLM call or response handling failed.
        """
        try:
            required = await self.extract(job_description)
            missing = exact_missing_skills(required, user_skills)
            self._store.append(AnalysisRecord(
                description=job_description,
                required_skills=required,
                missing_skills=missing,
            ))
        except Exception as exc:
            logger.exception("Job analysis error: %s", exc)
            raise ExtractionError() from exc

        logger.info(
            "Job analysed: %d required, %d missing",
            len(required), len(missing),
            extra={"skill_count": len(required), "missing_count": len(missing)},
        )
        return JobAnalysisResponse(required_skills=required, missing_skills=missing)
