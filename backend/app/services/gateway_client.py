"""HTTP client for the SkillLens gateway.

Mirrors what the analyzer page does: check the form, POST the job
description and skills to ``/api/jobs``, verify the answer holds two skill
lists, then build the report locally with the scoring engine.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

import httpx

from shared.models import SkillReport
from app.core.errors import (
    AnalysisFailedError,
    MissingInputError,
    UnexpectedResponseError,
)
from app.core.skill_rules import SkillRules
from app.services.report_builder import build_report
from app.services.skill_matcher import split_skill_input

logger = logging.getLogger(__name__)

TIMEOUT = 180.0  # LLM extraction can take time


def _is_string_list(value: object) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


class SkillLensClient:
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        rules: Optional[SkillRules] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._rules = rules

    async def fetch_skills(
        self, job_description: str, user_skills: list[str]
    ) -> tuple[list[str], list[str]]:
        """POST to the gateway and return its (required, missing) lists."""
        url = f"{self._base_url}/api/jobs"
        start = time.perf_counter()

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                resp = await client.post(
                    url,
                    json={"jobDescription": job_description, "userSkills": user_skills},
                )
                resp.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("Gateway call failed: %s", str(exc))
            raise AnalysisFailedError() from exc

        latency_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "Gateway call latency=%.1f ms", latency_ms,
            extra={"latency_ms": latency_ms},
        )

        try:
            data = resp.json()
        except ValueError as exc:
            logger.error("Gateway returned a non-JSON body: %.200r", resp.text)
            raise UnexpectedResponseError() from exc

        if not (
            isinstance(data, dict)
            and _is_string_list(data.get("requiredSkills"))
            and _is_string_list(data.get("missingSkills"))
        ):
            logger.error("Gateway returned unexpected payload: %.200r", data)
            raise UnexpectedResponseError()
        return data["requiredSkills"], data["missingSkills"]

    async def analyze(self, job_description: str, user_skills_text: str) -> SkillReport:
        """Run a full analysis for the form inputs.

        Raises:
            MissingInputError: either field is empty.
            AnalysisFailedError: the gateway could not be reached or failed.
            UnexpectedResponseError: the gateway answered with the wrong shape.
        """
        if not job_description or not user_skills_text:
            raise MissingInputError()

        required, _ = await self.fetch_skills(
            job_description, split_skill_input(user_skills_text)
        )
        report = build_report(required, user_skills_text, job_description, self._rules)
        logger.info(
            "Report ready: readiness=%d", report.readiness_score,
            extra={"readiness_score": report.readiness_score},
        )
        return report
