"""FastAPI application entrypoint — SkillLens gateway.

Responsibilities:
  - Validate job analysis requests
  - Proxy the job description to the configured LLM for skill extraction
  - Score extracted skills against the user's skills (report endpoint)

NOT responsible for:
  - Persisting analyses (in-memory diagnostic store only)
  - Rendering the dashboard
"""

from __future__ import annotations

import logging
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.logging_config import setup_logging
from app.core.errors import InvalidInputError, SkillLensError
from app.routers import jobs

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="SkillLens — Job Analyzer",
    version="1.0.0",
    description="Extracts required skills from job descriptions and scores job readiness",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(jobs.router, prefix="/api", tags=["jobs"])


@app.exception_handler(SkillLensError)
async def skilllens_error_handler(request: Request, exc: SkillLensError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies get the same ``{"error": ...}`` shape as other failures."""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'][1:]) or 'body'}: {err['msg']}"
        for err in exc.errors()
    )
    logger.info("Rejected request to %s: %s", request.url.path, problems)
    return JSONResponse(
        status_code=InvalidInputError.status_code,
        content={"error": f"Invalid request: {problems}"},
    )


@app.on_event("startup")
async def startup_event() -> None:
    from app.core.skill_rules import get_skill_rules
    rules = get_skill_rules()
    logger.info(
        "Skill rules ready: v%s, %d technical keywords, %d roadmap buckets",
        rules.version, len(rules.technical_keywords), len(rules.roadmap_buckets),
    )


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}
