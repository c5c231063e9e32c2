"""Versioned matching and scoring rules.

The keyword lists, weights and fixed texts used by the scoring engine live
in ``skill_rules.json`` next to this module so they can be varied without
code changes. ``SKILL_RULES_PATH`` points the service at another file.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.core.config import settings

logger = logging.getLogger(__name__)

_DEFAULT_PATH = Path(__file__).with_name("skill_rules.json")


class ReadinessWeights(BaseModel):
    overall: float = 0.6
    technical: float = 0.3
    soft: float = 0.1


class ReadinessTip(BaseModel):
    min_score: int = Field(..., ge=0, le=100)
    tip: str


class RoadmapBucket(BaseModel):
    name: str
    triggers: list[str]
    step: str


class SkillRules(BaseModel):
    """Parsed ``skill_rules.json``."""
    version: str
    technical_keywords: list[str]
    importance_words: list[str]
    importance_phrase_points: int = 5
    occurrence_points: int = 2
    top_missing_limit: int = Field(5, ge=0)
    readiness_weights: ReadinessWeights = Field(default_factory=ReadinessWeights)
    readiness_tips: list[ReadinessTip] = Field(..., min_length=1)
    roadmap_buckets: list[RoadmapBucket] = Field(default_factory=list)
    roadmap_fallback: str

    @field_validator("readiness_tips")
    @classmethod
    def _highest_band_first(cls, tips: list[ReadinessTip]) -> list[ReadinessTip]:
        return sorted(tips, key=lambda t: t.min_score, reverse=True)

    @field_validator("technical_keywords", "importance_words")
    @classmethod
    def _lowercase(cls, words: list[str]) -> list[str]:
        return [w.lower() for w in words]


def load_skill_rules(path: Path | str | None = None) -> SkillRules:
    """Read and validate a rules file (bundled rules when *path* is None)."""
    rules_path = Path(path) if path else _DEFAULT_PATH
    rules = SkillRules(**json.loads(rules_path.read_text(encoding="utf-8")))
    logger.info("Skill rules v%s loaded from %s", rules.version, rules_path)
    return rules


# ---------------------------------------------------------------------------
# Module-level singleton
# ---------------------------------------------------------------------------

_rules: Optional[SkillRules] = None


def get_skill_rules() -> SkillRules:
    global _rules
    if _rules is None:
        _rules = load_skill_rules(settings.SKILL_RULES_PATH)
    return _rules
