"""Deterministic readiness scorer.

Match percentages are whole numbers. Rounding is half-up (2.5 → 3), the
same as the dashboard has always shown, not Python's round-half-even.
"""

from __future__ import annotations

import math

from app.core.skill_rules import SkillRules


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def percentage(part: int, whole: int) -> int:
    """Return round(100 * part / whole), or 0 when *whole* is 0."""
    if whole == 0:
        return 0
    return round_half_up(part / whole * 100)


def category_match_percentage(category: list[str], matched_skills: list[str]) -> int:
    """Share of *category* whose skills appear in *matched_skills*."""
    if not category:
        return 0
    matched = set(matched_skills)
    return percentage(sum(1 for skill in category if skill in matched), len(category))


def readiness_score(
    match_pct: int,
    technical_pct: int,
    soft_pct: int,
    rules: SkillRules,
) -> int:
    """Weighted composite of the three percentages, clamped to [0, 100]."""
    weights = rules.readiness_weights
    score = round_half_up(
        match_pct * weights.overall
        + technical_pct * weights.technical
        + soft_pct * weights.soft
    )
    return max(0, min(100, score))


def readiness_tip(score: int, rules: SkillRules) -> str:
    """Fixed advice for the band *score* falls in."""
    for band in rules.readiness_tips:
        if score >= band.min_score:
            return band.tip
    return rules.readiness_tips[-1].tip
