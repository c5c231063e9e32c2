"""Importance ranking of missing skills.

A missing skill earns points when the job description stresses it
("must have X", "experience with X", ...) and for every time it is
mentioned at all. The highest scoring skills are suggested first.
"""

from __future__ import annotations

import re

from app.core.skill_rules import SkillRules


def importance_score(skill: str, job_description: str, rules: SkillRules) -> int:
    lower_jd = job_description.lower()
    skill_lower = skill.lower()

    score = 0
    for word in rules.importance_words:
        if f"{word} {skill_lower}" in lower_jd or f"{word} with {skill_lower}" in lower_jd:
            score += rules.importance_phrase_points

    occurrences = len(re.findall(re.escape(skill_lower), lower_jd))
    return score + occurrences * rules.occurrence_points


def rank_missing_skills(
    missing_skills: list[str], job_description: str, rules: SkillRules
) -> list[tuple[str, int]]:
    """Return (skill, score) pairs, highest first; ties keep input order."""
    scored = [
        (skill, importance_score(skill, job_description, rules))
        for skill in missing_skills
    ]
    return sorted(scored, key=lambda pair: pair[1], reverse=True)


def top_missing_skills(
    missing_skills: list[str], job_description: str, rules: SkillRules
) -> list[str]:
    """Up to ``rules.top_missing_limit`` missing skills, most important first.

    Short lists are topped up with the remaining missing skills in their
    original order.
    """
    limit = rules.top_missing_limit
    ranked = rank_missing_skills(missing_skills, job_description, rules)
    top = [skill for skill, _ in ranked[:limit]]
    if len(top) < limit:
        remaining = [s for s in missing_skills if s not in top]
        top.extend(remaining[: limit - len(top)])
    return top
