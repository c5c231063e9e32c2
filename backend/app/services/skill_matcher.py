"""Deterministic skill matcher.

No LLM involved. Required skills come from the extraction gateway; user
skills are the raw comma-separated text typed into the form. Matching is
a loose substring test on normalised strings so that "Node.js" matches
"nodejs" and "React" matches "react native".
"""

from __future__ import annotations

import re

from app.core.skill_rules import SkillRules

_STRIP_CHARS = re.compile(r"[.\-\s]")


def normalize_skill(skill: str) -> str:
    """Lowercase, trim, and drop dots, hyphens and whitespace."""
    return _STRIP_CHARS.sub("", skill.strip().lower())


def split_skill_input(raw: str) -> list[str]:
    """Split form input on commas, trim each part, drop empty parts."""
    return [part.strip() for part in raw.split(",") if part.strip()]


def parse_user_skills(raw: str) -> list[str]:
    """Return the normalised user skills, ignoring parts that normalise to ''.

    An empty string is a substring of everything, so a trailing comma would
    otherwise mark every required skill as matched.
    """
    normalized = (normalize_skill(part) for part in raw.split(","))
    return [skill for skill in normalized if skill]


def is_matched(skill: str, user_skills: list[str]) -> bool:
    """True if any normalised user skill contains, or is contained in, *skill*."""
    norm = normalize_skill(skill)
    return any(user in norm or norm in user for user in user_skills)


def match_skills(
    required_skills: list[str], user_skills_text: str
) -> tuple[list[str], list[str]]:
    """Return (matched, missing), both in the order of *required_skills*."""
    user_skills = parse_user_skills(user_skills_text)
    matched: list[str] = []
    missing: list[str] = []
    for skill in required_skills:
        (matched if is_matched(skill, user_skills) else missing).append(skill)
    return matched, missing


def exact_missing_skills(extracted: list[str], user_skills: list[str]) -> list[str]:
    """Skills absent from *user_skills* under case-sensitive equality."""
    present = set(user_skills)
    return [skill for skill in extracted if skill not in present]


def is_technical(skill: str, rules: SkillRules) -> bool:
    lower = skill.lower()
    return any(keyword in lower for keyword in rules.technical_keywords)


def classify_skills(
    required_skills: list[str], rules: SkillRules
) -> tuple[list[str], list[str]]:
    """Partition *required_skills* into (technical, soft), order preserved."""
    technical: list[str] = []
    soft: list[str] = []
    for skill in required_skills:
        (technical if is_technical(skill, rules) else soft).append(skill)
    return technical, soft
