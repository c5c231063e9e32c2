"""Rule-based learning roadmap."""

from __future__ import annotations

from app.core.skill_rules import RoadmapBucket, SkillRules


def bucket_applies(bucket: RoadmapBucket, missing_lower: list[str]) -> bool:
    return any(
        trigger in skill for skill in missing_lower for trigger in bucket.triggers
    )


def build_roadmap(missing_skills: list[str], rules: SkillRules) -> list[str]:
    """One step per bucket touched by a missing skill, in bucket order.

    Falls back to a single generic line when no bucket applies.
    """
    missing_lower = [skill.lower() for skill in missing_skills]
    roadmap = [
        bucket.step
        for bucket in rules.roadmap_buckets
        if bucket_applies(bucket, missing_lower)
    ]
    return roadmap or [rules.roadmap_fallback]
