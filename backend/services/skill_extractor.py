"""Skill extraction and overlap against a fixed skill vocabulary.

Skills are found by plain substring lookup in the lower-cased text and
compared with a containment rule: two skills are equivalent when either
string contains the other ("java" satisfies "javascript" and vice versa).
No fuzzy or semantic matching is applied.
"""

import logging
from collections.abc import Iterable

from models.schemas.skill_profile import SkillProfile
from services.score_aggregator import clamp_score, round_half_up
from services.text_normalizer import Document, normalize

logger = logging.getLogger(__name__)

# Ordered: extraction results follow this order, not document order
SKILL_VOCABULARY: tuple[str, ...] = (
    # Languages, frameworks, platforms
    "javascript", "python", "react", "angular", "vue", "node.js", "typescript",
    "java", "c++", "c#", "sql", "mongodb", "postgresql", "aws", "azure",
    "docker", "kubernetes", "git",
    # Methodologies and domains
    "agile", "scrum", "machine learning", "ai", "data analysis",
    # Soft skills
    "project management", "leadership", "communication",
)

# Score when the job posting names no recognizable skill
NO_REQUIREMENTS_SCORE = 50.0


def extract_skills(text: str) -> list[str]:
    """Return vocabulary skills occurring in text, in vocabulary order."""
    normalized = normalize(text)
    return [skill for skill in SKILL_VOCABULARY if skill in normalized]


def skills_match(a: str, b: str) -> bool:
    """Containment equivalence: either skill string contains the other."""
    return a in b or b in a


def _has_equivalent(skill: str, candidates: Iterable[str]) -> bool:
    return any(skills_match(skill, other) for other in candidates)


def _explain(matched: int, total: int, missing: list[str]) -> str:
    percentage = round_half_up(matched / total * 100) if total > 0 else 0
    text = f"You have {matched} of {total} required skills ({percentage}%). "
    if missing:
        return text + f"Consider adding: {', '.join(missing[:3])}."
    return text + "Great skill coverage!"


def analyze_skills(resume: Document, job: Document) -> SkillProfile:
    """Partition the job's required skills by presence in the resume."""
    required = extract_skills(job.normalized)
    resume_skills = extract_skills(resume.normalized)

    matched = [s for s in required if _has_equivalent(s, resume_skills)]
    missing = [s for s in required if not _has_equivalent(s, resume_skills)]
    additional = [s for s in resume_skills if not _has_equivalent(s, required)]

    if required:
        score = len(matched) / len(required) * 100
    else:
        score = NO_REQUIREMENTS_SCORE

    logger.debug(
        "Skills: %d required, %d matched, %d additional",
        len(required), len(matched), len(additional),
    )
    return SkillProfile(
        required_skills=required,
        matched_skills=matched,
        missing_skills=missing,
        additional_skills=additional,
        score=clamp_score(score),
        explanation=_explain(len(matched), len(required), missing),
    )
