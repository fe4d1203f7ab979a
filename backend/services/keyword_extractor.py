"""Generic keyword coverage for resume-JD analysis.

Uses a small curated vocabulary of role and work-style terms that is kept
separate from the skill taxonomy in skill_extractor and the experience
domains in experience_extractor. Matching is plain substring lookup on
lower-cased text.
"""

import logging

from models.schemas.keyword_profile import KeywordProfile
from services.score_aggregator import clamp_score
from services.text_normalizer import Document, normalize

logger = logging.getLogger(__name__)

COMMON_KEYWORDS: tuple[str, ...] = (
    "leadership", "management", "development", "analysis", "design",
    "implementation", "strategy", "communication", "collaboration",
    "problem-solving", "innovation", "project management", "team lead",
    "senior", "junior", "architect", "engineer",
)

# Score when the job posting contains none of the vocabulary
NO_KEYWORDS_SCORE = 50.0


def extract_keywords(text: str) -> list[str]:
    """Vocabulary keywords found in text, in vocabulary order."""
    normalized = normalize(text)
    return [kw for kw in COMMON_KEYWORDS if kw in normalized]


def match_keywords(
    resume: Document, job_keywords: list[str]
) -> tuple[list[str], list[str]]:
    """Split job keywords into (matched, missing) by presence in the resume."""
    matched = []
    missing = []
    for kw in job_keywords:
        if resume.contains(kw):
            matched.append(kw)
        else:
            missing.append(kw)
    return matched, missing


def compute_keyword_score(matched: list[str], missing: list[str]) -> float:
    """Match percentage, or the neutral default when there is nothing to match."""
    total = len(matched) + len(missing)
    if total == 0:
        return NO_KEYWORDS_SCORE
    return clamp_score(len(matched) / total * 100)


def compute_keyword_frequency(resume: Document, keywords: list[str]) -> dict[str, int]:
    """Non-overlapping occurrence count of each keyword in the resume."""
    return {kw: resume.normalized.count(normalize(kw)) for kw in keywords}


def analyze_keywords(resume: Document, job: Document) -> KeywordProfile:
    job_keywords = extract_keywords(job.normalized)
    matched, missing = match_keywords(resume, job_keywords)

    logger.debug("Keywords: %d/%d matched", len(matched), len(job_keywords))
    return KeywordProfile(
        matched_keywords=matched,
        missing_keywords=missing,
        total_keywords=len(job_keywords),
        keyword_frequency=compute_keyword_frequency(resume, job_keywords),
        score=compute_keyword_score(matched, missing),
        explanation=(
            f"Found {len(matched)} of {len(job_keywords)} important keywords "
            "from the job description."
        ),
    )
