"""Years-of-experience extraction and experience-domain coverage."""

import logging
import re

from models.schemas.experience_profile import ExperienceProfile
from services.score_aggregator import clamp_score
from services.text_normalizer import Document

logger = logging.getLogger(__name__)

# "5+ years of experience", "3 yrs exp", "10years experience"
# ASCII digits only; full-width and other Unicode digits do not count
EXP_YEARS_RE = re.compile(
    r"([0-9]+)\+?\s*(?:years?|yrs?)\s*(?:of\s*)?(?:experience|exp)",
    re.IGNORECASE,
)

# Longer figures saturate so parsing and the years ratio stay bounded
MAX_YEARS_DIGITS = 6
YEARS_CEILING = 10**MAX_YEARS_DIGITS - 1

DOMAIN_KEYWORDS: tuple[str, ...] = (
    "management", "leadership", "development", "design",
    "analysis", "implementation", "strategy",
)

BASE_SCORE = 50.0
YEARS_WEIGHT = 50.0
DOMAIN_WEIGHT = 50.0


def _parse_years(digits: str) -> int:
    digits = digits.lstrip("0") or "0"
    if len(digits) > MAX_YEARS_DIGITS:
        return YEARS_CEILING
    return int(digits)


def extract_years(text: str) -> int:
    """Largest explicit years-of-experience figure in text, 0 if none.

    Figures longer than MAX_YEARS_DIGITS digits saturate at YEARS_CEILING.
    """
    return max((_parse_years(m.group(1)) for m in EXP_YEARS_RE.finditer(text)), default=0)


def extract_domains(text: str) -> list[str]:
    """Domain keywords present in text, in DOMAIN_KEYWORDS order."""
    lowered = text.lower()
    return [kw for kw in DOMAIN_KEYWORDS if kw in lowered]


def compute_experience_score(
    years_found: int, years_required: int, matched_domains: int, total_domains: int
) -> float:
    """Years component (capped at 50) plus domain component (up to 50).

    Without a stated requirement the years component is replaced by the
    neutral base of 50.
    """
    score = BASE_SCORE
    if years_required > 0:
        if years_found >= years_required:
            score = YEARS_WEIGHT
        else:
            score = years_found / years_required * YEARS_WEIGHT
    if total_domains > 0:
        score += matched_domains / total_domains * DOMAIN_WEIGHT
    return clamp_score(score)


def _explain(years: int, required: int, matched: int, total: int) -> str:
    explanation = ""
    if required > 0:
        explanation += f"You have {years} years of experience vs {required} required. "
    if total > 0:
        explanation += f"{matched} of {total} experience types match the job requirements."
    return explanation.strip() or "Experience analysis based on job relevance and keywords."


def analyze_experience(resume: Document, job: Document) -> ExperienceProfile:
    years_found = extract_years(resume.raw)
    years_required = extract_years(job.raw)

    job_domains = extract_domains(job.normalized)
    matched = [kw for kw in job_domains if resume.contains(kw)]
    missing = [kw for kw in job_domains if not resume.contains(kw)]

    logger.debug(
        "Experience: %d years vs %d required, %d/%d domains",
        years_found, years_required, len(matched), len(job_domains),
    )
    return ExperienceProfile(
        years_found=years_found,
        years_required=years_required,
        matched_domains=matched,
        missing_domains=missing,
        score=compute_experience_score(
            years_found, years_required, len(matched), len(job_domains)
        ),
        explanation=_explain(years_found, years_required, len(matched), len(job_domains)),
    )
