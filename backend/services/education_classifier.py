"""Education presence, degree level and field detection."""

import logging
import re

from models.schemas.education_profile import EducationProfile
from services.score_aggregator import clamp_score
from services.text_normalizer import Document

logger = logging.getLogger(__name__)


def _any_of(*terms: str) -> re.Pattern:
    return re.compile("|".join(re.escape(t) for t in terms), re.IGNORECASE)


EDUCATION_RE = _any_of(
    "education", "degree", "university", "college", "bachelor", "master", "phd",
)
DEGREE_RE = _any_of("bachelor", "master", "phd", "degree")
FIELD_RE = _any_of("computer science", "engineering", "business", "marketing")

# Missing education requirements should not be punitive
BASE_SCORE = 70.0
DEGREE_BONUS = 20.0
FIELD_BONUS = 10.0


def _explain(has_education: bool, has_degree: bool, degree_required: bool) -> str:
    if not has_education:
        return "No education section found. Consider adding your educational background."
    if degree_required and not has_degree:
        return "Job requires specific degree level. Highlight relevant educational achievements."
    return "Educational background appears adequate for this position."


def analyze_education(resume: Document, job: Document) -> EducationProfile:
    has_education = bool(EDUCATION_RE.search(resume.normalized))
    has_relevant_degree = bool(DEGREE_RE.search(resume.normalized))
    relevant_field = bool(FIELD_RE.search(resume.normalized))
    degree_required = bool(DEGREE_RE.search(job.normalized))
    field_required = bool(FIELD_RE.search(job.normalized))

    score = BASE_SCORE
    if degree_required and has_relevant_degree:
        score += DEGREE_BONUS
    if field_required and relevant_field:
        score += FIELD_BONUS

    logger.debug(
        "Education: degree %s/%s, field %s/%s",
        has_relevant_degree, degree_required, relevant_field, field_required,
    )
    return EducationProfile(
        has_education=has_education,
        has_relevant_degree=has_relevant_degree,
        relevant_field=relevant_field,
        degree_required=degree_required,
        field_required=field_required,
        score=clamp_score(score),
        explanation=_explain(has_education, has_relevant_degree, degree_required),
    )
