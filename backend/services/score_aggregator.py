"""Weighted combination of the five category scores.

The weights and the predictive-metric coefficients are fixed constants
carried over unchanged from the scoring rules this engine reproduces; they
were never empirically tuned.
"""

import math
from typing import NamedTuple

from models.responses import CategoryBreakdown, CategoryScore, PredictiveMetrics
from services.text_normalizer import Document

DEFAULT_JOB_TITLE = "the role"


class Category(NamedTuple):
    key: str
    name: str
    weight: int
    description: str


# Breakdown order; weights sum to 100
CATEGORIES: tuple[Category, ...] = (
    Category("skills", "Technical Skills", 35, "Match between your skills and job requirements"),
    Category("experience", "Work Experience", 25, "Relevance and depth of your professional experience"),
    Category("keywords", "Keywords", 20, "Presence of important keywords from job description"),
    Category("format", "Resume Format", 15, "ATS-friendly formatting and structure"),
    Category("education", "Education", 5, "Educational background alignment"),
)

ATS_PASS_CAP = 95
HUMAN_REVIEW_CAP = 90
INTERVIEW_CALLBACK_CAP = 85


def clamp_score(value: float) -> float:
    """Clamp a category score into [0, 100]."""
    return min(100.0, max(0.0, float(value)))


def round_half_up(value: float) -> int:
    """Round .5 upward (Python's round() would round half to even)."""
    return math.floor(value + 0.5)


def _weighted_sum(scores: dict[str, float]) -> float:
    return sum(scores[c.key] * (c.weight / 100) for c in CATEGORIES)


def compute_overall(scores: dict[str, float]) -> int:
    """Overall 0-100 score from raw category scores keyed by Category.key."""
    return min(100, max(0, round_half_up(_weighted_sum(scores))))


def build_breakdown(scores: dict[str, float], overall_explanation: str) -> CategoryBreakdown:
    return CategoryBreakdown(
        categories=[
            CategoryScore(
                name=c.name,
                score=scores[c.key],
                weight=c.weight,
                description=c.description,
            )
            for c in CATEGORIES
        ],
        overall_explanation=overall_explanation,
    )


def reaggregate(breakdown: CategoryBreakdown) -> int:
    """Recompute the overall score from a stored breakdown."""
    by_name = {c.name: c.key for c in CATEGORIES}
    scores = {by_name[entry.name]: entry.score for entry in breakdown.categories}
    return compute_overall(scores)


def job_title(job: Document) -> str:
    return job.first_line or DEFAULT_JOB_TITLE


def _risk_factors(scores: dict[str, float]) -> list[str]:
    risks = []
    if scores["keywords"] < 60:
        risks.append("Low keyword optimization may cause ATS filtering")
    if scores["format"] < 70:
        risks.append("Format issues could prevent proper parsing")
    if scores["skills"] < 50:
        risks.append("Skill gaps may reduce competitiveness")
    if scores["experience"] < 60:
        risks.append("Experience mismatch could lower ranking")
    return risks


def _success_predictors(scores: dict[str, float]) -> list[str]:
    predictors = []
    if scores["skills"] >= 80:
        predictors.append("Strong technical skills alignment")
    if scores["experience"] >= 80:
        predictors.append("Excellent experience match")
    if scores["keywords"] >= 75:
        predictors.append("Good keyword optimization")
    if scores["format"] >= 85:
        predictors.append("ATS-friendly formatting")
    return predictors


def compute_predictive_metrics(overall: int, scores: dict[str, float]) -> PredictiveMetrics:
    """Derived pass/callback percentages, capped below 100."""
    ats_pass_rate = min(
        round_half_up(overall * 0.4 + scores["keywords"] * 0.3 + scores["format"] * 0.3),
        ATS_PASS_CAP,
    )
    interview_callback_rate = min(
        round_half_up(scores["experience"] * 0.5 + scores["skills"] * 0.3 + overall * 0.2),
        INTERVIEW_CALLBACK_CAP,
    )
    human_review_rate = min(
        round_half_up(scores["skills"] * 0.4 + scores["experience"] * 0.3 + overall * 0.3),
        HUMAN_REVIEW_CAP,
    )
    confidence_level = round_half_up(
        (ats_pass_rate + human_review_rate + interview_callback_rate) / 3 * 0.9
    )
    return PredictiveMetrics(
        ats_pass_rate=ats_pass_rate,
        interview_callback_rate=interview_callback_rate,
        human_review_rate=human_review_rate,
        confidence_level=confidence_level,
        risk_factors=_risk_factors(scores),
        success_predictors=_success_predictors(scores),
    )
