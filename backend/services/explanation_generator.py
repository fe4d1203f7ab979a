"""Template-based strengths, weaknesses and recommendations.

Deterministic rules over the category results; each bucket is evaluated
independently and falls back to a single generic sentence when no rule
fires, so none of the lists is ever empty.
"""

from models.responses import Explainability
from models.schemas import ExperienceProfile, SkillProfile

STRENGTH_FALLBACK = "Resume shows potential for the role"
WEAKNESS_FALLBACK = "Minor improvements could enhance the match"
RECOMMENDATION_FALLBACK = "Consider tailoring content to better match job requirements"
KEYWORD_RECOMMENDATION = "Use more industry-specific keywords naturally"

# (threshold, sentence), checked from the top
_OVERALL_BANDS: tuple[tuple[int, str], ...] = (
    (90, "Exceptional match! Your resume is highly aligned with this job opportunity."),
    (80, "Strong match! Your resume shows good alignment with most job requirements."),
    (70, "Good match! Some areas could be improved to better align with the job."),
    (60, "Fair match. Several key areas need improvement to meet job requirements."),
)
_POOR_MATCH = "Poor match. Significant improvements needed to align with this job opportunity."


def overall_explanation(score: float) -> str:
    for threshold, sentence in _OVERALL_BANDS:
        if score >= threshold:
            return sentence
    return _POOR_MATCH


def _build_strengths(skills: SkillProfile, experience: ExperienceProfile) -> list[str]:
    strengths: list[str] = []
    if skills.score >= 80:
        strengths.append("Strong technical skills alignment with job requirements")
    if experience.score >= 80:
        strengths.append("Excellent experience match for the role")
    if len(skills.matched_skills) > 5:
        strengths.append(
            f"{len(skills.matched_skills)} key skills directly match job requirements"
        )
    return strengths or [STRENGTH_FALLBACK]


def _build_weaknesses(skills: SkillProfile, experience: ExperienceProfile) -> list[str]:
    weaknesses: list[str] = []
    if skills.score < 60:
        weaknesses.append("Limited technical skills matching job requirements")
    if experience.score < 60:
        weaknesses.append("Experience doesn't strongly align with role expectations")
    if len(skills.missing_skills) > 3:
        weaknesses.append(f"Missing {len(skills.missing_skills)} important skills")
    return weaknesses or [WEAKNESS_FALLBACK]


def _build_recommendations(skills: SkillProfile, experience: ExperienceProfile) -> list[str]:
    recommendations: list[str] = []
    if skills.missing_skills:
        recommendations.append(
            f"Add experience with {' and '.join(skills.missing_skills[:2])}"
        )
    if experience.missing_domains:
        recommendations.append(f"Highlight {experience.missing_domains[0]} experience")
    recommendations.append(KEYWORD_RECOMMENDATION)
    return recommendations or [RECOMMENDATION_FALLBACK]


def build_explainability(skills: SkillProfile, experience: ExperienceProfile) -> Explainability:
    return Explainability(
        top_strengths=_build_strengths(skills, experience),
        main_weaknesses=_build_weaknesses(skills, experience),
        key_recommendations=_build_recommendations(skills, experience),
    )
