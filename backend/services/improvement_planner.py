"""Actionable improvement tips for low-scoring categories.

Each category is checked on its own; education never produces a tip.
"""

from models.responses import Improvement
from models.schemas import ExperienceProfile, FormatProfile, KeywordProfile, SkillProfile

SKILLS_THRESHOLD = 70
EXPERIENCE_THRESHOLD = 70
KEYWORDS_THRESHOLD = 60
FORMAT_THRESHOLD = 80


def _skills_tip(skills: SkillProfile) -> str:
    # Default-scored (50) postings have no named skills to suggest
    if skills.missing_skills:
        lead = f"Add {', '.join(skills.missing_skills[:3])} to better match job requirements."
    else:
        lead = "Add skills named in the job description to better match job requirements."
    return f"{lead} {skills.explanation}".strip()


def _experience_tip(experience: ExperienceProfile) -> str:
    if experience.missing_domains:
        lead = f"Emphasize experience with {' and '.join(experience.missing_domains[:2])}."
    else:
        lead = "Emphasize experience most relevant to the role."
    return f"{lead} {experience.explanation}".strip()


def _keywords_tip(keywords: KeywordProfile) -> str:
    if keywords.missing_keywords:
        return (
            "Naturally incorporate these missing keywords: "
            f"{', '.join(keywords.missing_keywords[:5])}."
        )
    return "Naturally incorporate important keywords from the job description."


def plan_improvements(
    skills: SkillProfile,
    experience: ExperienceProfile,
    keywords: KeywordProfile,
    fmt: FormatProfile,
) -> list[Improvement]:
    improvements: list[Improvement] = []

    if skills.score < SKILLS_THRESHOLD:
        improvements.append(Improvement(
            category="Skills Enhancement",
            tip=_skills_tip(skills),
            priority="high",
            impact="Major impact on ATS ranking",
        ))

    if experience.score < EXPERIENCE_THRESHOLD:
        improvements.append(Improvement(
            category="Experience Optimization",
            tip=_experience_tip(experience),
            priority="high",
            impact="Significant improvement in relevance score",
        ))

    if keywords.score < KEYWORDS_THRESHOLD:
        improvements.append(Improvement(
            category="Keyword Integration",
            tip=_keywords_tip(keywords),
            priority="medium",
            impact="Better ATS keyword matching",
        ))

    if fmt.score < FORMAT_THRESHOLD:
        improvements.append(Improvement(
            category="Format Improvements",
            tip=(
                "Improve ATS compatibility with better formatting, clear sections, "
                "and contact information."
            ),
            priority="medium",
            impact="Ensures ATS can properly parse your resume",
        ))

    return improvements
