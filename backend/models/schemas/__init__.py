"""Per-category result records produced by the scoring services."""

from models.schemas.education_profile import EducationProfile
from models.schemas.experience_profile import ExperienceProfile
from models.schemas.format_profile import FormatProfile
from models.schemas.keyword_profile import KeywordProfile
from models.schemas.skill_profile import SkillProfile

__all__ = [
    "SkillProfile",
    "ExperienceProfile",
    "EducationProfile",
    "FormatProfile",
    "KeywordProfile",
]
