"""Skills category output: required/matched/missing skill partition."""

from pydantic import BaseModel, ConfigDict


class SkillProfile(BaseModel):
    """Skill overlap between the job posting and the resume.

    matched_skills and missing_skills partition required_skills;
    additional_skills never overlaps required_skills.
    """
    model_config = ConfigDict(frozen=True)

    required_skills: list[str] = []  # vocabulary order, from the job posting
    matched_skills: list[str] = []
    missing_skills: list[str] = []
    additional_skills: list[str] = []  # resume skills the job did not ask for
    score: float = 0.0  # 0-100
    explanation: str = ""
