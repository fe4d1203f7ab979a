"""Experience category output: years and domain keyword coverage."""

from pydantic import BaseModel, ConfigDict


class ExperienceProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    years_found: int = 0  # max "N years of experience" claim in resume
    years_required: int = 0  # same, from the job posting
    matched_domains: list[str] = []
    missing_domains: list[str] = []
    score: float = 0.0  # 0-100
    explanation: str = ""
