"""Education category output."""

from pydantic import BaseModel, ConfigDict


class EducationProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    has_education: bool = False
    has_relevant_degree: bool = False
    relevant_field: bool = False
    degree_required: bool = False
    field_required: bool = False
    score: float = 0.0  # 0-100
    explanation: str = ""
