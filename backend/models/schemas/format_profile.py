"""Format category output. Derived from the resume alone."""

from pydantic import BaseModel, ConfigDict


class FormatProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    has_email: bool = False
    has_phone: bool = False
    has_bullet_points: bool = False
    has_proper_structure: bool = False  # more than 10 lines
    sections_found: list[str] = []
    score: float = 0.0  # 0-100
    explanation: str = ""
