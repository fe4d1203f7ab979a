"""Keyword category output: generic vocabulary coverage."""

from pydantic import BaseModel, ConfigDict


class KeywordProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    matched_keywords: list[str] = []
    missing_keywords: list[str] = []
    total_keywords: int = 0
    keyword_frequency: dict[str, int] = {}  # job keyword -> occurrences in resume
    score: float = 0.0  # 0-100
    explanation: str = ""
