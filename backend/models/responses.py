from typing import Literal

from pydantic import BaseModel, ConfigDict

from models.schemas import (
    EducationProfile,
    ExperienceProfile,
    FormatProfile,
    KeywordProfile,
    SkillProfile,
)


class CategoryScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    score: float = 0.0
    weight: int = 0  # percent; all weights sum to 100
    description: str = ""


class CategoryBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    categories: list[CategoryScore] = []
    overall_explanation: str = ""


class Explainability(BaseModel):
    model_config = ConfigDict(frozen=True)

    top_strengths: list[str] = []
    main_weaknesses: list[str] = []
    key_recommendations: list[str] = []


class Improvement(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    tip: str
    priority: Literal["high", "medium", "low"]
    impact: str = ""


class PredictiveMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    ats_pass_rate: int = 0  # capped at 95
    interview_callback_rate: int = 0  # capped at 85
    human_review_rate: int = 0  # capped at 90
    confidence_level: int = 0
    risk_factors: list[str] = []
    success_predictors: list[str] = []


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall_score: int = 0
    skills_score: int = 0
    experience_score: int = 0
    education_score: int = 0
    format_score: int = 0
    keyword_score: int = 0
    skills_analysis: SkillProfile = SkillProfile()
    experience_analysis: ExperienceProfile = ExperienceProfile()
    education_analysis: EducationProfile = EducationProfile()
    format_analysis: FormatProfile = FormatProfile()
    keyword_analysis: KeywordProfile = KeywordProfile()
    detailed_breakdown: CategoryBreakdown = CategoryBreakdown()
    improvements: list[Improvement] = []
    explainability: Explainability = Explainability()
    job_title: str = ""
    predictive_metrics: PredictiveMetrics = PredictiveMetrics()
