"""Orchestrator: deterministic resume-to-job compatibility analysis.

Pipeline:
1. Wrap both inputs as Documents (raw + lower-cased views)
2. Score five independent categories: skills, experience, education,
   format (resume only), keywords
3. Combine into the weighted overall score and category breakdown
4. Derive explanations, improvement tips and predictive metrics

Pure and synchronous: no I/O, no shared state, same output for the same
inputs. Any pair of strings is valid input, including empty ones.
"""

import logging

from models.responses import AnalysisResult
from services.education_classifier import analyze_education
from services.experience_extractor import analyze_experience
from services.explanation_generator import build_explainability, overall_explanation
from services.format_scorer import analyze_format
from services.improvement_planner import plan_improvements
from services.keyword_extractor import analyze_keywords
from services.score_aggregator import (
    build_breakdown,
    compute_overall,
    compute_predictive_metrics,
    job_title,
    round_half_up,
)
from services.skill_extractor import analyze_skills
from services.text_normalizer import Document

logger = logging.getLogger(__name__)


def analyze(resume_text: str, job_text: str) -> AnalysisResult:
    """Run the full analysis for one resume/job posting pair."""
    resume = Document(resume_text)
    job = Document(job_text)

    # --- Category analyses (independent of each other) ---
    skills = analyze_skills(resume, job)
    experience = analyze_experience(resume, job)
    education = analyze_education(resume, job)
    fmt = analyze_format(resume)
    keywords = analyze_keywords(resume, job)

    # --- Aggregation ---
    scores = {
        "skills": skills.score,
        "experience": experience.score,
        "education": education.score,
        "format": fmt.score,
        "keywords": keywords.score,
    }
    overall = compute_overall(scores)

    logger.info(
        "Analysis complete: overall=%d skills=%.1f experience=%.1f "
        "education=%.1f format=%.1f keywords=%.1f",
        overall, skills.score, experience.score,
        education.score, fmt.score, keywords.score,
    )

    return AnalysisResult(
        overall_score=overall,
        skills_score=round_half_up(skills.score),
        experience_score=round_half_up(experience.score),
        education_score=round_half_up(education.score),
        format_score=round_half_up(fmt.score),
        keyword_score=round_half_up(keywords.score),
        skills_analysis=skills,
        experience_analysis=experience,
        education_analysis=education,
        format_analysis=fmt,
        keyword_analysis=keywords,
        detailed_breakdown=build_breakdown(scores, overall_explanation(overall)),
        improvements=plan_improvements(skills, experience, keywords, fmt),
        explainability=build_explainability(skills, experience),
        job_title=job_title(job),
        predictive_metrics=compute_predictive_metrics(overall, scores),
    )
