"""Resume structure and contact-info hygiene scoring.

Only the resume is inspected; the job posting plays no part here.
"""

import logging
import re

from models.schemas.format_profile import FormatProfile
from services.score_aggregator import clamp_score
from services.text_normalizer import Document

logger = logging.getLogger(__name__)

# US-style phone: 555-123-4567, 555.123.4567, 555 123 4567, 5551234567
# ASCII digits only; full-width and other Unicode digits do not count
PHONE_RE = re.compile(r"[0-9]{3}[-.\s]?[0-9]{3}[-.\s]?[0-9]{4}")
BULLET_CHARS: tuple[str, ...] = ("•", "*", "-")
SECTION_HEADERS: tuple[str, ...] = ("experience", "education", "skills", "summary")

BASE_SCORE = 50.0
EMAIL_POINTS = 15.0
PHONE_POINTS = 15.0
BULLET_POINTS = 10.0
STRUCTURE_POINTS = 10.0
SECTION_POINTS = 2.5
MIN_STRUCTURED_LINES = 10

FORMAT_EXPLANATION = (
    "Format analysis checks for ATS-friendly structure, contact information, "
    "and proper formatting."
)


def find_sections(resume: Document) -> list[str]:
    """Standard section header words present anywhere in the resume."""
    return [s for s in SECTION_HEADERS if s in resume.normalized]


def analyze_format(resume: Document) -> FormatProfile:
    has_email = "@" in resume.raw
    has_phone = PHONE_RE.search(resume.raw) is not None
    has_bullets = any(ch in resume.raw for ch in BULLET_CHARS)
    has_structure = len(resume.lines) > MIN_STRUCTURED_LINES
    sections = find_sections(resume)

    score = BASE_SCORE
    if has_email:
        score += EMAIL_POINTS
    if has_phone:
        score += PHONE_POINTS
    if has_bullets:
        score += BULLET_POINTS
    if has_structure:
        score += STRUCTURE_POINTS
    score += len(sections) * SECTION_POINTS

    logger.debug("Format: %s sections, score %.1f", len(sections), score)
    return FormatProfile(
        has_email=has_email,
        has_phone=has_phone,
        has_bullet_points=has_bullets,
        has_proper_structure=has_structure,
        sections_found=sections,
        score=clamp_score(score),
        explanation=FORMAT_EXPLANATION,
    )
