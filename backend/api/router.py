import logging

from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import AnalyzeRequest
from models.responses import AnalysisResult
from services import resume_analyzer

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health(request: Request):
    return {
        "status": "ok",
        "version": request.app.version,
    }


@router.post("/analyze", response_model=AnalysisResult)
@limiter.limit(settings.rate_limit)
async def analyze(request: Request, body: AnalyzeRequest):
    if not body.resume_text.strip() or not body.job_description.strip():
        logger.info("Rejected analyze request with blank input")
        raise HTTPException(
            status_code=400,
            detail="Please provide both your resume and job description for analysis.",
        )

    if len(body.resume_text) > settings.max_resume_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Resume too long (max {settings.max_resume_chars} chars)",
        )
    if len(body.job_description) > settings.max_job_description_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_job_description_chars} chars)",
        )

    return resume_analyzer.analyze(body.resume_text, body.job_description)
