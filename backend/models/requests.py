from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    resume_text: str = Field(..., description="Plain text resume content")
    job_description: str = Field(..., description="Job posting text; first line is used as the job title")
