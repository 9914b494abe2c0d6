"""
Mock ATS analysis routes
"""
import random
from typing import List, Optional
from fastapi import APIRouter
from pydantic import BaseModel, Field
import structlog

from resumeforge.ats.keywords import DEFAULT_ROLE, keywords_for_role

router = APIRouter(prefix="/api/ats", tags=["ATS"])
logger = structlog.get_logger()

SCORE_MIN = 70
SCORE_MAX = 94


class AnalyzeRequest(BaseModel):
    job_role: Optional[str] = Field(default=DEFAULT_ROLE, alias="jobRole")

    class Config:
        populate_by_name = True


class AnalysisData(BaseModel):
    score: int
    keywords: List[str]
    missing: List[str]
    formatting: str = "Good"


class AnalyzeResponse(BaseModel):
    success: bool = True
    data: AnalysisData


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze_resume(payload: AnalyzeRequest):
    """Canned keyword report for a job role with a randomized score"""
    role_data = keywords_for_role(payload.job_role or DEFAULT_ROLE)
    score = random.randint(SCORE_MIN, SCORE_MAX)

    logger.info("ats_analysis", job_role=payload.job_role, score=score)
    return AnalyzeResponse(
        data=AnalysisData(
            score=score,
            keywords=role_data["found"],
            missing=role_data["missing"],
        )
    )
