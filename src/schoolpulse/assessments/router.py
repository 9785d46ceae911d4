"""Assessment submission endpoint."""

from __future__ import annotations

from datetime import timedelta

from fastapi import APIRouter, Depends

from schoolpulse.assessments.schemas import AssessmentSubmitRequest, AssessmentSubmitResponse
from schoolpulse.assessments.service import SUCCESS_MESSAGE, submit_assessment
from schoolpulse.config import get_settings
from schoolpulse.scoring.schemas import SchoolScoreResponse
from schoolpulse.storage import get_storage
from schoolpulse.storage.base import Storage

router = APIRouter(prefix="/api/assessments", tags=["Assessments"])


@router.post("", response_model=AssessmentSubmitResponse)
async def submit_assessment_endpoint(
    body: AssessmentSubmitRequest,
    storage: Storage = Depends(get_storage),
) -> AssessmentSubmitResponse:
    """Submit a completed questionnaire."""
    settings = get_settings()
    try:
        user, score = await submit_assessment(
            storage,
            body.user_id,
            body.responses,
            cooldown=timedelta(days=settings.assessment_cooldown_days),
            window=timedelta(days=settings.score_window_days),
        )
    except Exception:
        await storage.rollback()
        raise
    await storage.commit()
    return AssessmentSubmitResponse(
        message=SUCCESS_MESSAGE,
        school_score=SchoolScoreResponse.model_validate(score),
        access_code=user.access_code,
    )
