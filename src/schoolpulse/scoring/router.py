"""School score endpoints."""

from __future__ import annotations

from datetime import timedelta

from fastapi import APIRouter, Depends

from schoolpulse.config import get_settings
from schoolpulse.scoring.schemas import AssessmentCountResponse, SchoolScoreResponse
from schoolpulse.scoring.service import (
    count_assessments_in_window,
    get_or_calculate_latest_score,
    get_score_history,
)
from schoolpulse.storage import get_storage
from schoolpulse.storage.base import Storage

router = APIRouter(prefix="/api/schools", tags=["Scores"])


def _window() -> timedelta:
    return timedelta(days=get_settings().score_window_days)


@router.get("/{school_id}/score", response_model=SchoolScoreResponse)
async def get_school_score_endpoint(
    school_id: str,
    storage: Storage = Depends(get_storage),
) -> SchoolScoreResponse:
    """Latest score snapshot, computing the first one on demand."""
    score, created = await get_or_calculate_latest_score(storage, school_id, window=_window())
    if created:
        await storage.commit()
    return SchoolScoreResponse.model_validate(score)


@router.get("/{school_id}/score-history", response_model=list[SchoolScoreResponse])
async def get_score_history_endpoint(
    school_id: str,
    storage: Storage = Depends(get_storage),
) -> list[SchoolScoreResponse]:
    """All snapshots for the school, newest first."""
    history = await get_score_history(storage, school_id)
    return [SchoolScoreResponse.model_validate(s) for s in history]


@router.get("/{school_id}/assessment-count", response_model=AssessmentCountResponse)
async def get_assessment_count_endpoint(
    school_id: str,
    storage: Storage = Depends(get_storage),
) -> AssessmentCountResponse:
    """Distinct respondents in the current window."""
    count = await count_assessments_in_window(storage, school_id, window=_window())
    return AssessmentCountResponse(assessment_count=count)
