"""Pydantic schemas for score endpoints."""

from __future__ import annotations

from datetime import datetime

from schoolpulse.schemas import CamelModel


class SchoolScoreResponse(CamelModel):
    id: str
    school_id: str
    overall_score: int
    category_scores: dict[str, int]
    calculated_at: datetime


class AssessmentCountResponse(CamelModel):
    assessment_count: int
