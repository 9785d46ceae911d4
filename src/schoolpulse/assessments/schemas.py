"""Pydantic schemas for assessment submission."""

from __future__ import annotations

from pydantic import Field

from schoolpulse.schemas import CamelModel
from schoolpulse.scoring.schemas import SchoolScoreResponse


class AnswerSubmission(CamelModel):
    question_id: str = Field(..., min_length=1)
    answer: str = Field(..., min_length=1)


class AssessmentSubmitRequest(CamelModel):
    user_id: str = Field(..., min_length=1)
    responses: list[AnswerSubmission] = Field(..., min_length=1)


class AssessmentSubmitResponse(CamelModel):
    message: str
    school_score: SchoolScoreResponse
    access_code: str
