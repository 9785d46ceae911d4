"""Pydantic schemas for user endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from schoolpulse.schemas import CamelModel

ROLES = ("student", "staff", "administrator", "counselor")
Role = Literal["student", "staff", "administrator", "counselor"]


class UserCreateRequest(CamelModel):
    school_id: str = Field(..., min_length=1)
    role: Role
    access_code: str | None = Field(None, min_length=4, max_length=4)


class UserResponse(CamelModel):
    id: str
    school_id: str
    role: str
    access_code: str
    last_assessment_date: datetime | None = None
    created_at: datetime


class EligibilityResponse(CamelModel):
    can_take_assessment: bool
    next_eligible_at: datetime | None = None


class UserAnswerResponse(CamelModel):
    id: str
    user_id: str
    question_id: str
    answer: str
    submitted_at: datetime
