"""Pydantic schemas for micro-ritual endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from schoolpulse.schemas import CamelModel


class MicroRitualResponse(CamelModel):
    id: str
    title: str
    description: str
    category: str
    target_relationship: str
    time_required: str
    participant_count: str
    difficulty: str
    steps: list[str]
    expected_outcome: str
    applicable_roles: list[str]


class CompletionCreateRequest(CamelModel):
    user_id: str = Field(..., min_length=1)
    micro_ritual_id: str = Field(..., min_length=1)


class CompletionResponse(CamelModel):
    id: str
    user_id: str
    micro_ritual_id: str
    completed_at: datetime


class AttemptCreateRequest(CamelModel):
    user_id: str = Field(..., min_length=1)
    attempted_rituals: str = Field(..., min_length=1, max_length=5000)


class AttemptResponse(CamelModel):
    id: str
    user_id: str
    attempted_rituals: str
    attempted_at: datetime
