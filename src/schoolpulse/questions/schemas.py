"""Pydantic schemas for the question bank."""

from __future__ import annotations

from schoolpulse.schemas import CamelModel


class QuestionOption(CamelModel):
    value: str
    label: str
    description: str | None = None


class QuestionResponse(CamelModel):
    id: str
    role: str
    category: str
    text: str
    options: list[QuestionOption]
    order: int
