"""Pydantic schemas for school endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from schoolpulse.schemas import CamelModel


class SchoolCreateRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    district: str = Field(..., min_length=1, max_length=200)
    city: str = Field(..., min_length=1, max_length=100)
    state: str = Field(..., min_length=1, max_length=100)


class SchoolUpdateRequest(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    district: str | None = Field(None, min_length=1, max_length=200)
    city: str | None = Field(None, min_length=1, max_length=100)
    state: str | None = Field(None, min_length=1, max_length=100)


class SchoolResponse(CamelModel):
    id: str
    name: str
    district: str
    city: str
    state: str
    created_at: datetime


class SchoolRegistrationResponse(CamelModel):
    school: SchoolResponse
    is_new: bool
