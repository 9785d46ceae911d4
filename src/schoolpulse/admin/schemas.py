"""Pydantic schemas for admin endpoints."""

from __future__ import annotations

from typing import Any

from schoolpulse.schemas import CamelModel
from schoolpulse.schools.schemas import SchoolResponse


class AdminAuthRequest(CamelModel):
    access_code: str


class AdminAuthResponse(CamelModel):
    authenticated: bool


class BulkUploadRequest(CamelModel):
    schools: list[Any]


class BulkUploadResult(CamelModel):
    success: bool
    school: SchoolResponse | None = None
    error: str | None = None
    data: Any = None


class BulkUploadResponse(CamelModel):
    results: list[BulkUploadResult]
