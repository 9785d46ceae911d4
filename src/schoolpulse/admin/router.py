"""Admin endpoints: school CRUD and bulk import behind the admin code."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from schoolpulse.admin.dependencies import require_admin, verify_admin_code
from schoolpulse.admin.schemas import (
    AdminAuthRequest,
    AdminAuthResponse,
    BulkUploadRequest,
    BulkUploadResponse,
)
from schoolpulse.admin.service import bulk_create_schools, parse_school_csv, update_school
from schoolpulse.errors import Unauthorized, ValidationError
from schoolpulse.schemas import MessageResponse
from schoolpulse.schools.schemas import SchoolCreateRequest, SchoolResponse, SchoolUpdateRequest
from schoolpulse.schools.service import create_school
from schoolpulse.storage import get_storage
from schoolpulse.storage.base import Storage

router = APIRouter(prefix="/api/admin", tags=["Admin"])
protected = APIRouter(dependencies=[Depends(require_admin)])


@router.post("/auth", response_model=AdminAuthResponse)
async def admin_auth(body: AdminAuthRequest) -> AdminAuthResponse:
    """Check the admin access code."""
    if not verify_admin_code(body.access_code):
        raise Unauthorized("Invalid access code")
    return AdminAuthResponse(authenticated=True)


@protected.get("/schools", response_model=list[SchoolResponse])
async def list_schools_endpoint(
    storage: Storage = Depends(get_storage),
) -> list[SchoolResponse]:
    """All schools ordered by name."""
    return [SchoolResponse.model_validate(s) for s in await storage.list_schools()]


@protected.post("/schools", response_model=SchoolResponse)
async def create_school_endpoint(
    body: SchoolCreateRequest,
    storage: Storage = Depends(get_storage),
) -> SchoolResponse:
    """Create a school without the duplicate-name check."""
    school = await create_school(storage, body)
    await storage.commit()
    return SchoolResponse.model_validate(school)


@protected.put("/schools/{school_id}", response_model=SchoolResponse)
async def update_school_endpoint(
    school_id: str,
    body: SchoolUpdateRequest,
    storage: Storage = Depends(get_storage),
) -> SchoolResponse:
    """Partial update of name, district, city or state."""
    school = await update_school(storage, school_id, body)
    await storage.commit()
    return SchoolResponse.model_validate(school)


@protected.delete("/schools/{school_id}", response_model=MessageResponse)
async def delete_school_endpoint(
    school_id: str,
    storage: Storage = Depends(get_storage),
) -> MessageResponse:
    await storage.delete_school(school_id)
    await storage.commit()
    return MessageResponse(message="School deleted successfully")


@protected.post("/schools/bulk-upload", response_model=BulkUploadResponse)
async def bulk_upload_endpoint(
    body: BulkUploadRequest,
    storage: Storage = Depends(get_storage),
) -> BulkUploadResponse:
    """Create many schools; each row succeeds or fails on its own."""
    results = await bulk_create_schools(storage, body.schools)
    await storage.commit()
    return BulkUploadResponse(results=results)


@protected.post("/schools/bulk-upload/csv", response_model=BulkUploadResponse)
async def bulk_upload_csv_endpoint(
    request: Request,
    storage: Storage = Depends(get_storage),
) -> BulkUploadResponse:
    """Same as bulk-upload, from a CSV document with a header row."""
    try:
        content = (await request.body()).decode("utf-8")
    except UnicodeDecodeError as e:
        raise ValidationError("CSV must be UTF-8 encoded") from e
    results = await bulk_create_schools(storage, parse_school_csv(content))
    await storage.commit()
    return BulkUploadResponse(results=results)


router.include_router(protected)
