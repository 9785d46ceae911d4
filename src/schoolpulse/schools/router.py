"""School endpoints: registration, autocomplete search, lookup."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from schoolpulse.config import get_settings
from schoolpulse.schools.schemas import SchoolCreateRequest, SchoolRegistrationResponse, SchoolResponse
from schoolpulse.schools.service import find_or_create_school, get_school_or_404, search_schools
from schoolpulse.storage import get_storage
from schoolpulse.storage.base import Storage

router = APIRouter(prefix="/api/schools", tags=["Schools"])


@router.post("", response_model=SchoolRegistrationResponse)
async def register_school(
    body: SchoolCreateRequest,
    storage: Storage = Depends(get_storage),
) -> SchoolRegistrationResponse:
    """Create a school, or return the existing one with the same name."""
    school, is_new = await find_or_create_school(storage, body)
    await storage.commit()
    return SchoolRegistrationResponse(school=SchoolResponse.model_validate(school), is_new=is_new)


# Declared before /{school_id} so "search" is not captured as an id.
@router.get("/search", response_model=list[SchoolResponse])
async def search_schools_endpoint(
    q: str | None = Query(None),
    storage: Storage = Depends(get_storage),
) -> list[SchoolResponse]:
    """Autocomplete: schools whose name, district, city or state contain ``q``."""
    schools = await search_schools(storage, q, limit=get_settings().school_search_limit)
    return [SchoolResponse.model_validate(s) for s in schools]


@router.get("/{school_id}", response_model=SchoolResponse)
async def get_school_endpoint(
    school_id: str,
    storage: Storage = Depends(get_storage),
) -> SchoolResponse:
    """Get a school by id."""
    return SchoolResponse.model_validate(await get_school_or_404(storage, school_id))
