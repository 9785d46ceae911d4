"""School business logic.

Rules:
- Self-service registration reuses an existing school whose name matches
  case-insensitively instead of creating a duplicate.
- Admin creation skips the name check.
- Search is a case-insensitive substring match, capped at the search limit.
"""

from __future__ import annotations

import logging

from schoolpulse.db.models import School
from schoolpulse.errors import NotFound
from schoolpulse.schools.schemas import SchoolCreateRequest
from schoolpulse.storage.base import Storage

logger = logging.getLogger(__name__)

SEARCH_LIMIT = 10


async def find_or_create_school(storage: Storage, data: SchoolCreateRequest) -> tuple[School, bool]:
    """Return ``(school, is_new)``."""
    existing = await storage.get_school_by_name(data.name)
    if existing is not None:
        return existing, False

    school = await create_school(storage, data)
    return school, True


async def create_school(storage: Storage, data: SchoolCreateRequest) -> School:
    """Create a school unconditionally."""
    school = await storage.create_school(
        name=data.name,
        district=data.district,
        city=data.city,
        state=data.state,
    )
    logger.info("School created: %s (id=%s)", school.name, school.id)
    return school


async def search_schools(storage: Storage, query: str | None, limit: int = SEARCH_LIMIT) -> list[School]:
    """Autocomplete search. A blank query matches nothing."""
    if not query or not query.strip():
        return []
    return await storage.search_schools(query.strip(), limit=limit)


async def get_school_or_404(storage: Storage, school_id: str) -> School:
    school = await storage.get_school(school_id)
    if school is None:
        raise NotFound("School not found")
    return school
