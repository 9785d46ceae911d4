"""Admin school management: partial updates and bulk import.

Bulk import validates and persists each row on its own; a bad row is
reported in the results and never aborts the rest of the batch.
"""

from __future__ import annotations

import csv
import io
import logging
from typing import Any

import pydantic

from schoolpulse.admin.schemas import BulkUploadResult
from schoolpulse.db.models import School
from schoolpulse.errors import ValidationError
from schoolpulse.schools.schemas import SchoolCreateRequest, SchoolResponse, SchoolUpdateRequest
from schoolpulse.schools.service import create_school
from schoolpulse.storage.base import Storage

logger = logging.getLogger(__name__)

CSV_COLUMNS = ("name", "district", "city", "state")


def _describe(exc: pydantic.ValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err["loc"]) or "row"
        parts.append(f"{field}: {err['msg']}")
    return "; ".join(parts)


async def update_school(storage: Storage, school_id: str, data: SchoolUpdateRequest) -> School:
    """Apply only the fields present in the request."""
    changes = data.model_dump(exclude_unset=True, exclude_none=True)
    return await storage.update_school(school_id, changes)


async def bulk_create_schools(storage: Storage, rows: list[Any]) -> list[BulkUploadResult]:
    """Create one school per valid row. Duplicate names are allowed."""
    results: list[BulkUploadResult] = []
    for row in rows:
        try:
            data = SchoolCreateRequest.model_validate(row)
        except pydantic.ValidationError as exc:
            results.append(BulkUploadResult(success=False, error=_describe(exc), data=row))
            continue
        school = await create_school(storage, data)
        results.append(BulkUploadResult(success=True, school=SchoolResponse.model_validate(school)))

    created = sum(1 for r in results if r.success)
    logger.info("Bulk upload: %d created, %d rejected", created, len(results) - created)
    return results


def parse_school_csv(content: str) -> list[dict[str, str]]:
    """Parse CSV text with a ``name,district,city,state`` header row.

    Header names are matched case-insensitively; blank lines are skipped.
    """
    reader = csv.reader(io.StringIO(content.lstrip("\ufeff")))
    try:
        header = next(reader)
    except StopIteration:
        raise ValidationError("CSV is empty") from None

    columns = [h.strip().lower() for h in header]
    missing = [c for c in CSV_COLUMNS if c not in columns]
    if missing:
        raise ValidationError(f"CSV header is missing column(s): {', '.join(missing)}")

    rows = []
    for record in reader:
        if not any(cell.strip() for cell in record):
            continue
        row = dict(zip(columns, (cell.strip() for cell in record)))
        rows.append({c: row.get(c, "") for c in CSV_COLUMNS})
    return rows
