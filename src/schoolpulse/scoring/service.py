"""Score reads: latest snapshot (computed on first request) and participation.

Every read is keyed by a school id that must resolve; an unknown school is a
NotFound, never an orphan snapshot.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from schoolpulse.db.models import SchoolScore
from schoolpulse.schools.service import get_school_or_404
from schoolpulse.scoring.engine import SCORE_WINDOW, calculate_and_store_school_score
from schoolpulse.storage.base import Storage


async def get_or_calculate_latest_score(
    storage: Storage,
    school_id: str,
    now: datetime | None = None,
    window: timedelta = SCORE_WINDOW,
) -> tuple[SchoolScore, bool]:
    """Return ``(latest snapshot, created)``; runs the engine if there is none yet."""
    await get_school_or_404(storage, school_id)
    latest = await storage.get_latest_school_score(school_id)
    if latest is not None:
        return latest, False
    return await calculate_and_store_school_score(storage, school_id, now=now, window=window), True


async def get_score_history(storage: Storage, school_id: str) -> list[SchoolScore]:
    """All snapshots for an existing school, newest first."""
    await get_school_or_404(storage, school_id)
    return await storage.get_school_score_history(school_id)


async def count_assessments_in_window(
    storage: Storage,
    school_id: str,
    now: datetime | None = None,
    window: timedelta = SCORE_WINDOW,
) -> int:
    """Distinct users of the school who answered within the scoring window."""
    await get_school_or_404(storage, school_id)
    if now is None:
        now = datetime.now(timezone.utc)
    return await storage.count_recent_respondents(school_id, since=now - window)
