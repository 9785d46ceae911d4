"""Assessment eligibility: a rolling cooldown since the last submission."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

COOLDOWN = timedelta(days=7)


def as_utc(dt: datetime) -> datetime:
    """Treat naive datetimes (SQLite round-trips) as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def can_take_assessment(
    last_assessment_date: datetime | None,
    now: datetime | None = None,
    cooldown: timedelta = COOLDOWN,
) -> bool:
    """Never assessed, or at least ``cooldown`` elapsed (boundary inclusive)."""
    if last_assessment_date is None:
        return True
    if now is None:
        now = datetime.now(timezone.utc)
    return as_utc(now) - as_utc(last_assessment_date) >= cooldown


def next_eligible_at(last_assessment_date: datetime | None, cooldown: timedelta = COOLDOWN) -> datetime | None:
    """When the cooldown ends, or None if the user was never assessed."""
    if last_assessment_date is None:
        return None
    return as_utc(last_assessment_date) + cooldown
