"""User registration, access-code lookup and assessment eligibility."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from schoolpulse.db.models import User
from schoolpulse.errors import NotFound, ValidationError
from schoolpulse.storage.base import Storage
from schoolpulse.users.access_codes import MAX_ATTEMPTS, is_valid_access_code, normalize_access_code
from schoolpulse.users.eligibility import COOLDOWN, can_take_assessment, next_eligible_at

logger = logging.getLogger(__name__)


async def register_user(
    storage: Storage,
    school_id: str,
    role: str,
    access_code: str | None = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> User:
    """Create a user under an existing school.

    A supplied access code is trusted as long as it is well-formed and free;
    otherwise one is generated.
    """
    if await storage.get_school(school_id) is None:
        raise NotFound("School not found")

    if access_code is not None:
        access_code = normalize_access_code(access_code)
        if not is_valid_access_code(access_code):
            raise ValidationError("Access code must be 4 characters A-Z or 0-9")

    user = await storage.create_user(
        school_id=school_id,
        role=role,
        access_code=access_code,
        max_attempts=max_attempts,
    )
    logger.info("User registered: id=%s school=%s role=%s", user.id, school_id, role)
    return user


async def get_user_or_404(storage: Storage, user_id: str) -> User:
    user = await storage.get_user(user_id)
    if user is None:
        raise NotFound("User not found")
    return user


async def find_user_by_access_code(storage: Storage, access_code: str) -> User:
    user = await storage.get_user_by_access_code(normalize_access_code(access_code))
    if user is None:
        raise NotFound("User not found")
    return user


async def check_eligibility(
    storage: Storage,
    user_id: str,
    now: datetime | None = None,
    cooldown: timedelta = COOLDOWN,
) -> tuple[bool, datetime | None]:
    """Return ``(eligible, next_eligible_at)``. Unknown users count as never assessed."""
    user = await storage.get_user(user_id)
    if user is None:
        return True, None
    if now is None:
        now = datetime.now(timezone.utc)
    eligible = can_take_assessment(user.last_assessment_date, now=now, cooldown=cooldown)
    return eligible, None if eligible else next_eligible_at(user.last_assessment_date, cooldown)
