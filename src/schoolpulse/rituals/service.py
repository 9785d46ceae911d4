"""Micro-ritual engagement: completions and free-text attempts."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from schoolpulse.db.models import MicroRitualAttempt, MicroRitualCompletion
from schoolpulse.errors import NotFound
from schoolpulse.scoring.engine import SCORE_WINDOW, calculate_and_store_school_score
from schoolpulse.storage.base import Storage

logger = logging.getLogger(__name__)


async def complete_micro_ritual(
    storage: Storage,
    user_id: str,
    micro_ritual_id: str,
    now: datetime | None = None,
    window: timedelta = SCORE_WINDOW,
) -> MicroRitualCompletion:
    """Record a completion and refresh the user's school score."""
    if now is None:
        now = datetime.now(timezone.utc)

    user = await storage.get_user(user_id)
    if user is None:
        raise NotFound("User not found")
    if await storage.get_micro_ritual(micro_ritual_id) is None:
        raise NotFound("Micro ritual not found")

    completion = await storage.create_micro_ritual_completion(
        user_id=user_id,
        micro_ritual_id=micro_ritual_id,
        completed_at=now,
    )
    await calculate_and_store_school_score(storage, user.school_id, now=now, window=window)
    logger.info("Micro-ritual completed: user=%s ritual=%s", user_id, micro_ritual_id)
    return completion


async def record_attempt(
    storage: Storage,
    user_id: str,
    attempted_rituals: str,
    now: datetime | None = None,
) -> MicroRitualAttempt:
    """Store a note of what the user tried."""
    if await storage.get_user(user_id) is None:
        raise NotFound("User not found")
    return await storage.create_micro_ritual_attempt(
        user_id=user_id,
        attempted_rituals=attempted_rituals,
        attempted_at=now or datetime.now(timezone.utc),
    )
