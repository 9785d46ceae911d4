"""Assessment submission.

Order of checks: the user must exist, must be outside the cooldown, and
every answer must reference a known question. Nothing is written until all
checks pass. A successful submission stores one response per answer (all
with the same timestamp), restarts the user's cooldown and recalculates the
school score.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, timedelta, timezone

from schoolpulse.assessments.schemas import AnswerSubmission
from schoolpulse.db.models import SchoolScore, User
from schoolpulse.errors import Forbidden, NotFound, ValidationError
from schoolpulse.scoring.engine import SCORE_WINDOW, calculate_and_store_school_score
from schoolpulse.storage.base import Storage
from schoolpulse.users.eligibility import COOLDOWN, can_take_assessment

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Assessment submitted successfully"


async def submit_assessment(
    storage: Storage,
    user_id: str,
    answers: Sequence[AnswerSubmission],
    now: datetime | None = None,
    cooldown: timedelta = COOLDOWN,
    window: timedelta = SCORE_WINDOW,
) -> tuple[User, SchoolScore]:
    """Persist a full submission and return ``(user, new school score)``."""
    if now is None:
        now = datetime.now(timezone.utc)

    user = await storage.get_user(user_id)
    if user is None:
        raise NotFound("User not found")

    if not can_take_assessment(user.last_assessment_date, now=now, cooldown=cooldown):
        raise Forbidden(f"Must wait {cooldown.days} days between assessments")

    if not answers:
        raise ValidationError("At least one response is required")
    for item in answers:
        if not item.answer:
            raise ValidationError("Every question must be answered")

    questions = await storage.get_questions_by_ids({a.question_id for a in answers})
    unknown = sorted({a.question_id for a in answers} - questions.keys())
    if unknown:
        raise ValidationError(f"Unknown question id(s): {', '.join(unknown)}")

    for item in answers:
        await storage.create_response(
            user_id=user.id,
            question_id=item.question_id,
            answer=item.answer,
            submitted_at=now,
        )
    await storage.update_user_last_assessment(user.id, now)
    score = await calculate_and_store_school_score(storage, user.school_id, now=now, window=window)

    logger.info(
        "Assessment submitted: user=%s school=%s answers=%d overall=%d",
        user.id,
        user.school_id,
        len(answers),
        score.overall_score,
    )
    return user, score
