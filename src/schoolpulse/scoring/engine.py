"""School score aggregation.

A school's score is computed from the responses its users submitted within
the last ``window`` (rolling, wall-clock). Responses are grouped by their
question's category, each answer is converted with the score table, and:

- category score = round(mean of converted answers in the category)
- overall score  = round(mean of the category scores)

The overall score is a mean of means: a category with one answer weighs as
much as a category with fifty. An empty window produces the default snapshot
(overall 50, no categories). Every run appends a new SchoolScore row.
"""

from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

import structlog

from schoolpulse.db.models import SchoolScore
from schoolpulse.scoring.conversion import convert_answer
from schoolpulse.storage.base import Storage

logger = structlog.get_logger()

SCORE_WINDOW = timedelta(days=7)
EMPTY_WINDOW_SCORE = 50


@dataclass(frozen=True)
class ScoreSummary:
    """Result of one aggregation run, before it is persisted."""

    overall_score: int
    category_scores: dict[str, int] = field(default_factory=dict)


def round_half_up(value: float) -> int:
    """Round to nearest integer, .5 away from zero for non-negative input."""
    return int(math.floor(value + 0.5))


def aggregate(answers: Iterable[tuple[str, str]]) -> ScoreSummary:
    """Aggregate ``(category, answer)`` pairs into a score summary."""
    by_category: dict[str, list[int]] = defaultdict(list)
    for category, answer in answers:
        by_category[category].append(convert_answer(answer))

    if not by_category:
        return ScoreSummary(overall_score=EMPTY_WINDOW_SCORE)

    category_scores = {
        category: round_half_up(sum(scores) / len(scores)) for category, scores in by_category.items()
    }
    overall = round_half_up(sum(category_scores.values()) / len(category_scores))
    return ScoreSummary(overall_score=overall, category_scores=category_scores)


async def summarize_school(
    storage: Storage,
    school_id: str,
    now: datetime | None = None,
    window: timedelta = SCORE_WINDOW,
) -> ScoreSummary:
    """Compute the school's current summary without persisting it."""
    if now is None:
        now = datetime.now(timezone.utc)
    responses = await storage.get_recent_responses_by_school(school_id, since=now - window)
    if not responses:
        return ScoreSummary(overall_score=EMPTY_WINDOW_SCORE)

    questions = await storage.get_questions_by_ids({r.question_id for r in responses})
    # Responses whose question no longer resolves are skipped.
    pairs = [
        (questions[r.question_id].category, r.answer) for r in responses if r.question_id in questions
    ]
    return aggregate(pairs)


async def calculate_and_store_school_score(
    storage: Storage,
    school_id: str,
    now: datetime | None = None,
    window: timedelta = SCORE_WINDOW,
) -> SchoolScore:
    """Run the aggregation for one school and append a snapshot."""
    if now is None:
        now = datetime.now(timezone.utc)
    summary = await summarize_school(storage, school_id, now=now, window=window)
    snapshot = await storage.create_school_score(
        school_id=school_id,
        overall_score=summary.overall_score,
        category_scores=summary.category_scores,
        calculated_at=now,
    )
    logger.info(
        "school_score_calculated",
        school_id=school_id,
        overall_score=summary.overall_score,
        categories=len(summary.category_scores),
    )
    return snapshot
