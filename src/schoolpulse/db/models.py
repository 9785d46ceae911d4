"""ORM models for schools, survey data, micro-rituals and score snapshots.

Every entity id is a server-assigned UUID string. All timestamps are
timezone-aware UTC.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import (
    JSON,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from schoolpulse.db.base import Base


def new_id() -> str:
    """Generate a process-wide unique entity id."""
    return str(uuid.uuid4())


# ---------------------------------------------------------------------------
# Schools and users
# ---------------------------------------------------------------------------


class School(Base):
    """A school that respondents register under."""

    __tablename__ = "schools"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    district: Mapped[str] = mapped_column(Text, nullable=False)
    city: Mapped[str] = mapped_column(Text, nullable=False)
    state: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


class User(Base):
    """A survey respondent. Identified on return visits by a 4-char access code."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    school_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("schools.id", ondelete="CASCADE"), nullable=False, index=True
    )
    role: Mapped[str] = mapped_column(String(32), nullable=False)
    access_code: Mapped[str] = mapped_column(String(4), unique=True, nullable=False)
    last_assessment_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


# ---------------------------------------------------------------------------
# Survey
# ---------------------------------------------------------------------------


class Question(Base):
    """Static question bank entry. Seeded at startup, never edited by users."""

    __tablename__ = "questions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    role: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    category: Mapped[str] = mapped_column(Text, nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    options: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False)


class Response(Base):
    """One answer to one question. Append-only."""

    __tablename__ = "responses"
    __table_args__ = (Index("idx_responses_submitted_at", "submitted_at"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    question_id: Mapped[str] = mapped_column(String(36), ForeignKey("questions.id"), nullable=False)
    answer: Mapped[str] = mapped_column(Text, nullable=False)
    submitted_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


# ---------------------------------------------------------------------------
# Micro-rituals
# ---------------------------------------------------------------------------


class MicroRitual(Base):
    """Suggested relationship-building activity. Static reference data."""

    __tablename__ = "micro_rituals"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(Text, nullable=False)
    target_relationship: Mapped[str] = mapped_column(Text, nullable=False)
    time_required: Mapped[str] = mapped_column(Text, nullable=False)
    participant_count: Mapped[str] = mapped_column(Text, nullable=False)
    difficulty: Mapped[str] = mapped_column(String(16), nullable=False)
    steps: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    expected_outcome: Mapped[str] = mapped_column(Text, nullable=False)
    applicable_roles: Mapped[list[str]] = mapped_column(JSON, nullable=False)


class MicroRitualCompletion(Base):
    """A user marked a micro-ritual as done."""

    __tablename__ = "micro_ritual_completions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    micro_ritual_id: Mapped[str] = mapped_column(String(36), ForeignKey("micro_rituals.id"), nullable=False)
    completed_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


class MicroRitualAttempt(Base):
    """Free-text note of what a user tried."""

    __tablename__ = "micro_ritual_attempts"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    attempted_rituals: Mapped[str] = mapped_column(Text, nullable=False)
    attempted_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)


# ---------------------------------------------------------------------------
# Scores
# ---------------------------------------------------------------------------


class SchoolScore(Base):
    """Immutable score snapshot. Latest = max(calculated_at) per school."""

    __tablename__ = "school_scores"
    __table_args__ = (Index("idx_school_scores_school_calculated", "school_id", "calculated_at"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    school_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("schools.id", ondelete="CASCADE"), nullable=False
    )
    overall_score: Mapped[int] = mapped_column(Integer, nullable=False)
    category_scores: Mapped[dict[str, int]] = mapped_column(JSON, nullable=False)
    calculated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
