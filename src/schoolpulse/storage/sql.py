"""SQLAlchemy-backed store bound to one AsyncSession (one per request).

Writes are flushed, not committed; routers commit at the end of a request.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import func, or_, select, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from schoolpulse.db.models import (
    MicroRitual,
    MicroRitualAttempt,
    MicroRitualCompletion,
    Question,
    Response,
    School,
    SchoolScore,
    User,
)
from schoolpulse.errors import GenerationExhausted, NotFound, ValidationError
from schoolpulse.storage.base import Storage
from schoolpulse.users.access_codes import generate_access_code


class SqlStorage(Storage):
    """Relational implementation of the storage contract."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()

    async def ping(self) -> bool:
        result = await self.session.execute(text("SELECT 1"))
        return result.scalar() == 1

    async def seed_questions(self, questions: Iterable[dict[str, Any]]) -> int:
        existing = await self.session.scalar(select(func.count()).select_from(Question))
        if existing:
            return 0
        rows = [Question(**data) for data in questions]
        self.session.add_all(rows)
        await self.session.flush()
        return len(rows)

    async def seed_micro_rituals(self, rituals: Iterable[dict[str, Any]]) -> int:
        existing = await self.session.scalar(select(func.count()).select_from(MicroRitual))
        if existing:
            return 0
        rows = [MicroRitual(**data) for data in rituals]
        self.session.add_all(rows)
        await self.session.flush()
        return len(rows)

    # --- Schools ---

    async def create_school(self, *, name: str, district: str, city: str, state: str) -> School:
        school = School(
            name=name,
            district=district,
            city=city,
            state=state,
            created_at=datetime.now(timezone.utc),
        )
        self.session.add(school)
        await self.session.flush()
        return school

    async def get_school(self, school_id: str) -> School | None:
        return await self.session.get(School, school_id)

    async def get_school_by_name(self, name: str) -> School | None:
        result = await self.session.execute(
            select(School).where(func.lower(School.name) == name.lower()).limit(1)
        )
        return result.scalar_one_or_none()

    async def search_schools(self, query: str, limit: int = 10) -> list[School]:
        # Literal substring: % and _ in the query are escaped, not wildcards.
        term = query.lower()
        result = await self.session.execute(
            select(School)
            .where(
                or_(
                    *(
                        func.lower(column).contains(term, autoescape=True)
                        for column in (School.name, School.district, School.city, School.state)
                    )
                )
            )
            .order_by(School.created_at)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def list_schools(self) -> list[School]:
        result = await self.session.execute(select(School).order_by(func.lower(School.name)))
        return list(result.scalars().all())

    async def update_school(self, school_id: str, changes: dict[str, str]) -> School:
        school = await self.get_school(school_id)
        if school is None:
            raise NotFound("School not found")
        for key, value in changes.items():
            setattr(school, key, value)
        await self.session.flush()
        return school

    async def delete_school(self, school_id: str) -> None:
        school = await self.get_school(school_id)
        if school is None:
            raise NotFound("School not found")
        await self.session.delete(school)
        await self.session.flush()

    # --- Users ---

    async def _code_taken(self, code: str) -> bool:
        return await self.get_user_by_access_code(code) is not None

    async def _insert_user(self, school_id: str, role: str, access_code: str) -> User:
        user = User(
            school_id=school_id,
            role=role,
            access_code=access_code,
            last_assessment_date=None,
            created_at=datetime.now(timezone.utc),
        )
        # A savepoint, so a unique-code conflict only undoes this insert.
        async with self.session.begin_nested():
            self.session.add(user)
            await self.session.flush()
        return user

    async def create_user(
        self,
        *,
        school_id: str,
        role: str,
        access_code: str | None = None,
        max_attempts: int = 100,
    ) -> User:
        if access_code is not None:
            if await self._code_taken(access_code):
                raise ValidationError("Access code already in use")
            return await self._insert_user(school_id, role, access_code)

        # The unique constraint on access_code is the source of truth; a
        # concurrent insert that wins the race shows up as IntegrityError.
        for _ in range(max_attempts):
            code = generate_access_code()
            if await self._code_taken(code):
                continue
            try:
                return await self._insert_user(school_id, role, code)
            except IntegrityError:
                if not await self._code_taken(code):
                    raise
        raise GenerationExhausted(f"Unable to generate unique access code after {max_attempts} attempts")

    async def get_user(self, user_id: str) -> User | None:
        return await self.session.get(User, user_id)

    async def get_user_by_access_code(self, access_code: str) -> User | None:
        result = await self.session.execute(select(User).where(User.access_code == access_code))
        return result.scalar_one_or_none()

    async def get_users_by_school(self, school_id: str) -> list[User]:
        result = await self.session.execute(
            select(User).where(User.school_id == school_id).order_by(User.created_at)
        )
        return list(result.scalars().all())

    async def update_user_last_assessment(self, user_id: str, when: datetime) -> User:
        user = await self.get_user(user_id)
        if user is None:
            raise NotFound("User not found")
        user.last_assessment_date = when
        await self.session.flush()
        return user

    # --- Questions ---

    async def get_question(self, question_id: str) -> Question | None:
        return await self.session.get(Question, question_id)

    async def get_questions_by_role(self, role: str) -> list[Question]:
        result = await self.session.execute(
            select(Question).where(Question.role == role).order_by(Question.order)
        )
        return list(result.scalars().all())

    async def get_questions_by_ids(self, question_ids: Iterable[str]) -> dict[str, Question]:
        ids = list(question_ids)
        if not ids:
            return {}
        result = await self.session.execute(select(Question).where(Question.id.in_(ids)))
        return {q.id: q for q in result.scalars().all()}

    # --- Responses ---

    async def create_response(
        self, *, user_id: str, question_id: str, answer: str, submitted_at: datetime
    ) -> Response:
        response = Response(
            user_id=user_id,
            question_id=question_id,
            answer=answer,
            submitted_at=submitted_at,
        )
        self.session.add(response)
        await self.session.flush()
        return response

    async def get_responses_by_user(self, user_id: str) -> list[Response]:
        result = await self.session.execute(
            select(Response).where(Response.user_id == user_id).order_by(Response.submitted_at)
        )
        return list(result.scalars().all())

    def _recent_stmt(self, school_id: str, since: datetime):  # noqa: ANN202
        return (
            select(Response)
            .join(User, User.id == Response.user_id)
            .where(User.school_id == school_id, Response.submitted_at >= since)
        )

    async def get_recent_responses_by_school(self, school_id: str, since: datetime) -> list[Response]:
        result = await self.session.execute(self._recent_stmt(school_id, since).order_by(Response.submitted_at))
        return list(result.scalars().all())

    async def count_recent_respondents(self, school_id: str, since: datetime) -> int:
        count = await self.session.scalar(
            select(func.count(func.distinct(Response.user_id)))
            .join(User, User.id == Response.user_id)
            .where(User.school_id == school_id, Response.submitted_at >= since)
        )
        return int(count or 0)

    # --- Micro-rituals ---

    async def list_micro_rituals(self) -> list[MicroRitual]:
        result = await self.session.execute(select(MicroRitual))
        return list(result.scalars().all())

    async def get_micro_ritual(self, ritual_id: str) -> MicroRitual | None:
        return await self.session.get(MicroRitual, ritual_id)

    async def get_micro_rituals_by_category(self, category: str) -> list[MicroRitual]:
        result = await self.session.execute(select(MicroRitual).where(MicroRitual.category == category))
        return list(result.scalars().all())

    async def get_micro_rituals_by_role(self, role: str) -> list[MicroRitual]:
        # applicable_roles is a JSON array; filtering it portably means doing it here.
        return [r for r in await self.list_micro_rituals() if role in r.applicable_roles]

    async def create_micro_ritual_completion(
        self, *, user_id: str, micro_ritual_id: str, completed_at: datetime
    ) -> MicroRitualCompletion:
        completion = MicroRitualCompletion(
            user_id=user_id,
            micro_ritual_id=micro_ritual_id,
            completed_at=completed_at,
        )
        self.session.add(completion)
        await self.session.flush()
        return completion

    async def get_micro_ritual_completions_by_user(self, user_id: str) -> list[MicroRitualCompletion]:
        result = await self.session.execute(
            select(MicroRitualCompletion)
            .where(MicroRitualCompletion.user_id == user_id)
            .order_by(MicroRitualCompletion.completed_at)
        )
        return list(result.scalars().all())

    async def create_micro_ritual_attempt(
        self, *, user_id: str, attempted_rituals: str, attempted_at: datetime
    ) -> MicroRitualAttempt:
        attempt = MicroRitualAttempt(
            user_id=user_id,
            attempted_rituals=attempted_rituals,
            attempted_at=attempted_at,
        )
        self.session.add(attempt)
        await self.session.flush()
        return attempt

    async def get_micro_ritual_attempts_by_user(self, user_id: str) -> list[MicroRitualAttempt]:
        result = await self.session.execute(
            select(MicroRitualAttempt)
            .where(MicroRitualAttempt.user_id == user_id)
            .order_by(MicroRitualAttempt.attempted_at)
        )
        return list(result.scalars().all())

    # --- Scores ---

    async def create_school_score(
        self,
        *,
        school_id: str,
        overall_score: int,
        category_scores: dict[str, int],
        calculated_at: datetime,
    ) -> SchoolScore:
        score = SchoolScore(
            school_id=school_id,
            overall_score=overall_score,
            category_scores=dict(category_scores),
            calculated_at=calculated_at,
        )
        self.session.add(score)
        await self.session.flush()
        return score

    async def get_latest_school_score(self, school_id: str) -> SchoolScore | None:
        result = await self.session.execute(
            select(SchoolScore)
            .where(SchoolScore.school_id == school_id)
            .order_by(SchoolScore.calculated_at.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def get_school_score_history(self, school_id: str) -> list[SchoolScore]:
        result = await self.session.execute(
            select(SchoolScore)
            .where(SchoolScore.school_id == school_id)
            .order_by(SchoolScore.calculated_at.desc())
        )
        return list(result.scalars().all())
