"""Dict-backed store. One instance per process, seeded at startup.

Not transactionally isolated: concurrent requests interleave between reads
and writes exactly as they would against an unlocked map.
"""

from __future__ import annotations

import bisect
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

from schoolpulse.db.models import (
    MicroRitual,
    MicroRitualAttempt,
    MicroRitualCompletion,
    Question,
    Response,
    School,
    SchoolScore,
    User,
    new_id,
)
from schoolpulse.errors import NotFound, ValidationError
from schoolpulse.storage.base import Storage
from schoolpulse.users.access_codes import generate_unique_access_code
from schoolpulse.users.eligibility import as_utc


def _submitted_key(response: Response) -> datetime:
    return as_utc(response.submitted_at)


class MemoryStorage(Storage):
    """In-process implementation of the storage contract."""

    def __init__(self) -> None:
        self.schools: dict[str, School] = {}
        self.users: dict[str, User] = {}
        self.users_by_code: dict[str, User] = {}
        self.questions: dict[str, Question] = {}
        self.micro_rituals: dict[str, MicroRitual] = {}
        self.completions: list[MicroRitualCompletion] = []
        self.attempts: list[MicroRitualAttempt] = []
        self.scores: dict[str, list[SchoolScore]] = {}
        # Kept sorted by submitted_at so time windows are a bisect, not a scan.
        self.responses: list[Response] = []

    async def ping(self) -> bool:
        return True

    async def seed_questions(self, questions: Iterable[dict[str, Any]]) -> int:
        if self.questions:
            return 0
        for data in questions:
            question = Question(id=new_id(), **data)
            self.questions[question.id] = question
        return len(self.questions)

    async def seed_micro_rituals(self, rituals: Iterable[dict[str, Any]]) -> int:
        if self.micro_rituals:
            return 0
        for data in rituals:
            ritual = MicroRitual(id=new_id(), **data)
            self.micro_rituals[ritual.id] = ritual
        return len(self.micro_rituals)

    # --- Schools ---

    async def create_school(self, *, name: str, district: str, city: str, state: str) -> School:
        school = School(
            id=new_id(),
            name=name,
            district=district,
            city=city,
            state=state,
            created_at=datetime.now(timezone.utc),
        )
        self.schools[school.id] = school
        return school

    async def get_school(self, school_id: str) -> School | None:
        return self.schools.get(school_id)

    async def get_school_by_name(self, name: str) -> School | None:
        wanted = name.lower()
        for school in self.schools.values():
            if school.name.lower() == wanted:
                return school
        return None

    async def search_schools(self, query: str, limit: int = 10) -> list[School]:
        term = query.lower()
        matches = [
            s
            for s in self.schools.values()
            if term in s.name.lower()
            or term in s.district.lower()
            or term in s.city.lower()
            or term in s.state.lower()
        ]
        return matches[:limit]

    async def list_schools(self) -> list[School]:
        return sorted(self.schools.values(), key=lambda s: s.name.lower())

    async def update_school(self, school_id: str, changes: dict[str, str]) -> School:
        school = self.schools.get(school_id)
        if school is None:
            raise NotFound("School not found")
        for key, value in changes.items():
            setattr(school, key, value)
        return school

    async def delete_school(self, school_id: str) -> None:
        if self.schools.pop(school_id, None) is None:
            raise NotFound("School not found")
        # Same cascade as the schema: users, their event logs, score snapshots.
        removed = {uid for uid, u in self.users.items() if u.school_id == school_id}
        for uid in removed:
            user = self.users.pop(uid)
            self.users_by_code.pop(user.access_code, None)
        self.responses = [r for r in self.responses if r.user_id not in removed]
        self.completions = [c for c in self.completions if c.user_id not in removed]
        self.attempts = [a for a in self.attempts if a.user_id not in removed]
        self.scores.pop(school_id, None)

    # --- Users ---

    async def _code_taken(self, code: str) -> bool:
        return code in self.users_by_code

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
        else:
            access_code = await generate_unique_access_code(self._code_taken, max_attempts)

        user = User(
            id=new_id(),
            school_id=school_id,
            role=role,
            access_code=access_code,
            last_assessment_date=None,
            created_at=datetime.now(timezone.utc),
        )
        self.users[user.id] = user
        self.users_by_code[access_code] = user
        return user

    async def get_user(self, user_id: str) -> User | None:
        return self.users.get(user_id)

    async def get_user_by_access_code(self, access_code: str) -> User | None:
        return self.users_by_code.get(access_code)

    async def get_users_by_school(self, school_id: str) -> list[User]:
        return [u for u in self.users.values() if u.school_id == school_id]

    async def update_user_last_assessment(self, user_id: str, when: datetime) -> User:
        user = self.users.get(user_id)
        if user is None:
            raise NotFound("User not found")
        user.last_assessment_date = when
        return user

    # --- Questions ---

    async def get_question(self, question_id: str) -> Question | None:
        return self.questions.get(question_id)

    async def get_questions_by_role(self, role: str) -> list[Question]:
        return sorted((q for q in self.questions.values() if q.role == role), key=lambda q: q.order)

    async def get_questions_by_ids(self, question_ids: Iterable[str]) -> dict[str, Question]:
        return {qid: self.questions[qid] for qid in question_ids if qid in self.questions}

    # --- Responses ---

    async def create_response(
        self, *, user_id: str, question_id: str, answer: str, submitted_at: datetime
    ) -> Response:
        response = Response(
            id=new_id(),
            user_id=user_id,
            question_id=question_id,
            answer=answer,
            submitted_at=submitted_at,
        )
        bisect.insort_right(self.responses, response, key=_submitted_key)
        return response

    async def get_responses_by_user(self, user_id: str) -> list[Response]:
        return [r for r in self.responses if r.user_id == user_id]

    def _window(self, since: datetime) -> list[Response]:
        start = bisect.bisect_left(self.responses, as_utc(since), key=_submitted_key)
        return self.responses[start:]

    async def get_recent_responses_by_school(self, school_id: str, since: datetime) -> list[Response]:
        user_ids = {u.id for u in await self.get_users_by_school(school_id)}
        return [r for r in self._window(since) if r.user_id in user_ids]

    async def count_recent_respondents(self, school_id: str, since: datetime) -> int:
        recent = await self.get_recent_responses_by_school(school_id, since)
        return len({r.user_id for r in recent})

    # --- Micro-rituals ---

    async def list_micro_rituals(self) -> list[MicroRitual]:
        return list(self.micro_rituals.values())

    async def get_micro_ritual(self, ritual_id: str) -> MicroRitual | None:
        return self.micro_rituals.get(ritual_id)

    async def get_micro_rituals_by_category(self, category: str) -> list[MicroRitual]:
        return [r for r in self.micro_rituals.values() if r.category == category]

    async def get_micro_rituals_by_role(self, role: str) -> list[MicroRitual]:
        return [r for r in self.micro_rituals.values() if role in r.applicable_roles]

    async def create_micro_ritual_completion(
        self, *, user_id: str, micro_ritual_id: str, completed_at: datetime
    ) -> MicroRitualCompletion:
        completion = MicroRitualCompletion(
            id=new_id(),
            user_id=user_id,
            micro_ritual_id=micro_ritual_id,
            completed_at=completed_at,
        )
        self.completions.append(completion)
        return completion

    async def get_micro_ritual_completions_by_user(self, user_id: str) -> list[MicroRitualCompletion]:
        return [c for c in self.completions if c.user_id == user_id]

    async def create_micro_ritual_attempt(
        self, *, user_id: str, attempted_rituals: str, attempted_at: datetime
    ) -> MicroRitualAttempt:
        attempt = MicroRitualAttempt(
            id=new_id(),
            user_id=user_id,
            attempted_rituals=attempted_rituals,
            attempted_at=attempted_at,
        )
        self.attempts.append(attempt)
        return attempt

    async def get_micro_ritual_attempts_by_user(self, user_id: str) -> list[MicroRitualAttempt]:
        return [a for a in self.attempts if a.user_id == user_id]

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
            id=new_id(),
            school_id=school_id,
            overall_score=overall_score,
            category_scores=dict(category_scores),
            calculated_at=calculated_at,
        )
        self.scores.setdefault(school_id, []).append(score)
        return score

    async def get_latest_school_score(self, school_id: str) -> SchoolScore | None:
        history = await self.get_school_score_history(school_id)
        return history[0] if history else None

    async def get_school_score_history(self, school_id: str) -> list[SchoolScore]:
        # Newest insert first among equal timestamps.
        snapshots = list(reversed(self.scores.get(school_id, [])))
        return sorted(snapshots, key=lambda s: as_utc(s.calculated_at), reverse=True)
