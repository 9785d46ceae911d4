"""Storage contract shared by the in-memory and SQL backends.

All reads and writes of the service go through this interface. Create
operations assign ids and server-side timestamps and return the fully
materialized entity. Update/delete of a missing id raises NotFound.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import datetime
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
)


class Storage(ABC):
    """Abstract persistence interface."""

    # --- Lifecycle ---

    async def commit(self) -> None:  # noqa: B027
        """Make pending writes durable. No-op for stores without transactions."""

    async def rollback(self) -> None:  # noqa: B027
        """Discard pending writes. No-op for stores without transactions."""

    @abstractmethod
    async def ping(self) -> bool:
        """Return True if the backing store is reachable."""

    @abstractmethod
    async def seed_questions(self, questions: Iterable[dict[str, Any]]) -> int:
        """Insert the question bank if empty. Returns rows inserted."""

    @abstractmethod
    async def seed_micro_rituals(self, rituals: Iterable[dict[str, Any]]) -> int:
        """Insert the micro-ritual catalogue if empty. Returns rows inserted."""

    # --- Schools ---

    @abstractmethod
    async def create_school(self, *, name: str, district: str, city: str, state: str) -> School: ...

    @abstractmethod
    async def get_school(self, school_id: str) -> School | None: ...

    @abstractmethod
    async def get_school_by_name(self, name: str) -> School | None:
        """Case-insensitive exact name match."""

    @abstractmethod
    async def search_schools(self, query: str, limit: int = 10) -> list[School]:
        """Case-insensitive substring match on name, district, city or state."""

    @abstractmethod
    async def list_schools(self) -> list[School]:
        """All schools ordered by name."""

    @abstractmethod
    async def update_school(self, school_id: str, changes: dict[str, str]) -> School: ...

    @abstractmethod
    async def delete_school(self, school_id: str) -> None: ...

    # --- Users ---

    @abstractmethod
    async def create_user(
        self,
        *,
        school_id: str,
        role: str,
        access_code: str | None = None,
        max_attempts: int = 100,
    ) -> User:
        """Create a user, generating a unique access code when none is given.

        A caller-supplied code that is already taken raises ValidationError.
        """

    @abstractmethod
    async def get_user(self, user_id: str) -> User | None: ...

    @abstractmethod
    async def get_user_by_access_code(self, access_code: str) -> User | None: ...

    @abstractmethod
    async def get_users_by_school(self, school_id: str) -> list[User]: ...

    @abstractmethod
    async def update_user_last_assessment(self, user_id: str, when: datetime) -> User: ...

    # --- Questions ---

    @abstractmethod
    async def get_question(self, question_id: str) -> Question | None: ...

    @abstractmethod
    async def get_questions_by_role(self, role: str) -> list[Question]:
        """Questions for a role, ascending ``order``."""

    @abstractmethod
    async def get_questions_by_ids(self, question_ids: Iterable[str]) -> dict[str, Question]:
        """Resolve ids to questions. Unknown ids are absent from the result."""

    # --- Responses ---

    @abstractmethod
    async def create_response(
        self, *, user_id: str, question_id: str, answer: str, submitted_at: datetime
    ) -> Response: ...

    @abstractmethod
    async def get_responses_by_user(self, user_id: str) -> list[Response]:
        """All responses of a user, oldest first."""

    @abstractmethod
    async def get_recent_responses_by_school(self, school_id: str, since: datetime) -> list[Response]:
        """Responses by the school's users with ``submitted_at >= since``."""

    @abstractmethod
    async def count_recent_respondents(self, school_id: str, since: datetime) -> int:
        """Distinct users of the school with a response since ``since``."""

    # --- Micro-rituals ---

    @abstractmethod
    async def list_micro_rituals(self) -> list[MicroRitual]: ...

    @abstractmethod
    async def get_micro_ritual(self, ritual_id: str) -> MicroRitual | None: ...

    @abstractmethod
    async def get_micro_rituals_by_category(self, category: str) -> list[MicroRitual]: ...

    @abstractmethod
    async def get_micro_rituals_by_role(self, role: str) -> list[MicroRitual]: ...

    @abstractmethod
    async def create_micro_ritual_completion(
        self, *, user_id: str, micro_ritual_id: str, completed_at: datetime
    ) -> MicroRitualCompletion: ...

    @abstractmethod
    async def get_micro_ritual_completions_by_user(self, user_id: str) -> list[MicroRitualCompletion]: ...

    @abstractmethod
    async def create_micro_ritual_attempt(
        self, *, user_id: str, attempted_rituals: str, attempted_at: datetime
    ) -> MicroRitualAttempt: ...

    @abstractmethod
    async def get_micro_ritual_attempts_by_user(self, user_id: str) -> list[MicroRitualAttempt]: ...

    # --- Scores ---

    @abstractmethod
    async def create_school_score(
        self,
        *,
        school_id: str,
        overall_score: int,
        category_scores: dict[str, int],
        calculated_at: datetime,
    ) -> SchoolScore: ...

    @abstractmethod
    async def get_latest_school_score(self, school_id: str) -> SchoolScore | None: ...

    @abstractmethod
    async def get_school_score_history(self, school_id: str) -> list[SchoolScore]:
        """All snapshots for the school, newest first."""
