"""SqlStorage against a throwaway SQLite database."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from schoolpulse.db.base import Base
from schoolpulse.errors import NotFound, ValidationError
from schoolpulse.questions.seed import QUESTION_SEED_DATA
from schoolpulse.rituals.seed import MICRO_RITUAL_SEED_DATA
from schoolpulse.scoring.engine import calculate_and_store_school_score, summarize_school
from schoolpulse.scoring.service import (
    count_assessments_in_window,
    get_or_calculate_latest_score,
    get_score_history,
)
from schoolpulse.storage.sql import SqlStorage
from schoolpulse.users.eligibility import as_utc

NOW = datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)


@pytest_asyncio.fixture
async def sql_storage(tmp_path) -> AsyncGenerator[SqlStorage, None]:
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")

    # Enforce foreign keys like Postgres does.
    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _record):  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        store = SqlStorage(session)
        await store.seed_questions(QUESTION_SEED_DATA)
        await store.seed_micro_rituals(MICRO_RITUAL_SEED_DATA)
        await store.commit()
        yield store
    await engine.dispose()


@pytest.mark.asyncio
async def test_ping(sql_storage: SqlStorage) -> None:
    assert await sql_storage.ping() is True


@pytest.mark.asyncio
async def test_seeding_is_idempotent(sql_storage: SqlStorage) -> None:
    assert await sql_storage.seed_questions(QUESTION_SEED_DATA) == 0
    assert len(await sql_storage.list_micro_rituals()) == 12


@pytest.mark.asyncio
async def test_questions_by_role_in_order(sql_storage: SqlStorage) -> None:
    questions = await sql_storage.get_questions_by_role("staff")
    assert [q.order for q in questions] == [1, 2, 3, 4, 5]
    by_id = await sql_storage.get_questions_by_ids([questions[0].id, "missing"])
    assert list(by_id) == [questions[0].id]


@pytest.mark.asyncio
async def test_school_lookup_and_search(sql_storage: SqlStorage) -> None:
    school = await sql_storage.create_school(name="Lincoln High", district="Unified", city="Omaha", state="NE")
    await sql_storage.commit()

    assert (await sql_storage.get_school_by_name("LINCOLN HIGH")).id == school.id
    assert [s.id for s in await sql_storage.search_schools("omaha")] == [school.id]
    assert await sql_storage.search_schools("nothing") == []

    for i in range(12):
        await sql_storage.create_school(name=f"Maple {i}", district="D", city="C", state="S")
    assert len(await sql_storage.search_schools("maple", limit=10)) == 10


@pytest.mark.asyncio
async def test_update_and_delete_school(sql_storage: SqlStorage) -> None:
    school = await sql_storage.create_school(name="Old", district="D", city="C", state="S")
    updated = await sql_storage.update_school(school.id, {"name": "New"})
    assert updated.name == "New"
    assert updated.city == "C"

    await sql_storage.delete_school(school.id)
    assert await sql_storage.get_school(school.id) is None
    with pytest.raises(NotFound):
        await sql_storage.delete_school(school.id)
    with pytest.raises(NotFound):
        await sql_storage.update_school("missing", {"name": "X"})


@pytest.mark.asyncio
async def test_create_user_codes(sql_storage: SqlStorage) -> None:
    school = await sql_storage.create_school(name="S", district="D", city="C", state="S")
    generated = await sql_storage.create_user(school_id=school.id, role="student")
    assert len(generated.access_code) == 4

    chosen = await sql_storage.create_user(school_id=school.id, role="staff", access_code="QQ11")
    assert (await sql_storage.get_user_by_access_code("QQ11")).id == chosen.id

    with pytest.raises(ValidationError):
        await sql_storage.create_user(school_id=school.id, role="staff", access_code="QQ11")


@pytest.mark.asyncio
async def test_last_assessment_round_trip(sql_storage: SqlStorage) -> None:
    school = await sql_storage.create_school(name="S", district="D", city="C", state="S")
    user = await sql_storage.create_user(school_id=school.id, role="student")
    await sql_storage.update_user_last_assessment(user.id, NOW)
    await sql_storage.commit()

    reloaded = await sql_storage.get_user(user.id)
    assert as_utc(reloaded.last_assessment_date) == NOW


@pytest.mark.asyncio
async def test_recent_responses_window_and_scoring(sql_storage: SqlStorage) -> None:
    school = await sql_storage.create_school(name="S", district="D", city="C", state="S")
    other = await sql_storage.create_school(name="T", district="D", city="C", state="S")
    alice = await sql_storage.create_user(school_id=school.id, role="student")
    bob = await sql_storage.create_user(school_id=school.id, role="student")
    outsider = await sql_storage.create_user(school_id=other.id, role="student")
    question = (await sql_storage.get_questions_by_role("student"))[0]

    for user, answer, age in [
        (alice, "always", timedelta(days=1)),
        (alice, "usually", timedelta(days=2)),
        (bob, "never", timedelta(days=9)),
        (outsider, "never", timedelta(hours=1)),
    ]:
        await sql_storage.create_response(
            user_id=user.id, question_id=question.id, answer=answer, submitted_at=NOW - age
        )
    await sql_storage.commit()

    since = NOW - timedelta(days=7)
    recent = await sql_storage.get_recent_responses_by_school(school.id, since)
    assert sorted(r.answer for r in recent) == ["always", "usually"]
    assert await sql_storage.count_recent_respondents(school.id, since) == 1

    summary = await summarize_school(sql_storage, school.id, now=NOW)
    assert summary.category_scores == {question.category: 90}


@pytest.mark.asyncio
async def test_score_history_newest_first(sql_storage: SqlStorage) -> None:
    school = await sql_storage.create_school(name="S", district="D", city="C", state="S")
    older = await calculate_and_store_school_score(sql_storage, school.id, now=NOW - timedelta(hours=1))
    newer = await calculate_and_store_school_score(sql_storage, school.id, now=NOW)
    await sql_storage.commit()

    history = await sql_storage.get_school_score_history(school.id)
    assert [s.id for s in history] == [newer.id, older.id]
    assert (await sql_storage.get_latest_school_score(school.id)).id == newer.id
    assert history[0].category_scores == {}


@pytest.mark.asyncio
async def test_micro_ritual_records(sql_storage: SqlStorage) -> None:
    school = await sql_storage.create_school(name="S", district="D", city="C", state="S")
    user = await sql_storage.create_user(school_id=school.id, role="staff")
    ritual = (await sql_storage.get_micro_rituals_by_role("staff"))[0]

    await sql_storage.create_micro_ritual_completion(user_id=user.id, micro_ritual_id=ritual.id, completed_at=NOW)
    await sql_storage.create_micro_ritual_attempt(user_id=user.id, attempted_rituals="notes", attempted_at=NOW)
    await sql_storage.commit()

    assert len(await sql_storage.get_micro_ritual_completions_by_user(user.id)) == 1
    assert [a.attempted_rituals for a in await sql_storage.get_micro_ritual_attempts_by_user(user.id)] == ["notes"]
    assert await sql_storage.get_micro_rituals_by_category(ritual.category)


@pytest.mark.asyncio
@pytest.mark.parametrize("query", ["_", "%", "a_b", "50%"])
async def test_search_treats_wildcards_literally(sql_storage: SqlStorage, query: str) -> None:
    await sql_storage.create_school(name="Lincoln High", district="Unified", city="Omaha", state="NE")
    await sql_storage.create_school(name="Roosevelt", district="North", city="Lincoln", state="NE")
    assert await sql_storage.search_schools(query) == []


@pytest.mark.asyncio
async def test_search_matches_literal_wildcard_characters(sql_storage: SqlStorage) -> None:
    plain = await sql_storage.create_school(name="Oak School", district="D", city="C", state="S")
    marked = await sql_storage.create_school(name="Oak_School 100%", district="D", city="C", state="S")

    assert [s.id for s in await sql_storage.search_schools("k_s")] == [marked.id]
    assert [s.id for s in await sql_storage.search_schools("100%")] == [marked.id]
    assert {s.id for s in await sql_storage.search_schools("oak")} == {plain.id, marked.id}


@pytest.mark.asyncio
async def test_score_reads_reject_unknown_school(sql_storage: SqlStorage) -> None:
    with pytest.raises(NotFound):
        await get_or_calculate_latest_score(sql_storage, "no-such-school", now=NOW)
    with pytest.raises(NotFound):
        await get_score_history(sql_storage, "no-such-school")
    with pytest.raises(NotFound):
        await count_assessments_in_window(sql_storage, "no-such-school", now=NOW)
    assert await sql_storage.get_latest_school_score("no-such-school") is None


@pytest.mark.asyncio
async def test_first_score_read_for_existing_school(sql_storage: SqlStorage) -> None:
    school = await sql_storage.create_school(name="S", district="D", city="C", state="S")
    score, created = await get_or_calculate_latest_score(sql_storage, school.id, now=NOW)
    assert created is True
    assert score.overall_score == 50

    again, created_again = await get_or_calculate_latest_score(sql_storage, school.id, now=NOW)
    assert (again.id, created_again) == (score.id, False)


@pytest.mark.asyncio
async def test_delete_school_cascades(sql_storage: SqlStorage) -> None:
    school = await sql_storage.create_school(name="S", district="D", city="C", state="S")
    user = await sql_storage.create_user(school_id=school.id, role="student", access_code="CC33")
    await calculate_and_store_school_score(sql_storage, school.id, now=NOW)
    await sql_storage.commit()

    await sql_storage.delete_school(school.id)
    await sql_storage.commit()
    sql_storage.session.expunge_all()

    assert await sql_storage.get_user(user.id) is None
    assert await sql_storage.get_user_by_access_code("CC33") is None
    assert await sql_storage.get_school_score_history(school.id) == []


@pytest.mark.asyncio
async def test_code_conflict_only_undoes_that_insert(sql_storage: SqlStorage, monkeypatch) -> None:
    school = await sql_storage.create_school(name="Kept", district="D", city="C", state="S")
    school_id = school.id
    holder_id = (await sql_storage.create_user(school_id=school_id, role="staff", access_code="AAAA")).id

    # The first existence check misses "AAAA", as if another request inserted
    # it between the check and the insert.
    codes = iter(["AAAA", "BBBB"])
    monkeypatch.setattr("schoolpulse.storage.sql.generate_access_code", lambda: next(codes))
    real_code_taken = sql_storage._code_taken
    calls = []

    async def stale_first_check(code: str) -> bool:
        calls.append(code)
        if len(calls) == 1:
            return False
        return await real_code_taken(code)

    monkeypatch.setattr(sql_storage, "_code_taken", stale_first_check)

    user = await sql_storage.create_user(school_id=school_id, role="student")
    assert user.access_code == "BBBB"
    assert calls == ["AAAA", "AAAA", "BBBB"]

    # Work flushed earlier in the same transaction survives the conflict.
    await sql_storage.commit()
    sql_storage.session.expunge_all()
    assert (await sql_storage.get_school(school_id)).name == "Kept"
    assert (await sql_storage.get_user_by_access_code("AAAA")).id == holder_id
