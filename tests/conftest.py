"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from schoolpulse.config import get_settings
from schoolpulse.main import create_app, seed_reference_data
from schoolpulse.questions.seed import QUESTION_SEED_DATA
from schoolpulse.rituals.seed import MICRO_RITUAL_SEED_DATA
from schoolpulse.storage import MemoryStorage, close_storage, init_storage

ADMIN_CODE = "6056"


@pytest_asyncio.fixture
async def client(monkeypatch: pytest.MonkeyPatch) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client over a fresh in-memory store.

    ASGITransport does not run the lifespan, so storage is set up here.
    """
    monkeypatch.setenv("SCHOOLPULSE_STORAGE_BACKEND", "memory")
    monkeypatch.setenv("SCHOOLPULSE_ADMIN_ACCESS_CODE", ADMIN_CODE)
    get_settings.cache_clear()

    app = create_app()
    await init_storage("memory")
    await seed_reference_data()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    await close_storage()
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def storage() -> MemoryStorage:
    """A seeded in-memory store for service-level tests."""
    store = MemoryStorage()
    await store.seed_questions(QUESTION_SEED_DATA)
    await store.seed_micro_rituals(MICRO_RITUAL_SEED_DATA)
    return store


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"X-Admin-Code": ADMIN_CODE}


async def register_school(client: AsyncClient, name: str = "Lincoln High School", **overrides: str) -> dict:
    """POST /api/schools and return the school object."""
    body = {"name": name, "district": "Unified", "city": "Springfield", "state": "IL", **overrides}
    response = await client.post("/api/schools", json=body)
    assert response.status_code == 200, response.text
    return response.json()["school"]


async def register_user(client: AsyncClient, school_id: str, role: str = "student") -> dict:
    """POST /api/users and return the user object."""
    response = await client.post("/api/users", json={"schoolId": school_id, "role": role})
    assert response.status_code == 200, response.text
    return response.json()


async def answer_all(client: AsyncClient, role: str, answer: str) -> list[dict]:
    """Build a submission answering every question for ``role`` with ``answer``."""
    questions = (await client.get(f"/api/questions/{role}")).json()
    return [{"questionId": q["id"], "answer": answer} for q in questions]


@pytest_asyncio.fixture
async def school(client: AsyncClient) -> dict:
    return await register_school(client)


@pytest_asyncio.fixture
async def user(client: AsyncClient, school: dict) -> dict:
    return await register_user(client, school["id"])
