"""Question bank endpoint tests."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
@pytest.mark.parametrize("role", ["student", "staff", "administrator", "counselor"])
async def test_questions_for_role(client: AsyncClient, role: str) -> None:
    response = await client.get(f"/api/questions/{role}")
    assert response.status_code == 200
    questions = response.json()
    assert len(questions) == 5
    assert all(q["role"] == role for q in questions)
    assert [q["order"] for q in questions] == sorted(q["order"] for q in questions)
    assert all(len(q["options"]) == 5 for q in questions)
    assert all({"value", "label"} <= q["options"][0].keys() for q in questions)


@pytest.mark.asyncio
async def test_unknown_role_has_no_questions(client: AsyncClient) -> None:
    response = await client.get("/api/questions/alien")
    assert response.status_code == 200
    assert response.json() == []
