"""Assessment submission tests."""

import pytest
from httpx import AsyncClient

from tests.conftest import answer_all, register_user


@pytest.mark.asyncio
async def test_submit_assessment(client: AsyncClient, user: dict) -> None:
    responses = await answer_all(client, "student", "always")
    response = await client.post("/api/assessments", json={"userId": user["id"], "responses": responses})
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Assessment submitted successfully"
    assert data["accessCode"] == user["accessCode"]
    assert data["schoolScore"]["schoolId"] == user["schoolId"]
    assert data["schoolScore"]["overallScore"] == 100
    assert set(data["schoolScore"]["categoryScores"].values()) == {100}


@pytest.mark.asyncio
async def test_second_submission_within_cooldown_is_forbidden(client: AsyncClient, user: dict) -> None:
    responses = await answer_all(client, "student", "usually")
    first = await client.post("/api/assessments", json={"userId": user["id"], "responses": responses})
    assert first.status_code == 200

    second = await client.post("/api/assessments", json={"userId": user["id"], "responses": responses})
    assert second.status_code == 403
    assert second.json() == {"error": "Must wait 7 days between assessments"}

    history = (await client.get(f"/api/schools/{user['schoolId']}/score-history")).json()
    assert len(history) == 1


@pytest.mark.asyncio
async def test_unknown_user(client: AsyncClient) -> None:
    responses = await answer_all(client, "student", "always")
    response = await client.post("/api/assessments", json={"userId": "ghost", "responses": responses})
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


@pytest.mark.asyncio
async def test_empty_answer_rejected_and_nothing_stored(client: AsyncClient, user: dict) -> None:
    responses = await answer_all(client, "student", "always")
    responses[2]["answer"] = ""
    response = await client.post("/api/assessments", json={"userId": user["id"], "responses": responses})
    assert response.status_code == 400

    assert (await client.get(f"/api/users/{user['id']}/responses")).json() == []
    eligibility = (await client.get(f"/api/users/{user['id']}/can-take-assessment")).json()
    assert eligibility["canTakeAssessment"] is True


@pytest.mark.asyncio
async def test_no_responses_rejected(client: AsyncClient, user: dict) -> None:
    response = await client.post("/api/assessments", json={"userId": user["id"], "responses": []})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_unknown_question_rejected(client: AsyncClient, user: dict) -> None:
    responses = await answer_all(client, "student", "always")
    responses.append({"questionId": "not-a-question", "answer": "always"})
    response = await client.post("/api/assessments", json={"userId": user["id"], "responses": responses})
    assert response.status_code == 400
    assert "not-a-question" in response.json()["error"]
    assert (await client.get(f"/api/users/{user['id']}/responses")).json() == []


@pytest.mark.asyncio
async def test_school_score_mixes_respondents(client: AsyncClient, school: dict) -> None:
    student = await register_user(client, school["id"], role="student")
    staff = await register_user(client, school["id"], role="staff")

    await client.post(
        "/api/assessments",
        json={"userId": student["id"], "responses": await answer_all(client, "student", "always")},
    )
    response = await client.post(
        "/api/assessments",
        json={"userId": staff["id"], "responses": await answer_all(client, "staff", "never")},
    )
    score = response.json()["schoolScore"]
    # School Community is shared by both roles: one 100 and one 20.
    assert score["categoryScores"]["School Community"] == 60
    assert score["categoryScores"]["Student-Student Relationships"] == 100
    assert score["categoryScores"]["Staff-Staff Relationships"] == 20
