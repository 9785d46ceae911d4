"""School registration, search and lookup tests."""

import pytest
from httpx import AsyncClient

from tests.conftest import register_school


@pytest.mark.asyncio
async def test_register_new_school(client: AsyncClient) -> None:
    response = await client.post(
        "/api/schools",
        json={"name": "Lincoln High School", "district": "Unified", "city": "Springfield", "state": "IL"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["isNew"] is True
    assert data["school"]["name"] == "Lincoln High School"
    assert data["school"]["id"]
    assert "createdAt" in data["school"]


@pytest.mark.asyncio
async def test_register_existing_name_is_reused(client: AsyncClient) -> None:
    first = await register_school(client, "Lincoln High School")
    response = await client.post(
        "/api/schools",
        json={"name": "lincoln high school", "district": "Other", "city": "Elsewhere", "state": "CA"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["isNew"] is False
    assert data["school"]["id"] == first["id"]
    assert data["school"]["city"] == "Springfield"

    found = (await client.get("/api/schools/search", params={"q": "lincoln"})).json()
    assert len(found) == 1


@pytest.mark.asyncio
async def test_register_requires_all_fields(client: AsyncClient) -> None:
    response = await client.post("/api/schools", json={"name": "X", "district": "", "city": "C", "state": "S"})
    assert response.status_code == 400
    assert "error" in response.json()


@pytest.mark.asyncio
async def test_search_matches_any_field_case_insensitive(client: AsyncClient) -> None:
    await register_school(client, "Oak Elementary", city="Portland", state="OR")
    await register_school(client, "Pine Middle", city="Bend", state="OR", district="Deschutes")

    by_city = (await client.get("/api/schools/search", params={"q": "PORT"})).json()
    assert [s["name"] for s in by_city] == ["Oak Elementary"]

    by_district = (await client.get("/api/schools/search", params={"q": "deschutes"})).json()
    assert [s["name"] for s in by_district] == ["Pine Middle"]

    by_state = (await client.get("/api/schools/search", params={"q": "or"})).json()
    assert len(by_state) == 2


@pytest.mark.asyncio
async def test_search_caps_results(client: AsyncClient) -> None:
    for i in range(12):
        await register_school(client, f"Maple School {i}")
    results = (await client.get("/api/schools/search", params={"q": "maple"})).json()
    assert len(results) == 10


@pytest.mark.asyncio
async def test_search_blank_query_returns_empty(client: AsyncClient) -> None:
    await register_school(client)
    assert (await client.get("/api/schools/search")).json() == []
    assert (await client.get("/api/schools/search", params={"q": "  "})).json() == []


@pytest.mark.asyncio
async def test_get_school_by_id(client: AsyncClient, school: dict) -> None:
    response = await client.get(f"/api/schools/{school['id']}")
    assert response.status_code == 200
    assert response.json() == school


@pytest.mark.asyncio
async def test_get_unknown_school(client: AsyncClient) -> None:
    response = await client.get("/api/schools/nope")
    assert response.status_code == 404
    assert response.json() == {"error": "School not found"}
