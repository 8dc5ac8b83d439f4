"""HTTP contract of the residence catalog endpoints."""
from __future__ import annotations

from unittest.mock import patch

import pytest
from httpx import ASGITransport, AsyncClient

from prague_flats.main import app


@pytest.mark.asyncio
async def test_list_residences_envelope() -> None:
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get("/api/residences")

    body = response.json()
    assert response.status_code == 200
    assert body["success"] is True
    assert body["count"] == 5 == len(body["data"])
    first = body["data"][0]
    assert first["name"] == "Balbínova Residence"
    assert first["mainImage"] == "/images/residences/balbinova/main.jpg"
    assert first["flats"][0]["residenceId"] == 1
    assert first["transport"]["tram"] == ["6", "11", "13"]


@pytest.mark.asyncio
async def test_list_residences_with_filters() -> None:
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        cheap = await client.get("/api/residences", params={"price_max": 6900})
        district = await client.get("/api/residences", params={"district": "repy"})

    assert [item["id"] for item in cheap.json()["data"]] == [2, 4, 5]
    assert cheap.json()["count"] == 3
    assert [item["district"] for item in district.json()["data"]] == ["Řepy"]


@pytest.mark.asyncio
async def test_get_residence_by_id() -> None:
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get("/api/residences/3")

    assert response.status_code == 200
    assert response.json()["success"] is True
    assert response.json()["data"]["name"] == "Palmovka Residence"


@pytest.mark.asyncio
@pytest.mark.parametrize("residence_id", ["42", "abc"])
async def test_get_residence_not_found(residence_id) -> None:
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get(f"/api/residences/{residence_id}")

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Residence not found"}


@pytest.mark.asyncio
async def test_get_residence_unexpected_failure_returns_500() -> None:
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        with patch(
            "prague_flats.repositories.residences.get_residence_by_id",
            side_effect=RuntimeError("boom"),
        ):
            response = await client.get("/api/residences/1")

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to fetch residence"}


@pytest.mark.asyncio
async def test_list_residences_unexpected_failure_returns_500() -> None:
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        with patch(
            "prague_flats.repositories.residences.list_residences",
            side_effect=RuntimeError("boom"),
        ):
            response = await client.get("/api/residences")

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to fetch residences"}


@pytest.mark.asyncio
async def test_list_flats() -> None:
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get("/api/flats")

    body = response.json()
    assert body["count"] == 5
    assert [flat["id"] for flat in body["data"]] == [101, 201, 301, 401, 501]
