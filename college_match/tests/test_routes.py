"""
API tests for the college match router.
"""

import pytest
from fastapi.testclient import TestClient

from db import get_db
from main import app


@pytest.fixture
def client(seeded_db, session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_health(client) -> None:
    response = client.get("/college-matches/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_match_page(client) -> None:
    response = client.post("/college-matches", json={
        "query": {"student_score": 90, "page_size": 4},
        "categories": "ALL",
    })
    assert response.status_code == 200
    data = response.json()

    assert data["pagination"] == {
        "current_page": 1,
        "total_pages": 2,
        "total_count": 6,
        "page_size": 4,
        "first_index": 1,
        "last_index": 4,
    }
    assert data["summary"]["eligible_count"] == 2
    assert data["summary"]["sort_mode"] == "eligible"
    assert [m["institution"] for m in data["matches"]] == ["VIT", "PICT", "PICT", "VJTI"]
    assert data["matches"][0]["eligible"] is True


def test_match_page_with_category_and_filters(client) -> None:
    response = client.post("/college-matches", json={
        "query": {
            "student_score": 86,
            "filters": {"eligible_only": True},
            "sort_mode": "name-asc",
        },
        "categories": ["OBC"],
    })
    assert response.status_code == 200
    data = response.json()

    assert data["pagination"]["total_count"] == 1
    assert data["matches"][0]["institution"] == "VIT"


def test_invalid_query_is_rejected(client) -> None:
    response = client.post("/college-matches", json={
        "query": {"student_score": 90, "page_size": 0},
    })
    assert response.status_code == 400


def test_strategy_report(client) -> None:
    response = client.post("/college-matches/strategy", json={
        "student_score": 90,
        "filters": {"cities": ["Pune"]},
    })
    assert response.status_code == 200
    data = response.json()

    assert data["counts"] == {"best-fit": 2, "safe": 0, "low-quality": 1, "dream": 1}
    assert data["total"] == 4
    assert data["tiers"]["dream"]["title"] == "Dream Option"
    assert [m["institution"] for m in data["groups"]["dream"]] == ["COEP Technological University"]


def test_filter_options(client) -> None:
    response = client.get("/college-matches/filters")
    assert response.status_code == 200
    assert response.json()["categories"] == ["GOPEN", "OBC"]


def test_scalar_filter_value_is_rejected(client) -> None:
    response = client.post("/college-matches", json={
        "query": {"student_score": 90, "filters": {"cities": 5}},
    })
    assert response.status_code == 400

    response = client.post("/college-matches/strategy", json={
        "student_score": 90,
        "filters": {"cities": 5},
    })
    assert response.status_code == 400
