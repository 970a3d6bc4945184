"""
Error handling tests: malformed input, missing or unknown sessions, and the
shape of error bodies.
"""

import pytest

from fastapi.testclient import TestClient

from main import app
from test_fixtures import client, meal_payload, new_user_client
from app.exceptions import NotFoundError, UnauthorizedError


# =============================================================================
# AUTHENTICATION
# =============================================================================


@pytest.mark.parametrize(
    "method, path",
    [
        ("get", "/meals"),
        ("get", "/meals/metrics"),
        ("get", "/meals/6f1c1f4e-2b47-4d5b-9a3e-0a4b8f1d2c3e"),
        ("delete", "/meals/6f1c1f4e-2b47-4d5b-9a3e-0a4b8f1d2c3e"),
    ],
)
def test_meal_routes_require_session(method, path):
    r = getattr(client, method)(path)
    assert r.status_code == 401
    assert r.json()["error"] == "Unauthorized."


def test_create_meal_requires_session():
    r = client.post("/meals", json=meal_payload())
    assert r.status_code == 401


def test_unknown_session_is_rejected():
    stranger = TestClient(app)
    stranger.cookies.set("sessionId", "not-a-real-session")
    r = stranger.get("/meals")
    assert r.status_code == 401
    assert r.json()["error"] == "Unauthorized."


# =============================================================================
# VALIDATION
# =============================================================================


@pytest.mark.parametrize(
    "override",
    [
        {"name": ""},
        {"isOnDiet": "true"},
        {"isOnDiet": 1},
        {"date": "yesterday-ish"},
        {"description": None},
    ],
)
def test_create_meal_rejects_bad_fields(override):
    user_client = new_user_client()
    body = {**meal_payload(), **override}

    r = user_client.post("/meals", json=body)

    assert r.status_code == 400
    assert r.json()["code"] == "VALIDATION_ERROR"
    assert user_client.get("/meals").json() == {"meals": []}


@pytest.mark.parametrize("missing", ["name", "description", "isOnDiet", "date"])
def test_create_meal_rejects_missing_fields(missing):
    user_client = new_user_client()
    body = meal_payload()
    body.pop(missing)

    r = user_client.post("/meals", json=body)

    assert r.status_code == 400
    assert r.json()["error"] == "Validation failed"


def test_update_meal_validates_body():
    user_client = new_user_client()
    user_client.post("/meals", json=meal_payload())
    meal_id = user_client.get("/meals").json()["meals"][0]["id"]

    r = user_client.put(f"/meals/{meal_id}", json={"name": "Only a name"})
    assert r.status_code == 400

    unchanged = user_client.get(f"/meals/{meal_id}").json()["meal"]
    assert unchanged["name"] == "Banana"


def test_non_uuid_meal_id_is_rejected():
    user_client = new_user_client()
    for method in ("get", "delete"):
        r = getattr(user_client, method)("/meals/not-a-uuid")
        assert r.status_code == 400
    r = user_client.put("/meals/not-a-uuid", json=meal_payload())
    assert r.status_code == 400


def test_malformed_json_is_rejected():
    user_client = new_user_client()
    r = user_client.post(
        "/meals",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400


@pytest.mark.parametrize(
    "date", ["9999-12-31T23:00:00-05:00", "0001-01-01T01:00:00+05:00"]
)
def test_create_meal_rejects_date_outside_utc_range(date):
    user_client = new_user_client()

    r = user_client.post("/meals", json=meal_payload(date=date))

    assert r.status_code == 400
    assert r.json()["code"] == "VALIDATION_ERROR"
    assert user_client.get("/meals").json() == {"meals": []}


def test_update_meal_rejects_date_outside_utc_range():
    user_client = new_user_client()
    user_client.post("/meals", json=meal_payload())
    meal_id = user_client.get("/meals").json()["meals"][0]["id"]

    r = user_client.put(
        f"/meals/{meal_id}", json=meal_payload(date="9999-12-31T23:00:00-05:00")
    )

    assert r.status_code == 400
    assert r.json()["code"] == "VALIDATION_ERROR"
    unchanged = user_client.get(f"/meals/{meal_id}").json()["meal"]
    assert unchanged["date"].startswith("2024-09-14T12:00:00")


# =============================================================================
# ERROR OBJECTS AND MISC
# =============================================================================


def test_service_errors_carry_status_and_payload():
    err = NotFoundError("Meal not found", code="NOT_FOUND")
    assert err.http_status == 404
    assert err.to_dict() == {"error": "Meal not found", "code": "NOT_FOUND"}

    assert UnauthorizedError().message == "Unauthorized."
    assert UnauthorizedError.http_status == 401

    rejected = UnauthorizedError(details={"reason": "unknown"})
    assert str(rejected) == "Unauthorized."
    assert rejected.to_dict() == {
        "error": "Unauthorized.",
        "details": {"reason": "unknown"},
    }


def test_unknown_route_is_404_json():
    r = client.get("/nothing-here")
    assert r.status_code == 404
    assert r.json()["error"] == "Not Found"


def test_health_check():
    r = client.get("/health-check")
    assert r.status_code == 200
    assert r.json() == {"status": "ok", "service": "DailyDiet"}
    assert "X-Request-ID" in r.headers


def test_database_health_check():
    r = client.get("/health-check/db")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
