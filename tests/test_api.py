import pytest
from fastapi.testclient import TestClient

from api.main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"


def test_defaults(client):
    data = client.get("/api/v1/recipes/defaults").json()
    assert data["defaults"]["method"] == "DIRECT"
    assert data["defaults"]["total_flour"] == 500
    assert data["ranges"]["target_hydration"] == {"min": 60, "max": 90, "default": 70, "step": 1}


def test_calculate_default_scenario(client):
    resp = client.post("/api/v1/recipes/calculate", json={})
    assert resp.status_code == 200
    data = resp.json()

    assert data["output"]["calculated_water_temp"] == 26
    assert data["output"]["water_total"] == 350
    assert data["output"]["salt"] == 10
    assert data["output"]["preferment"] is None
    assert data["steps"][0]["id"] == "step-1"
    assert data["steps"][0]["category"] == "mix"
    assert data["labels"] == {
        "hydration": "Supple",
        "speed": "Standard",
        "water_advice": "Warm",
        "water_icon": "warm",
        "total_time": "5h 42m",
    }


def test_calculate_is_idempotent(client):
    body = {"method": "POOLISH", "target_hydration": 82, "preferment_storage": "FRIDGE"}
    first = client.post("/api/v1/recipes/calculate", json=body).json()
    second = client.post("/api/v1/recipes/calculate", json=body).json()
    assert first == second
    assert first["output"]["preferment_time"] == 1440


@pytest.mark.parametrize(
    "body",
    [
        {"target_hydration": 95},
        {"total_flour": 50},
        {"fermentation_speed": 0},
        {"method": "SOURDOUGH"},
    ],
)
def test_calculate_rejects_out_of_range(client, body):
    assert client.post("/api/v1/recipes/calculate", json=body).status_code == 422


def test_markdown(client):
    resp = client.post(
        "/api/v1/recipes/markdown",
        json={"inputs": {"method": "BIGA"}, "profile": "simple", "unit": "IMPERIAL"},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["profile_id"] == "simple_v1"
    assert "Prepare Biga" in data["markdown"]
    assert "oz" in data["markdown"]


def test_schedule(client):
    resp = client.post(
        "/api/v1/bakes/schedule",
        json={"start": "2026-03-14T08:00:00", "current_step_index": 2},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["items"][0]["starts_at"] == "2026-03-14T08:00:00"
    assert data["items"][0]["title"] == "Mix Ingredients"
    assert data["items"][-1]["ends_at"] == data["ready_at"]
    assert data["remaining_minutes"] > 0


def test_schedule_rejects_bad_index(client):
    resp = client.post(
        "/api/v1/bakes/schedule",
        json={"start": "2026-03-14T08:00:00", "current_step_index": 99},
    )
    assert resp.status_code == 400


def test_resume_timers(client):
    body = {
        "now": 1000.0,
        "timers": [
            {"step_id": "step-3", "remaining_seconds": 600, "is_running": True, "last_updated": 900.0},
            {"step_id": "step-4", "remaining_seconds": 300, "is_running": False, "last_updated": 900.0},
        ],
    }
    timers = client.post("/api/v1/bakes/timers/resume", json=body).json()["timers"]
    assert timers[0] == {"step_id": "step-3", "remaining_seconds": 500, "is_running": True, "last_updated": 1000.0}
    assert timers[1]["remaining_seconds"] == 300


def test_resume_timers_rejects_malformed_state(client):
    body = {"timers": [{"step_id": "step-1", "remaining_seconds": -1, "is_running": True, "last_updated": 0}]}
    assert client.post("/api/v1/bakes/timers/resume", json=body).status_code == 400


@pytest.mark.parametrize(
    "raw",
    [
        '{"timers": [{"step_id": "step-1", "remaining_seconds": 60, "is_running": true, "last_updated": Infinity}]}',
        '{"timers": [{"step_id": "step-1", "remaining_seconds": 60, "is_running": true, "last_updated": NaN}]}',
        '{"timers": [{"step_id": "step-1", "remaining_seconds": Infinity, "is_running": true, "last_updated": 0}]}',
        '{"timers": [{"step_id": "step-1", "remaining_seconds": 60, "is_running": true, "last_updated": "inf"}]}',
    ],
)
def test_resume_timers_rejects_non_finite_state(client, raw):
    resp = client.post(
        "/api/v1/bakes/timers/resume",
        content=raw,
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400


def test_resume_timers_rejects_non_finite_now(client):
    resp = client.post(
        "/api/v1/bakes/timers/resume",
        content='{"now": Infinity, "timers": []}',
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 422
