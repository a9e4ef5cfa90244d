from __future__ import annotations

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from cvd_platform.domain.entities.errors import ScoringServiceError
from cvd_platform.main.app import create_app
from cvd_platform.main.container import get_container

VALID_PARAMS = {
    "substrateType": "SiO₂",
    "metalChalcogenRatio": 0.4,
    "hArRatio": 0.2,
    "pressureType": "low pressure",
    "metalTemperature": 800,
    "chalcogenTemperature": 180,
    "substratePosition": "side",
    "reactionTime": 20,
    "saltAddition": "no",
}


@pytest.fixture()
def client(monkeypatch, stub_gateway):
    monkeypatch.setenv("HISTORY_BACKEND", "memory")
    app = create_app()
    container = get_container()
    container.scoring_gateway.override(providers.Object(stub_gateway))

    with TestClient(app) as test_client:
        yield test_client


def test_prediction_round_trip(client, stub_gateway):
    response = client.post(
        "/predictions/", json={"material": "mos2", "params": VALID_PARAMS}
    )
    assert response.status_code == 201
    body = response.json()
    assert body["state"] == "succeeded"
    assert body["record"]["prediction"]["label"] == "excellent"
    assert stub_gateway.calls[0][0] == "MoS2"
    assert stub_gateway.calls[0][1]["substrateType"] == "SiO₂"

    current = client.get("/predictions/current")
    assert current.status_code == 200
    assert current.json()["material"] == "mos2"

    history = client.get("/history/", params={"material": "mos2"})
    assert history.status_code == 200
    assert history.json()["total_count"] == 1

    notifications = client.get("/notifications").json()
    assert [n["title"] for n in notifications] == ["Prediction Complete"]
    assert client.get("/notifications").json() == []


def test_invalid_submission_is_422(client):
    params = dict(VALID_PARAMS, reactionTime=0)

    response = client.post("/predictions/", json={"params": params})

    assert response.status_code == 422
    assert response.json()["detail"] == {
        "field": "reaction_time",
        "message": "Please enter a valid reaction time",
    }


def test_malformed_submission_reports_first_field_in_order(client):
    params = dict(VALID_PARAMS, metalTemperature="abc")
    del params["substrateType"]

    response = client.post("/predictions/", json={"params": params})

    assert response.status_code == 422
    assert response.json()["detail"] == {
        "field": "substrate_type",
        "message": "Please select substrate type",
    }
    notifications = client.get("/notifications").json()
    assert [(n["title"], n["message"]) for n in notifications] == [
        ("Validation Error", "Please select substrate type")
    ]


def test_non_numeric_value_is_rejected_by_field(client):
    params = dict(VALID_PARAMS, metalTemperature="abc")

    response = client.post("/predictions/", json={"params": params})

    assert response.status_code == 422
    assert response.json()["detail"] == {
        "field": "metal_temperature",
        "message": "Please enter a valid metal temperature",
    }


def test_unreachable_service_is_simulated(client, stub_gateway):
    stub_gateway.error = ScoringServiceError("refused")

    response = client.post("/predictions/", json={"params": VALID_PARAMS})

    assert response.status_code == 201
    assert response.json()["simulated"] is True


def test_remarks_and_delete(client):
    created = client.post("/predictions/", json={"params": VALID_PARAMS})
    record_id = created.json()["record"]["id"]

    updated = client.put(f"/history/{record_id}/remarks", json={"remarks": "clean"})
    assert updated.status_code == 200
    assert updated.json()["remarks"] == "clean"

    missing = client.put("/history/missing/remarks", json={"remarks": "x"})
    assert missing.status_code == 404
    assert client.delete(f"/history/{record_id}").status_code == 204
    assert client.delete(f"/history/{record_id}").status_code == 204
    assert client.get("/history/").json()["total_count"] == 0


def test_materials_and_selection(client):
    selected = client.put("/session/material", json={"material": "wse2"})
    assert selected.status_code == 200

    materials = client.get("/materials").json()

    assert [m["value"] for m in materials if m["selected"]] == ["wse2"]
    assert client.put("/session/material", json={"material": "c"}).status_code == 422


def test_health_endpoint(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "up"
    assert [d["name"] for d in body["checks"]] == [
        "history_slot",
        "scoring_service",
    ]
