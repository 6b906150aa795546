"""
Calculator + catalog API tests.

Tests:
1.    Health endpoint
2.    Catalog listing
3-4.  POST /api/calculate/dimensions and /area — reference scenario
5.    Policy overrides per request
6-9.  Error mapping: engine ValidationError, UnknownCatalogKey, malformed body → 400
10-11. Oversized measurements → 400
"""

import pytest


def _dimensions_payload(**overrides):
    payload = {
        "sides": [{"width": 10, "height": 3}],
        "frame_size": "mason-frame-152x152",
        "platform_length": "platform-244",
        "work_levels": 2,
        "building_sides": 1,
    }
    payload.update(overrides)
    return payload


def _area_payload(**overrides):
    payload = {
        "area": 30,
        "height": 3,
        "frame_size": "mason-frame-152x152",
        "platform_length": "platform-244",
        "work_levels": 2,
        "building_sides": 1,
    }
    payload.update(overrides)
    return payload


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "app": "scaffoldpro"}


def test_catalog_listing(client):
    resp = client.get("/api/catalog", follow_redirects=False)
    assert resp.status_code == 200
    data = resp.json()
    frame_keys = [f["key"] for f in data["frame_sizes"]]
    assert "mason-frame-152x152" in frame_keys
    assert "platform-244" in [p["key"] for p in data["platform_lengths"]]
    assert data["systems"][0]["key"] == "mason-frame"
    assert data["systems"][0]["load_capacity"] == 675.0


def test_calculate_from_dimensions(client):
    resp = client.post("/api/calculate/dimensions", json=_dimensions_payload())
    assert resp.status_code == 200
    data = resp.json()
    components = data["components"]
    assert components["frames"]["quantity"] == 16
    assert components["cross_braces"]["quantity"] == 28
    assert components["platforms"]["quantity"] == 42
    assert components["base_plates"]["quantity"] == 8
    assert components["screw_jacks"]["quantity"] == 8
    assert components["outriggers"]["quantity"] == 2
    assert components["ladders"]["quantity"] == 1
    assert components["leg_holders"]["quantity"] == 8
    assert data["total_components"] == 172
    assert data["weight"] == 1515
    assert data["dimensions"] == "10.0m x 1.5m x 3.0m"
    assert data["system"] == "mason-frame"


def test_calculate_from_area_matches_dimensions(client):
    by_area = client.post("/api/calculate/area", json=_area_payload()).json()
    by_dims = client.post("/api/calculate/dimensions", json=_dimensions_payload()).json()
    assert by_area["components"]["frames"] == by_dims["components"]["frames"]
    assert by_area["weight"] == by_dims["weight"]
    assert by_area["total_components"] == by_dims["total_components"]


def test_request_policy_overrides(client):
    resp = client.post("/api/calculate/dimensions", json=_dimensions_payload(
        guardrails_top_level_only=True, frames_per_level=False))
    assert resp.status_code == 200
    components = resp.json()["components"]
    assert components["guardrails"]["quantity"] == 8
    assert components["frames"]["quantity"] == 8


def test_engine_validation_error_is_400(client):
    resp = client.post("/api/calculate/dimensions", json=_dimensions_payload(
        sides=[{"width": 10, "height": 0}]))
    assert resp.status_code == 400
    data = resp.json()
    assert data["success"] is False
    assert data["field"] == "sides[0].height"


@pytest.mark.parametrize("work_levels", [0, 6])
def test_work_levels_range_is_400(client, work_levels):
    resp = client.post("/api/calculate/area", json=_area_payload(work_levels=work_levels))
    assert resp.status_code == 400
    assert resp.json()["field"] == "work_levels"


def test_unknown_catalog_key_is_400(client):
    resp = client.post("/api/calculate/area", json=_area_payload(frame_size="mason-frame-999x999"))
    assert resp.status_code == 400
    data = resp.json()
    assert data["success"] is False
    assert data["field"] == "frame_size"
    assert "mason-frame-999x999" in data["message"]


def test_malformed_body_is_400(client):
    resp = client.post("/api/calculate/area", json={"area": "lots", "height": 3})
    assert resp.status_code == 400
    data = resp.json()
    assert data["success"] is False
    assert "area" in data["message"]


def test_oversized_area_is_400_not_500(client):
    resp = client.post("/api/calculate/area", json=_area_payload(area=1e308, height=1e-10))
    assert resp.status_code == 400
    data = resp.json()
    assert data["success"] is False
    assert data["field"] == "area"
    assert "too large" in data["message"]


def test_oversized_side_is_400_not_500(client):
    resp = client.post("/api/calculate/dimensions", json=_dimensions_payload(
        sides=[{"width": 1e308, "height": 3}]))
    assert resp.status_code == 400
    assert resp.json()["field"] == "sides[0].width"
