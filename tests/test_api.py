"""Tests for the HTTP API layer.

Covers:
  - Health, catalog and defaults endpoints
  - /simulate with defaults, partial overrides, trace toggle
  - Validation errors surface as 422
  - Deep merge utility
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from evtol_sim.api.server import app, _deep_merge, _build_scenario
from evtol_sim.config.scenario import Scenario


client = TestClient(app)


# ═══════════════════════════════════════════════════════════════════════════
# Read-only endpoints
# ═══════════════════════════════════════════════════════════════════════════

class TestReadEndpoints:

    def test_health(self):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_catalog(self):
        resp = client.get("/catalog")
        assert resp.status_code == 200
        catalog = resp.json()
        assert [c["operator"] for c in catalog] == ["Alpha", "Bravo", "Charlie", "Delta", "Echo"]

        bravo = catalog[1]
        assert bravo["flight_duration_hours"] == pytest.approx(2 / 3)
        delta = catalog[3]
        assert delta["distance_per_flight_miles"] == pytest.approx(150.0)

    def test_defaults(self):
        resp = client.get("/scenario/defaults")
        assert resp.status_code == 200
        data = resp.json()
        assert data["simulation"]["horizon_hours"] == 3.0
        assert data["simulation"]["fleet_size"] == 20
        assert data["simulation"]["num_chargers"] == 3
        assert len(data["catalog"]) == 5
        # Round-trips into a valid scenario
        Scenario(**data)


# ═══════════════════════════════════════════════════════════════════════════
# Simulation endpoint
# ═══════════════════════════════════════════════════════════════════════════

class TestSimulate:

    def test_defaults(self):
        resp = client.post("/simulate", json={"scenario": {"simulation": {"random_seed": 1}}})
        assert resp.status_code == 200
        body = resp.json()
        result = body["result"]
        assert result["fleet_size"] == 20
        assert sum(result["vehicle_counts"].values()) == 20
        assert "trace" not in result
        assert "Vehicle Distribution:" in body["report"]

    def test_empty_body(self):
        resp = client.post("/simulate", json={})
        assert resp.status_code == 200

    def test_include_trace(self):
        resp = client.post("/simulate", json={
            "scenario": {"simulation": {"random_seed": 2, "fleet_size": 4}},
            "include_trace": True,
        })
        result = resp.json()["result"]
        assert len(result["trace"]) == result["events_executed"]

    def test_custom_catalog(self):
        bravo = {
            "operator": "Bravo", "cruise_speed_mph": 100, "battery_capacity_kwh": 100,
            "time_to_charge_hours": 0.2, "energy_per_mile_kwh": 1.5,
            "passenger_count": 5, "fault_probability_per_hour": 0.0,
        }
        resp = client.post("/simulate", json={"scenario": {
            "catalog": [bravo],
            "simulation": {"fleet_size": 1, "num_chargers": 1, "random_seed": 0},
        }})
        assert resp.status_code == 200
        (report,) = resp.json()["result"]["operators"]
        assert report["operator"] == "Bravo"
        assert report["total_flights"] == 3
        assert report["total_charges"] == 3

    def test_same_seed_same_response(self):
        body = {"scenario": {"simulation": {"random_seed": 9}}}
        assert client.post("/simulate", json=body).json() == client.post("/simulate", json=body).json()

    def test_infinite_horizon_rejected(self):
        resp = client.post(
            "/simulate",
            content='{"scenario": {"simulation": {"horizon_hours": Infinity}}}',
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 422
        assert resp.json()["detail"][0]["loc"] == ["simulation", "horizon_hours"]

    def test_trace_not_recorded_by_default(self):
        resp = client.post("/simulate", json={"scenario": {"simulation": {"random_seed": 4}}})
        result = resp.json()["result"]
        assert "trace" not in result
        assert result["events_executed"] > 0

    def test_invalid_config_rejected(self):
        resp = client.post("/simulate", json={"scenario": {"simulation": {"num_chargers": -1}}})
        assert resp.status_code == 422

    def test_empty_catalog_rejected(self):
        resp = client.post("/simulate", json={"scenario": {"catalog": []}})
        assert resp.status_code == 422


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

class TestHelpers:

    def test_deep_merge_nested(self):
        base = {"a": {"b": 1, "c": 2}, "d": 3}
        _deep_merge(base, {"a": {"c": 20}, "e": 5})
        assert base == {"a": {"b": 1, "c": 20}, "d": 3, "e": 5}

    def test_deep_merge_replaces_lists(self):
        base = {"items": [1, 2, 3]}
        _deep_merge(base, {"items": [9]})
        assert base == {"items": [9]}

    def test_build_scenario_partial(self):
        scenario = _build_scenario({"simulation": {"num_chargers": 7}})
        assert scenario.simulation.num_chargers == 7
        assert scenario.simulation.fleet_size == 20
        assert len(scenario.catalog) == 5
