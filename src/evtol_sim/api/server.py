"""FastAPI server — HTTP access to the eVTOL fleet simulator.

Run with:
    uvicorn evtol_sim.api.server:app --reload --port 8000

Or:
    python -m evtol_sim.api.server

Endpoints:
    GET  /health             — liveness probe
    GET  /catalog            — reference vehicle types with derived flight figures
    GET  /scenario/defaults  — complete default scenario as JSON
    POST /simulate           — run a simulation (partial or full Scenario)
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, ValidationError

from evtol_sim import __version__
from evtol_sim.api.report import generate_report
from evtol_sim.config.scenario import Scenario
from evtol_sim.config.vehicle import REFERENCE_CATALOG
from evtol_sim.engine.orchestrator import run_engine

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="eVTOL Fleet Charging Simulator API",
    version=__version__,
    description=(
        "Discrete-event simulation of an eVTOL fleet cycling between flight "
        "and a shared pool of chargers, with per-operator statistics."
    ),
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class SimulateRequest(BaseModel):
    """Request body for /simulate. All fields optional — defaults used for missing."""
    scenario: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial or full Scenario JSON. Missing fields use defaults. "
                    "Example: {'simulation': {'num_chargers': 5, 'random_seed': 7}}",
    )
    include_trace: bool = Field(
        default=False,
        description="Include the per-event trace in the result (can be large).",
    )


class SimulateResponse(BaseModel):
    """Response from /simulate."""
    result: dict[str, Any]
    report: str = ""


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _build_scenario(overrides: dict[str, Any]) -> Scenario:
    """Build a Scenario from partial overrides merged onto defaults."""
    defaults = Scenario().model_dump()
    _deep_merge(defaults, overrides)
    return Scenario(**defaults)


def _deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            _deep_merge(base[key], val)
        else:
            base[key] = val
    return base


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/catalog")
def get_catalog():
    """Reference vehicle types, each with its flight duration and range per charge."""
    return [
        {
            **vt.model_dump(),
            "flight_duration_hours": vt.flight_duration_hours,
            "distance_per_flight_miles": vt.distance_per_flight_miles,
        }
        for vt in REFERENCE_CATALOG
    ]


@app.get("/scenario/defaults")
def get_defaults():
    """Complete default Scenario as JSON. Use as a starting point for modifications."""
    return Scenario().model_dump()


@app.post("/simulate", response_model=SimulateResponse)
def simulate(req: SimulateRequest):
    """Run one simulation to the horizon.

    Returns the per-operator results and the plain-text report.
    """
    try:
        scenario = _build_scenario(req.scenario)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False, include_context=False, include_input=False),
        )

    result = run_engine(scenario, record_trace=req.include_trace)
    logger.info(
        "Simulated %d vehicles / %d chargers: %d events",
        result.fleet_size, result.num_chargers, result.events_executed,
    )

    exclude = None if req.include_trace else {"trace"}
    return SimulateResponse(
        result=result.model_dump(exclude=exclude),
        report=generate_report(result),
    )


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    uvicorn.run(
        "evtol_sim.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
