"""Result models — simulation output contracts."""

from evtol_sim.models.results import (
    EventSnapshot,
    OperatorReport,
    SimulationResult,
)

__all__ = [
    "EventSnapshot",
    "OperatorReport",
    "SimulationResult",
]
