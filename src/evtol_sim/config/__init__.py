"""Configuration models — vehicle catalog and run constants."""

from evtol_sim.config.vehicle import REFERENCE_CATALOG, VehicleType
from evtol_sim.config.scenario import Scenario, SimulationConfig

__all__ = [
    "REFERENCE_CATALOG",
    "VehicleType",
    "SimulationConfig",
    "Scenario",
]
