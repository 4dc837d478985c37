"""Engine — discrete-event fleet simulation."""

from evtol_sim.engine.events import ChargeEnd, Event, EventQueue, FlightEnd
from evtol_sim.engine.fleet import Vehicle, build_fleet, count_by_operator
from evtol_sim.engine.charging import ChargerPool
from evtol_sim.engine.stats import OperatorStats, StatsAggregator
from evtol_sim.engine.simulation import Simulation
from evtol_sim.engine.orchestrator import build_operator_reports, run_engine

__all__ = [
    "ChargeEnd",
    "Event",
    "EventQueue",
    "FlightEnd",
    "Vehicle",
    "build_fleet",
    "count_by_operator",
    "ChargerPool",
    "OperatorStats",
    "StatsAggregator",
    "Simulation",
    "build_operator_reports",
    "run_engine",
]
