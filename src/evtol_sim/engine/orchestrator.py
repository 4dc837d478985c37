"""Orchestrator — runs one simulation and packages a ``SimulationResult``.

Entry point: ``run_engine(scenario)``
  1. Seeded ``numpy`` generator (``scenario.simulation.random_seed``)
  2. ``Simulation`` built and run to the horizon
  3. Frozen per-operator stats + fleet counts → ``OperatorReport`` list
"""

from __future__ import annotations

from collections.abc import Mapping

import numpy as np

from evtol_sim.config.scenario import Scenario
from evtol_sim.engine.fleet import count_by_operator
from evtol_sim.engine.simulation import Simulation
from evtol_sim.engine.stats import OperatorStats
from evtol_sim.models.results import OperatorReport, SimulationResult


def run_engine(
    scenario: Scenario,
    rng: np.random.Generator | None = None,
    record_trace: bool = True,
) -> SimulationResult:
    """Run ``scenario`` to its horizon and return the aggregated result.

    With ``record_trace=False`` the result carries an empty ``trace``.
    """
    sim_cfg = scenario.simulation
    if rng is None:
        rng = np.random.default_rng(sim_cfg.random_seed)

    sim = Simulation(scenario, rng=rng, record_trace=record_trace)
    stats = sim.run()

    vehicle_counts = count_by_operator(sim.fleet)
    ordered = [op for op in scenario.operators if op in vehicle_counts]

    return SimulationResult(
        horizon_hours=sim_cfg.horizon_hours,
        fleet_size=len(sim.fleet),
        num_chargers=sim.pool.capacity,
        random_seed=sim_cfg.random_seed,
        operators=build_operator_reports(stats.operators, vehicle_counts, ordered),
        vehicle_counts={op: vehicle_counts[op] for op in ordered},
        events_executed=sim.events_executed,
        events_discarded=sim.events_discarded,
        final_time=sim.now,
        trace=sim.trace,
    )


def build_operator_reports(
    stats: Mapping[str, OperatorStats],
    vehicle_counts: Mapping[str, int],
    operators: list[str],
) -> list[OperatorReport]:
    """One report per operator; operators with no recorded activity get zeros."""
    reports: list[OperatorReport] = []
    for op in operators:
        s = stats.get(op) or OperatorStats()
        reports.append(OperatorReport(
            operator=op,
            vehicle_count=vehicle_counts.get(op, 0),
            total_flights=s.total_flights,
            total_charges=s.total_charges,
            total_faults=s.total_faults,
            total_flight_time_hours=s.total_flight_time,
            total_distance_miles=s.total_distance,
            total_charge_time_hours=s.total_charge_time,
            total_passenger_miles=s.passenger_miles,
            avg_flight_time_hours=s.avg_flight_time,
            avg_distance_per_flight_miles=s.avg_distance_per_flight,
            avg_charge_time_hours=s.avg_charge_time,
        ))
    return reports
