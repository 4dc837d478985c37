"""Plain-text report — the console view of a finished run.

Per operator: average flight time, average distance per flight, average
charge time, total faults and total passenger miles; then the number of
vehicles each operator fielded.  All figures to two decimals.

Run the reference scenario from the command line with::

    python -m evtol_sim --seed 7
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from evtol_sim.config.scenario import Scenario, SimulationConfig
from evtol_sim.engine.orchestrator import run_engine
from evtol_sim.models.results import SimulationResult


def generate_report(result: SimulationResult) -> str:
    """Render ``result`` as the multi-line console report."""
    lines: list[str] = []

    for r in result.operators:
        lines.append("")
        lines.append(f"Stats for {r.operator}:")
        lines.append(f"  Avg Flight Time: {r.avg_flight_time_hours:.2f} hr")
        lines.append(f"  Avg Distance per Flight: {r.avg_distance_per_flight_miles:.2f} miles")
        lines.append(f"  Avg Charge Time: {r.avg_charge_time_hours:.2f} hr")
        lines.append(f"  Total Faults: {r.total_faults}")
        lines.append(f"  Total Passenger Miles: {r.total_passenger_miles:.2f}")

    lines.append("")
    lines.append("Vehicle Distribution:")
    for operator, count in result.vehicle_counts.items():
        lines.append(f"  {operator}: {count} vehicle(s)")

    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the reference scenario and print its report."""
    parser = argparse.ArgumentParser(description="eVTOL fleet charging simulation")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for a reproducible run")
    parser.add_argument("--verbose", action="store_true", help="Log every engine decision")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    scenario = Scenario(simulation=SimulationConfig(random_seed=args.seed))
    print(generate_report(run_engine(scenario, record_trace=False)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
