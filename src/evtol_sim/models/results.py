"""Result types — the contract between the engine, the report and the API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class OperatorReport(BaseModel):
    """Final aggregates for one operator.

    Operators that own vehicles but never completed a flight or charge are
    still reported, with every total and average at zero.
    """

    operator: str
    vehicle_count: int

    total_flights: int
    total_charges: int
    total_faults: int

    total_flight_time_hours: float
    total_distance_miles: float
    total_charge_time_hours: float
    total_passenger_miles: float

    avg_flight_time_hours: float
    """total_flight_time / total_flights (0 when no flights)."""

    avg_distance_per_flight_miles: float
    """total_distance / total_flights (0 when no flights)."""

    avg_charge_time_hours: float
    """total_charge_time / total_charges (0 when no charges)."""


class EventSnapshot(BaseModel):
    """State right after one event was executed."""

    time: float
    kind: Literal["flight_end", "charge_end"]
    vehicle_id: int
    operator: str
    chargers_in_use: int
    vehicles_waiting: int


class SimulationResult(BaseModel):
    """Everything a run produces."""

    horizon_hours: float
    fleet_size: int
    num_chargers: int
    random_seed: int | None = None

    operators: list[OperatorReport]
    """One entry per operator present in the fleet, in catalog order."""

    vehicle_counts: dict[str, int]

    events_executed: int
    events_discarded: int
    """Events still queued past the horizon when the engine halted."""

    final_time: float
    """Fire time of the last executed event (0.0 if none ran)."""

    trace: list[EventSnapshot] = []

    def operator(self, name: str) -> OperatorReport | None:
        return next((r for r in self.operators if r.operator == name), None)
