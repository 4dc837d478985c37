"""Fleet arena — vehicles addressed by a stable integer handle.

Events and the charger pool carry ``vehicle_id`` (the index into the fleet
list), never the vehicle object itself.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from evtol_sim.config.vehicle import VehicleType


@dataclass(frozen=True)
class Vehicle:
    """One simulated aircraft bound to an immutable type."""

    vehicle_id: int
    vehicle_type: VehicleType

    @property
    def operator(self) -> str:
        return self.vehicle_type.operator

    @property
    def flight_duration(self) -> float:
        return self.vehicle_type.flight_duration_hours

    @property
    def distance_per_flight(self) -> float:
        return self.vehicle_type.distance_per_flight_miles


def build_fleet(
    catalog: Sequence[VehicleType],
    fleet_size: int,
    rng: np.random.Generator,
) -> list[Vehicle]:
    """Create ``fleet_size`` vehicles, each with a uniformly drawn catalog type."""
    if fleet_size == 0:
        return []
    if not catalog:
        raise ValueError("cannot build a fleet from an empty catalog")
    picks = rng.integers(0, len(catalog), size=fleet_size)
    return [Vehicle(vehicle_id=i, vehicle_type=catalog[int(k)]) for i, k in enumerate(picks)]


def count_by_operator(fleet: Sequence[Vehicle]) -> dict[str, int]:
    """Vehicles per operator, in first-seen order."""
    return dict(Counter(v.operator for v in fleet))
