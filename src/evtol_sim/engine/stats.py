"""Per-operator statistics, accumulated as a side effect of lifecycle events."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass
class OperatorStats:
    """Running totals for one operator.  Only ever incremented."""

    total_flight_time: float = 0.0
    total_distance: float = 0.0
    total_charge_time: float = 0.0
    passenger_miles: float = 0.0
    total_flights: int = 0
    total_charges: int = 0
    total_faults: int = 0

    @property
    def avg_flight_time(self) -> float:
        return self.total_flight_time / self.total_flights if self.total_flights else 0.0

    @property
    def avg_distance_per_flight(self) -> float:
        return self.total_distance / self.total_flights if self.total_flights else 0.0

    @property
    def avg_charge_time(self) -> float:
        return self.total_charge_time / self.total_charges if self.total_charges else 0.0


class StatsAggregator:
    """Operator → ``OperatorStats``, created lazily on the first event.

    ``freeze()`` is called when the engine halts; after that the totals are
    read-only and any further ``record_*`` call raises ``RuntimeError``.
    """

    def __init__(self) -> None:
        self._stats: dict[str, OperatorStats] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def operators(self) -> Mapping[str, OperatorStats]:
        return MappingProxyType(self._stats)

    def get(self, operator: str) -> OperatorStats | None:
        return self._stats.get(operator)

    def freeze(self) -> None:
        self._frozen = True

    def _entry(self, operator: str) -> OperatorStats:
        if self._frozen:
            raise RuntimeError("stats are frozen; the simulation has halted")
        return self._stats.setdefault(operator, OperatorStats())

    def record_flight(
        self,
        operator: str,
        duration: float,
        distance: float,
        passengers: int,
    ) -> None:
        s = self._entry(operator)
        s.total_flight_time += duration
        s.total_distance += distance
        s.total_flights += 1
        s.passenger_miles += passengers * distance

    def record_fault(self, operator: str) -> None:
        self._entry(operator).total_faults += 1

    def record_charge(self, operator: str, charge_time: float) -> None:
        s = self._entry(operator)
        s.total_charge_time += charge_time
        s.total_charges += 1
