"""Charger pool — fixed slots plus a FIFO queue of vehicles waiting for one."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class ChargerPool:
    """Slot ``i`` holds at most one vehicle handle; waiting vehicles are served FIFO.

    The pool only tracks occupancy.  Deciding *whether* a waiting vehicle may
    start charging (the horizon check) belongs to the engine.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"charger capacity must be >= 0, got {capacity}")
        self._slots: list[int | None] = [None] * capacity
        self._waiting: deque[int] = deque()

    # ── Inspection ──────────────────────────────────────────────────────

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def in_use(self) -> int:
        return sum(1 for s in self._slots if s is not None)

    @property
    def waiting(self) -> int:
        return len(self._waiting)

    @property
    def has_waiting(self) -> bool:
        return bool(self._waiting)

    def occupant(self, index: int) -> int | None:
        return self._slots[index]

    def is_free(self, index: int) -> bool:
        return self._slots[index] is None

    def free_slots(self) -> Iterator[int]:
        """Indices of currently free slots, lowest first."""
        return (i for i, s in enumerate(self._slots) if s is None)

    def holds(self, vehicle_id: int) -> bool:
        """True if the vehicle is waiting or charging."""
        return vehicle_id in self._waiting or vehicle_id in self._slots

    # ── Mutation ────────────────────────────────────────────────────────

    def enqueue(self, vehicle_id: int) -> None:
        if self.holds(vehicle_id):
            raise ValueError(f"vehicle {vehicle_id} is already waiting or charging")
        self._waiting.append(vehicle_id)

    def pop_waiting(self) -> int:
        """Remove and return the longest-waiting vehicle."""
        return self._waiting.popleft()

    def occupy(self, index: int, vehicle_id: int) -> None:
        if self._slots[index] is not None:
            raise ValueError(
                f"charger {index} is busy with vehicle {self._slots[index]}"
            )
        self._slots[index] = vehicle_id

    def release(self, index: int) -> int:
        """Free slot ``index`` and return the vehicle that was in it."""
        vehicle_id = self._slots[index]
        if vehicle_id is None:
            raise ValueError(f"charger {index} is already free")
        self._slots[index] = None
        return vehicle_id
