"""Event queue — the engine's only driver of progress.

Events are plain tagged values (``FlightEnd`` / ``ChargeEnd``) stored next to
their absolute fire time.  The queue is a binary heap ordered by time only;
equal times pop in insertion order, so a run is fully determined by its seed.
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class FlightEnd:
    """A vehicle lands at ``start_time + duration``."""

    vehicle_id: int
    start_time: float
    duration: float

    @property
    def end_time(self) -> float:
        return self.start_time + self.duration


@dataclass(frozen=True)
class ChargeEnd:
    """A vehicle finishes charging and frees ``charger_index``."""

    vehicle_id: int
    charger_index: int
    start_time: float


Event = Union[FlightEnd, ChargeEnd]


class EventQueue:
    """Min-heap of ``(time, seq, event)`` entries."""

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, Event]] = []
        self._seq = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def push(self, time: float, event: Event) -> None:
        heapq.heappush(self._heap, (time, next(self._seq), event))

    def pop(self) -> tuple[float, Event]:
        """Remove and return the earliest ``(time, event)``.

        Raises ``IndexError`` when the queue is empty.
        """
        if not self._heap:
            raise IndexError("pop from an empty event queue")
        time, _, event = heapq.heappop(self._heap)
        return time, event

    def peek_time(self) -> float | None:
        """Fire time of the earliest event, or ``None`` when empty."""
        return self._heap[0][0] if self._heap else None

    def clear(self) -> int:
        """Drop every pending event; returns how many were discarded."""
        n = len(self._heap)
        self._heap.clear()
        return n
