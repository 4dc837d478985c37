"""Discrete-event engine — the flight → queue → charge → flight lifecycle.

Every vehicle tries to take off at t = 0.  After landing it joins the FIFO
charger queue; a free slot starts a charge, and the end of a charge schedules
the next flight.  Nothing is ever scheduled past the horizon:

  - a flight that would land after the horizon is not flown,
  - a charge that would finish after the horizon is not started, and the
    vehicle is dropped (it does not go back into the queue).

In both cases the vehicle simply stops taking part in the run.

The loop pops events in time order (ties in insertion order) until the
queue is empty or the next event lies beyond the horizon, at which point
the remaining events are discarded and the stats are frozen.
"""

from __future__ import annotations

import logging

import numpy as np

from evtol_sim.config.scenario import Scenario
from evtol_sim.engine.charging import ChargerPool
from evtol_sim.engine.events import ChargeEnd, Event, EventQueue, FlightEnd
from evtol_sim.engine.fleet import Vehicle, build_fleet
from evtol_sim.engine.stats import StatsAggregator
from evtol_sim.models.results import EventSnapshot

logger = logging.getLogger(__name__)


class Simulation:
    """One run of the fleet model.

    Usage::

        sim = Simulation(scenario, rng=np.random.default_rng(7))
        stats = sim.run()
        stats.get("Bravo").avg_flight_time

    Parameters
    ----------
    scenario : Scenario
        Catalog + horizon, fleet size and charger count.
    rng : np.random.Generator, optional
        Source of all randomness (fleet assignment, fault draws).  Defaults
        to ``np.random.default_rng(scenario.simulation.random_seed)``.
    record_trace : bool
        Keep an ``EventSnapshot`` per executed event.  Off means ``trace``
        stays empty.
    """

    def __init__(
        self,
        scenario: Scenario,
        rng: np.random.Generator | None = None,
        record_trace: bool = True,
    ) -> None:
        cfg = scenario.simulation
        self._horizon = cfg.horizon_hours
        self._rng = rng if rng is not None else np.random.default_rng(cfg.random_seed)
        self._record_trace = record_trace

        self._queue = EventQueue()
        self._pool = ChargerPool(cfg.num_chargers)
        self._stats = StatsAggregator()
        self._trace: list[EventSnapshot] = []

        self._now = 0.0
        self._events_executed = 0
        self._events_discarded = 0
        self._halted = False

        self._fleet = build_fleet(scenario.catalog, cfg.fleet_size, self._rng)
        for vehicle in self._fleet:
            self.schedule_flight(vehicle.vehicle_id, 0.0)

        logger.info(
            "Simulation ready: %d vehicles, %d chargers, horizon %.2f h, %d flights scheduled",
            len(self._fleet), self._pool.capacity, self._horizon, len(self._queue),
        )

    # ── Public API ──────────────────────────────────────────────────────

    @property
    def horizon(self) -> float:
        return self._horizon

    @property
    def now(self) -> float:
        """Fire time of the most recently executed event."""
        return self._now

    @property
    def fleet(self) -> list[Vehicle]:
        return self._fleet

    @property
    def queue(self) -> EventQueue:
        return self._queue

    @property
    def pool(self) -> ChargerPool:
        return self._pool

    @property
    def stats(self) -> StatsAggregator:
        return self._stats

    @property
    def trace(self) -> list[EventSnapshot]:
        return self._trace

    @property
    def halted(self) -> bool:
        return self._halted

    @property
    def events_executed(self) -> int:
        return self._events_executed

    @property
    def events_discarded(self) -> int:
        return self._events_discarded

    def vehicle(self, vehicle_id: int) -> Vehicle:
        return self._fleet[vehicle_id]

    def schedule_flight(self, vehicle_id: int, start_time: float) -> bool:
        """Queue a landing for a flight departing at ``start_time``.

        Returns False (and schedules nothing) when the landing would fall
        after the horizon.
        """
        duration = self._fleet[vehicle_id].flight_duration
        if start_time + duration > self._horizon:
            logger.debug(
                "t=%.4f vehicle %d: flight of %.4f h would end past the horizon; retired",
                start_time, vehicle_id, duration,
            )
            return False
        self._queue.push(start_time + duration, FlightEnd(vehicle_id, start_time, duration))
        return True

    def step(self) -> bool:
        """Execute the next event.  Returns False once the engine has halted."""
        if self._halted:
            return False

        next_time = self._queue.peek_time()
        if next_time is None or next_time > self._horizon:
            self._halt()
            return False

        time, event = self._queue.pop()
        self._now = time
        self._dispatch(time, event)
        self._events_executed += 1
        if self._record_trace:
            self._record(time, event)
        return True

    def run(self) -> StatsAggregator:
        """Step until halted and return the (frozen) stats."""
        while self.step():
            pass
        return self._stats

    # ── Event handlers ──────────────────────────────────────────────────

    def _dispatch(self, time: float, event: Event) -> None:
        if isinstance(event, FlightEnd):
            self._on_flight_end(event)
        elif isinstance(event, ChargeEnd):
            self._on_charge_end(event, time)
        else:
            raise ValueError(f"unknown event type: {type(event).__name__}")

    def _on_flight_end(self, event: FlightEnd) -> None:
        end_time = event.end_time
        if end_time > self._horizon:
            return

        vehicle = self._fleet[event.vehicle_id]
        vt = vehicle.vehicle_type
        distance = vt.cruise_speed_mph * event.duration
        self._stats.record_flight(vt.operator, event.duration, distance, vt.passenger_count)

        # Linear approximation of P(fault); independent of behaviour.
        if self._rng.random() < vt.fault_probability_per_hour * event.duration:
            self._stats.record_fault(vt.operator)
            logger.debug("t=%.4f vehicle %d (%s): fault recorded", end_time, vehicle.vehicle_id, vt.operator)

        self._pool.enqueue(vehicle.vehicle_id)
        self._assign_chargers(end_time)

    def _assign_chargers(self, now: float) -> None:
        """One pass over the slots, in index order, pulling waiting vehicles FIFO."""
        for index in range(self._pool.capacity):
            if not (self._pool.is_free(index) and self._pool.has_waiting):
                continue
            vehicle_id = self._pool.pop_waiting()
            charge_end = now + self._fleet[vehicle_id].vehicle_type.time_to_charge_hours
            if charge_end > self._horizon:
                logger.debug(
                    "t=%.4f vehicle %d: charge would end at %.4f past the horizon; dropped",
                    now, vehicle_id, charge_end,
                )
                continue
            self._pool.occupy(index, vehicle_id)
            self._queue.push(charge_end, ChargeEnd(vehicle_id, index, now))

    def _on_charge_end(self, event: ChargeEnd, fire_time: float) -> None:
        vehicle_id = self._pool.release(event.charger_index)
        if vehicle_id != event.vehicle_id:
            raise ValueError(
                f"charger {event.charger_index} held vehicle {vehicle_id}, "
                f"expected {event.vehicle_id}"
            )
        vt = self._fleet[vehicle_id].vehicle_type
        self._stats.record_charge(vt.operator, vt.time_to_charge_hours)

        self.schedule_flight(vehicle_id, fire_time)
        self._assign_chargers(fire_time)

    # ── Internals ───────────────────────────────────────────────────────

    def _record(self, time: float, event: Event) -> None:
        self._trace.append(EventSnapshot(
            time=time,
            kind="flight_end" if isinstance(event, FlightEnd) else "charge_end",
            vehicle_id=event.vehicle_id,
            operator=self._fleet[event.vehicle_id].operator,
            chargers_in_use=self._pool.in_use,
            vehicles_waiting=self._pool.waiting,
        ))

    def _halt(self) -> None:
        self._events_discarded = self._queue.clear()
        self._stats.freeze()
        self._halted = True
        logger.info(
            "Simulation halted at t=%.4f: %d events executed, %d discarded past the horizon",
            self._now, self._events_executed, self._events_discarded,
        )
