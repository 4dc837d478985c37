"""Shared test fixtures — catalog entries from the reference table."""

from __future__ import annotations

import pytest

from evtol_sim.config import REFERENCE_CATALOG, Scenario, SimulationConfig, VehicleType


def catalog_entry(operator: str) -> VehicleType:
    return next(vt for vt in REFERENCE_CATALOG if vt.operator == operator)


def make_scenario(
    catalog: list[VehicleType],
    horizon_hours: float = 3.0,
    fleet_size: int = 1,
    num_chargers: int = 1,
    random_seed: int | None = 0,
) -> Scenario:
    return Scenario(
        catalog=catalog,
        simulation=SimulationConfig(
            horizon_hours=horizon_hours,
            fleet_size=fleet_size,
            num_chargers=num_chargers,
            random_seed=random_seed,
        ),
    )


@pytest.fixture
def alpha() -> VehicleType:
    return catalog_entry("Alpha")


@pytest.fixture
def bravo() -> VehicleType:
    return catalog_entry("Bravo")


@pytest.fixture
def delta() -> VehicleType:
    return catalog_entry("Delta")


@pytest.fixture
def fault_free_bravo(bravo: VehicleType) -> VehicleType:
    """Bravo with faults disabled so every counter is deterministic."""
    return bravo.model_copy(update={"fault_probability_per_hour": 0.0})


@pytest.fixture
def reference_scenario() -> Scenario:
    """The 5-operator reference run: 3 h, 20 vehicles, 3 chargers."""
    return Scenario(simulation=SimulationConfig(random_seed=42))


@pytest.fixture
def build_scenario():
    """Factory fixture: ``build_scenario([bravo], fleet_size=2, num_chargers=1)``."""
    return make_scenario
