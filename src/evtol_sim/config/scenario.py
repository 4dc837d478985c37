"""Top-level scenario — the catalog plus the run constants."""

from pydantic import BaseModel, Field

from evtol_sim.config.vehicle import REFERENCE_CATALOG, VehicleType


class SimulationConfig(BaseModel):
    """Run constants: horizon, fleet size, charger count and RNG seed."""

    horizon_hours: float = Field(default=3.0, gt=0, allow_inf_nan=False, description="Simulated time bound (hours)")
    fleet_size: int = Field(default=20, ge=0, description="Number of vehicles in the fleet")
    num_chargers: int = Field(default=3, ge=0, description="Charger slots shared by the whole fleet")
    random_seed: int | None = Field(
        default=None,
        description="Optional RNG seed for reproducible runs. "
                    "None = fresh OS entropy (non-deterministic).",
    )


class Scenario(BaseModel):
    """Complete input bundle for one simulation run."""

    catalog: list[VehicleType] = Field(
        default_factory=lambda: list(REFERENCE_CATALOG),
        min_length=1,
        description="Vehicle types; each vehicle is assigned one uniformly at random",
    )
    simulation: SimulationConfig = Field(default_factory=SimulationConfig)

    @property
    def operators(self) -> list[str]:
        """Distinct operators in catalog order."""
        return list(dict.fromkeys(vt.operator for vt in self.catalog))
