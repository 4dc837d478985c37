"""Vehicle types — the immutable catalog each simulated aircraft is bound to."""

from pydantic import BaseModel, ConfigDict, Field


class VehicleType(BaseModel):
    """One aircraft configuration, owned by a single operator."""

    model_config = ConfigDict(frozen=True)

    operator: str = Field(description="Operator (company) the vehicle and its stats belong to")
    cruise_speed_mph: float = Field(gt=0, allow_inf_nan=False, description="Cruise speed (miles per hour)")
    battery_capacity_kwh: float = Field(gt=0, allow_inf_nan=False, description="Usable battery capacity (kWh)")
    time_to_charge_hours: float = Field(ge=0, allow_inf_nan=False, description="Time for a full charge (hours)")
    energy_per_mile_kwh: float = Field(gt=0, allow_inf_nan=False, description="Energy use at cruise (kWh per mile)")
    passenger_count: int = Field(ge=0, description="Passengers carried on every flight")
    fault_probability_per_hour: float = Field(
        ge=0,
        allow_inf_nan=False,
        description="Fault rate per flight hour.  The per-flight probability is "
                    "approximated as rate × flight duration, which only holds while "
                    "that product stays well below 1.",
    )

    @property
    def flight_duration_hours(self) -> float:
        """Time to drain a full battery at cruise = battery / (speed × kWh/mile)."""
        return self.battery_capacity_kwh / (self.cruise_speed_mph * self.energy_per_mile_kwh)

    @property
    def distance_per_flight_miles(self) -> float:
        return self.cruise_speed_mph * self.flight_duration_hours


REFERENCE_CATALOG: tuple[VehicleType, ...] = (
    VehicleType(operator="Alpha", cruise_speed_mph=120, battery_capacity_kwh=320,
                time_to_charge_hours=0.6, energy_per_mile_kwh=1.6,
                passenger_count=4, fault_probability_per_hour=0.25),
    VehicleType(operator="Bravo", cruise_speed_mph=100, battery_capacity_kwh=100,
                time_to_charge_hours=0.2, energy_per_mile_kwh=1.5,
                passenger_count=5, fault_probability_per_hour=0.10),
    VehicleType(operator="Charlie", cruise_speed_mph=160, battery_capacity_kwh=220,
                time_to_charge_hours=0.8, energy_per_mile_kwh=2.2,
                passenger_count=3, fault_probability_per_hour=0.05),
    VehicleType(operator="Delta", cruise_speed_mph=90, battery_capacity_kwh=120,
                time_to_charge_hours=0.62, energy_per_mile_kwh=0.8,
                passenger_count=2, fault_probability_per_hour=0.22),
    VehicleType(operator="Echo", cruise_speed_mph=30, battery_capacity_kwh=150,
                time_to_charge_hours=0.3, energy_per_mile_kwh=5.8,
                passenger_count=2, fault_probability_per_hour=0.61),
)
"""The five-operator reference table used when no catalog is supplied."""
