"""Pydantic records for calculator inputs, results, and persisted output rows."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .config import DEFAULT_CONFIG

MEDICAL_CLINIC = "Medical Clinic"


class CoolingInputs(BaseModel):
    """Validated-once, immutable configuration for a single calculation run.

    Range checks live in ``validation`` so that the user-facing messages stay
    stable; the model itself only enforces types.
    """

    model_config = ConfigDict(frozen=True)

    location: str = Field(default=DEFAULT_CONFIG.location, examples=["Sacramento"])
    building_type: str = MEDICAL_CLINIC
    solar_reduction_kwh_day: float
    electricity_cost_per_kwh: float
    ac_cop: float = DEFAULT_CONFIG.ac_cop
    shgc: float = DEFAULT_CONFIG.shgc
    wwr: float = DEFAULT_CONFIG.wwr
    transmission_factor: float = DEFAULT_CONFIG.transmission_factor
    time_lag_factor: float = DEFAULT_CONFIG.time_lag_factor
    medical_equip_factor: float = DEFAULT_CONFIG.medical_equip_factor
    output_dir: Path = Path(DEFAULT_CONFIG.output_dir)


class Units(BaseModel):
    """Unit labels attached to every result."""

    model_config = ConfigDict(frozen=True)

    solar_radiation: str = "kWh/day"
    cooling_load: str = "kWh/day"
    electricity: str = "kWh/day"
    cost: str = "$/kWh"
    savings: str = "$/year"


class Assumptions(BaseModel):
    """Echo of the coefficients a result was computed from."""

    model_config = ConfigDict(frozen=True)

    units: Units
    location: str
    building_type: str
    ac_cop: float
    shgc: float
    wwr: float
    transmission_factor: float
    time_lag_factor: float
    medical_equip_factor: float
    electricity_cost: float


class CoolingResult(BaseModel):
    """Derived daily/annual savings plus the assumptions behind them."""

    model_config = ConfigDict(frozen=True)

    assumptions: Assumptions
    total_solar_reduction: float
    cooling_load_reduced: float
    electricity_saved: float
    annual_cost_saved: float


class ResultRecord(BaseModel):
    """Flat row persisted to the JSON artifact.

    Field names are the external keys. ``daily_cost_saved_usd`` carries the
    annual savings figure; the key is kept for downstream compatibility.
    """

    timestamp: str
    location: str
    building_type: str

    solar_reduction_kwh_day: float
    electricity_cost_per_kwh: float
    ac_cop: float
    shgc: float
    wwr: float
    transmission_factor: float
    time_lag_factor: float
    medical_equip_factor: float

    cooling_load_reduced_kwh_day: float
    electricity_saved_kwh_day: float
    daily_cost_saved_usd: float
