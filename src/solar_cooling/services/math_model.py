"""Deterministic cooling-load and cost savings model for clinic glazing upgrades."""

from __future__ import annotations

from ..schemas import MEDICAL_CLINIC, Assumptions, CoolingInputs, CoolingResult, Units

DAYS_PER_YEAR = 365
BUILDING_TYPE = MEDICAL_CLINIC
UNITS = Units()


def cooling_load_reduced_kwh_day(inputs: CoolingInputs) -> float:
    """Sensible cooling load avoided per day by the radiation reduction."""
    return (
        inputs.solar_reduction_kwh_day
        * inputs.shgc
        * inputs.transmission_factor
        * inputs.time_lag_factor
        * inputs.medical_equip_factor
    )


def calculate_cooling_savings(inputs: CoolingInputs) -> CoolingResult:
    """Map validated inputs to cooling load, electricity and cost savings.

    The annual figure scales one representative day by ``DAYS_PER_YEAR``; there
    is no seasonal weighting. Inputs must already have passed
    ``validation.validate_inputs``.
    """
    cooling_load = cooling_load_reduced_kwh_day(inputs)
    electricity_saved = cooling_load / inputs.ac_cop
    annual_cost_saved = electricity_saved * inputs.electricity_cost_per_kwh * DAYS_PER_YEAR

    return CoolingResult(
        total_solar_reduction=inputs.solar_reduction_kwh_day,
        cooling_load_reduced=cooling_load,
        electricity_saved=electricity_saved,
        annual_cost_saved=annual_cost_saved,
        assumptions=Assumptions(
            units=UNITS,
            location=inputs.location,
            building_type=BUILDING_TYPE,
            ac_cop=inputs.ac_cop,
            shgc=inputs.shgc,
            wwr=inputs.wwr,
            transmission_factor=inputs.transmission_factor,
            time_lag_factor=inputs.time_lag_factor,
            medical_equip_factor=inputs.medical_equip_factor,
            electricity_cost=inputs.electricity_cost_per_kwh,
        ),
    )
