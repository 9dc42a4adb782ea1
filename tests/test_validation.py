"""Tests for solar_cooling.validation — domain rules and their reporting order."""

from __future__ import annotations

import math

import pytest

from solar_cooling.errors import InvalidInputError, SolarCoolingError
from solar_cooling.schemas import CoolingInputs
from solar_cooling.validation import find_violations, validate_inputs


def _inputs(**overrides: float) -> CoolingInputs:
    values = {"solar_reduction_kwh_day": 100.0, "electricity_cost_per_kwh": 0.15}
    values.update(overrides)
    return CoolingInputs(**values)


class TestAccepts:
    def test_documented_defaults(self):
        validate_inputs(_inputs())
        assert find_violations(_inputs()) == []

    @pytest.mark.parametrize("value", [1.0, 0.01])
    def test_fraction_bounds_inclusive_of_one(self, value):
        validate_inputs(_inputs(shgc=value, wwr=value))

    def test_factors_are_not_range_checked(self):
        validate_inputs(_inputs(transmission_factor=1.5, time_lag_factor=0.0, medical_equip_factor=0.5))


class TestRejects:
    @pytest.mark.parametrize(
        ("field", "value", "match"),
        [
            ("solar_reduction_kwh_day", 0.0, "Solar reduction"),
            ("solar_reduction_kwh_day", -5.0, "Solar reduction"),
            ("solar_reduction_kwh_day", math.inf, "Solar reduction"),
            ("solar_reduction_kwh_day", math.nan, "Solar reduction"),
            ("electricity_cost_per_kwh", math.nan, "Electricity cost"),
            ("electricity_cost_per_kwh", math.inf, "Electricity cost"),
            ("shgc", math.nan, "SHGC"),
            ("shgc", math.inf, "SHGC"),
            ("wwr", math.nan, "WWR"),
            ("wwr", -math.inf, "WWR"),
            ("ac_cop", math.nan, "COP"),
            ("ac_cop", math.inf, "COP"),
            ("electricity_cost_per_kwh", 0.0, "Electricity cost"),
            ("electricity_cost_per_kwh", -0.1, "Electricity cost"),
            ("shgc", 0.0, "SHGC"),
            ("shgc", -0.2, "SHGC"),
            ("shgc", 1.01, "SHGC"),
            ("wwr", 0.0, "WWR"),
            ("wwr", -0.4, "WWR"),
            ("wwr", 1.5, "WWR"),
            ("ac_cop", 0.0, "COP"),
            ("ac_cop", -4.0, "COP"),
        ],
    )
    def test_rule_violation(self, field, value, match):
        with pytest.raises(InvalidInputError, match=match) as exc_info:
            validate_inputs(_inputs(**{field: value}))
        assert exc_info.value.field == field

    def test_error_taxonomy(self):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_inputs(_inputs(solar_reduction_kwh_day=0.0))
        assert isinstance(exc_info.value, SolarCoolingError)
        assert isinstance(exc_info.value, ValueError)
        assert str(exc_info.value) == "Solar reduction must be a positive number"


class TestOrdering:
    def test_first_failing_rule_is_reported(self):
        bad = _inputs(electricity_cost_per_kwh=0.0, shgc=2.0, ac_cop=0.0)
        with pytest.raises(InvalidInputError) as exc_info:
            validate_inputs(bad)
        assert exc_info.value.field == "electricity_cost_per_kwh"

    def test_find_violations_lists_all_in_order(self):
        bad = _inputs(
            solar_reduction_kwh_day=0.0,
            electricity_cost_per_kwh=0.0,
            shgc=0.0,
            wwr=0.0,
            ac_cop=0.0,
        )
        fields = [err.field for err in find_violations(bad)]
        assert fields == [
            "solar_reduction_kwh_day",
            "electricity_cost_per_kwh",
            "shgc",
            "wwr",
            "ac_cop",
        ]

    def test_no_side_effects(self):
        inputs = _inputs(shgc=3.0)
        before = inputs.model_dump()
        with pytest.raises(InvalidInputError):
            validate_inputs(inputs)
        assert inputs.model_dump() == before

    def test_raised_error_is_first_listed_violation(self):
        bad = _inputs(wwr=math.nan, ac_cop=-1.0)
        listed = find_violations(bad)
        with pytest.raises(InvalidInputError) as exc_info:
            validate_inputs(bad)
        assert exc_info.value.field == listed[0].field == "wwr"
        assert str(exc_info.value) == str(listed[0])
