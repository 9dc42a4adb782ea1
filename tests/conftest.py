"""Shared fixtures for solar_cooling tests."""

from __future__ import annotations

import pytest

from solar_cooling.config import LOCATION_ENV_VAR, OUTPUT_DIR_ENV_VAR
from solar_cooling.schemas import CoolingInputs


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOCATION_ENV_VAR, raising=False)
    monkeypatch.delenv(OUTPUT_DIR_ENV_VAR, raising=False)


@pytest.fixture
def clinic_inputs() -> CoolingInputs:
    """Reference run: 100 kWh/day reduction at $0.15/kWh with default factors."""
    return CoolingInputs(solar_reduction_kwh_day=100.0, electricity_cost_per_kwh=0.15)
