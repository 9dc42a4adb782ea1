"""Configuration for solar cooling calculator domain defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

LOCATION_ENV_VAR = "SOLAR_COOLING_LOCATION"
OUTPUT_DIR_ENV_VAR = "SOLAR_COOLING_OUTPUT_DIR"


@dataclass(frozen=True)
class CalculatorDefaults:
    """Engineering constants and overridable defaults for a clinic run."""

    location: str = "Sacramento"
    output_dir: str = "results"
    ac_cop: float = 4.0  # ASHRAE 90.1-2019
    shgc: float = 0.25  # CA Title 24 2022
    wwr: float = 0.40  # DOE Reference Building
    transmission_factor: float = 0.80
    time_lag_factor: float = 0.95
    medical_equip_factor: float = 1.15


DEFAULT_CONFIG = CalculatorDefaults()


def load_defaults(base: CalculatorDefaults = DEFAULT_CONFIG) -> CalculatorDefaults:
    """Overlay location and output directory from the environment / ``.env``.

    The ``.env`` file is looked up from the current working directory upward.

    Only the labels are environment-configurable; the physical factors stay
    fixed so that results remain comparable across sites.
    """
    load_dotenv(find_dotenv(usecwd=True))
    overrides: dict[str, str] = {}

    location = os.getenv(LOCATION_ENV_VAR)
    if location:
        overrides["location"] = location
    output_dir = os.getenv(OUTPUT_DIR_ENV_VAR)
    if output_dir:
        overrides["output_dir"] = output_dir

    if overrides:
        logger.info("Environment overrides applied: %s", ", ".join(sorted(overrides)))
        return replace(base, **overrides)
    return base
