"""Calculator CLI entrypoint (validate → calculate → save → report)."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from . import PROGRAM_TITLE, __version__
from .config import CalculatorDefaults, load_defaults
from .errors import SolarCoolingError
from .reporter import save_results
from .schemas import CoolingInputs, CoolingResult
from .services.math_model import calculate_cooling_savings
from .validation import validate_inputs

logger = logging.getLogger(__name__)

EXAMPLES = """\
Examples:
  solar-cooling -r 100 -c 0.15
  solar-cooling --reduction 150.5 --cost 0.12 --cop 3.5 --shgc 0.3 -o results
"""


def configure_logging(verbose: bool = False) -> None:
    """Configure console logging on stderr so stdout carries only the report."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )


# --- Console report ---------------------------------------------------------


def format_report(result: CoolingResult, verbose: bool = False) -> str:
    """Render the human-readable run summary."""
    a = result.assumptions
    units = a.units
    lines = [
        "",
        "Calculation Results (Daily):",
        f"Location: {a.location}",
        f"Building type: {a.building_type}",
        "",
        "Inputs:",
        f"Total solar radiation reduction: {result.total_solar_reduction:.2f} {units.solar_radiation}",
        f"Electricity cost: {a.electricity_cost:.3f} {units.cost}",
    ]
    if verbose:
        lines += [
            f"AC COP: {a.ac_cop:.1f}",
            f"Solar Heat Gain Coefficient: {a.shgc:.2f}",
            f"Window-to-Wall Ratio: {a.wwr:.2f}",
        ]
    lines += [
        "",
        "Results:",
        f"Total cooling load reduced: {result.cooling_load_reduced:.2f} {units.cooling_load}",
        f"Total electricity saved: {result.electricity_saved:.2f} {units.electricity}",
        f"Annual cost savings: {result.annual_cost_saved:.2f} {units.savings}",
    ]
    if verbose:
        lines += [
            "",
            "Detailed Assumptions:",
            f"Transmission Factor: {a.transmission_factor:.2f}",
            f"Time Lag Factor: {a.time_lag_factor:.2f}",
            f"Medical Equipment Factor: {a.medical_equip_factor:.2f}",
        ]
    return "\n".join(lines)


# --- CLI --------------------------------------------------------------------


def _build_parser(defaults: CalculatorDefaults) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="solar-cooling",
        description=f"{PROGRAM_TITLE} for Medical Clinics v{__version__}",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    required = p.add_argument_group("required flags")
    required.add_argument("-r", "--reduction", type=float, default=0.0, metavar="FLOAT",
                          help="Total solar radiation reduction in kWh/day")
    required.add_argument("-c", "--cost", type=float, default=0.0, metavar="FLOAT",
                          help="Electricity cost in $/kWh")

    optional = p.add_argument_group("optional flags (with defaults)")
    optional.add_argument("--cop", type=float, default=defaults.ac_cop, metavar="FLOAT",
                          help=f"AC Coefficient of Performance (default: {defaults.ac_cop:.1f})")
    optional.add_argument("--shgc", type=float, default=defaults.shgc, metavar="FLOAT",
                          help=f"Solar Heat Gain Coefficient (default: {defaults.shgc:.2f})")
    optional.add_argument("--wwr", type=float, default=defaults.wwr, metavar="FLOAT",
                          help=f"Window to Wall Ratio (default: {defaults.wwr:.2f})")
    optional.add_argument("-l", "--location", default=defaults.location,
                          help=f"Building location (default: {defaults.location})")
    optional.add_argument("-o", "--output", default=defaults.output_dir,
                          help=f"Output directory for CSV and JSON files (default: {defaults.output_dir})")

    other = p.add_argument_group("other options")
    other.add_argument("-v", "--verbose", action="store_true",
                       help="Show detailed assumptions and calculations")
    other.add_argument("-V", "--version", action="version",
                       version=f"{PROGRAM_TITLE} v{__version__}",
                       help="Show program version")
    return p


def _inputs_from_args(args: argparse.Namespace, defaults: CalculatorDefaults) -> CoolingInputs:
    """Overlay parsed flags on the fixed defaults."""
    return CoolingInputs(
        location=args.location,
        solar_reduction_kwh_day=args.reduction,
        electricity_cost_per_kwh=args.cost,
        ac_cop=args.cop,
        shgc=args.shgc,
        wwr=args.wwr,
        transmission_factor=defaults.transmission_factor,
        time_lag_factor=defaults.time_lag_factor,
        medical_equip_factor=defaults.medical_equip_factor,
        output_dir=args.output,
    )


def run(inputs: CoolingInputs, verbose: bool = False) -> CoolingResult:
    """Validate, calculate, persist, and print the summary for one run.

    Raises:
        InvalidInputError: *inputs* violate a domain rule.
        ReportIOError: The artifacts could not be written.
    """
    validate_inputs(inputs)
    result = calculate_cooling_savings(inputs)
    logger.info(
        "Computed savings for %s: %.4f kWh/day cooling, %.4f kWh/day electricity",
        inputs.location,
        result.cooling_load_reduced,
        result.electricity_saved,
    )
    save_results(result, inputs.output_dir)
    print(format_report(result, verbose=verbose))
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Parse CLI args, run the calculation, and return the process exit code."""
    defaults = load_defaults()
    args = _build_parser(defaults).parse_args(argv)
    configure_logging(args.verbose)

    inputs = _inputs_from_args(args, defaults)
    try:
        run(inputs, verbose=args.verbose)
    except SolarCoolingError as exc:
        logger.error("Error: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
