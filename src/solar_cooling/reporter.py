"""Persist a calculation result as paired, timestamped JSON and CSV artifacts."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import NamedTuple

import pandas as pd

from .errors import ReportIOError
from .schemas import CoolingResult, ResultRecord

logger = logging.getLogger(__name__)

FILE_PREFIX = "solar_cooling"
FILE_STAMP_FORMAT = "%Y-%m-%d_%H%M%S"

# (CSV header, ResultRecord key, number format). ``None`` keeps the value as text.
CSV_COLUMNS: list[tuple[str, str, str | None]] = [
    ("Timestamp", "timestamp", None),
    ("Location", "location", None),
    ("Building Type", "building_type", None),
    ("Solar Reduction (kWh/day)", "solar_reduction_kwh_day", "{:.2f}"),
    ("Electricity Cost ($/kWh)", "electricity_cost_per_kwh", "{:.3f}"),
    ("AC COP", "ac_cop", "{:.1f}"),
    ("SHGC", "shgc", "{:.2f}"),
    ("WWR", "wwr", "{:.2f}"),
    ("Transmission Factor", "transmission_factor", "{:.2f}"),
    ("Time Lag Factor", "time_lag_factor", "{:.2f}"),
    ("Medical Equipment Factor", "medical_equip_factor", "{:.2f}"),
    ("Cooling Load Reduced (kWh/day)", "cooling_load_reduced_kwh_day", "{:.2f}"),
    ("Electricity Saved (kWh/day)", "electricity_saved_kwh_day", "{:.2f}"),
    ("Daily Cost Saved ($)", "daily_cost_saved_usd", "{:.2f}"),
]
CSV_HEADERS: list[str] = [header for header, _, _ in CSV_COLUMNS]


class ReportPaths(NamedTuple):
    """Locations of the two artifacts written for one run."""

    json_path: Path
    csv_path: Path


def build_record(result: CoolingResult, timestamp: str) -> ResultRecord:
    """Flatten *result* into the persisted row shape."""
    assumptions = result.assumptions
    return ResultRecord(
        timestamp=timestamp,
        location=assumptions.location,
        building_type=assumptions.building_type,
        solar_reduction_kwh_day=result.total_solar_reduction,
        electricity_cost_per_kwh=assumptions.electricity_cost,
        ac_cop=assumptions.ac_cop,
        shgc=assumptions.shgc,
        wwr=assumptions.wwr,
        transmission_factor=assumptions.transmission_factor,
        time_lag_factor=assumptions.time_lag_factor,
        medical_equip_factor=assumptions.medical_equip_factor,
        cooling_load_reduced_kwh_day=result.cooling_load_reduced,
        electricity_saved_kwh_day=result.electricity_saved,
        daily_cost_saved_usd=result.annual_cost_saved,
    )


def format_csv_row(record: ResultRecord) -> list[str]:
    """Render *record* as CSV cells with fixed per-column precision."""
    values = record.model_dump()
    return [
        fmt.format(values[key]) if fmt else str(values[key])
        for _, key, fmt in CSV_COLUMNS
    ]


def artifact_paths(output_dir: Path, now: datetime) -> ReportPaths:
    """Return the JSON/CSV pair for a run started at *now*."""
    stem = f"{FILE_PREFIX}_{now.strftime(FILE_STAMP_FORMAT)}"
    return ReportPaths(
        json_path=output_dir / f"{stem}.json",
        csv_path=output_dir / f"{stem}.csv",
    )


def _ensure_output_dir(output_dir: Path) -> None:
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ReportIOError(f"cannot create output directory {output_dir}: {exc}") from exc


def _write_json(path: Path, record: ResultRecord) -> None:
    try:
        path.write_text(record.model_dump_json(indent=2), encoding="utf-8")
    except OSError as exc:
        raise ReportIOError(f"cannot write file {path}: {exc}") from exc


def _write_csv(path: Path, record: ResultRecord) -> None:
    frame = pd.DataFrame([format_csv_row(record)], columns=CSV_HEADERS)
    try:
        frame.to_csv(path, index=False, lineterminator="\n")
    except OSError as exc:
        raise ReportIOError(f"cannot write file {path}: {exc}") from exc


def save_results(
    result: CoolingResult,
    output_dir: str | Path,
    *,
    now: datetime | None = None,
) -> ReportPaths:
    """Write the JSON and CSV artifacts for *result* into *output_dir*.

    The directory (and any missing parents) is created first. The JSON file is
    written before the CSV file; the first failure aborts the run.

    Args:
        result: Output of ``calculate_cooling_savings``.
        output_dir: Target directory.
        now: Run timestamp; defaults to the current local time. Naive values
            are read as local time.

    Returns:
        Paths of the written JSON and CSV files, sharing one timestamp suffix.

    Raises:
        ReportIOError: Directory creation or a file write failed.
    """
    output_dir = Path(output_dir)
    now = now or datetime.now()
    if now.tzinfo is None:
        now = now.astimezone()

    _ensure_output_dir(output_dir)

    paths = artifact_paths(output_dir, now)
    record = build_record(result, now.isoformat(timespec="seconds"))

    _write_json(paths.json_path, record)
    logger.info("JSON results written: %s", paths.json_path)
    _write_csv(paths.csv_path, record)
    logger.info("CSV results written: %s", paths.csv_path)

    return paths
