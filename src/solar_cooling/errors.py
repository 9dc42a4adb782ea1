"""Error taxonomy surfaced at the CLI boundary."""

from __future__ import annotations


class SolarCoolingError(Exception):
    """Base class for all calculator failures reported to the user."""


class InvalidInputError(SolarCoolingError, ValueError):
    """A configuration value violates a physical or domain constraint."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class ReportIOError(SolarCoolingError, OSError):
    """The output directory or one of the result files could not be written."""
