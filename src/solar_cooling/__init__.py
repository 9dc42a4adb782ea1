"""Solar cooling energy calculator for medical clinics."""

__version__ = "1.4.0"

PROGRAM_TITLE = "Solar Cooling Energy Calculator"
