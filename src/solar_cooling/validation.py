"""Physical and domain checks applied to inputs before any computation."""

from __future__ import annotations

import math
from typing import Callable

from .errors import InvalidInputError
from .schemas import CoolingInputs


def _positive(value: float) -> bool:
    return math.isfinite(value) and value > 0


def _unit_fraction(value: float) -> bool:
    return 0 < value <= 1


# Order matters: the first failing rule is the one reported to the user.
_RULES: list[tuple[str, Callable[[float], bool], str]] = [
    ("solar_reduction_kwh_day", _positive, "Solar reduction must be a positive number"),
    ("electricity_cost_per_kwh", _positive, "Electricity cost must be a positive number"),
    ("shgc", _unit_fraction, "SHGC must be between 0 and 1"),
    ("wwr", _unit_fraction, "WWR must be between 0 and 1"),
    ("ac_cop", _positive, "COP must be positive"),
]


def find_violations(inputs: CoolingInputs) -> list[InvalidInputError]:
    """Return every failing rule in reporting order (empty when valid)."""
    return [
        InvalidInputError(field, message)
        for field, check, message in _RULES
        if not check(getattr(inputs, field))
    ]


def validate_inputs(inputs: CoolingInputs) -> None:
    """Raise ``InvalidInputError`` for the first rule *inputs* violate.

    Raises:
        InvalidInputError: reduction, cost or COP not positive, or SHGC/WWR
            outside ``(0, 1]``.
    """
    violations = find_violations(inputs)
    if violations:
        raise violations[0]
