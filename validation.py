"""
Input Validation
================
Checks raw, user-entered market rates before they reach the forward models.

Errors are returned as data, never raised: a mapping of field name to a
readable message. An empty mapping means the inputs can be computed.

Two kinds of entries:
    Hard bound violations  - keyed by field name, block computation.
    Yield-curve advisory   - keyed by ``yield_curve``, informational only.
                             A flat or inverted curve is unusual but still
                             produces a well-defined forward rate.
"""

from __future__ import annotations

import math
from typing import Dict, Union

import pandas as pd

from market_inputs import FXInputs, RateInputs
from settings import RATE_CEILING_PCT, RATE_FLOOR_PCT, SPOT_CEILING

ValidationResult = Dict[str, str]

YIELD_CURVE_KEY = "yield_curve"
ADVISORY_KEYS = frozenset({YIELD_CURVE_KEY})

FIELD_LABELS = {
    "one_year_rate": "One-Year Rate",
    "two_year_rate": "Two-Year Rate",
    "spot_rate": "Spot Rate",
    "domestic_rate": "Domestic Rate",
    "foreign_rate": "Foreign Rate",
}


def _coerce(value) -> float:
    """Numeric value or NaN when the entry is blank or not a number."""
    if value is None:
        return math.nan
    number = pd.to_numeric(value, errors="coerce")
    try:
        number = float(number)
    except (TypeError, ValueError):
        return math.nan
    return number


def _present(value: float) -> bool:
    return not math.isnan(value)


def validate_rate_inputs(inputs: RateInputs) -> ValidationResult:
    errors: ValidationResult = {}
    values = {
        "one_year_rate": _coerce(inputs.one_year_rate),
        "two_year_rate": _coerce(inputs.two_year_rate),
    }

    for field, value in values.items():
        label = FIELD_LABELS[field]
        if not _present(value) or value <= 0:
            errors[field] = f"{label} must be positive"
        elif value > RATE_CEILING_PCT:
            errors[field] = f"{label} cannot exceed {RATE_CEILING_PCT:g}%"

    one_year, two_year = values["one_year_rate"], values["two_year_rate"]
    both_positive = _present(one_year) and _present(two_year) and one_year > 0 and two_year > 0
    if both_positive and two_year <= one_year:
        errors[YIELD_CURVE_KEY] = (
            "Two-Year Rate should typically be higher than One-Year Rate "
            "for a normal yield curve"
        )
    return errors


def validate_fx_inputs(inputs: FXInputs) -> ValidationResult:
    errors: ValidationResult = {}

    spot = _coerce(inputs.spot_rate)
    if not _present(spot):
        errors["spot_rate"] = "Spot Rate is required"
    elif spot <= 0:
        errors["spot_rate"] = "Spot Rate must be positive"
    elif spot > SPOT_CEILING:
        # Sanity bound for quoted majors, not a parity constraint.
        errors["spot_rate"] = f"Spot Rate cannot exceed {SPOT_CEILING:g}"

    for field in ("domestic_rate", "foreign_rate"):
        label = FIELD_LABELS[field]
        value = _coerce(getattr(inputs, field))
        if not _present(value):
            errors[field] = f"{label} is required"
        elif value <= RATE_FLOOR_PCT:
            errors[field] = f"{label} must be greater than {RATE_FLOOR_PCT:g}%"
        elif value > RATE_CEILING_PCT:
            errors[field] = f"{label} cannot exceed {RATE_CEILING_PCT:g}%"
    return errors


def validate(inputs: Union[RateInputs, FXInputs]) -> ValidationResult:
    """Validate either input set; the result is empty when everything is acceptable."""
    if isinstance(inputs, RateInputs):
        return validate_rate_inputs(inputs)
    if isinstance(inputs, FXInputs):
        return validate_fx_inputs(inputs)
    raise TypeError(
        f"Inputs must be RateInputs or FXInputs, got {type(inputs).__name__}"
    )


def blocking_errors(result: ValidationResult) -> ValidationResult:
    return {k: v for k, v in result.items() if k not in ADVISORY_KEYS}


def has_blocking_errors(result: ValidationResult) -> bool:
    return bool(blocking_errors(result))
