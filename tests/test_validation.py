import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parent.parent))

from forward_rates import compute_forward_rates_from
from market_inputs import FXInputs, RateInputs
from validation import (
    YIELD_CURVE_KEY,
    blocking_errors,
    has_blocking_errors,
    validate,
    validate_fx_inputs,
    validate_rate_inputs,
)


def test_default_rates_are_clean():
    assert validate(RateInputs(6.30, 8.00)) == {}


def test_zero_rate_is_rejected():
    result = validate(RateInputs(0.0, 8.0))
    assert result["one_year_rate"] == "One-Year Rate must be positive"
    assert has_blocking_errors(result)


def test_negative_and_missing_rates_are_rejected():
    result = validate(RateInputs(-1.0, None))
    assert "must be positive" in result["one_year_rate"]
    assert "must be positive" in result["two_year_rate"]
    assert YIELD_CURVE_KEY not in result


def test_non_numeric_entry_counts_as_missing():
    result = validate(RateInputs("abc", 8.0))
    assert result["one_year_rate"] == "One-Year Rate must be positive"


def test_numeric_strings_are_accepted():
    assert validate(RateInputs("6.30", "8.00")) == {}


def test_upper_bound_is_inclusive():
    assert "one_year_rate" not in validate(RateInputs(50.0, 8.0))
    assert "two_year_rate" not in validate(RateInputs(6.3, 50.0))


def test_just_above_upper_bound_is_rejected():
    result = validate(RateInputs(50.01, 8.0))
    assert result["one_year_rate"] == "One-Year Rate cannot exceed 50%"
    result = validate(RateInputs(6.3, 50.01))
    assert result["two_year_rate"] == "Two-Year Rate cannot exceed 50%"


def test_inverted_curve_is_advisory_only():
    inputs = RateInputs(8.0, 6.0)
    result = validate(inputs)
    assert YIELD_CURVE_KEY in result
    assert blocking_errors(result) == {}
    assert not has_blocking_errors(result)
    assert compute_forward_rates_from(inputs).is_valid


def test_flat_curve_is_advisory_only():
    result = validate_rate_inputs(RateInputs(5.0, 5.0))
    assert list(result) == [YIELD_CURVE_KEY]


def test_advisory_needs_both_rates_positive():
    result = validate(RateInputs(8.0, -1.0))
    assert YIELD_CURVE_KEY not in result
    assert "two_year_rate" in result


def test_fx_defaults_are_clean():
    assert validate(FXInputs(1.2602, 2.360, 2.430)) == {}


def test_fx_spot_bounds():
    assert validate_fx_inputs(FXInputs(0.0, 2.0, 2.0))["spot_rate"] == "Spot Rate must be positive"
    assert validate_fx_inputs(FXInputs(-1.0, 2.0, 2.0))["spot_rate"] == "Spot Rate must be positive"
    assert validate_fx_inputs(FXInputs(10.5, 2.0, 2.0))["spot_rate"] == "Spot Rate cannot exceed 10"
    assert "spot_rate" not in validate_fx_inputs(FXInputs(10.0, 2.0, 2.0))
    assert validate_fx_inputs(FXInputs(None, 2.0, 2.0))["spot_rate"] == "Spot Rate is required"


def test_fx_rate_bounds():
    result = validate(FXInputs(1.2, -100.0, 50.5))
    assert result["domestic_rate"] == "Domestic Rate must be greater than -100%"
    assert result["foreign_rate"] == "Foreign Rate cannot exceed 50%"

    # negative rates above -100% are acceptable
    assert validate(FXInputs(1.2, -0.5, -99.0)) == {}
    assert validate(FXInputs(1.2, 50.0, 2.0)) == {}


def test_fx_missing_rate():
    result = validate(FXInputs(1.2, "", 2.0))
    assert result["domestic_rate"] == "Domestic Rate is required"


def test_fx_has_no_yield_curve_advisory():
    result = validate(FXInputs(1.2, 5.0, 1.0))
    assert YIELD_CURVE_KEY not in result


def test_validate_rejects_unknown_input_type():
    with pytest.raises(TypeError, match="RateInputs or FXInputs"):
        validate({"one_year_rate": 6.3, "two_year_rate": 8.0})


def test_validation_is_deterministic():
    inputs = RateInputs(8.0, 60.0)
    assert validate(inputs) == validate(inputs)
