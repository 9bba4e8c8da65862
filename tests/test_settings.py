import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parent.parent))

from market_inputs import FXInputs, RateInputs, default_fx_inputs, default_rate_inputs
from settings import DEFAULTS, default_value


def test_built_in_defaults(monkeypatch):
    for key in DEFAULTS:
        monkeypatch.delenv(key, raising=False)
    assert default_rate_inputs() == RateInputs(6.30, 8.00)
    assert default_fx_inputs() == FXInputs(1.2602, 2.360, 2.430)


def test_environment_overrides_defaults(monkeypatch):
    monkeypatch.setenv("FWD_ONE_YEAR_RATE", "4.5")
    monkeypatch.setenv("FWD_TWO_YEAR_RATE", " ")
    inputs = default_rate_inputs()
    assert inputs.one_year_rate == 4.5
    assert inputs.two_year_rate == 8.00


def test_explicit_overrides_win_over_environment(monkeypatch):
    monkeypatch.setenv("FWD_SPOT_RATE", "1.5")
    inputs = default_fx_inputs({"FWD_SPOT_RATE": "0.91"})
    assert inputs.spot_rate == 0.91


def test_bad_value_names_the_setting(monkeypatch):
    monkeypatch.setenv("FWD_FOREIGN_RATE", "two percent")
    with pytest.raises(ValueError, match="FWD_FOREIGN_RATE"):
        default_value("FWD_FOREIGN_RATE")


def test_unknown_setting():
    with pytest.raises(KeyError):
        default_value("FWD_THREE_YEAR_RATE")
