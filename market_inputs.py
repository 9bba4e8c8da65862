from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from settings import default_value


@dataclass(frozen=True)
class RateInputs:
    one_year_rate: float  # annual %, e.g. 6.30
    two_year_rate: float  # annual %


@dataclass(frozen=True)
class FXInputs:
    spot_rate: float  # units of foreign currency per unit of domestic
    domestic_rate: float  # annual %, continuously compounded
    foreign_rate: float  # annual %, continuously compounded


def default_rate_inputs(overrides: Optional[Mapping[str, str]] = None) -> RateInputs:
    """Starting inputs for the interest-rate page: a normal, upward sloping curve."""
    return RateInputs(
        one_year_rate=default_value("FWD_ONE_YEAR_RATE", overrides),
        two_year_rate=default_value("FWD_TWO_YEAR_RATE", overrides),
    )


def default_fx_inputs(overrides: Optional[Mapping[str, str]] = None) -> FXInputs:
    return FXInputs(
        spot_rate=default_value("FWD_SPOT_RATE", overrides),
        domestic_rate=default_value("FWD_DOMESTIC_RATE", overrides),
        foreign_rate=default_value("FWD_FOREIGN_RATE", overrides),
    )
