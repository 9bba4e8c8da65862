"""
Implied Forward Exchange Rate
=============================
Covered interest rate parity with continuously compounded rates over one
period:

    F = S * exp(r_foreign - r_domestic)

with S quoted in units of foreign currency per unit of domestic currency.

Strategies (from a common domestic notional):
    Domestic:  notional * exp(r_domestic)
    Foreign:   convert at S, earn r_foreign, convert back at F
               notional * S * exp(r_foreign) / F

The two agree whenever F comes from the parity relation. Validity only
requires S > 0 and both rates above -100%; unlike the interest-rate model
there is no upper bound on the rates here.
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from typing import Tuple

import numpy as np
import pandas as pd

from market_inputs import FXInputs
from settings import FX_NO_ARBITRAGE_TOLERANCE, NOTIONAL, RATE_FLOOR_PCT


@dataclass(frozen=True)
class FXRatePoint:
    period: int
    exchange_rate: float
    domestic_rate: float  # %
    foreign_rate: float  # %

    @property
    def period_label(self) -> str:
        return "Spot" if self.period == 0 else "Forward"


@dataclass(frozen=True)
class FXForwardModel:
    spot_rate: float
    domestic_rate: float
    foreign_rate: float
    notional: float
    forward_rate: float
    forward_premium: float  # (F / S - 1) in %
    domestic_ending_value: float
    foreign_starting_value: float
    foreign_ending_value: float
    domestic_equivalent: float
    arbitrage_diff: float
    no_arbitrage: bool
    rate_path: Tuple[FXRatePoint, ...]
    is_valid: bool


def compute_forward_exchange_rate(
    spot_rate: float,
    domestic_rate: float,
    foreign_rate: float,
    notional: float = NOTIONAL,
) -> FXForwardModel:
    rd = domestic_rate / 100.0
    rf = foreign_rate / 100.0

    forward = float(spot_rate * np.exp(rf - rd))

    domestic_ending = float(notional * np.exp(rd))
    foreign_starting = notional * spot_rate
    foreign_ending = float(foreign_starting * np.exp(rf))
    if forward != 0.0 and math.isfinite(forward):
        domestic_equivalent = foreign_ending / forward
    else:
        domestic_equivalent = math.nan

    arbitrage_diff = abs(domestic_ending - domestic_equivalent)
    no_arbitrage = arbitrage_diff < FX_NO_ARBITRAGE_TOLERANCE

    is_valid = (
        spot_rate > 0
        and domestic_rate > RATE_FLOOR_PCT
        and foreign_rate > RATE_FLOOR_PCT
        and math.isfinite(domestic_equivalent)
    )

    if spot_rate != 0:
        forward_premium = (forward / spot_rate - 1.0) * 100.0
    else:
        forward_premium = math.nan

    rate_path = (
        FXRatePoint(0, spot_rate, domestic_rate, foreign_rate),
        FXRatePoint(1, forward, domestic_rate, foreign_rate),
    )

    if not is_valid:
        warnings.warn(
            f"Spot {spot_rate} with rates {domestic_rate}% / {foreign_rate}% is outside "
            "the range where parity is meaningful. Results may be unreliable.",
            UserWarning,
        )

    return FXForwardModel(
        spot_rate=spot_rate,
        domestic_rate=domestic_rate,
        foreign_rate=foreign_rate,
        notional=notional,
        forward_rate=forward,
        forward_premium=forward_premium,
        domestic_ending_value=domestic_ending,
        foreign_starting_value=foreign_starting,
        foreign_ending_value=foreign_ending,
        domestic_equivalent=domestic_equivalent,
        arbitrage_diff=arbitrage_diff,
        no_arbitrage=no_arbitrage,
        rate_path=rate_path,
        is_valid=is_valid,
    )


def compute_forward_exchange_rate_from(inputs: FXInputs, notional: float = NOTIONAL) -> FXForwardModel:
    return compute_forward_exchange_rate(
        inputs.spot_rate, inputs.domestic_rate, inputs.foreign_rate, notional=notional
    )


def rate_path_frame(model: FXForwardModel) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "period": p.period,
                "period_label": p.period_label,
                "exchange_rate": p.exchange_rate,
                "domestic_rate": p.domestic_rate,
                "foreign_rate": p.foreign_rate,
            }
            for p in model.rate_path
        ]
    )
