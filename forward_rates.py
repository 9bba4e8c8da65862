"""
Implied Forward Interest Rates
==============================
Derives the one-year rate one year forward (f1,1) from the one-year and
two-year spot rates, and checks it against the two investment strategies it
must equalise.

No-Arbitrage Relation:
    Investing for two years at r2 must earn the same as investing for one
    year at r1 and rolling the proceeds at the forward rate:

        (1 + r2)^2 = (1 + r1) * (1 + f1,1)
        f1,1       = (1 + r2)^2 / (1 + r1) - 1

Strategies (from a common notional, 100 by default):
    Roll-over:     notional * (1 + r1), reinvested at f1,1 for year two
    Buy-and-hold:  notional * (1 + r2)^2

Because f1,1 is derived from the relation above, the two terminal values
agree up to floating-point rounding. ``no_arbitrage`` makes that visible.

Inputs are annual percentages with annual compounding. The model computes for
any finite input and flags results outside 0% < r < 50% via ``is_valid``
instead of raising.
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from typing import Tuple

import pandas as pd

from cash_flows import (
    CashFlowPeriod,
    InitialPeriod,
    IntermediatePeriod,
    TerminalPeriod,
    cash_flow_frame,
)
from market_inputs import RateInputs, default_rate_inputs
from settings import NO_ARBITRAGE_TOLERANCE, NOTIONAL, RATE_CEILING_PCT


@dataclass(frozen=True)
class ForwardRateModel:
    """Result of one forward-rate computation. Recomputed, never mutated."""
    one_year_rate: float       # input, %
    two_year_rate: float       # input, %
    notional: float
    forward_rate: float        # f1,1 in %
    strategy1_year1_value: float
    strategy1_final: float     # roll-over terminal value
    strategy2_final: float     # buy-and-hold terminal value
    arbitrage_diff: float
    no_arbitrage: bool
    cash_flow_data: Tuple[CashFlowPeriod, ...]
    is_valid: bool


def implied_forward_rate(one_year_rate: float, two_year_rate: float) -> float:
    """f1,1 in percent from one-year and two-year spot rates in percent."""
    return compute_forward_rates(one_year_rate, two_year_rate).forward_rate


def _in_domain(rate: float) -> bool:
    return 0.0 < rate < RATE_CEILING_PCT / 100.0


def compute_forward_rates(
    one_year_rate: float,
    two_year_rate: float,
    notional: float = NOTIONAL,
) -> ForwardRateModel:
    r1 = one_year_rate / 100.0
    r2 = two_year_rate / 100.0

    two_year_growth = (1.0 + r2) * (1.0 + r2)
    one_year_growth = 1.0 + r1
    if one_year_growth != 0.0:
        forward = two_year_growth / one_year_growth - 1.0
    else:
        forward = math.nan

    # Roll-over: one year at r1, then the proceeds for one year at f1,1
    strategy1_year1 = notional * one_year_growth
    strategy1_final = strategy1_year1 * (1.0 + forward)

    # Buy-and-hold: two years at r2
    strategy2_final = notional * two_year_growth

    arbitrage_diff = abs(strategy1_final - strategy2_final)
    no_arbitrage = arbitrage_diff < NO_ARBITRAGE_TOLERANCE
    is_valid = _in_domain(r1) and _in_domain(r2)

    periods = (
        InitialPeriod(
            rolling_investment=-notional,
            two_year_investment=-notional,
            two_year_rate=r2 * 100.0,
        ),
        IntermediatePeriod(
            rolling_maturity=strategy1_year1,
            rolling_reinvestment=-strategy1_year1,
            two_year_investment=0.0,
            one_year_rate=r1 * 100.0,
            two_year_rate=r2 * 100.0,
        ),
        TerminalPeriod(
            rolling_investment=strategy1_final,
            two_year_investment=strategy2_final,
            forward_rate=forward * 100.0,
            two_year_rate=r2 * 100.0,
        ),
    )

    if not is_valid:
        warnings.warn(
            f"Rates {one_year_rate}% / {two_year_rate}% fall outside the 0-"
            f"{RATE_CEILING_PCT:g}% range the model treats as meaningful. "
            "Results may be unreliable.",
            UserWarning,
        )

    return ForwardRateModel(
        one_year_rate=one_year_rate,
        two_year_rate=two_year_rate,
        notional=notional,
        forward_rate=forward * 100.0,
        strategy1_year1_value=strategy1_year1,
        strategy1_final=strategy1_final,
        strategy2_final=strategy2_final,
        arbitrage_diff=arbitrage_diff,
        no_arbitrage=no_arbitrage,
        cash_flow_data=periods,
        is_valid=is_valid,
    )


def compute_forward_rates_from(inputs: RateInputs, notional: float = NOTIONAL) -> ForwardRateModel:
    return compute_forward_rates(inputs.one_year_rate, inputs.two_year_rate, notional=notional)


def forward_rate_summary(model: ForwardRateModel) -> pd.DataFrame:
    """Headline figures as a two-column table for display."""
    rows = [
        {"Metric": "One-Year Rate (%)", "Value": model.one_year_rate},
        {"Metric": "Two-Year Rate (%)", "Value": model.two_year_rate},
        {"Metric": "Implied Forward Rate f1,1 (%)", "Value": model.forward_rate},
        {"Metric": "Roll-Over: Value After Year 1", "Value": model.strategy1_year1_value},
        {"Metric": "Roll-Over: Terminal Value", "Value": model.strategy1_final},
        {"Metric": "Buy-and-Hold: Terminal Value", "Value": model.strategy2_final},
        {"Metric": "Arbitrage Difference", "Value": model.arbitrage_diff},
    ]
    return pd.DataFrame(rows)


def describe_cash_flow_additivity(model: ForwardRateModel) -> str:
    year1 = model.strategy1_year1_value
    return (
        "Under no-arbitrage conditions, both investment strategies must yield "
        f"identical returns of ${model.strategy1_final:.2f}. At year 1, the "
        "subsequent one-year strategy shows two simultaneous cash flows: "
        f"+${year1:.2f} (first bond matures) and -${year1:.2f} (immediate "
        "reinvestment at the forward rate). This ensures no risk-free "
        "arbitrage opportunities exist in bond markets."
    )


if __name__ == "__main__":
    inputs = default_rate_inputs()
    model = compute_forward_rates_from(inputs)

    print("\n" + "=" * 60)
    print(" IMPLIED FORWARD RATE")
    print("=" * 60)
    print(f"\nOne-Year Rate: {inputs.one_year_rate:.2f}%")
    print(f"Two-Year Rate: {inputs.two_year_rate:.2f}%")
    print(f"\nf1,1 = [(1 + r2)^2 / (1 + r1)] - 1 = {model.forward_rate:.4f}%")

    print("\n" + "-" * 60)
    print("Strategy Comparison:")
    print("-" * 60)
    print(f"  Roll-over:    {model.notional:.2f} -> {model.strategy1_year1_value:.2f} -> {model.strategy1_final:.4f}")
    print(f"  Buy-and-hold: {model.notional:.2f} -> {model.strategy2_final:.4f}")
    status = "satisfied" if model.no_arbitrage else "VIOLATED"
    print(f"  No-arbitrage {status} (difference {model.arbitrage_diff:.2e})")

    print("\n" + "-" * 60)
    print("Cash Flows:")
    print("-" * 60)
    print(cash_flow_frame(model.cash_flow_data).to_string(index=False))

    if not math.isfinite(model.forward_rate) or not model.is_valid:
        print("\n[WARN] Inputs fall outside the meaningful range; figures are for reference only.")
    print()
