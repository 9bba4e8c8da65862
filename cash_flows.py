"""
Cash Flow Periods
=================
Chart-ready period records for the two-period roll-over vs buy-and-hold
comparison.

Not every series applies at every time point, so each period kind is its own
record type instead of one record with optional fields:

    t=0  InitialPeriod       both strategies pay out the notional
    t=1  IntermediatePeriod  the one-year bond matures and is reinvested;
                             the two-year position shows an explicit 0.0
    t=2  TerminalPeriod      both strategies receive their terminal value

``cash_flow_frame`` flattens any sequence of periods into a DataFrame with
NaN where a series does not apply, which is the shape plotting code wants.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Iterable, Union

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class InitialPeriod:
    rolling_investment: float
    two_year_investment: float
    two_year_rate: float  # %
    period: int = 0

    kind = "initial"

    @property
    def period_label(self) -> str:
        return str(self.period)


@dataclass(frozen=True)
class IntermediatePeriod:
    rolling_maturity: float
    rolling_reinvestment: float
    two_year_investment: float
    one_year_rate: float  # %
    two_year_rate: float  # %
    period: int = 1

    kind = "intermediate"

    @property
    def period_label(self) -> str:
        return str(self.period)


@dataclass(frozen=True)
class TerminalPeriod:
    rolling_investment: float
    two_year_investment: float
    forward_rate: float  # %
    two_year_rate: float  # %
    period: int = 2

    kind = "terminal"

    @property
    def period_label(self) -> str:
        return str(self.period)


CashFlowPeriod = Union[InitialPeriod, IntermediatePeriod, TerminalPeriod]

FRAME_COLUMNS = [
    "period",
    "period_label",
    "kind",
    "rolling_investment",
    "rolling_maturity",
    "rolling_reinvestment",
    "two_year_investment",
    "one_year_rate",
    "forward_rate",
    "two_year_rate",
]


def cash_flow_frame(periods: Iterable[CashFlowPeriod]) -> pd.DataFrame:
    rows = []
    for record in periods:
        row = {name: np.nan for name in FRAME_COLUMNS}
        row["period_label"] = record.period_label
        row["kind"] = record.kind
        for f in fields(record):
            row[f.name] = getattr(record, f.name)
        rows.append(row)

    frame = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    if not frame.empty:
        frame["period"] = frame["period"].astype(int)
    return frame
