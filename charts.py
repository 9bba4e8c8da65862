from __future__ import annotations

import math
from typing import Optional, Tuple

import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter
import numpy as np

from cash_flows import cash_flow_frame
from forward_rates import ForwardRateModel
from fx_forward import FXForwardModel, rate_path_frame
from settings import RATE_AXIS_FLOOR_PCT

COLORS = {
    "rolling": "#059669",        # emerald: subsequent one-year investments
    "two_year": "#2563eb",       # blue: two-year investment
    "one_year_rate": "#1d4ed8",
    "forward_rate": "#6d28d9",
    "two_year_rate": "#ea580c",
    "domestic_rate": "#2563eb",
    "foreign_rate": "#ea580c",
    "exchange_rate": "#6d28d9",
}

# Bars smaller than a cent carry no label.
LABEL_THRESHOLD = 0.01


def format_cash_flow_label(value: Optional[float]) -> Optional[str]:
    """'$116.64' / '-$100.00', or None for missing and negligible flows."""
    if value is None or not math.isfinite(value) or abs(value) < LABEL_THRESHOLD:
        return None
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):.2f}"


def rate_axis_limit(model: ForwardRateModel) -> float:
    return max(RATE_AXIS_FLOOR_PCT, model.forward_rate * 1.2)


def _label_bars(ax: plt.Axes, bars, values) -> None:
    for bar, value in zip(bars, values):
        text = format_cash_flow_label(value)
        if text is None:
            continue
        x = bar.get_x() + bar.get_width() / 2
        offset = -12 if value < 0 else 4
        ax.annotate(
            text,
            xy=(x, value),
            xytext=(0, offset),
            textcoords="offset points",
            ha="center",
            fontsize=8,
            fontweight="bold",
        )


def plot_cash_flows(
    model: ForwardRateModel,
    figsize: Tuple[int, int] = (10, 6),
    title: Optional[str] = "Implied Forward Rate & Investment Cash Flows (in USD)",
) -> plt.Figure:
    """
    Composed chart of the roll-over vs buy-and-hold comparison.

    Right axis: cash-flow bars per period. The roll-over strategy has two
    bars at t=1 (maturity and reinvestment); the two-year bar at t=1 is an
    explicit zero.
    Left axis: two-year yield as a flat line, the one-year yield as a dot at
    t=1 and the implied forward as a dot at t=2.
    """
    frame = cash_flow_frame(model.cash_flow_data)
    x = frame["period"].to_numpy(dtype=float)
    width = 0.25

    fig, ax_rates = plt.subplots(figsize=figsize)
    ax_flows = ax_rates.twinx()

    rolling = frame["rolling_investment"].fillna(0.0).to_numpy()
    maturity = frame["rolling_maturity"].to_numpy()
    reinvest = frame["rolling_reinvestment"].to_numpy()
    two_year = frame["two_year_investment"].to_numpy()

    has_investment = frame["rolling_investment"].notna().to_numpy()
    bars = ax_flows.bar(
        x[has_investment] - width / 2, rolling[has_investment], width,
        color=COLORS["rolling"], label="Subsequent One-Year Investments",
    )
    _label_bars(ax_flows, bars, rolling[has_investment])

    at_t1 = ~np.isnan(maturity)
    bars = ax_flows.bar(
        x[at_t1] - width / 2, maturity[at_t1], width,
        color=COLORS["rolling"], alpha=0.85, label="Bond Maturity",
    )
    _label_bars(ax_flows, bars, maturity[at_t1])
    bars = ax_flows.bar(
        x[at_t1] - width / 2, reinvest[at_t1], width,
        color=COLORS["rolling"], alpha=0.6, label="Reinvestment",
    )
    _label_bars(ax_flows, bars, reinvest[at_t1])

    bars = ax_flows.bar(
        x + width / 2, two_year, width,
        color=COLORS["two_year"], label="Two-Year Investment",
    )
    _label_bars(ax_flows, bars, two_year)
    ax_flows.axhline(0, color="black", linewidth=0.5)
    ax_flows.set_ylabel("Cash Flows ($)")

    ax_rates.plot(
        x, frame["two_year_rate"], color=COLORS["two_year_rate"], linewidth=2,
        label=f"Two-Year Bond Yield: {model.two_year_rate:.2f}%",
    )
    ax_rates.scatter(
        x, frame["one_year_rate"], color=COLORS["one_year_rate"], s=40, zorder=5,
        label=f"One-Year Bond Yield: {model.one_year_rate:.2f}%",
    )
    ax_rates.scatter(
        x, frame["forward_rate"], color=COLORS["forward_rate"], s=40, zorder=5,
        label=f"Implied Forward Rate: {model.forward_rate:.2f}%",
    )
    # Rate markers sit above the bars of the twin axis.
    ax_rates.set_zorder(ax_flows.get_zorder() + 1)
    ax_rates.patch.set_visible(False)
    ax_rates.set_ylim(0, rate_axis_limit(model))
    ax_rates.set_ylabel("Rates (%)", color=COLORS["forward_rate"])
    ax_rates.tick_params(axis="y", colors=COLORS["forward_rate"])
    ax_rates.yaxis.set_major_formatter(FuncFormatter(lambda v, _: f"{v:.1f}%"))

    ax_rates.set_xticks(x)
    ax_rates.set_xticklabels(frame["period_label"])
    ax_rates.set_xlabel("Years")
    ax_rates.grid(True, linestyle="--", linewidth=0.5, alpha=0.5)

    handles, labels = [], []
    for ax in (ax_flows, ax_rates):
        h, lab = ax.get_legend_handles_labels()
        handles.extend(h)
        labels.extend(lab)
    ax_rates.legend(handles, labels, loc="upper left", fontsize=8, framealpha=0.9)

    if title:
        ax_rates.set_title(title, fontsize=11)
    fig.tight_layout()
    return fig


def plot_fx_rate_path(
    model: FXForwardModel,
    figsize: Tuple[int, int] = (10, 5),
    title: Optional[str] = "Spot vs Implied Forward Exchange Rate",
) -> plt.Figure:
    frame = rate_path_frame(model)
    x = frame["period"].to_numpy(dtype=float)

    fig, ax_fx = plt.subplots(figsize=figsize)
    ax_rates = ax_fx.twinx()

    ax_fx.plot(
        x, frame["exchange_rate"], color=COLORS["exchange_rate"], linewidth=2,
        marker="o", label="Exchange Rate",
    )
    for xi, rate in zip(x, frame["exchange_rate"]):
        ax_fx.annotate(f"{rate:.4f}", xy=(xi, rate), xytext=(0, 8),
                       textcoords="offset points", ha="center", fontsize=9)
    ax_fx.set_ylabel("Exchange Rate (foreign per domestic)")

    ax_rates.plot(
        x, frame["domestic_rate"], color=COLORS["domestic_rate"], linestyle="--",
        label=f"Domestic Rate: {model.domestic_rate:.3f}%",
    )
    ax_rates.plot(
        x, frame["foreign_rate"], color=COLORS["foreign_rate"], linestyle="--",
        label=f"Foreign Rate: {model.foreign_rate:.3f}%",
    )
    ax_rates.set_ylabel("Rates (%)")

    ax_fx.set_xticks(x)
    ax_fx.set_xticklabels(frame["period_label"])
    ax_fx.set_xlabel("Period")
    ax_fx.grid(True, linestyle="--", linewidth=0.5, alpha=0.5)

    handles, labels = [], []
    for ax in (ax_fx, ax_rates):
        h, lab = ax.get_legend_handles_labels()
        handles.extend(h)
        labels.extend(lab)
    ax_fx.legend(handles, labels, loc="best", fontsize=8, framealpha=0.9)

    if title:
        ax_fx.set_title(title, fontsize=11)
    fig.tight_layout()
    return fig
