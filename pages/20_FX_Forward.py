from __future__ import annotations

import matplotlib.pyplot as plt
import streamlit as st

from charts import plot_fx_rate_path
from fx_forward import compute_forward_exchange_rate_from, rate_path_frame
from market_inputs import FXInputs, default_fx_inputs
from settings import RATE_CEILING_PCT, SPOT_CEILING, secret_overrides
from validation import blocking_errors, validate


st.title("Implied Forward Exchange Rate")
st.caption("Covered interest rate parity with continuously compounded rates over one period.")


@st.cache_data
def _starting_inputs() -> FXInputs:
    return default_fx_inputs(secret_overrides())


defaults = _starting_inputs()

c1, c2, c3 = st.columns(3)
with c1:
    spot_rate = st.number_input(
        f"Spot Rate (foreign per domestic, max {SPOT_CEILING:g})",
        value=float(defaults.spot_rate),
        step=0.0001,
        format="%.4f",
    )
with c2:
    domestic_rate = st.number_input(
        f"Domestic Rate (%)  (> -100, ≤ {RATE_CEILING_PCT:g})",
        value=float(defaults.domestic_rate),
        step=0.001,
        format="%.3f",
    )
with c3:
    foreign_rate = st.number_input(
        f"Foreign Rate (%)  (> -100, ≤ {RATE_CEILING_PCT:g})",
        value=float(defaults.foreign_rate),
        step=0.001,
        format="%.3f",
    )

inputs = FXInputs(spot_rate=spot_rate, domestic_rate=domestic_rate, foreign_rate=foreign_rate)
errors = blocking_errors(validate(inputs))
if errors:
    st.error("Please correct the following:\n\n" + "\n".join(f"- {msg}" for msg in errors.values()))
    st.stop()

model = compute_forward_exchange_rate_from(inputs)
if not model.is_valid:
    st.warning("These inputs fall outside the range where parity is meaningful; results are hidden.")
    st.stop()

st.markdown("### Result")
k1, k2, k3 = st.columns(3)
k1.metric("Implied Forward Rate", f"{model.forward_rate:.4f}", f"{model.forward_premium:+.3f}% vs spot")
k2.metric("Invest Domestically", f"{model.domestic_ending_value:,.4f}")
k3.metric("Invest Abroad (converted back)", f"{model.domestic_equivalent:,.4f}")
st.latex(r"F = S \cdot e^{(r_{foreign} - r_{domestic})}")

if model.no_arbitrage:
    st.success(f"No-arbitrage condition satisfied (difference {model.arbitrage_diff:.6f})")
else:
    st.error(f"Strategies diverge by {model.arbitrage_diff:.4f}")

st.markdown("### Strategies")
s1, s2 = st.columns(2)
with s1:
    st.markdown("**Domestic Investment**")
    st.write(f"{model.notional:.2f} @ {model.domestic_rate:.3f}% → {model.domestic_ending_value:.4f}")
with s2:
    st.markdown("**Foreign Investment, Hedged**")
    st.write(
        f"{model.notional:.2f} × {model.spot_rate:.4f} = {model.foreign_starting_value:.4f} foreign  \n"
        f"@ {model.foreign_rate:.3f}% → {model.foreign_ending_value:.4f} foreign  \n"
        f"÷ {model.forward_rate:.4f} = {model.domestic_equivalent:.4f} domestic"
    )

chart_col, table_col = st.columns([3, 2])
with chart_col:
    fig = plot_fx_rate_path(model)
    st.pyplot(fig)
    plt.close(fig)
with table_col:
    st.dataframe(
        rate_path_frame(model).style.format(
            {"exchange_rate": "{:.4f}", "domestic_rate": "{:.3f}%", "foreign_rate": "{:.3f}%"}
        ),
        width="stretch",
        hide_index=True,
    )
