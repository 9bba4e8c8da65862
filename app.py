import matplotlib.pyplot as plt
import streamlit as st

from cash_flows import cash_flow_frame
from charts import plot_cash_flows
from forward_rates import (
    compute_forward_rates_from,
    describe_cash_flow_additivity,
    forward_rate_summary,
)
from market_inputs import RateInputs, default_rate_inputs
from settings import RATE_CEILING_PCT, secret_overrides
from validation import YIELD_CURVE_KEY, blocking_errors, validate

st.set_page_config(layout="wide", page_title="Implied Forward Interest Rates")

# --- UI Elements ---
st.title("Implied Forward Interest Rates")
st.caption("CFA Level 1 • Quantitative Methods • Learning Module 2")
st.markdown("""
Enter the one-year and two-year bond yields. The calculator derives the implied one-year rate
one year forward and shows that rolling two one-year investments earns exactly the same as a
single two-year investment.
""")
st.info(
    "Assumes annually compounded spot rates (in %) on zero-coupon bonds. "
    "No day-count conventions or bond pricing are applied."
)


@st.cache_data
def _starting_inputs() -> RateInputs:
    return default_rate_inputs(secret_overrides())


defaults = _starting_inputs()

# --- Inputs ---
col_one, col_two = st.columns(2)
with col_one:
    one_year_rate = st.number_input(
        f"One-Year Bond Yield (%)  (0 - {RATE_CEILING_PCT:g})",
        min_value=0.0,
        max_value=RATE_CEILING_PCT,
        value=float(defaults.one_year_rate),
        step=0.01,
        format="%.2f",
    )
with col_two:
    two_year_rate = st.number_input(
        f"Two-Year Bond Yield (%)  (0 - {RATE_CEILING_PCT:g})",
        min_value=0.0,
        max_value=RATE_CEILING_PCT,
        value=float(defaults.two_year_rate),
        step=0.01,
        format="%.2f",
    )

inputs = RateInputs(one_year_rate=one_year_rate, two_year_rate=two_year_rate)
result = validate(inputs)
errors = blocking_errors(result)

if errors:
    st.error("Please correct the following:\n\n" + "\n".join(f"- {msg}" for msg in errors.values()))
    st.stop()

if YIELD_CURVE_KEY in result:
    st.warning(result[YIELD_CURVE_KEY])

model = compute_forward_rates_from(inputs)
if not model.is_valid:
    st.warning("These rates fall outside the range the model treats as meaningful; results are hidden.")
    st.stop()

# --- Results ---
st.subheader("One-Year Forward Rate (f₁,₁)")
metric_col, formula_col = st.columns([1, 2])
with metric_col:
    st.metric("Implied Forward Rate", f"{model.forward_rate:.2f}%")
with formula_col:
    st.markdown("The one-year rate starting in year 1.")
    st.latex(r"f_{1,1} = \frac{(1 + r_2)^2}{1 + r_1} - 1")
    if model.no_arbitrage:
        st.success(f"No-arbitrage condition satisfied (both strategies yield ${model.strategy1_final:.2f})")
    else:
        st.error(f"Strategies diverge by ${model.arbitrage_diff:.4f}")

strat_col1, strat_col2 = st.columns(2)
with strat_col1:
    st.markdown("**Subsequent One-Year Investments**")
    st.write(
        f"Year 1: ${model.notional:.0f} → ${model.strategy1_year1_value:.2f}  \n"
        f"Year 2: ${model.strategy1_year1_value:.2f} → ${model.strategy1_final:.2f}"
    )
with strat_col2:
    st.markdown("**Two-Year Investment**")
    st.write(
        f"${model.notional:.0f} → ${model.strategy2_final:.2f}  \n"
        f"@ {model.two_year_rate}% annually"
    )

chart_col, table_col = st.columns([3, 2])
with chart_col:
    fig = plot_cash_flows(model)
    st.pyplot(fig)
    plt.close(fig)

with table_col:
    st.markdown("**Cash Flows by Period**")
    flows = cash_flow_frame(model.cash_flow_data).drop(columns=["period_label"])
    st.dataframe(flows.set_index("period"), width="stretch")

    st.markdown("**Summary**")
    st.dataframe(
        forward_rate_summary(model).style.format({"Value": "{:,.4f}"}),
        width="stretch",
        hide_index=True,
    )

st.markdown(f"**Cash Flow Additivity Principle:** {describe_cash_flow_additivity(model)}")

st.info("This is an educational tool. For financial decisions, always consult with a qualified professional.")
