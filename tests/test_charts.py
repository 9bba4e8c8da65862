import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

sys.path.append(str(Path(__file__).resolve().parent.parent))

from charts import format_cash_flow_label, plot_cash_flows, plot_fx_rate_path, rate_axis_limit
from forward_rates import compute_forward_rates
from fx_forward import compute_forward_exchange_rate


def test_label_format():
    assert format_cash_flow_label(116.64) == "$116.64"
    assert format_cash_flow_label(-100.0) == "-$100.00"
    assert format_cash_flow_label(0.0) is None
    assert format_cash_flow_label(0.004) is None
    assert format_cash_flow_label(None) is None
    assert format_cash_flow_label(float("nan")) is None


def test_rate_axis_has_floor():
    assert rate_axis_limit(compute_forward_rates(6.30, 8.00)) == 15.0
    steep = compute_forward_rates(20.0, 30.0)
    assert abs(rate_axis_limit(steep) - steep.forward_rate * 1.2) < 1e-12


def test_cash_flow_chart_labels_every_non_zero_flow():
    model = compute_forward_rates(6.30, 8.00)
    fig = plot_cash_flows(model)
    try:
        ax_rates, ax_flows = fig.axes
        labels = sorted(t.get_text() for t in ax_flows.texts)
        assert labels == sorted(
            ["-$100.00", "-$100.00", "$106.30", "-$106.30", "$116.64", "$116.64"]
        )
        assert ax_rates.get_ylim() == (0.0, 15.0)
        assert ax_rates.get_xlabel() == "Years"
        assert ax_flows.get_ylabel() == "Cash Flows ($)"
    finally:
        plt.close(fig)


def test_fx_chart_shows_spot_and_forward():
    model = compute_forward_exchange_rate(1.2602, 2.360, 2.430)
    fig = plot_fx_rate_path(model)
    try:
        ax_fx = fig.axes[0]
        texts = [t.get_text() for t in ax_fx.texts]
        assert texts == ["1.2602", f"{model.forward_rate:.4f}"]
        assert [t.get_text() for t in ax_fx.get_xticklabels()] == ["Spot", "Forward"]
    finally:
        plt.close(fig)
