import sys
from pathlib import Path

import numpy as np

sys.path.append(str(Path(__file__).resolve().parent.parent))

from cash_flows import FRAME_COLUMNS, cash_flow_frame
from forward_rates import compute_forward_rates


def test_frame_has_one_row_per_period():
    model = compute_forward_rates(6.30, 8.00)
    frame = cash_flow_frame(model.cash_flow_data)
    assert list(frame.columns) == FRAME_COLUMNS
    assert list(frame["period"]) == [0, 1, 2]
    assert list(frame["period_label"]) == ["0", "1", "2"]
    assert list(frame["kind"]) == ["initial", "intermediate", "terminal"]


def test_frame_keeps_sparse_encoding():
    model = compute_forward_rates(6.30, 8.00)
    frame = cash_flow_frame(model.cash_flow_data).set_index("period")

    # maturity and reinvestment only exist at t=1
    assert np.isnan(frame.loc[0, "rolling_maturity"])
    assert np.isnan(frame.loc[2, "rolling_reinvestment"])
    assert abs(frame.loc[1, "rolling_maturity"] - 106.30) < 1e-9

    # the two-year position has no flow at t=1, recorded as zero
    assert frame.loc[1, "two_year_investment"] == 0.0
    assert np.isnan(frame.loc[1, "rolling_investment"])

    assert frame["one_year_rate"].notna().tolist() == [False, True, False]
    assert frame["forward_rate"].notna().tolist() == [False, False, True]
    assert frame["two_year_rate"].notna().all()


def test_empty_sequence_gives_empty_frame():
    frame = cash_flow_frame([])
    assert frame.empty
    assert list(frame.columns) == FRAME_COLUMNS
