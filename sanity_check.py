"""
Sanity Check Suite for the Forward Rate Calculator
===================================================
Quick manual run (``python sanity_check.py``) printing PASS / INFO lines for
the textbook scenarios and the no-arbitrage identities.
"""

import sys
import warnings

import numpy as np

# ============================================================
print("=" * 60)
print("TESTING IMPORTS")
print("=" * 60)

try:
    from cash_flows import cash_flow_frame
    from forward_rates import compute_forward_rates
    from fx_forward import compute_forward_exchange_rate, rate_path_frame
    from market_inputs import RateInputs, FXInputs
    from validation import validate, has_blocking_errors, YIELD_CURVE_KEY
    print("[PASS] All imports successful")
except ImportError as e:
    print(f"[FAIL] Import error: {e}")
    sys.exit(1)

# ============================================================
# TEST 1: TEXTBOOK FORWARD RATE
# ============================================================
print("\n" + "=" * 60)
print("TEST 1: IMPLIED FORWARD RATE (6.30% / 8.00%)")
print("=" * 60)

model = compute_forward_rates(6.30, 8.00)
print(f"[INFO] f1,1 = {model.forward_rate:.4f}%")
print(f"[INFO] Roll-over: {model.strategy1_final:.4f} | Buy-and-hold: {model.strategy2_final:.4f}")
print(cash_flow_frame(model.cash_flow_data).to_string(index=False))

assert abs(model.forward_rate - 9.73) < 0.01, f"Forward rate mismatch: {model.forward_rate:.4f}"
assert model.no_arbitrage, "Strategies diverge"
assert model.is_valid, "Textbook inputs flagged invalid"
print("[PASS] Forward rate ~9.73%, strategies agree at ~116.64")

# ============================================================
# TEST 2: NO-ARBITRAGE GRID
# ============================================================
print("\n" + "=" * 60)
print("TEST 2: NO-ARBITRAGE ACROSS THE RATE DOMAIN")
print("=" * 60)

grid = np.linspace(0.1, 49.9, 40)
worst = max(compute_forward_rates(r1, r2).arbitrage_diff for r1 in grid for r2 in grid)
print(f"[INFO] Largest strategy difference on grid: {worst:.2e}")
assert worst < 0.001, "No-arbitrage identity violated"
print("[PASS] No-arbitrage identity holds on 0.1%..49.9%")

# ============================================================
# TEST 3: VALIDATION GATE
# ============================================================
print("\n" + "=" * 60)
print("TEST 3: VALIDATION")
print("=" * 60)

for one, two in [(0.0, 8.0), (50.01, 8.0), (50.0, 8.0), (8.0, 6.0)]:
    result = validate(RateInputs(one, two))
    print(f"[INFO] {one:>6.2f}% / {two:>5.2f}% -> blocking={has_blocking_errors(result)} {result}")
assert has_blocking_errors(validate(RateInputs(0.0, 8.0)))
assert has_blocking_errors(validate(RateInputs(50.01, 8.0)))
assert not has_blocking_errors(validate(RateInputs(50.0, 8.0)))
assert YIELD_CURVE_KEY in validate(RateInputs(8.0, 6.0))
print("[PASS] Bounds and yield-curve advisory behave as expected")

# ============================================================
# TEST 4: COVERED INTEREST PARITY
# ============================================================
print("\n" + "=" * 60)
print("TEST 4: FX FORWARD (1.2602, 2.360%, 2.430%)")
print("=" * 60)

assert validate(FXInputs(1.2602, 2.360, 2.430)) == {}
fx = compute_forward_exchange_rate(1.2602, 2.360, 2.430)
print(rate_path_frame(fx).to_string(index=False))
print(f"[INFO] Domestic: {fx.domestic_ending_value:.4f} | Foreign, hedged: {fx.domestic_equivalent:.4f}")
assert abs(fx.forward_rate - 1.2611) < 1e-4
assert fx.no_arbitrage
print("[PASS] Forward ~1.2611, parity holds within 0.01")

# ============================================================
# TEST 5: INVALID DOMAIN IS FLAGGED, NOT RAISED
# ============================================================
print("\n" + "=" * 60)
print("TEST 5: OUT-OF-DOMAIN INPUTS")
print("=" * 60)

with warnings.catch_warnings():
    warnings.simplefilter("ignore", UserWarning)
    flagged = compute_forward_rates(-5.0, 60.0)
    fx_flagged = compute_forward_exchange_rate(0.0, 2.0, 2.0)
assert not flagged.is_valid and not fx_flagged.is_valid
print("[PASS] Out-of-domain inputs return complete results flagged invalid")

print("\n" + "=" * 60)
print(" ALL CHECKS PASSED")
print("=" * 60)
