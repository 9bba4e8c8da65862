from __future__ import annotations

import os
from typing import Dict, Mapping, Optional

NOTIONAL = 100.0

RATE_CEILING_PCT = 50.0
SPOT_CEILING = 10.0
RATE_FLOOR_PCT = -100.0

NO_ARBITRAGE_TOLERANCE = 0.001
FX_NO_ARBITRAGE_TOLERANCE = 0.01

# Rate axis never shrinks below this, so small forwards keep a readable scale.
RATE_AXIS_FLOOR_PCT = 15.0

DEFAULTS = {
    "FWD_ONE_YEAR_RATE": 6.30,
    "FWD_TWO_YEAR_RATE": 8.00,
    "FWD_SPOT_RATE": 1.2602,
    "FWD_DOMESTIC_RATE": 2.360,
    "FWD_FOREIGN_RATE": 2.430,
}


def _parse_float(key: str, raw: str) -> float:
    try:
        return float(raw.strip())
    except ValueError:
        raise ValueError(f"Setting {key} must be a number, got '{raw}'") from None


def secret_overrides() -> Dict[str, str]:
    """Defaults configured in Streamlit secrets; empty when no secrets file exists."""
    import streamlit as st
    from streamlit.errors import StreamlitSecretNotFoundError

    found: Dict[str, str] = {}
    try:
        for key in DEFAULTS:
            if key in st.secrets:
                found[key] = str(st.secrets[key])
    except StreamlitSecretNotFoundError:
        return {}
    return found


def default_value(key: str, overrides: Optional[Mapping[str, str]] = None) -> float:
    """Resolve a default input: explicit overrides, then environment, then built-in."""
    if key not in DEFAULTS:
        raise KeyError(f"Unknown setting: {key}")
    if overrides is not None and key in overrides:
        return _parse_float(key, str(overrides[key]))
    raw = os.getenv(key)
    if raw is not None and raw.strip():
        return _parse_float(key, raw)
    return DEFAULTS[key]
