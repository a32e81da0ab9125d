"""
FARS Coordinate and State Helpers (Functional Core)

Pure functions only. No I/O, no side effects.
Input/output is DataFrames; inputs are never modified in place.

Package Location: src/fars/analysis/coordinates.py

Sentinel Rule:
    FARS encodes an unknown position with out-of-range codes
    (e.g. LONGITUD 999.9999, LATITUDE 99.9999).  Any LONGITUD > 900 or
    LATITUDE > 90 is replaced with NaN by ``mask_coordinate_sentinels``.
"""

from __future__ import annotations

from typing import List, Set

import numpy as np
import pandas as pd

from .states import STATE_CODES

# ---------------------------------------------------------------------------
# Sentinel thresholds
# ---------------------------------------------------------------------------

_LON_COL: str = 'LONGITUD'
_LAT_COL: str = 'LATITUDE'
_STATE_COL: str = 'STATE'

_LON_SENTINEL: float = 900.0
_LAT_SENTINEL: float = 90.0


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def mask_coordinate_sentinels(df: pd.DataFrame) -> pd.DataFrame:
    """
    Replace sentinel coordinates with NaN.

    Args:
        df: Accident DataFrame.  ``LONGITUD`` and ``LATITUDE`` are optional;
            a frame lacking either column is returned as an untouched copy
            for that column.

    Returns:
        Copy of *df* where ``LONGITUD > 900`` and ``LATITUDE > 90`` are NaN.
    """
    out = df.copy()
    if _LON_COL in out.columns:
        lon = pd.to_numeric(out[_LON_COL], errors='coerce')
        out[_LON_COL] = lon.where(lon <= _LON_SENTINEL, np.nan)
    if _LAT_COL in out.columns:
        lat = pd.to_numeric(out[_LAT_COL], errors='coerce')
        out[_LAT_COL] = lat.where(lat <= _LAT_SENTINEL, np.nan)
    return out


def known_states(df: pd.DataFrame) -> Set[int]:
    """Return FARS state codes plus any state code present in *df*."""
    _validate_columns(df, required=[_STATE_COL])
    observed = pd.to_numeric(df[_STATE_COL], errors='coerce').dropna()
    return set(STATE_CODES) | set(observed.astype(int).tolist())


def validate_state(df: pd.DataFrame, state_num: int) -> int:
    """
    Check that *state_num* is a known state for *df*.

    Returns:
        *state_num* coerced to ``int``.

    Raises:
        ValueError: ``'invalid STATE number: <n>'`` when the code is
            neither a FARS state code nor present in ``df['STATE']``.
    """
    state_num = int(state_num)
    if state_num not in known_states(df):
        raise ValueError(f"invalid STATE number: {state_num}")
    return state_num


def filter_state(df: pd.DataFrame, state_num: int) -> pd.DataFrame:
    """Return the rows of *df* whose ``STATE`` equals *state_num*."""
    _validate_columns(df, required=[_STATE_COL])
    state = pd.to_numeric(df[_STATE_COL], errors='coerce')
    return df.loc[state == int(state_num)].copy()


def plottable_points(df: pd.DataFrame) -> pd.DataFrame:
    """Return ``[LONGITUD, LATITUDE]`` rows with both coordinates present."""
    _validate_columns(df, required=[_LON_COL, _LAT_COL])
    return df[[_LON_COL, _LAT_COL]].dropna()


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _validate_columns(df: pd.DataFrame, required: List[str]) -> None:
    """Raise ValueError if *df* is missing any of *required*."""
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"DataFrame is missing required columns: {missing}")
