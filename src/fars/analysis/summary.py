"""
FARS Month/Year Summary (Functional Core)

Pure functions only. No I/O, no side effects.

Package Location: src/fars/analysis/summary.py

Counts accidents per (year, MONTH) and pivots years into columns:

    MONTH  2013  2014  2015
    1      2230  2168  2368
    2      1952  1893  1968
    ...

Month/year pairs with no records are NaN rather than 0.
"""

from __future__ import annotations

from typing import Iterable, Optional

import pandas as pd


def monthly_counts(frames: Iterable[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """
    Pivot per-year ``[MONTH, year]`` frames into a month-by-year count table.

    ``None`` entries (years that failed to load) are skipped.

    Args:
        frames: Iterable of DataFrames with ``MONTH`` and ``year`` columns,
            or ``None``.

    Returns:
        DataFrame indexed by ``MONTH`` (ascending) with one column per
        year (ascending).  Empty DataFrame when no frame is available.
    """
    available = [df for df in frames if df is not None]
    if not available:
        return pd.DataFrame()

    combined = pd.concat(available, ignore_index=True)
    counts = (
        combined.groupby(['year', 'MONTH'])
        .size()
        .reset_index(name='n')
    )
    return counts.pivot(index='MONTH', columns='year', values='n').sort_index()
