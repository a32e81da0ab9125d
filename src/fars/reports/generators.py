"""
FARS Report Generator (Imperative Shell)

Thin orchestration layer: calls reader.py to load DataFrames, calls the
functional core to summarise / filter, calls plotting functions to build
figures, and optionally writes CSV / HTML output.

No parsing or aggregation logic lives here.

Package Location: src/fars/reports/generators.py

Usage::

    from pathlib import Path
    from fars.reports.generators import ReportGenerator

    gen = ReportGenerator(
        data_dir=Path("data/fars"),
        output_dir=Path("reports"),
    )
    gen.write_summary([2013, 2014, 2015])
    gen.write_state_map(1, 2013)
    # Writes:
    #   reports/summary_2013-2015.csv
    #   reports/state_01_2013.html
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

import pandas as pd
import plotly.graph_objects as go

from ..data import reader
from ..analysis.summary import monthly_counts
from ..analysis.coordinates import validate_state, filter_state
from ..plotting.state_map import plot_state_accidents

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def fars_summarize_years(
    years: Iterable,
    data_dir: Optional[PathLike] = None,
) -> pd.DataFrame:
    """
    Count accidents per month for each requested year.

    Years that fail to load are dropped after the warning emitted by
    ``fars_read_years``; they do not appear as columns.

    Args:
        years: Iterable of year values.
        data_dir: Directory holding the FARS files (default: cwd).

    Returns:
        DataFrame indexed by ``MONTH`` with one column per loaded year.
        Empty DataFrame when no year could be loaded.
    """
    return monthly_counts(reader.fars_read_years(years, data_dir=data_dir))


def fars_map_state(
    state_num,
    year,
    data_dir: Optional[PathLike] = None,
    show: bool = True,
) -> Optional[go.Figure]:
    """
    Map the accidents of one state for one year.

    Args:
        state_num: FARS state code (anything ``int()`` accepts).
        year: Data year.
        data_dir: Directory holding the FARS files (default: cwd).
        show: Call ``fig.show()`` before returning.

    Returns:
        The figure, or ``None`` when the state has no accidents that year.

    Raises:
        FileNotFoundError: If the year's file does not exist.
        ValueError: If *state_num* is not a known state.
    """
    df = reader.read_year(year, data_dir=data_dir)
    state_num = validate_state(df, state_num)

    df_state = filter_state(df, state_num)
    if df_state.empty:
        log.info(
            "no accidents to plot",
            extra={"state": state_num, "year": int(year)},
        )
        return None

    fig = plot_state_accidents(df_state, state_num=state_num, year=year)
    if show:
        fig.show()
    return fig


class ReportGenerator:
    """
    Writes the month/year summary and state maps to disk.

    Args:
        data_dir: Directory holding the ``accident_<year>.csv.bz2`` files.
        output_dir: Directory for report output (created on demand).
    """

    def __init__(self, data_dir: PathLike, output_dir: PathLike) -> None:
        self.data_dir = Path(data_dir)
        self.output_dir = Path(output_dir)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def write_summary(self, years: Iterable) -> Path:
        """
        Write ``summary_<first>-<last>.csv`` for *years*.

        An empty summary (no year loaded) is still written.

        Returns:
            Path of the CSV file.
        """
        years = list(years)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        summary = fars_summarize_years(years, data_dir=self.data_dir)
        out_path = self.output_dir / f"summary_{_year_span(years)}.csv"
        summary.to_csv(out_path)
        log.info(f"Summary saved → {out_path}", extra={"path": str(out_path)})
        return out_path

    def write_state_map(self, state_num, year) -> Optional[Path]:
        """
        Write ``state_<nn>_<year>.html`` for one state and year.

        Returns:
            Path of the HTML file, or ``None`` when nothing was plotted.

        Raises:
            FileNotFoundError: If the year's file does not exist.
            ValueError: If *state_num* is not a known state.
        """
        fig = fars_map_state(state_num, year, data_dir=self.data_dir, show=False)
        if fig is None:
            return None

        self.output_dir.mkdir(parents=True, exist_ok=True)
        out_path = self.output_dir / f"state_{int(state_num):02d}_{int(year)}.html"
        fig.write_html(str(out_path))
        log.info(f"State map saved → {out_path}", extra={"path": str(out_path)})
        return out_path

    def generate(self, years: Iterable, states: Iterable) -> List[Path]:
        """
        Write the summary plus one map per (state, year).

        Errors in individual maps are logged so that one bad state or
        missing year does not prevent the other outputs from being saved.

        Returns:
            Paths of every file written.
        """
        years = list(years)
        written = [self.write_summary(years)]

        for state_num in states:
            for year in years:
                try:
                    path = self.write_state_map(state_num, year)
                except (FileNotFoundError, ValueError) as exc:
                    log.error(
                        f"State map FAILED for state {state_num}, {year}: {exc}",
                        extra={"state": str(state_num), "year": str(year)},
                    )
                    continue
                if path is not None:
                    written.append(path)

        return written


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _year_span(years: List) -> str:
    """Return ``'<min>-<max>'`` (or one year) for the numeric entries of *years*."""
    numeric = set()
    for y in years:
        try:
            numeric.add(int(float(y)))
        except (TypeError, ValueError):
            continue
    numeric = sorted(numeric)
    if not numeric:
        return 'none'
    if numeric[0] == numeric[-1]:
        return str(numeric[0])
    return f"{numeric[0]}-{numeric[-1]}"
