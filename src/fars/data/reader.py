"""
FARS Data Reader (Imperative Shell)

All file access for the package lives here.  Each FARS year is shipped
as a single bz2-compressed CSV named ``accident_<year>.csv.bz2``;
pandas infers the compression from the extension.

Package Location: src/fars/data/reader.py

Two load styles are supported:

1. Verbatim (fars_read / fars_read_years):
   The frame is returned exactly as parsed.  ``fars_read_years`` trims
   each year down to ``[MONTH, year]`` for the month/year summary.

2. Cleaned (read_year):
   Coordinate sentinels (LONGITUD > 900, LATITUDE > 90) are replaced
   with NaN at load time so that downstream plotting never sees them.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

import pandas as pd

from ..analysis.coordinates import mask_coordinate_sentinels

log = logging.getLogger(__name__)

PathLike = Union[str, Path]

_FILENAME_TEMPLATE: str = "accident_{year}.csv.bz2"

# Columns retained per year by fars_read_years
_YEAR_COLUMNS: List[str] = ['MONTH', 'year']


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def make_filename(year) -> str:
    """
    Build the conventional FARS accident filename for *year*.

    The year is coerced with ``int()`` first, so ``2015``, ``"2015"`` and
    ``2015.0`` all produce ``'accident_2015.csv.bz2'``.  The file is not
    required to exist.

    Raises:
        ValueError: If *year* cannot be converted to an integer.
    """
    return _FILENAME_TEMPLATE.format(year=int(year))


def fars_read(filename: PathLike) -> pd.DataFrame:
    """
    Read a FARS accident CSV into a DataFrame.

    Args:
        filename: Path to the (optionally compressed) CSV file.

    Returns:
        The parsed DataFrame with all source columns, unchanged.

    Raises:
        FileNotFoundError: If *filename* does not exist.
    """
    path = Path(filename)
    if not path.is_file():
        raise FileNotFoundError(f"file '{filename}' does not exist")

    df = pd.read_csv(path, low_memory=False)
    log.debug(
        f"Read {len(df)} rows from {path.name}",
        extra={"path": str(path), "rows": len(df)},
    )
    return df


def fars_read_years(
    years: Iterable,
    data_dir: Optional[PathLike] = None,
) -> List[Optional[pd.DataFrame]]:
    """
    Load several years, keeping only the month and the year of each record.

    Each year is loaded independently.  A year that cannot be loaded
    (missing file, non-numeric year, no ``MONTH`` column) is logged as a
    warning and its slot is ``None``; the remaining years are unaffected.

    Args:
        years: Iterable of year values (anything ``int()`` accepts).
        data_dir: Directory holding the ``accident_<year>.csv.bz2`` files.
            Defaults to the current working directory.

    Returns:
        List aligned with *years*.  Each entry is either a DataFrame with
        columns ``[MONTH, year]`` or ``None``.
    """
    if isinstance(years, (str, int)):
        years = [years]

    base = _resolve_data_dir(data_dir)
    results: List[Optional[pd.DataFrame]] = []

    for year in years:
        try:
            df = fars_read(base / make_filename(year))
            df = df.assign(year=int(year))
            results.append(df[_YEAR_COLUMNS])
        except Exception as exc:
            log.warning(
                f"invalid year: {year}",
                extra={"year": str(year), "reason": str(exc)},
            )
            results.append(None)

    return results


def read_year(year, data_dir: Optional[PathLike] = None) -> pd.DataFrame:
    """
    Load one year's dataset with coordinate sentinels converted to NaN.

    Args:
        year: Year value (anything ``int()`` accepts).
        data_dir: Directory holding the FARS files (default: cwd).

    Returns:
        DataFrame with ``LONGITUD``/``LATITUDE`` sentinels masked.

    Raises:
        FileNotFoundError: If the year's file does not exist.
    """
    path = _resolve_data_dir(data_dir) / make_filename(year)
    return mask_coordinate_sentinels(fars_read(path))


# ---------------------------------------------------------------------------
# Private helpers
# ---------------------------------------------------------------------------

def _resolve_data_dir(data_dir: Optional[PathLike]) -> Path:
    """Return *data_dir* as a Path, defaulting to the working directory."""
    if data_dir is None:
        return Path.cwd()
    return Path(data_dir)
