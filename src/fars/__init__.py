"""
FARS - Fatality Analysis Reporting System accident toolkit

Loads yearly FARS accident files (``accident_<year>.csv.bz2``),
summarises accident counts by month and year, and maps accident
locations for a single state.

Structure:
- data/     : Imperative Shell (file I/O)
- analysis/ : Functional Core (pure transformations)
- plotting/ : (plotting functions)
- reports/  : orchestration of the above
"""

from .data.reader import make_filename, fars_read, fars_read_years
from .reports.generators import fars_summarize_years, fars_map_state

__version__ = "0.1.0"

__all__ = [
    'make_filename',
    'fars_read',
    'fars_read_years',
    'fars_summarize_years',
    'fars_map_state',
]
