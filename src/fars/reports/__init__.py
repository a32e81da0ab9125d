"""
FARS Reports Package (Imperative Shell)

Orchestrates data loading, summaries, map generation, and file output.
No analysis logic lives here — this package calls the functional core
(src/fars/analysis/) and plotting (src/fars/plotting/) via the data
reader (src/fars/data/reader.py).

Modules:
    generators: fars_summarize_years(), fars_map_state(), and the
                ReportGenerator class that writes CSV / HTML output.
"""

from .generators import (
    fars_summarize_years,
    fars_map_state,
    ReportGenerator,
)

__all__ = [
    'fars_summarize_years',
    'fars_map_state',
    'ReportGenerator',
]
