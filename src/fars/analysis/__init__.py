"""
FARS Analysis Package (Functional Core)

Pure transformations over accident DataFrames.  No file I/O.

Modules:
- summary:     Month/year count pivot
- coordinates: Sentinel masking, state filtering and validation
- states:      FARS state code table
"""

from .summary import monthly_counts
from .coordinates import (
    mask_coordinate_sentinels,
    known_states,
    validate_state,
    filter_state,
    plottable_points,
)
from .states import STATE_CODES, state_name

__all__ = [
    'monthly_counts',
    'mask_coordinate_sentinels',
    'known_states',
    'validate_state',
    'filter_state',
    'plottable_points',
    'STATE_CODES',
    'state_name',
]
