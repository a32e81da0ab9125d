"""
FARS State Accident Map (Functional Core)

Pure function – no file I/O, no side effects.
Input: accident DataFrame already filtered to one state, with coordinate
sentinels masked to NaN.
Output: plotly.graph_objects.Figure.

Package Location: src/fars/plotting/state_map.py

Base map:
    ``Scattergeo`` on the ``usa`` scope with state boundaries drawn as
    subunits.  Puerto Rico and the Virgin Islands fall outside the
    Albers USA projection and use the ``north america`` scope instead.
    The view is fitted to the plotted points so a single state fills the
    frame.  Rows with a missing LONGITUD or LATITUDE are not
    plotted.
"""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from ..analysis.coordinates import plottable_points
from ..analysis.states import state_name

# ---------------------------------------------------------------------------
# Style
# ---------------------------------------------------------------------------

_MARKER = {'color': 'firebrick', 'size': 4, 'opacity': 0.7}
_LAND_COLOR = 'rgb(240, 240, 240)'
_BORDER_COLOR = 'rgb(120, 120, 120)'

# Territories outside the Albers USA projection (Puerto Rico, Virgin Islands)
_OUTSIDE_USA_SCOPE = frozenset({43, 52})


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plot_state_accidents(
    df_state: pd.DataFrame,
    state_num: int,
    year: int,
) -> go.Figure:
    """
    Build a scatter map of accident locations over state boundaries.

    Args:
        df_state: Accident rows for one state with columns ``LONGITUD``
            and ``LATITUDE`` (NaN for unknown positions).
        state_num: FARS state code, used for the title.
        year: Data year, used for the title.

    Returns:
        ``plotly.graph_objects.Figure`` ready for ``fig.show()`` or
        ``fig.write_html()``.

    Raises:
        ValueError: If *df_state* lacks the coordinate columns.
    """
    points = plottable_points(df_state)
    title = f"{state_name(state_num)} fatal accidents, {int(year)} (n={len(points)})"

    fig = go.Figure(
        go.Scattergeo(
            lon=points['LONGITUD'],
            lat=points['LATITUDE'],
            mode='markers',
            marker=_MARKER,
            name='Accident',
            hovertemplate='Lon %{lon:.4f}<br>Lat %{lat:.4f}<extra></extra>',
        )
    )

    fig.update_geos(
        scope=_geo_scope(state_num),
        showcountries=True,
        showsubunits=True,
        subunitcolor=_BORDER_COLOR,
        showland=True,
        landcolor=_LAND_COLOR,
        fitbounds='locations' if not points.empty else False,
    )
    fig.update_layout(
        title=title,
        margin={'l': 10, 'r': 10, 't': 50, 'b': 10},
        showlegend=False,
    )
    return fig


def _geo_scope(state_num: int) -> str:
    """Return the plotly geo scope that can draw *state_num*."""
    return 'north america' if int(state_num) in _OUTSIDE_USA_SCOPE else 'usa'
