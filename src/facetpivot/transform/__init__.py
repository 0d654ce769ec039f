"""
Transform module.

Reshapes raw query results into chart-ready structures.

Key components:
- pivot, pivot_percentage, pivot_cumulative: the facet pivot transformer
- rank, rank_rows: single-facet ranking for one-metric bar charts
- Column-key extraction and ordering policies
- pandas interop for pivot output
"""

from .pivot import (
    PivotRow,
    PivotResult,
    ZeroTotalPolicy,
    pivot,
    pivot_percentage,
    pivot_cumulative,
)
from .ranking import RankedEntry, RankedSeries, rank, rank_rows, ranking_entries
from .columns import (
    MONTH_NAMES,
    extract_column_keys,
    invert_color,
    month_year_key,
    natural_key,
    series_colors,
    sort_keys_lexicographic,
    sort_keys_month_year,
    sort_rows,
)
from .frame import from_frame, to_frame, to_series

__all__ = [
    "PivotRow",
    "PivotResult",
    "ZeroTotalPolicy",
    "pivot",
    "pivot_percentage",
    "pivot_cumulative",
    "RankedEntry",
    "RankedSeries",
    "rank",
    "rank_rows",
    "ranking_entries",
    "MONTH_NAMES",
    "extract_column_keys",
    "invert_color",
    "month_year_key",
    "natural_key",
    "series_colors",
    "sort_keys_lexicographic",
    "sort_keys_month_year",
    "sort_rows",
    "from_frame",
    "to_frame",
    "to_series",
]
