"""
facetpivot - Facet pivot transforms for dashboard chart widgets.

This package reshapes faceted query results, delivered as flat
``(row facet, column facet, value)`` records, into chart-ready structures.

Usage:
    >>> import facetpivot as fp
    >>> rows = [
    ...     {"groups": [{"displayName": "GB"}, {"value": "Jan"}, {"value": "US"}], "series": [{"y": 10}]},
    ...     {"groups": [{"displayName": "GB"}, {"value": "Jan"}, {"value": "EU"}], "series": [{"y": 30}]},
    ... ]
    >>> fp.pivot_percentage(rows).rows[0].to_dict()
    {'name': 'Jan', 'US': 25.0, 'EU': 75.0}

Key components:
- RawResultRow / FacetShape: validated boundary schema for raw records
- pivot, pivot_percentage, pivot_cumulative: the facet pivot transformer
- rank, rank_rows: single-facet ranking
- Widgets: chart variants that pick a transform and display options
"""

from .model import FacetDescriptor, FacetShape, RawResultRow, axis_label
from .transform import (
    PivotResult,
    PivotRow,
    RankedEntry,
    RankedSeries,
    ZeroTotalPolicy,
    extract_column_keys,
    from_frame,
    month_year_key,
    pivot,
    pivot_cumulative,
    pivot_percentage,
    rank,
    rank_rows,
    sort_keys_lexicographic,
    sort_keys_month_year,
    to_frame,
    to_series,
)
from .config import Settings, configure_logging
from .exceptions import *

# Version
__version__ = "0.1.0"

__all__ = [
    'FacetDescriptor',
    'FacetShape',
    'RawResultRow',
    'axis_label',
    'PivotResult',
    'PivotRow',
    'RankedEntry',
    'RankedSeries',
    'ZeroTotalPolicy',
    'extract_column_keys',
    'from_frame',
    'month_year_key',
    'pivot',
    'pivot_cumulative',
    'pivot_percentage',
    'rank',
    'rank_rows',
    'sort_keys_lexicographic',
    'sort_keys_month_year',
    'to_frame',
    'to_series',
    'Settings',
    'configure_logging',
    'FacetPivotError',
    'MalformedFacetShapeError',
    'MissingConfigurationError',
    'UpstreamQueryError',
    'DegenerateNormalizationError',
]
