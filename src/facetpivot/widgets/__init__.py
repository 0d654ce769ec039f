"""
Widget module for facetpivot.

Chart widgets turn a query configuration and a data-source snapshot into
either a placeholder panel or a ChartSpec for the rendering collaborator.
"""

from facetpivot.widgets.base import ChartSpec, QueryConfig, QueryState, Widget
from facetpivot.widgets.charts import (
    CumulativeSumChart,
    GroupedBarChart,
    HorizontalBarChart,
    SimpleBarChart,
    StackedPercentBarChart,
    VerticalBarChart,
)
from facetpivot.widgets.palette import PLOTLY_COLORS, palette_colors
from facetpivot.widgets.placeholders import Placeholder, PlaceholderKind

__all__ = [
    "ChartSpec",
    "QueryConfig",
    "QueryState",
    "Widget",
    "CumulativeSumChart",
    "GroupedBarChart",
    "HorizontalBarChart",
    "SimpleBarChart",
    "StackedPercentBarChart",
    "VerticalBarChart",
    "PLOTLY_COLORS",
    "palette_colors",
    "Placeholder",
    "PlaceholderKind",
]
