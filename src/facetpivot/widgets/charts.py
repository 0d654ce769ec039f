"""
Chart widget variants.

Each variant picks a transform, a column-key order and the display options
handed to the rendering collaborator. The layout dicts are pass-through
options for the charting library; they carry no transform semantics.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Optional

from facetpivot.config import Settings
from facetpivot.model.schema import RawResultRow
from facetpivot.transform.columns import (
    natural_key,
    series_colors,
    sort_keys_lexicographic,
    sort_keys_month_year,
    sort_rows,
)
from facetpivot.transform.frame import to_series
from facetpivot.transform.pivot import PivotResult, pivot, pivot_cumulative, pivot_percentage
from facetpivot.transform.ranking import rank_rows
from facetpivot.widgets.base import ChartSpec, Widget
from facetpivot.widgets.palette import palette_colors


class GroupedBarChart(Widget):
    """Bars of each column key side by side, one group per row name."""

    example_query = (
        "SELECT count(*) FROM Transaction FACET appName, host SINCE 1 DAY AGO"
    )

    def build(self, rows: list[RawResultRow]) -> ChartSpec:
        result = pivot(rows, default_label=self.settings.default_axis_label)
        traces = [
            {**series, "type": "bar", "hoverlabel": {"namelength": -1}}
            for series in to_series(result)
        ]
        return ChartSpec(
            traces=traces,
            layout={"barmode": "group", "yaxis": {"title": result.axis_label}},
        )


class StackedPercentBarChart(Widget):
    """Stacked bars where each row name adds up to 100%."""

    example_query = (
        "SELECT sum(GigabytesIngested) FROM NrConsumption "
        "WHERE usageMetric NOT IN ('MetricsBytes','CustomEventsBytes') "
        "FACET monthOf(timestamp), usageMetric SINCE 3 MONTH AGO LIMIT MAX"
    )

    def build(self, rows: list[RawResultRow]) -> ChartSpec:
        result = pivot_percentage(
            rows,
            zero_total=self.settings.zero_total_policy,
            default_label=self.settings.default_axis_label,
        )
        traces = []
        for series in to_series(result):
            labels = [_percent_label(row.get(series["name"])) for row in result.rows]
            traces.append({**series, "type": "bar", "text": labels, "textposition": "inside"})
        return ChartSpec(
            traces=traces,
            layout={
                "barmode": "stack",
                "yaxis": {
                    "title": f"Percentage of {result.axis_label}",
                    "tickvals": [0, 20, 40, 60, 80, 100],
                    "ticktext": ["0%", "20%", "40%", "60%", "80%", "100%"],
                },
                "legend": {"orientation": "h"},
            },
        )


class CumulativeSumChart(Widget):
    """One line per column key showing its running total across row names."""

    example_query = (
        "SELECT sum(numeric(Value)) AS 'Cumulative Sum' FROM lookup(salesData) "
        "FACET Date, `Product Sold`"
    )

    def __init__(self, settings: Optional[Settings] = None, sort_key=None) -> None:
        super().__init__(settings)
        self.sort_key = sort_key

    def build(self, rows: list[RawResultRow]) -> ChartSpec:
        result = pivot_cumulative(
            rows,
            sort_key=self.sort_key,
            default_label=self.settings.default_axis_label,
        )
        keys = sort_keys_lexicographic(result.column_keys)
        traces = [
            {**series, "type": "scatter", "mode": "lines"}
            for series in to_series(result, keys)
        ]
        return ChartSpec(traces=traces, layout={"yaxis": {"title": result.axis_label}})


class HorizontalBarChart(Widget):
    """One bar per category, longest bar at the top."""

    example_query = (
        "SELECT count(*) FROM Transaction FACET appName SINCE 1 DAY AGO"
    )

    def build(self, rows: list[RawResultRow]) -> ChartSpec:
        ranked = rank_rows(rows, reverse=True)
        trace = {
            "type": "bar",
            "orientation": "h",
            "x": list(ranked.values),
            "y": list(ranked.names),
            "marker": {"color": palette_colors(len(ranked))},
        }
        return ChartSpec(traces=[trace], layout={"yaxis": {"automargin": True}})


class VerticalBarChart(Widget):
    """One bar per category, largest first."""

    example_query = (
        "SELECT count(*) FROM Transaction FACET appName SINCE 1 DAY AGO"
    )

    def build(self, rows: list[RawResultRow]) -> ChartSpec:
        ranked = rank_rows(rows)
        trace = {
            "type": "bar",
            "x": list(ranked.names),
            "y": list(ranked.values),
            "marker": {"color": palette_colors(len(ranked))},
        }
        return ChartSpec(traces=[trace], layout={"xaxis": {"automargin": True}})


class SimpleBarChart(Widget):
    """Grouped bars colored by the query engine.

    By default rows are in plain name order and series keep the order their
    keys were first seen. ``row_order`` and ``key_order`` replace either
    policy; ``recharts`` builds the variant with numeric-first rows,
    calendar-month series and inverted colors.
    """

    example_query = (
        "SELECT average(pageRenderingDuration) FROM PageView "
        "FACET userAgentName, countryCode SINCE 1 MONTH AGO"
    )

    def __init__(
        self,
        settings: Optional[Settings] = None,
        invert_colors: bool = False,
        row_order: Optional[Callable[[str], Any]] = None,
        key_order: Optional[Callable[[list[str]], list[str]]] = None,
    ) -> None:
        super().__init__(settings)
        self.invert_colors = invert_colors
        self.row_order = row_order
        self.key_order = key_order

    @classmethod
    def recharts(cls, settings: Optional[Settings] = None) -> "SimpleBarChart":
        return cls(
            settings,
            invert_colors=True,
            row_order=natural_key,
            key_order=sort_keys_month_year,
        )

    def build(self, rows: list[RawResultRow]) -> ChartSpec:
        result = pivot(rows, default_label=self.settings.default_axis_label)
        ordered = PivotResult(
            rows=sort_rows(result.rows, key=self.row_order),
            axis_label=result.axis_label,
        )
        keys = result.column_keys
        if self.key_order is not None:
            keys = self.key_order(keys)
        colors = series_colors(rows, invert=self.invert_colors)
        traces = []
        for series in to_series(ordered, keys):
            trace: dict[str, Any] = {**series, "type": "bar"}
            if series["name"] in colors:
                trace["marker"] = {"color": colors[series["name"]]}
            traces.append(trace)
        return ChartSpec(traces=traces, layout={"yaxis": {"title": ordered.axis_label}})


def _percent_label(value: Optional[float]) -> str:
    if not value or math.isnan(value):
        return ""
    return f"{value:.2f}%"
