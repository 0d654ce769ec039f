"""
Demo script showing the facet pivot transforms and chart widgets.

This script demonstrates:
1. Plain, percentage and cumulative pivots of faceted rows
2. Single-facet ranking
3. Widget rendering for loaded, missing-config and error states
"""

import facetpivot as fp
from facetpivot.transform import month_year_key
from facetpivot.utils import to_json
from facetpivot.widgets import QueryState, StackedPercentBarChart


def row(name, column, y):
    return {
        "groups": [{"displayName": "GB Ingested"}, {"value": name}, {"value": column}],
        "series": [{"y": y}],
    }


rows = [
    row("January 2024", "Logs", 40),
    row("January 2024", "Apm", 60),
    row("February 2024", "Logs", 10),
    row("March 2024", "Apm", 25),
    row("March 2024", "Logs", 75),
]

# Example 1: Plain pivot
print("=" * 60)
print("Example 1: Plain pivot")
print("=" * 60)
print(fp.to_frame(fp.pivot(rows)))

# Example 2: Percentage pivot
print("\n" + "=" * 60)
print("Example 2: Percentage pivot")
print("=" * 60)
print(fp.to_frame(fp.pivot_percentage(rows), fill_value=0))

# Example 3: Cumulative pivot in calendar order
print("\n" + "=" * 60)
print("Example 3: Cumulative pivot")
print("=" * 60)
print(fp.to_frame(fp.pivot_cumulative(rows, sort_key=month_year_key)))

# Example 4: Ranking
print("\n" + "=" * 60)
print("Example 4: Ranking")
print("=" * 60)
print(fp.rank([("checkout", 120), ("search", 300), ("login", 45)], reverse=True))

# Example 5: Widget states
print("\n" + "=" * 60)
print("Example 5: Widget states")
print("=" * 60)
widget = StackedPercentBarChart(fp.Settings())
queries = [{"accountId": 1, "query": "SELECT sum(GigabytesIngested) FROM NrConsumption FACET monthOf(timestamp), usageMetric"}]
print(to_json(widget.render(queries, QueryState(data=rows)), indent=2))
print(to_json(widget.render([], QueryState()), indent=2))
print(to_json(widget.render(queries, QueryState(error="timeout")), indent=2))
