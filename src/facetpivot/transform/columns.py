"""
Column-key extraction and ordering policies.

The union of column keys across pivot rows becomes the set of chart series.
Chart variants choose how those keys (and the rows themselves) are ordered;
every policy here is a pure function over its input.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Callable, Iterable, Optional, Sequence

from facetpivot.model.schema import RawResultRow, facet_shapes

logger = logging.getLogger(__name__)

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def extract_column_keys(rows: Iterable[Any]) -> list[str]:
    """Collect the column keys of pivot rows, first-seen order, deduplicated.

    Args:
        rows: PivotRow-like objects exposing a ``values`` mapping

    Returns:
        Every key that appears in any row, exactly once
    """
    return list(dict.fromkeys(key for row in rows for key in row.values))


def sort_keys_lexicographic(keys: Iterable[str]) -> list[str]:
    return sorted(dict.fromkeys(keys))


def month_year_key(key: str) -> Optional[tuple[int, int]]:
    """Parse a ``"<MonthName> <Year>"`` label into ``(year, month)``.

    Returns None when the label does not have that shape.

    Example:
        >>> month_year_key("March 2024")
        (2024, 3)
    """
    parts = str(key).split()
    if len(parts) != 2 or parts[0] not in MONTH_NAMES:
        return None
    try:
        year = int(parts[1])
    except ValueError:
        return None
    return year, MONTH_NAMES.index(parts[0]) + 1


def sort_keys_month_year(keys: Iterable[str]) -> list[str]:
    """Order calendar-month labels by year, then by month.

    Labels that are not ``"<MonthName> <Year>"`` are placed after the
    calendar labels in the order they were first seen.
    """
    parsed = []
    unparsed = []
    for key in dict.fromkeys(keys):
        sort_key = month_year_key(key)
        if sort_key is None:
            unparsed.append(key)
        else:
            parsed.append((sort_key, key))

    if unparsed:
        logger.warning("Column keys are not month-year labels: %s", unparsed)

    parsed.sort(key=lambda item: item[0])
    return [key for _, key in parsed] + unparsed


def natural_key(name: str) -> tuple[int, float, str]:
    """Sort key placing numeric names first (numerically), then other names."""
    try:
        number = float(name)
    except (TypeError, ValueError):
        return (1, 0.0, str(name))
    if not math.isfinite(number):
        return (1, 0.0, str(name))
    return (0, number, "")


def sort_rows(rows: Sequence[Any], key: Optional[Callable[[str], Any]] = None) -> list[Any]:
    """Return pivot rows ordered by name.

    Args:
        rows: PivotRow-like objects exposing ``name``
        key: Sort key applied to each name; plain string order when None
    """
    if key is None:
        return sorted(rows, key=lambda row: row.name)
    return sorted(rows, key=lambda row: key(row.name))


def series_colors(rows: Sequence[RawResultRow], invert: bool = False) -> dict[str, str]:
    """Map each column key to the color the engine suggested for it.

    When several rows carry the same column key the last color wins. Rows
    without a color are ignored.
    """
    colors: dict[str, str] = {}
    for shape in facet_shapes(rows):
        if shape.color:
            colors[shape.column_key] = invert_color(shape.color) if invert else shape.color
    return colors


def invert_color(hex_color: str) -> str:
    """Return the RGB complement of a ``#rrggbb`` color.

    Raises:
        ValueError: If the color is not in ``#rrggbb`` form
    """
    if len(hex_color) != 7 or not hex_color.startswith("#"):
        raise ValueError(f"Expected a '#rrggbb' color, got {hex_color!r}")
    r, g, b = (int(hex_color[i:i + 2], 16) for i in (1, 3, 5))
    return "#{:02x}{:02x}{:02x}".format(255 - r, 255 - g, 255 - b)
