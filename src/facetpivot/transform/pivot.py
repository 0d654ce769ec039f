"""
Facet pivot transformer.

Reshapes flat ``(row facet, column facet, value)`` records into a wide table
keyed by the row facet, with one column per column-facet value. Three
variants share the same core:

- pivot: rows in first-seen order, absent combinations stay absent
- pivot_percentage: each row rescaled to sum to 100
- pivot_cumulative: rows ordered by name, columns accumulated down the rows

Every call recomputes its output from scratch and never mutates its input.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Iterable, Iterator, Mapping, Optional

from facetpivot.config import DEFAULT_AXIS_LABEL
from facetpivot.exceptions import DegenerateNormalizationError
from facetpivot.model.schema import RawResultRow, axis_label, coerce_rows, facet_shapes
from facetpivot.transform.columns import extract_column_keys, sort_rows

logger = logging.getLogger(__name__)

RawRows = Iterable[RawResultRow | Mapping[str, Any]]

NAME_FIELD = "name"

# A row total this small relative to the row's magnitude is float noise.
ZERO_TOTAL_TOLERANCE = 1e-9


class ZeroTotalPolicy(str, Enum):
    """What a percentage pivot does with a row whose values sum to zero."""

    ZERO = "zero"
    NAN = "nan"
    SKIP = "skip"
    RAISE = "raise"


@dataclass
class PivotRow:
    """One output row: the row-facet value plus its column values.

    A key missing from ``values`` means "no data" for that combination; it is
    not the same as a stored zero.
    """

    name: str
    values: dict[str, float] = field(default_factory=dict)

    def __getitem__(self, key: str) -> float:
        return self.values[key]

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def to_dict(self) -> dict[str, Any]:
        """Flatten to ``{"name": name, **values}``.

        Raises:
            ValueError: If a column key is itself ``"name"``, since flattening
                would overwrite the row name
        """
        if NAME_FIELD in self.values:
            raise ValueError(
                f"Row {self.name!r} has a column keyed {NAME_FIELD!r}, which "
                f"collides with the row name when flattened"
            )
        return {NAME_FIELD: self.name, **self.values}


@dataclass
class PivotResult:
    """Rows produced by a pivot plus the label of the value axis."""

    rows: list[PivotRow] = field(default_factory=list)
    axis_label: str = DEFAULT_AXIS_LABEL

    @property
    def column_keys(self) -> list[str]:
        return extract_column_keys(self.rows)

    @property
    def names(self) -> list[str]:
        return [row.name for row in self.rows]

    def row(self, name: str) -> PivotRow:
        for row in self.rows:
            if row.name == name:
                return row
        raise KeyError(name)


def pivot(rows: RawRows, default_label: str = DEFAULT_AXIS_LABEL) -> PivotResult:
    """Pivot raw rows into one output row per row-facet value.

    Rows keep the order in which their name was first seen. A repeated
    (row, column) pair overwrites the earlier value. A record whose value is
    null still opens its row but leaves the cell absent.

    Args:
        rows: Raw result rows, each with at least three facet groups
        default_label: Axis label used when the input carries none

    Returns:
        PivotResult with the wide rows and the value-axis label

    Raises:
        MalformedFacetShapeError: If a row has fewer than three groups

    Example:
        >>> result = pivot([
        ...     {"groups": [{"displayName": "GB"}, {"value": "Jan"}, {"value": "US"}],
        ...      "series": [{"y": 10}]},
        ... ])
        >>> result.rows[0].to_dict()
        {'name': 'Jan', 'US': 10}
    """
    raw = coerce_rows(rows)
    by_name: dict[str, PivotRow] = {}
    out: list[PivotRow] = []

    for shape in facet_shapes(raw, require_column=True):
        entry = by_name.get(shape.row_key)
        if entry is None:
            entry = PivotRow(name=shape.row_key)
            by_name[entry.name] = entry
            out.append(entry)
        if shape.value is not None:
            entry.values[shape.column_key] = shape.value

    logger.debug("Pivoted %d raw rows into %d rows", len(raw), len(out))
    return PivotResult(rows=out, axis_label=axis_label(raw, default_label))


def pivot_percentage(
    rows: RawRows,
    zero_total: ZeroTotalPolicy | str = ZeroTotalPolicy.ZERO,
    default_label: str = DEFAULT_AXIS_LABEL,
) -> PivotResult:
    """Pivot raw rows, then rescale each row so its values sum to 100.

    The row total is the sum of the row's values after duplicates have been
    resolved, so every row with a non-zero total sums to 100. A total within
    ``ZERO_TOTAL_TOLERANCE`` of zero, relative to the sum of the absolute
    values, counts as zero.

    Args:
        rows: Raw result rows, each with at least three facet groups
        zero_total: Policy for rows whose total is zero: ``"zero"`` sets every
            value to 0.0, ``"nan"`` to NaN, ``"skip"`` drops the row and
            ``"raise"`` raises DegenerateNormalizationError
        default_label: Axis label used when the input carries none

    Raises:
        ValueError: If ``zero_total`` names no known policy
        DegenerateNormalizationError: On a zero-total row under ``"raise"``
    """
    policy = ZeroTotalPolicy(zero_total)
    result = pivot(rows, default_label=default_label)
    normalized: list[PivotRow] = []

    for row in result.rows:
        total = sum(row.values.values())
        if _is_zero_total(total, row.values.values()):
            if policy is ZeroTotalPolicy.RAISE:
                raise DegenerateNormalizationError(
                    f"Row {row.name!r} sums to zero and cannot be normalized"
                )
            logger.warning(
                "Row %r sums to zero; applying %r policy", row.name, policy.value
            )
            if policy is ZeroTotalPolicy.SKIP:
                continue
            fill = 0.0 if policy is ZeroTotalPolicy.ZERO else float("nan")
            normalized.append(PivotRow(row.name, dict.fromkeys(row.values, fill)))
            continue

        normalized.append(
            PivotRow(row.name, {key: value / total * 100 for key, value in row.values.items()})
        )

    return PivotResult(rows=normalized, axis_label=result.axis_label)


def pivot_cumulative(
    rows: RawRows,
    sort_key: Optional[Callable[[str], Any]] = None,
    default_label: str = DEFAULT_AXIS_LABEL,
) -> PivotResult:
    """Pivot raw rows, order them by name and accumulate every column.

    Each output row holds, for every column ever seen, the running total of
    that column up to and including the row. A column with no data yet
    reads 0; a column absent from a row carries the previous total forward.

    Args:
        rows: Raw result rows, each with at least three facet groups
        sort_key: Key applied to row names for ordering; plain string order
            when None
        default_label: Axis label used when the input carries none

    Example:
        >>> result = pivot_cumulative([
        ...     {"groups": [{}, {"value": "2024-01"}, {"value": "US"}], "series": [{"y": 10}]},
        ...     {"groups": [{}, {"value": "2024-02"}, {"value": "US"}], "series": [{"y": 5}]},
        ...     {"groups": [{}, {"value": "2024-02"}, {"value": "EU"}], "series": [{"y": 2}]},
        ... ])
        >>> result.rows[1].to_dict()
        {'name': '2024-02', 'US': 15, 'EU': 2}
    """
    result = pivot(rows, default_label=default_label)
    ordered = sort_rows(result.rows, key=sort_key)

    keys = extract_column_keys(ordered)
    running: dict[str, float] = dict.fromkeys(keys, 0)
    accumulated: list[PivotRow] = []

    for row in ordered:
        for key, value in row.values.items():
            running[key] += value
        accumulated.append(PivotRow(row.name, {key: running[key] for key in keys}))

    logger.debug("Accumulated %d columns over %d rows", len(keys), len(accumulated))
    return PivotResult(rows=accumulated, axis_label=result.axis_label)


def _is_zero_total(total: float, values: Iterable[float]) -> bool:
    magnitude = sum(abs(value) for value in values)
    return math.isclose(total, 0.0, abs_tol=ZERO_TOTAL_TOLERANCE * magnitude)
