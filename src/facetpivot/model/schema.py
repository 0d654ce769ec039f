"""
Boundary schema for raw query results.

The query engine delivers one record per facet combination. Each record lists
its facets positionally: the first group describes the value dimension, the
second is the row facet and the third (when present) is the column facet.
This module validates that positional shape once and exposes it through named
fields, so transforms never index ``groups`` directly.

- FacetDescriptor: One facet entry (value and optional display name)
- RawResultRow: One record delivered by the query engine
- FacetShape: The named view of a RawResultRow used by transforms
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Any, Iterable, Mapping, Optional, Sequence

from facetpivot.config import DEFAULT_AXIS_LABEL
from facetpivot.exceptions import MalformedFacetShapeError


@dataclass(frozen=True)
class FacetDescriptor:
    """A single facet of a raw result row.

    Attributes:
        value: The facet value (row or column identifier)
        display_name: Human readable label of the facet, if the engine sent one
    """

    value: Any = None
    display_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FacetDescriptor":
        if not isinstance(data, Mapping):
            raise MalformedFacetShapeError(
                f"Facet entry must be a mapping, got {type(data).__name__}"
            )
        display_name = data.get("displayName", data.get("display_name"))
        return cls(value=data.get("value"), display_name=display_name)


@dataclass(frozen=True)
class RawResultRow:
    """One record delivered by the query engine.

    Attributes:
        groups: Facet descriptors in the order the engine reports them
        series: Numeric series points; only the first one is read. A null
            point (the engine reports one for an empty aggregate) is kept as
            None and read as "no data".
        color: Optional series color suggested by the engine
    """

    groups: tuple[FacetDescriptor, ...]
    series: tuple[Optional[float], ...]
    color: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "groups", tuple(self.groups))
        object.__setattr__(self, "series", tuple(self.series))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RawResultRow":
        """Build a row from either wire shape the host emits.

        Accepts ``{"groups": [...], "series": [{"y": n}]}`` as well as the
        query-engine shape ``{"metadata": {"groups": [...], "color": c},
        "data": [{"y": n}]}``.

        Raises:
            MalformedFacetShapeError: If groups or series points are missing
        """
        if not isinstance(data, Mapping):
            raise MalformedFacetShapeError(
                f"Raw result row must be a mapping, got {type(data).__name__}"
            )

        metadata = data.get("metadata") or {}
        groups = data.get("groups", metadata.get("groups"))
        points = data.get("series", data.get("data"))
        color = data.get("color", metadata.get("color"))

        if groups is None:
            raise MalformedFacetShapeError("Raw result row has no 'groups'")
        if not points:
            raise MalformedFacetShapeError("Raw result row has no series points")

        series = []
        for point in points:
            y = point.get("y") if isinstance(point, Mapping) else point
            series.append(_as_number(y))

        return cls(
            groups=tuple(FacetDescriptor.from_dict(g) for g in groups),
            series=tuple(series),
            color=color,
        )

    @property
    def value(self) -> Optional[float]:
        if not self.series:
            raise MalformedFacetShapeError("Raw result row has no series points")
        return self.series[0]


@dataclass(frozen=True)
class FacetShape:
    """Named view of a raw result row.

    Attributes:
        value_dimension: ``groups[0]``; its display name labels the value axis
        row_facet: ``groups[1]``; becomes the output row name
        column_facet: ``groups[2]``; becomes the output column key (may be None
            for single-facet rows)
        value: ``series[0]``; None when the engine reported no value
        color: Color suggested by the engine, if any
    """

    value_dimension: FacetDescriptor
    row_facet: FacetDescriptor
    column_facet: Optional[FacetDescriptor]
    value: Optional[float]
    color: Optional[str] = None

    @classmethod
    def from_row(
        cls,
        row: RawResultRow,
        require_column: bool = True,
        index: Optional[int] = None,
    ) -> "FacetShape":
        """Validate a row's facet count and name its facets.

        Args:
            row: The raw row to validate
            require_column: Whether a column facet (``groups[2]``) is required
            index: Position of the row in its batch, used in error messages

        Raises:
            MalformedFacetShapeError: If the row has fewer groups than required
        """
        required = 3 if require_column else 2
        if len(row.groups) < required:
            where = f"Row {index}" if index is not None else "Row"
            raise MalformedFacetShapeError(
                f"{where} has {len(row.groups)} facet group(s); "
                f"{required} are required"
            )
        return cls(
            value_dimension=row.groups[0],
            row_facet=row.groups[1],
            column_facet=row.groups[2] if len(row.groups) > 2 else None,
            value=row.value,
            color=row.color,
        )

    @property
    def row_key(self) -> str:
        return str(self.row_facet.value)

    @property
    def column_key(self) -> str:
        if self.column_facet is None:
            raise MalformedFacetShapeError("Row has no column facet")
        return str(self.column_facet.value)


def coerce_rows(rows: Iterable[RawResultRow | Mapping[str, Any]]) -> list[RawResultRow]:
    """Accept RawResultRow instances or wire dicts and return RawResultRows."""
    return [
        row if isinstance(row, RawResultRow) else RawResultRow.from_dict(row)
        for row in rows
    ]


def facet_shapes(rows: Sequence[RawResultRow], require_column: bool = True) -> list[FacetShape]:
    return [
        FacetShape.from_row(row, require_column=require_column, index=i)
        for i, row in enumerate(rows)
    ]


def axis_label(rows: Sequence[RawResultRow], default: str = DEFAULT_AXIS_LABEL) -> str:
    """Return the value-axis label: the first row's value dimension name.

    Falls back to ``default`` when there are no rows or the name is empty.
    """
    if not rows or not rows[0].groups:
        return default
    return rows[0].groups[0].display_name or default


def _as_number(value: Any) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"Series value must be numeric, got {value!r}")
    return value
