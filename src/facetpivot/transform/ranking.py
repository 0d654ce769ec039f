"""
Single-facet ranking.

Bar charts that show one metric per category rank ``(name, value)`` pairs by
value, largest first. Some orientations draw the sequence the other way
round, so the ranking can be reversed as a whole.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping

from facetpivot.model.schema import RawResultRow, coerce_rows, facet_shapes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankedEntry:
    name: str
    value: float


@dataclass(frozen=True)
class RankedSeries:
    """Parallel name and value sequences; ``names[i]`` pairs with ``values[i]``."""

    names: tuple[str, ...] = ()
    values: tuple[float, ...] = ()

    def __post_init__(self):
        if len(self.names) != len(self.values):
            raise ValueError(
                f"names and values must have the same length, "
                f"got {len(self.names)} and {len(self.values)}"
            )

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[RankedEntry]:
        return (RankedEntry(n, v) for n, v in zip(self.names, self.values))

    def reversed(self) -> "RankedSeries":
        return RankedSeries(self.names[::-1], self.values[::-1])


def ranking_entries(rows: Iterable[RawResultRow | Mapping[str, Any]]) -> list[RankedEntry]:
    """Pair each raw row's row facet with its value.

    Rows whose value is null have nothing to rank and are left out.

    Raises:
        MalformedFacetShapeError: If a row has fewer than two groups
    """
    shapes = facet_shapes(coerce_rows(rows), require_column=False)
    return [
        RankedEntry(shape.row_key, shape.value)
        for shape in shapes
        if shape.value is not None
    ]


def rank(entries: Iterable[RankedEntry | tuple[str, float]], reverse: bool = False) -> RankedSeries:
    """Sort entries by value, largest first.

    The sort is stable: entries with equal values keep their input order.

    Args:
        entries: RankedEntry objects or ``(name, value)`` tuples
        reverse: Reverse the ranked sequence (names and values together),
            e.g. so the largest horizontal bar is drawn at the top

    Example:
        >>> rank([("a", 1), ("b", 3), ("c", 2)]).names
        ('b', 'c', 'a')
    """
    normalized = [
        entry if isinstance(entry, RankedEntry) else RankedEntry(*entry)
        for entry in entries
    ]
    ordered = sorted(normalized, key=lambda entry: entry.value, reverse=True)
    series = RankedSeries(
        names=tuple(entry.name for entry in ordered),
        values=tuple(entry.value for entry in ordered),
    )
    logger.debug("Ranked %d entries", len(series))
    return series.reversed() if reverse else series


def rank_rows(rows: Iterable[RawResultRow | Mapping[str, Any]], reverse: bool = False) -> RankedSeries:
    return rank(ranking_entries(rows), reverse=reverse)
