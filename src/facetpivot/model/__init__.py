"""
Raw result schema.

Validates the positional facet layout delivered by the query engine and
exposes it through named fields.
"""

from .schema import (
    FacetDescriptor,
    RawResultRow,
    FacetShape,
    axis_label,
    coerce_rows,
    facet_shapes,
)

__all__ = [
    "FacetDescriptor",
    "RawResultRow",
    "FacetShape",
    "axis_label",
    "coerce_rows",
    "facet_shapes",
]
