"""
Exception classes for facetpivot.

These exceptions are used throughout the facetpivot package to signal error
conditions while validating raw query results, transforming them, and
rendering widget output.
"""


class FacetPivotError(Exception):
    """Base class for every error raised by facetpivot."""
    pass


class MalformedFacetShapeError(FacetPivotError, ValueError):
    """Raised when a raw result row does not have the facets a transform needs.

    This is a precondition violation: the query that produced the rows has the
    wrong shape for the chart variant, so the error is never recovered silently.
    Examples:
        - A two-facet pivot fed rows with only one FACET clause
        - A row payload without any series point
        - A groups entry that is not a mapping
    """
    pass


class MissingConfigurationError(FacetPivotError):
    """Raised when no usable query/account pair was supplied to a widget.

    Widgets catch this error and show the empty-state placeholder instead of
    a chart. It signals missing user input, not a fault.
    """
    pass


class UpstreamQueryError(FacetPivotError):
    """Raised when the data source reports an error for a query.

    The original error reported by the data source is kept as ``__cause__``
    when one is available. Common causes include:
        - Query syntax errors
        - Permission errors for the account
        - Timeouts in the query engine
    """
    pass


class DegenerateNormalizationError(FacetPivotError, ArithmeticError):
    """Raised when a percentage pivot meets a row whose total is zero.

    Only raised under the ``"raise"`` zero-total policy. The other policies
    resolve the row to zeros, NaNs or drop it.
    """
    pass
