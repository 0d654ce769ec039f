"""
Widget contract shared by every chart variant.

A widget receives the host's query configuration and one snapshot of the
data source (data, loading flag, error) and returns either a placeholder or
a ChartSpec for the rendering collaborator. Query execution and drawing are
done by the host; widgets only decide what to show.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence

from facetpivot.config import Settings
from facetpivot.exceptions import MissingConfigurationError, UpstreamQueryError
from facetpivot.model.schema import RawResultRow, coerce_rows
from facetpivot.widgets.placeholders import (
    Placeholder,
    empty_state,
    error_state,
    loading_state,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryConfig:
    """The query/account pair a widget was configured with."""

    account_id: Optional[int] = None
    query: Optional[str] = None

    @classmethod
    def first(cls, nrql_queries: Optional[Sequence[Mapping[str, Any]]]) -> "QueryConfig":
        """Take the first entry of the host's query list (or an empty config)."""
        if not nrql_queries:
            return cls()
        entry = nrql_queries[0] or {}
        account_id = entry.get("accountId", entry.get("account_id"))
        try:
            account_id = int(account_id) if account_id not in (None, "") else None
        except (TypeError, ValueError):
            account_id = None
        return cls(account_id=account_id, query=entry.get("query") or None)

    def require(self) -> "QueryConfig":
        """Return self, or raise MissingConfigurationError if incomplete."""
        if not self.account_id or not self.query:
            raise MissingConfigurationError(
                "At least one query and account ID pair is required"
            )
        return self


@dataclass(frozen=True)
class QueryState:
    """One snapshot delivered by the data source."""

    data: Optional[Sequence[Any]] = None
    loading: bool = False
    error: Any = None

    def raise_for_error(self) -> None:
        """Raise UpstreamQueryError if the data source reported an error."""
        if self.error is None:
            return
        if isinstance(self.error, BaseException):
            raise UpstreamQueryError(str(self.error)) from self.error
        raise UpstreamQueryError(str(self.error))


@dataclass
class ChartSpec:
    """Chart-ready output: one trace per series plus pass-through layout options."""

    traces: list[dict[str, Any]] = field(default_factory=list)
    layout: dict[str, Any] = field(default_factory=dict)


class Widget:
    """Base class for chart widgets.

    Subclasses implement ``build`` for validated, loaded rows; ``render``
    handles the configuration and data-source states the same way for
    every variant.
    """

    example_query: Optional[str] = None

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings.load()

    def render(
        self,
        nrql_queries: Optional[Sequence[Mapping[str, Any]]],
        state: QueryState,
    ) -> Placeholder | ChartSpec:
        """Decide what to show for a query configuration and data snapshot.

        Args:
            nrql_queries: Host query list; only the first entry is used
            state: Current data-source snapshot

        Returns:
            The empty placeholder when configuration is missing, the loading
            placeholder while loading, the error placeholder when the data
            source failed, otherwise the ChartSpec built from the data.

        Raises:
            MalformedFacetShapeError: If the rows do not have the facets this
                variant needs
        """
        try:
            QueryConfig.first(nrql_queries).require()
        except MissingConfigurationError:
            return empty_state(self.example_query)

        if state.loading:
            return loading_state()

        try:
            state.raise_for_error()
        except UpstreamQueryError as e:
            logger.warning("%s query failed: %s", type(self).__name__, e)
            return error_state()

        return self.build(coerce_rows(state.data or []))

    def build(self, rows: list[RawResultRow]) -> ChartSpec:
        raise NotImplementedError
