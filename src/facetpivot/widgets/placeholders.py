"""Fixed informational panels shown instead of a chart."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PlaceholderKind(str, Enum):
    EMPTY = "empty"
    ERROR = "error"
    LOADING = "loading"


@dataclass(frozen=True)
class Placeholder:
    kind: PlaceholderKind
    heading: str
    detail: Optional[str] = None
    example_query: Optional[str] = None


def empty_state(example_query: Optional[str] = None) -> Placeholder:
    return Placeholder(
        kind=PlaceholderKind.EMPTY,
        heading="Please provide at least one NRQL query & account ID pair",
        detail="An example NRQL query you can try is:" if example_query else None,
        example_query=example_query,
    )


def error_state() -> Placeholder:
    return Placeholder(kind=PlaceholderKind.ERROR, heading="Oops! Something went wrong.")


def loading_state() -> Placeholder:
    return Placeholder(kind=PlaceholderKind.LOADING, heading="Loading")
