"""
Output serialization utilities.

Converts transform results and widget output into JSON-serializable
dictionaries for the rendering collaborator. Key names follow the host's
camelCase convention. Non-finite floats (e.g. NaN from the ``"nan"``
zero-total policy) serialize as ``null``.
"""

import json
import math
from dataclasses import asdict
from enum import Enum
from typing import Any, Dict

from ..transform.pivot import PivotResult
from ..transform.ranking import RankedSeries
from ..widgets.base import ChartSpec
from ..widgets.placeholders import Placeholder


def serialize_pivot(result: PivotResult) -> Dict[str, Any]:
    """Serialize a pivot result to ``{"rows": [...], "axisLabel": ...}``.

    Raises:
        TypeError: If result is not a PivotResult instance
        ValueError: If a column key is ``"name"`` and would overwrite the
            row name
    """
    if not isinstance(result, PivotResult):
        raise TypeError(f"Expected PivotResult, got {type(result)}")

    return {
        "rows": [_clean(row.to_dict()) for row in result.rows],
        "axisLabel": result.axis_label,
    }


def serialize_ranking(series: RankedSeries) -> Dict[str, Any]:
    """Serialize a ranking to ``{"names": [...], "values": [...]}``."""
    if not isinstance(series, RankedSeries):
        raise TypeError(f"Expected RankedSeries, got {type(series)}")

    return {
        "names": list(series.names),
        "values": _clean(list(series.values)),
    }


def serialize(obj: Any) -> Dict[str, Any]:
    """Serialize any facetpivot output object to a JSON-serializable dict.

    Raises:
        TypeError: If the object type has no serialized form
    """
    if isinstance(obj, PivotResult):
        return serialize_pivot(obj)
    if isinstance(obj, RankedSeries):
        return serialize_ranking(obj)
    if isinstance(obj, ChartSpec):
        return {"traces": _clean(obj.traces), "layout": _clean(obj.layout)}
    if isinstance(obj, Placeholder):
        data = asdict(obj)
        data["kind"] = obj.kind.value
        data["exampleQuery"] = data.pop("example_query")
        return data
    raise TypeError(f"Cannot serialize {type(obj).__name__}")


def to_json(obj: Any, **kwargs) -> str:
    """Serialize a facetpivot output object to a JSON string.

    Args:
        obj: PivotResult, RankedSeries, ChartSpec or Placeholder
        **kwargs: Additional arguments to pass to json.dumps (e.g., indent=2)
    """
    return json.dumps(serialize(obj), allow_nan=False, **kwargs)


def _clean(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _clean(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_clean(v) for v in value]
    return value
