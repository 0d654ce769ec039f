"""pandas interop for pivot output.

A pivot result maps naturally onto a DataFrame: one row per pivot row, a
``name`` column followed by one column per column key. Cells for absent
(row, column) combinations are NaN, so the "no data" distinction survives
until a display view fills them.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

import pandas as pd

from facetpivot.config import DEFAULT_AXIS_LABEL
from facetpivot.transform.pivot import PivotResult, PivotRow

NAME_COLUMN = "name"


def _values_frame(rows: Sequence[PivotRow], keys: Sequence[str]) -> pd.DataFrame:
    return pd.DataFrame(
        [row.values for row in rows],
        columns=list(keys),
        index=pd.RangeIndex(len(rows)),
    )


def to_frame(result: PivotResult, fill_value: Any = None) -> pd.DataFrame:
    """Convert a pivot result to a DataFrame.

    Args:
        result: Output of one of the pivot functions
        fill_value: Value for absent cells; NaN is kept when None

    Returns:
        DataFrame with a ``name`` column followed by the column keys in
        first-seen order

    Raises:
        ValueError: If a column key is itself ``"name"``
    """
    keys = result.column_keys
    if NAME_COLUMN in keys:
        raise ValueError(
            f"Column key {NAME_COLUMN!r} collides with the row name column"
        )
    df = _values_frame(result.rows, keys)
    if fill_value is not None and keys:
        df[keys] = df[keys].fillna(fill_value)
    df.insert(0, NAME_COLUMN, result.names)
    return df


def from_frame(df: pd.DataFrame, axis_label: str = DEFAULT_AXIS_LABEL) -> PivotResult:
    """Rebuild a pivot result from a DataFrame produced by ``to_frame``.

    NaN cells are dropped, restoring the "absent" meaning.

    Raises:
        ValueError: If the DataFrame has no ``name`` column
    """
    if NAME_COLUMN not in df.columns:
        raise ValueError(f"DataFrame must have a {NAME_COLUMN!r} column")

    keys = [col for col in df.columns if col != NAME_COLUMN]
    rows = []
    for record in df.to_dict(orient="records"):
        values = {
            str(key): record[key] for key in keys if not pd.isna(record[key])
        }
        rows.append(PivotRow(name=str(record[NAME_COLUMN]), values=values))
    return PivotResult(rows=rows, axis_label=axis_label)


def to_series(result: PivotResult, keys: Optional[Sequence[str]] = None) -> list[dict[str, Any]]:
    """Assemble one chart series per column key.

    Absent cells are drawn as 0.

    Args:
        result: Output of one of the pivot functions
        keys: Column keys to draw, in order; defaults to ``result.column_keys``

    Returns:
        List of ``{"name": key, "x": [row names], "y": [values]}`` dicts
    """
    if keys is None:
        keys = result.column_keys
    df = _values_frame(result.rows, keys)
    x = result.names
    return [{"name": key, "x": x, "y": df[key].fillna(0).tolist()} for key in keys]
