"""DataFrame -> columnar input conversion.

Host dashboards deliver data as ``{column_id: [cell, ...]}`` plus
``{column_id: {"name": ...}}``. Python callers usually hold a DataFrame;
``columnar_from_frame`` produces the same two mappings from a pandas or
polars DataFrame so it can be fed straight to ``transform_marks``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

import pandas as pd

# Optional polars
try:  # pragma: no cover
    import polars as _pl  # type: ignore[import]
    HAS_POLARS = True
except Exception:  # pragma: no cover
    _pl = None  # type: ignore[assignment]
    HAS_POLARS = False

if TYPE_CHECKING:
    import polars as pl
else:
    pl = _pl  # type: ignore[assignment]

FrameLike = Union["pd.DataFrame", "pl.DataFrame"]


def _pandas_column(s: pd.Series) -> list[Any]:
    # NaN/NaT/NA -> None so blanks look the same as host-provided nulls
    return s.astype(object).where(s.notna(), None).tolist()


def columnar_from_frame(
    df: FrameLike,
    names: Optional[Mapping[str, str]] = None,
) -> tuple[dict[str, list[Any]], dict[str, dict[str, str]]]:
    """Split a DataFrame into columnar data and column metadata.

    Args:
        df: pandas or polars DataFrame. Column labels become column ids.
        names: Optional column id -> display name. Columns not listed use
            their label as display name.

    Returns:
        (data, column_info) ready for transform_marks.

    Raises:
        TypeError: If df is not a pandas or polars DataFrame.
    """
    names = names or {}

    if isinstance(df, pd.DataFrame):
        data = {str(col): _pandas_column(df[col]) for col in df.columns}
    elif HAS_POLARS and pl is not None and isinstance(df, pl.DataFrame):
        data = {str(col): df[col].to_list() for col in df.columns}
    else:
        raise TypeError("Unsupported data type: expected pandas.DataFrame or polars.DataFrame.")

    column_info = {col_id: {"name": str(names.get(col_id, col_id))} for col_id in data}
    return data, column_info
