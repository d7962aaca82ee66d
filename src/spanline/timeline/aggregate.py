"""
Percentile aggregation of mark columns: pure pandas/numpy.

Each mark column is a list of raw cell values. Blank cells (None, NaN, and
other falsy values such as 0 or "") count as 0; every other cell must be
readable as a number. The column is then collapsed to a single value with
``numpy.percentile`` using linear interpolation between order statistics,
so percentile 0.5 is the median and the result does not depend on row order.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

import numpy as np
import pandas as pd

from spanline.timeline.errors import ColumnValueError, PercentileError
from spanline.utils.logging import get_logger

logger = get_logger(__name__)


def _is_blank(value: Any) -> bool:
    """True for cells that aggregate as 0: None, NaN/NA, and falsy scalars."""
    if value is None:
        return True
    try:
        if pd.isna(value):
            return True
    except (TypeError, ValueError):
        # pd.isna on a list-like returns an array; not a scalar cell
        return False
    try:
        return not value
    except (TypeError, ValueError):
        return False


def coerce_mark_values(col_id: str, values: Sequence[Any]) -> np.ndarray:
    """Convert raw cell values to a float array, blanks as 0.

    Args:
        col_id: Column id, used in error messages.
        values: Raw cell values for one column.

    Returns:
        1-D float array with one entry per input cell.

    Raises:
        ColumnValueError: If a non-blank cell is not numeric.
    """
    raw = list(values)
    if not raw:
        return np.array([], dtype=float)

    blank = np.array([_is_blank(v) for v in raw], dtype=bool)
    for v, b in zip(raw, blank):
        # pd.to_numeric would drop the imaginary part
        if not b and isinstance(v, (complex, np.complexfloating)):
            raise ColumnValueError(col_id, v)
    cells = pd.Series(
        [0 if b else (int(v) if isinstance(v, (bool, np.bool_)) else v) for v, b in zip(raw, blank)],
        dtype=object,
    )
    numeric = pd.to_numeric(cells, errors="coerce")
    bad = numeric.isna().to_numpy() & ~blank
    if bad.any():
        first = int(np.flatnonzero(bad)[0])
        raise ColumnValueError(col_id, raw[first])
    return numeric.to_numpy(dtype=float)


def column_percentile(values: np.ndarray, percentile: float) -> Optional[float]:
    """Percentile of values, with percentile given as a fraction in [0, 1].

    Returns None for an empty array.

    Raises:
        PercentileError: If percentile is outside [0, 1] or not a number.
    """
    try:
        p = float(percentile)
    except (TypeError, ValueError):
        raise PercentileError(percentile) from None
    if not 0.0 <= p <= 1.0:
        raise PercentileError(percentile)
    if values.size == 0:
        return None
    return float(np.percentile(values, p * 100.0))


def aggregate_marks(
    marks: Sequence[str],
    data: Mapping[str, Sequence[Any]],
    percentile: float,
) -> dict[str, float]:
    """Collapse each mark column to its percentile value.

    Columns missing from ``data`` (or with no rows) are left out of the
    result rather than stored as 0.

    Args:
        marks: Mark column ids, in configured order.
        data: Column id -> raw cell values.
        percentile: Fraction in [0, 1].

    Returns:
        Column id -> aggregated value, in ``marks`` order.
    """
    aggregated: dict[str, float] = {}
    for col_id in marks:
        col_values = data.get(col_id)
        if col_values is None:
            logger.debug(f"mark column {col_id!r} has no data, skipping")
            continue
        value = column_percentile(coerce_mark_values(col_id, col_values), percentile)
        if value is None:
            logger.debug(f"mark column {col_id!r} has no rows, skipping")
            continue
        aggregated[col_id] = value
    return aggregated
