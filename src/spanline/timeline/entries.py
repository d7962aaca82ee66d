"""Entry payload decoding and grouping.

An entries column carries its whole payload in a single cell: a JSON array of
``{"name": str, "timeRange": [start, end]}`` objects. Any other row count
means the column has no entries.

Decode policy
-------------
Lenient by default: a payload that is not valid JSON, is not an array, or
holds a malformed record is logged and treated as empty, so one bad column
degrades only its own group. Pass ``strict=True`` to raise EntryPayloadError
instead.
"""

from __future__ import annotations

import json
import numbers
from typing import Any, Mapping, Optional, Sequence

from spanline.timeline.errors import EntryPayloadError
from spanline.timeline.records import TimelineSeries
from spanline.utils.logging import get_logger

logger = get_logger(__name__)


def _check_time_range(col_id: str, index: int, time_range: Any) -> list[float]:
    if not isinstance(time_range, (list, tuple)) or len(time_range) != 2:
        raise EntryPayloadError(col_id, f"entry {index} timeRange must be a [start, end] pair")
    for v in time_range:
        if isinstance(v, bool) or not isinstance(v, numbers.Real):
            raise EntryPayloadError(col_id, f"entry {index} timeRange has non-numeric value {v!r}")
    return list(time_range)


def _check_records(col_id: str, records: Any) -> list[dict[str, Any]]:
    if not isinstance(records, list):
        raise EntryPayloadError(col_id, f"payload must be a JSON array, got {type(records).__name__}")
    checked: list[dict[str, Any]] = []
    for i, rec in enumerate(records):
        if not isinstance(rec, Mapping):
            raise EntryPayloadError(col_id, f"entry {i} is not an object")
        if rec.get("name") is None:
            raise EntryPayloadError(col_id, f"entry {i} has no name")
        checked.append({
            "name": str(rec["name"]),
            "timeRange": _check_time_range(col_id, i, rec.get("timeRange")),
        })
    return checked


def _load_payload(col_id: str, cell: Any) -> Any:
    if isinstance(cell, (bytes, bytearray)):
        try:
            cell = cell.decode("utf-8")
        except UnicodeDecodeError as e:
            raise EntryPayloadError(col_id, "payload is not UTF-8") from e
    if not isinstance(cell, str):
        # already-decoded payload from a Python data provider
        return cell
    try:
        return json.loads(cell)
    except json.JSONDecodeError as e:
        raise EntryPayloadError(col_id, f"invalid JSON ({e.msg} at position {e.pos})") from e


def decode_entry_payload(
    col_id: str,
    rows: Optional[Sequence[Any]],
    *,
    strict: bool = False,
) -> list[dict[str, Any]]:
    """Decode the entry records held by one entries column.

    Args:
        col_id: Column id, used in log and error messages.
        rows: Raw cell values for the column, or None if the column is absent.
        strict: Raise on malformed payloads instead of returning [].

    Returns:
        List of ``{"name", "timeRange"}`` dicts in payload order.

    Raises:
        EntryPayloadError: Only when ``strict`` is True.
    """
    if rows is None:
        logger.debug(f"entries column {col_id!r} has no data")
        return []
    rows = list(rows)
    if len(rows) != 1:
        logger.debug(f"entries column {col_id!r} has {len(rows)} rows, expected 1; no entries")
        return []

    cell = rows[0]
    if cell is None:
        return []

    try:
        payload = _load_payload(col_id, cell)
        if payload is None:
            return []
        return _check_records(col_id, payload)
    except EntryPayloadError as e:
        if strict:
            raise
        logger.warning(f"Ignoring malformed entries payload: {e}")
        return []


def group_entries(records: Sequence[Mapping[str, Any]]) -> list[TimelineSeries]:
    """Group entry records by name.

    Series appear in first-seen name order; each series holds one segment
    per record with that name, in input order.
    """
    by_name: dict[str, TimelineSeries] = {}
    for rec in records:
        name = rec["name"]
        series = by_name.get(name)
        if series is None:
            series = TimelineSeries(label=name)
            by_name[name] = series
        series.add(rec["timeRange"])
    return list(by_name.values())
