"""Timeline transform: columnar marks and entries -> grouped timeline series.

``transform_marks`` is the single entry point. It is a pure function of its
three inputs and recomputes everything on each call:

1. Aggregation: each mark column collapses to one percentile value.
2. Span pairing: ``<label>StartTime`` / ``<label>EndTime`` mark columns fill
   the ``[start, end]`` pair of span ``label`` and widen the domain.
3. Marks group: one single-segment series per span, in discovery order.
4. Entries: each entries column becomes its own group of per-name series.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from spanline.timeline.aggregate import aggregate_marks
from spanline.timeline.config import ConfigLike, coerce_config
from spanline.timeline.entries import decode_entry_payload, group_entries
from spanline.timeline.naming import parse_span_name
from spanline.timeline.records import TimelineGroup, TimelineSeries
from spanline.utils.logging import get_logger

logger = get_logger(__name__)

MARKS_GROUP = "marks"

# Returned when no mark columns are configured.
EMPTY_DOMAIN: tuple[float, float] = (0, 1)

ColumnarData = Mapping[str, Sequence[Any]]
ColumnInfo = Mapping[str, Any]


def column_display_name(column_info: ColumnInfo, col_id: str) -> Optional[str]:
    """Display name for col_id, or None when the column has no metadata.

    Metadata entries may be mappings (``{"name": ...}``) or objects with a
    ``name`` attribute.
    """
    info = column_info.get(col_id)
    if info is None:
        return None
    if isinstance(info, Mapping):
        return info.get("name")
    return getattr(info, "name", None)


def pair_spans(
    marks: Sequence[str],
    aggregated: Mapping[str, float],
    column_info: ColumnInfo,
) -> tuple[dict[str, list[float]], list[float]]:
    """Pair start/end mark columns into spans and compute the domain.

    Args:
        marks: Mark column ids, in configured order.
        aggregated: Column id -> aggregated value (see aggregate_marks).
        column_info: Column id -> metadata with a display name.

    Returns:
        (spans, domain). ``spans`` maps label -> [start, end] in first-seen
        order; a side never supplied stays 0. ``domain`` is [min start,
        max end] over the values seen, 0 for a side with no values.
    """
    spans: dict[str, list[float]] = {}
    starts: list[float] = []
    ends: list[float] = []

    for col_id in marks:
        name = column_display_name(column_info, col_id)
        if name is None:
            logger.debug(f"mark column {col_id!r} has no metadata, skipping")
            continue
        span_name = parse_span_name(name)
        if not span_name.is_span:
            continue
        value = aggregated.get(col_id)
        if value is None:
            continue
        span = spans.setdefault(span_name.label, [0, 0])
        span[span_name.index] = value
        if span_name.index == 0:
            starts.append(value)
        else:
            ends.append(value)

    domain = [min(starts) if starts else 0, max(ends) if ends else 0]
    return spans, domain


def build_marks_group(spans: Mapping[str, Sequence[float]]) -> TimelineGroup:
    """One series per span label, each with a single summary segment."""
    group = TimelineGroup(group=MARKS_GROUP)
    for label, time_range in spans.items():
        series = TimelineSeries(label=label)
        series.add(time_range)
        group.data.append(series)
    return group


def build_entry_group(
    col_id: str,
    data: ColumnarData,
    column_info: ColumnInfo,
    *,
    strict: bool = False,
) -> TimelineGroup:
    """Group for one entries column, labeled by its display name.

    Falls back to the column id as label when the column has no metadata.
    """
    records = decode_entry_payload(col_id, data.get(col_id), strict=strict)
    label = column_display_name(column_info, col_id)
    if label is None:
        label = str(col_id)
    return TimelineGroup(group=label, data=group_entries(records))


def transform_marks(
    config: ConfigLike,
    data: Optional[ColumnarData],
    column_info: Optional[ColumnInfo],
    *,
    strict_entries: bool = False,
) -> tuple[list[TimelineGroup], list[float]]:
    """Transform columnar data into timeline groups and a value domain.

    Args:
        config: TimelineConfig or a mapping with marks/entries/percentile.
        data: Column id -> raw cell values.
        column_info: Column id -> metadata carrying a display ``name``.
        strict_entries: Raise EntryPayloadError on malformed entries
            payloads instead of treating them as empty.

    Returns:
        (groups, domain). ``groups`` is the "marks" group followed by one
        group per entries column, in configured order. With no mark columns
        configured, returns ``([], [0, 1])``.

    Raises:
        ColumnValueError: A mark column holds a non-numeric value.
        PercentileError: The configured percentile is outside [0, 1].
        EntryPayloadError: Only when strict_entries is True.
    """
    cfg = coerce_config(config)
    if not cfg.marks:
        return [], list(EMPTY_DOMAIN)

    data = data or {}
    column_info = column_info or {}

    aggregated = aggregate_marks(cfg.marks, data, cfg.percentile)
    spans, domain = pair_spans(cfg.marks, aggregated, column_info)
    groups = [build_marks_group(spans)]
    for col_id in cfg.entries:
        groups.append(build_entry_group(col_id, data, column_info, strict=strict_entries))

    logger.debug(
        f"transformed {len(cfg.marks)} marks into {len(spans)} spans, "
        f"{len(cfg.entries)} entry groups, domain={domain}"
    )
    return groups, domain
