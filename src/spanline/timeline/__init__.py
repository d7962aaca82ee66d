"""Timeline transform: percentile span marks and grouped entry payloads."""

from spanline.timeline.config import DEFAULT_PERCENTILE, PERCENTILE_CHOICES, TimelineConfig
from spanline.timeline.engine import MARKS_GROUP, transform_marks
from spanline.timeline.errors import (
    ColumnValueError,
    EntryPayloadError,
    PercentileError,
    SpanlineError,
)
from spanline.timeline.frame_adapter import columnar_from_frame
from spanline.timeline.naming import SpanKind, SpanName, parse_span_name
from spanline.timeline.records import (
    TimelineGroup,
    TimelineSegment,
    TimelineSeries,
    timeline_to_dicts,
)
from spanline.timeline.refresher import TimelineRefresher

__all__ = [
    "ColumnValueError",
    "DEFAULT_PERCENTILE",
    "EntryPayloadError",
    "MARKS_GROUP",
    "PERCENTILE_CHOICES",
    "PercentileError",
    "SpanKind",
    "SpanName",
    "SpanlineError",
    "TimelineConfig",
    "TimelineGroup",
    "TimelineRefresher",
    "TimelineSegment",
    "TimelineSeries",
    "columnar_from_frame",
    "parse_span_name",
    "timeline_to_dicts",
    "transform_marks",
]
