"""Output records handed to a timeline renderer.

Each record serializes to the renderer's JSON shape via ``to_dict()``:

    [{"group": "marks",
      "data": [{"label": "Load",
                "data": [{"timeRange": [10.0, 50.0], "val": 40.0}]}]}]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence


@dataclass
class TimelineSegment:
    """One interval on a timeline row. ``val`` is always the duration."""
    time_range: list[float]

    @property
    def val(self) -> float:
        return self.time_range[1] - self.time_range[0]

    def to_dict(self) -> dict[str, Any]:
        return {"timeRange": list(self.time_range), "val": self.val}


@dataclass
class TimelineSeries:
    """A labeled timeline row holding segments in insertion order."""
    label: str
    data: list[TimelineSegment] = field(default_factory=list)

    def add(self, time_range: Sequence[float]) -> TimelineSegment:
        segment = TimelineSegment(list(time_range))
        self.data.append(segment)
        return segment

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "data": [seg.to_dict() for seg in self.data]}


@dataclass
class TimelineGroup:
    """A named block of timeline rows."""
    group: str
    data: list[TimelineSeries] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"group": self.group, "data": [series.to_dict() for series in self.data]}


def timeline_to_dicts(groups: Sequence[TimelineGroup]) -> list[dict[str, Any]]:
    """Convert groups to plain dicts (JSON-serializable when values are numbers)."""
    return [g.to_dict() for g in groups]
