"""Column naming convention for span marks.

A mark column named ``"<label>StartTime"`` supplies the start of span
``label``; ``"<label>EndTime"`` supplies its end. Matching is case-sensitive
and anchored at the end of the name. The label is everything before the
suffix with trailing whitespace removed, so ``"Load StartTime"`` and
``"LoadEndTime"`` both belong to span ``"Load"``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

START_SUFFIX = "StartTime"
END_SUFFIX = "EndTime"

_SPAN_START = re.compile(rf"^(.*){START_SUFFIX}$", re.DOTALL)
_SPAN_END = re.compile(rf"^(.*){END_SUFFIX}$", re.DOTALL)


class SpanKind(Enum):
    """Which side of a span a column supplies."""
    START = "start"
    END = "end"
    NONE = "none"


@dataclass(frozen=True)
class SpanName:
    """Parsed column display name. ``label`` is None when kind is NONE."""
    kind: SpanKind
    label: Optional[str] = None

    @property
    def is_span(self) -> bool:
        return self.kind is not SpanKind.NONE

    @property
    def index(self) -> int:
        """Position written in the [start, end] pair (0 or 1)."""
        if self.kind is SpanKind.START:
            return 0
        if self.kind is SpanKind.END:
            return 1
        raise ValueError("SpanName with kind NONE has no span index")


NO_MATCH = SpanName(SpanKind.NONE)


def parse_span_name(name: Optional[str]) -> SpanName:
    """Classify a column display name as span start, span end, or neither.

    Examples:
        >>> parse_span_name("Render StartTime")
        SpanName(kind=<SpanKind.START: 'start'>, label='Render')
        >>> parse_span_name("RenderEndTime").label
        'Render'
        >>> parse_span_name("duration").kind
        <SpanKind.NONE: 'none'>
    """
    if not isinstance(name, str):
        return NO_MATCH
    m = _SPAN_START.match(name)
    if m is not None:
        return SpanName(SpanKind.START, m.group(1).rstrip())
    m = _SPAN_END.match(name)
    if m is not None:
        return SpanName(SpanKind.END, m.group(1).rstrip())
    return NO_MATCH
