"""Exceptions raised by the timeline transform.

All errors subclass ValueError so callers that already guard input parsing
with ``except ValueError`` keep working.
"""

from __future__ import annotations

from typing import Any


class SpanlineError(ValueError):
    """Base class for spanline input errors."""


class ColumnValueError(SpanlineError):
    """A marks column holds a value that cannot be read as a number."""

    def __init__(self, col_id: str, value: Any) -> None:
        self.col_id = col_id
        self.value = value
        super().__init__(f"Column {col_id!r} has non-numeric value {value!r}")


class PercentileError(SpanlineError):
    """Requested percentile is outside [0, 1]."""

    def __init__(self, percentile: Any) -> None:
        self.percentile = percentile
        super().__init__(f"percentile must be within [0, 1], got {percentile!r}")


class EntryPayloadError(SpanlineError):
    """An entries column payload could not be decoded into entry records."""

    def __init__(self, col_id: str, reason: str) -> None:
        self.col_id = col_id
        self.reason = reason
        super().__init__(f"Entries column {col_id!r}: {reason}")
