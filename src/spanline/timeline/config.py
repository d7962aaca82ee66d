"""Timeline configuration.

This module defines the TimelineConfig dataclass: which columns are span
marks, which columns carry JSON entry payloads, and the percentile used to
collapse each mark column into a single value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, Mapping, Optional, Union

from spanline.timeline.errors import PercentileError
from spanline.utils.logging import get_logger

logger = get_logger(__name__)

# Percentiles offered by the host dropdown. Not enforced by the transform.
PERCENTILE_CHOICES: tuple[float, ...] = (0.25, 0.5, 0.75, 0.95)
DEFAULT_PERCENTILE: float = 0.5


def _as_id_list(value: Any, key: str) -> list[Hashable]:
    if value is None:
        return []
    if isinstance(value, str):
        # a lone id is a common mistake for a one-element list
        logger.warning(f"{key} is a string, treating it as a single column id")
        return [value]
    try:
        items = list(value)
    except TypeError:
        logger.warning(f"{key} is not a list of column ids, using empty list")
        return []
    # ids stay as given; they are looked up in the caller's data mappings
    ids: list[Hashable] = []
    for v in items:
        if not isinstance(v, Hashable):
            logger.warning(f"{key} contains unhashable column id {v!r}, ignoring")
            continue
        ids.append(v)
    return ids


@dataclass
class TimelineConfig:
    """Declarative configuration for one timeline transform.

    Attributes:
        marks: Column ids aggregated into start/end spans, in order.
        entries: Column ids whose single cell holds a JSON array of entries.
        percentile: Fraction in [0, 1] used to aggregate each mark column.
    """

    marks: list[Hashable] = field(default_factory=list)
    entries: list[Hashable] = field(default_factory=list)
    percentile: float = DEFAULT_PERCENTILE

    def is_standard_percentile(self) -> bool:
        """True if percentile is one of PERCENTILE_CHOICES."""
        return self.percentile in PERCENTILE_CHOICES

    def to_dict(self) -> dict[str, Any]:
        """Serialize TimelineConfig to a JSON-friendly dictionary."""
        return {
            "marks": list(self.marks),
            "entries": list(self.entries),
            "percentile": self.percentile,
        }

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "TimelineConfig":
        """Tolerant loader for host-provided config.

        - missing keys and None values fall back to defaults
        - "source" (the host element id) is accepted and dropped
        - unknown keys are ignored with a warning

        Raises:
            PercentileError: If percentile cannot be converted to float.
        """
        if data is None:
            return cls()

        known_keys = {"source", "marks", "entries", "percentile"}
        for key in data.keys():
            if key not in known_keys:
                logger.warning(f"Unknown key '{key}' in timeline config, ignoring")

        percentile = data.get("percentile")
        if percentile is None:
            percentile = DEFAULT_PERCENTILE
        try:
            percentile = float(percentile)
        except (TypeError, ValueError):
            raise PercentileError(percentile) from None

        return cls(
            marks=_as_id_list(data.get("marks"), "marks"),
            entries=_as_id_list(data.get("entries"), "entries"),
            percentile=percentile,
        )


ConfigLike = Union[TimelineConfig, Mapping[str, Any], None]


def coerce_config(config: ConfigLike) -> TimelineConfig:
    """Return config as a TimelineConfig, converting mappings via from_dict."""
    if isinstance(config, TimelineConfig):
        return config
    return TimelineConfig.from_dict(config)
