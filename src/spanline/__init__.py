"""
spanline: turn columnar dashboard data into grouped timeline series.

This package provides:
- transform_marks: percentile-aggregated start/end span marks plus grouped
  JSON entry payloads, ready for a timeline renderer
- TimelineRefresher: sequenced recompute-and-render for a single surface
- columnar_from_frame: pandas/polars DataFrame -> columnar input
- Logging utilities for library and application use

For logging configuration in standalone scripts:
    ```python
    from spanline.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```

When used as a library, logging is handled by the parent application's
configuration.
"""

import logging

from spanline.utils.logging import configure_logging, get_logger

from spanline.timeline import (
    TimelineConfig,
    TimelineGroup,
    TimelineRefresher,
    columnar_from_frame,
    timeline_to_dicts,
    transform_marks,
)

# NullHandler so spanline logs don't reach the root logger's last-resort
# handler when no application has configured logging.
_logger = logging.getLogger("spanline")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "TimelineConfig",
    "TimelineGroup",
    "TimelineRefresher",
    "columnar_from_frame",
    "configure_logging",
    "get_logger",
    "timeline_to_dicts",
    "transform_marks",
]

__version__ = "0.1.0"
