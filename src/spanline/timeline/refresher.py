"""Sequenced recompute-and-render for one timeline surface.

The transform itself is pure; whoever owns the render target has to make sure
two results never race onto it. TimelineRefresher keeps the latest config,
data and column metadata, recomputes when any of them changes, and hands the
result to ``on_render``. Renders are serialized, and a result that has been
overtaken by a newer ``update()`` while it was computing is dropped instead of
drawn over the newer one.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional

from spanline.timeline.config import ConfigLike
from spanline.timeline.engine import ColumnarData, ColumnInfo, transform_marks
from spanline.timeline.records import TimelineGroup
from spanline.utils.logging import get_logger

logger = get_logger(__name__)

# Public type aliases (stable API)
TimelineResult = tuple[list[TimelineGroup], list[float]]
OnRender = Callable[[list[TimelineGroup], list[float]], None]
TransformFn = Callable[..., TimelineResult]

_UNSET: Any = object()


class TimelineRefresher:
    """Recompute the timeline on input changes and render the newest result.

    Example:
        refresher = TimelineRefresher(on_render=draw)
        refresher.update(config=cfg, data=data, column_info=columns)
        refresher.update(data=new_data)  # config/columns are kept
    """

    def __init__(
        self,
        on_render: OnRender,
        *,
        strict_entries: bool = False,
        transform: TransformFn = transform_marks,
    ) -> None:
        self._on_render = on_render
        self._strict_entries = strict_entries
        self._transform = transform

        self._config: Optional[ConfigLike] = None
        self._data: Optional[ColumnarData] = None
        self._column_info: Optional[ColumnInfo] = None
        self._has_config = False

        self._generation = 0
        self._rendered_generation = 0
        self._latest: Optional[TimelineResult] = None

        self._state_lock = threading.Lock()
        self._render_lock = threading.Lock()

    @property
    def latest(self) -> Optional[TimelineResult]:
        """Last (groups, domain) handed to on_render, or None."""
        return self._latest

    @property
    def generation(self) -> int:
        """Number of update() calls so far."""
        return self._generation

    def is_ready(self) -> bool:
        """True once config, data and column info have all been supplied."""
        return self._has_config and self._data is not None and self._column_info is not None

    def update(
        self,
        *,
        config: ConfigLike = _UNSET,
        data: Optional[ColumnarData] = _UNSET,
        column_info: Optional[ColumnInfo] = _UNSET,
    ) -> bool:
        """Store the given inputs, recompute, and render if still current.

        Omitted arguments keep their previous value.

        Returns:
            True if the result was rendered, False if inputs are incomplete or
            a newer update superseded this one.

        Raises:
            Whatever the transform raises; the previous render stays current.
        """
        with self._state_lock:
            if config is not _UNSET:
                self._config = config
                self._has_config = True
            if data is not _UNSET:
                self._data = data
            if column_info is not _UNSET:
                self._column_info = column_info
            self._generation += 1
            gen = self._generation
            if not self.is_ready():
                logger.debug(f"update {gen}: inputs incomplete, not rendering")
                return False
            cfg, d, info = self._config, self._data, self._column_info

        groups, domain = self._transform(cfg, d, info, strict_entries=self._strict_entries)

        with self._render_lock:
            if gen != self._generation or gen < self._rendered_generation:
                logger.debug(f"update {gen}: superseded by {self._generation}, dropping result")
                return False
            self._on_render(groups, domain)
            self._latest = (groups, domain)
            self._rendered_generation = gen
        return True
