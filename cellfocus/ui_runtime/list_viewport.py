"""Visible-row measurement for uniform-height vertical list viewports."""

from __future__ import annotations

import math

import numpy as np

from cellfocus.api.focus import RowVisibility
from cellfocus.api.primitives import Rect
from cellfocus.runtime.config import FocusConfig


def _require_row_height(row_height: float) -> float:
    value = float(row_height)
    if value <= 0.0:
        raise ValueError("row_height must be > 0")
    return value


def clamp_offset(
    offset: float,
    viewport_height: float,
    row_height: float,
    total_count: int,
    bottom_inset: float = 0.0,
) -> float:
    """Clamp a scroll offset to the scrollable content bounds."""
    content_height = max(0, total_count) * _require_row_height(row_height) + max(0.0, bottom_inset)
    max_offset = max(0.0, content_height - max(0.0, viewport_height))
    return max(0.0, min(float(offset), max_offset))


def visible_index_range(
    offset: float,
    viewport_height: float,
    row_height: float,
    total_count: int,
) -> range:
    """Return indices of rows intersecting the viewport at `offset`."""
    height = _require_row_height(row_height)
    if total_count <= 0 or viewport_height <= 0:
        return range(0)
    first = max(0, math.floor(offset / height))
    stop = min(total_count, math.ceil((offset + viewport_height) / height))
    if stop <= first:
        return range(0)
    return range(first, stop)


def measure_visible_rows(
    offset: float,
    viewport_height: float,
    row_height: float,
    total_count: int,
    row_width: float = 0.0,
) -> list[RowVisibility]:
    """Measure each visible row's on-screen percentage, top to bottom."""
    height = _require_row_height(row_height)
    index_range = visible_index_range(offset, viewport_height, height, total_count)
    if not index_range:
        return []
    indices = np.arange(index_range.start, index_range.stop, dtype=np.int64)
    tops = indices * height - float(offset)
    visible = np.clip(
        np.minimum(tops + height, float(viewport_height)) - np.maximum(tops, 0.0),
        0.0,
        height,
    )
    percentages = np.floor(visible * 100.0 / height)
    rows: list[RowVisibility] = []
    for index, top, amount, pct in zip(indices, tops, visible, percentages):
        if amount <= 0.0:
            continue
        rows.append(
            RowVisibility(
                index=int(index),
                visible_percentage=float(pct),
                frame=Rect(x=0.0, y=float(top), w=max(0.0, float(row_width)), h=height),
            )
        )
    return rows


class ListViewportSource:
    """Batch supplier for a single-column list of uniform rows."""

    def __init__(
        self,
        *,
        total_count: int,
        viewport_height: float,
        row_height: float,
        bottom_inset: float = 0.0,
        row_width: float = 0.0,
    ) -> None:
        if total_count < 0:
            raise ValueError("total_count must be >= 0")
        if viewport_height < 0.0:
            raise ValueError("viewport_height must be >= 0")
        self._row_height = _require_row_height(row_height)
        self._total_count = int(total_count)
        self._viewport_height = float(viewport_height)
        self._bottom_inset = max(0.0, float(bottom_inset))
        self._row_width = max(0.0, float(row_width))

    @classmethod
    def from_config(
        cls,
        config: FocusConfig,
        *,
        total_count: int,
        viewport_height: float,
        row_width: float = 0.0,
    ) -> ListViewportSource:
        """Build a source using the configured row height and bottom inset."""
        return cls(
            total_count=total_count,
            viewport_height=viewport_height,
            row_height=config.viewport.row_height,
            bottom_inset=config.viewport.bottom_inset,
            row_width=row_width,
        )

    @property
    def row_height(self) -> float:
        return self._row_height

    @property
    def total_count(self) -> int:
        return self._total_count

    @property
    def viewport_height(self) -> float:
        return self._viewport_height

    def resize(self, viewport_height: float) -> None:
        """Update the viewport height after a layout change."""
        if viewport_height < 0.0:
            raise ValueError("viewport_height must be >= 0")
        self._viewport_height = float(viewport_height)

    def clamp(self, offset: float) -> float:
        return clamp_offset(
            offset,
            self._viewport_height,
            self._row_height,
            self._total_count,
            self._bottom_inset,
        )

    def __call__(self, offset: float) -> list[RowVisibility]:
        return measure_visible_rows(
            self.clamp(offset),
            self._viewport_height,
            self._row_height,
            self._total_count,
            self._row_width,
        )
