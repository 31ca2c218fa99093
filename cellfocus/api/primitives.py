"""Public geometry primitives shared by focus measurement and selection."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rect:
    """Row bounds in viewport-relative coordinates; `y` is negative above the top edge."""

    x: float
    y: float
    w: float
    h: float
