"""Public focus selection contracts."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal, Protocol

from cellfocus.api.primitives import Rect

DEFAULT_FOCUS_THRESHOLD = 90.0
FOCUS_LABEL = "focus on"
UNFOCUSED_LABEL = "out of focus"

FocusRole = Literal["first", "interior", "last"]
ROLE_FIRST: FocusRole = "first"
ROLE_INTERIOR: FocusRole = "interior"
ROLE_LAST: FocusRole = "last"


@dataclass(frozen=True, slots=True)
class RowVisibility:
    """Visible-area measurement of one row for a single settle event."""

    index: int
    visible_percentage: float
    frame: Rect | None = None

    @property
    def clamped_percentage(self) -> float:
        """Return the visible percentage bounded to `[0, 100]`; NaN reads as hidden."""
        value = float(self.visible_percentage)
        if math.isnan(value):
            return 0.0
        return max(0.0, min(100.0, value))


@dataclass(frozen=True, slots=True)
class FocusState:
    """Session-scoped focus bookkeeping."""

    current: int | None = None
    previous: int | None = None


@dataclass(frozen=True, slots=True)
class FocusTransition:
    """Rows whose decoration changes after a focus update."""

    previous: int | None
    current: int | None


@dataclass(frozen=True, slots=True)
class FocusUpdate:
    """Outcome of applying a selection to a focus state."""

    state: FocusState
    changed: bool
    transition: FocusTransition | None = None


@dataclass(frozen=True, slots=True)
class FocusSelection:
    """Selection result with the winning rate and row role."""

    index: int | None
    rate: float
    role: FocusRole | None


class FocusRenderer(Protocol):
    """Render-side consumer of focus transitions."""

    def apply_transition(self, transition: FocusTransition) -> None:
        """Un-highlight the previous row and highlight the current one."""
