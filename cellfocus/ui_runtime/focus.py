"""Focused-row selection and focus transition bookkeeping."""

from __future__ import annotations

from collections.abc import Iterable

from cellfocus.api.focus import (
    DEFAULT_FOCUS_THRESHOLD,
    ROLE_FIRST,
    ROLE_INTERIOR,
    ROLE_LAST,
    FocusRole,
    FocusSelection,
    FocusState,
    FocusTransition,
    FocusUpdate,
    RowVisibility,
)


def validate_threshold(threshold: float) -> float:
    """Return `threshold` as float, rejecting values outside `(0, 100]`."""
    value = float(threshold)
    if not 0.0 < value <= 100.0:
        raise ValueError("threshold must be in (0, 100]")
    return value


def select_focus_detailed(
    rows: Iterable[RowVisibility],
    threshold: float = DEFAULT_FOCUS_THRESHOLD,
) -> FocusSelection:
    """Pick the focused row and report the rate and row role that won.

    The topmost row keeps focus while it is at least `threshold` percent
    visible. Otherwise focus cascades to the next row down: interior rows
    count as fully visible, and the bottommost row is the terminal fallback
    with its own percentage.
    """
    ordered = sorted(rows, key=lambda row: row.index)
    last_position = len(ordered) - 1
    focus_index: int | None = None
    focus_rate = 0.0
    focus_role: FocusRole | None = None
    for position, row in enumerate(ordered):
        if position == 0:
            focus_rate = row.clamped_percentage
            focus_index = row.index
            focus_role = ROLE_FIRST
        elif position == last_position:
            if focus_rate < threshold:
                focus_rate = row.clamped_percentage
                focus_index = row.index
                focus_role = ROLE_LAST
        elif focus_rate < threshold:
            # Only the viewport edges clip rows.
            focus_rate = 100.0
            focus_index = row.index
            focus_role = ROLE_INTERIOR
    return FocusSelection(index=focus_index, rate=focus_rate, role=focus_role)


def select_focus(
    rows: Iterable[RowVisibility],
    threshold: float = DEFAULT_FOCUS_THRESHOLD,
) -> int | None:
    """Return the focused row index, or None for an empty batch."""
    return select_focus_detailed(rows, threshold).index


def update_focus(state: FocusState, new_index: int | None) -> FocusUpdate:
    """Apply a selected index to `state`, reporting whether focus moved."""
    if new_index == state.current:
        return FocusUpdate(state=state, changed=False)
    next_state = FocusState(current=new_index, previous=state.current)
    return FocusUpdate(
        state=next_state,
        changed=True,
        transition=FocusTransition(previous=state.current, current=new_index),
    )
