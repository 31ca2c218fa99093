"""Visible-row focus selection for scrolling lists."""

from cellfocus.api.focus import FocusState, FocusTransition, FocusUpdate, RowVisibility
from cellfocus.session import FocusSession
from cellfocus.ui_runtime.focus import select_focus, update_focus

__all__ = [
    "FocusSession",
    "FocusState",
    "FocusTransition",
    "FocusUpdate",
    "RowVisibility",
    "select_focus",
    "update_focus",
]
