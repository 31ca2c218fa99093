"""Public cellfocus API boundary types."""

from cellfocus.api.focus import (
    DEFAULT_FOCUS_THRESHOLD,
    FOCUS_LABEL,
    ROLE_FIRST,
    ROLE_INTERIOR,
    ROLE_LAST,
    UNFOCUSED_LABEL,
    FocusRole,
    FocusRenderer,
    FocusSelection,
    FocusState,
    FocusTransition,
    FocusUpdate,
    RowVisibility,
)
from cellfocus.api.logging import FocusLoggingConfig
from cellfocus.api.primitives import Rect

__all__ = [
    "DEFAULT_FOCUS_THRESHOLD",
    "FOCUS_LABEL",
    "FocusLoggingConfig",
    "FocusRenderer",
    "FocusRole",
    "FocusSelection",
    "FocusState",
    "FocusTransition",
    "FocusUpdate",
    "ROLE_FIRST",
    "ROLE_INTERIOR",
    "ROLE_LAST",
    "Rect",
    "RowVisibility",
    "UNFOCUSED_LABEL",
]
