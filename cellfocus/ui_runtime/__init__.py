"""Focus measurement, selection and decoration helpers."""

from cellfocus.ui_runtime.focus import (
    ROLE_FIRST,
    ROLE_INTERIOR,
    ROLE_LAST,
    select_focus,
    select_focus_detailed,
    update_focus,
    validate_threshold,
)
from cellfocus.ui_runtime.highlight import RowDecoration, RowHighlightModel
from cellfocus.ui_runtime.list_viewport import (
    ListViewportSource,
    clamp_offset,
    measure_visible_rows,
    visible_index_range,
)

__all__ = [
    "ListViewportSource",
    "ROLE_FIRST",
    "ROLE_INTERIOR",
    "ROLE_LAST",
    "RowDecoration",
    "RowHighlightModel",
    "clamp_offset",
    "measure_visible_rows",
    "select_focus",
    "select_focus_detailed",
    "update_focus",
    "validate_threshold",
    "visible_index_range",
]
