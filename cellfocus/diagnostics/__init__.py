"""Focus diagnostics observer package."""

from cellfocus.diagnostics.event import (
    EVENT_BATCH,
    EVENT_EMPTY_BATCH,
    EVENT_SELECTED,
    EVENT_TRANSITION,
    FocusEvent,
)
from cellfocus.diagnostics.hub import FocusDiagnosticHub

__all__ = [
    "EVENT_BATCH",
    "EVENT_EMPTY_BATCH",
    "EVENT_SELECTED",
    "EVENT_TRANSITION",
    "FocusDiagnosticHub",
    "FocusEvent",
]
