"""Structured focus diagnostics event schema."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

EVENT_BATCH = "focus.batch"
EVENT_EMPTY_BATCH = "focus.empty_batch"
EVENT_SELECTED = "focus.selected"
EVENT_TRANSITION = "focus.transition"


@dataclass(frozen=True, slots=True)
class FocusEvent:
    """Single structured focus diagnostics event."""

    ts_utc: str
    sequence: int
    name: str
    value: float | int | str | bool | dict[str, Any] | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


def utc_now_iso() -> str:
    """Return an RFC3339-like UTC timestamp with milliseconds."""
    return datetime.now(tz=UTC).isoformat(timespec="milliseconds")
