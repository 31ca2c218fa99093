"""Observer hook for focus diagnostics."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from typing import Any

from cellfocus.diagnostics.event import FocusEvent, utc_now_iso

Subscriber = Callable[[FocusEvent], None]

_LOG = logging.getLogger("cellfocus.diagnostics")


class FocusDiagnosticHub:
    """Bounded event history plus subscriber fan-out."""

    def __init__(self, *, capacity: int = 1_000, enabled: bool = True) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be > 0")
        self._enabled = bool(enabled)
        self._events: deque[FocusEvent] = deque(maxlen=int(capacity))
        self._subscribers: dict[int, Subscriber] = {}
        self._next_subscriber_id = 1
        self._next_sequence = 1

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def capacity(self) -> int:
        return self._events.maxlen or 0

    def emit(self, event: FocusEvent) -> None:
        if not self._enabled:
            return
        self._events.append(event)
        for token, callback in tuple(self._subscribers.items()):
            try:
                callback(event)
            except Exception:
                _LOG.exception(
                    "diagnostics_subscriber_failed token=%d event=%s", token, event.name
                )

    def emit_fast(
        self,
        *,
        name: str,
        value: float | int | str | bool | dict[str, Any] | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        if not self._enabled:
            return
        sequence = self._next_sequence
        self._next_sequence += 1
        self.emit(
            FocusEvent(
                ts_utc=utc_now_iso(),
                sequence=sequence,
                name=name,
                value=value,
                metadata=dict(metadata or {}),
            )
        )

    def subscribe(self, callback: Subscriber) -> int:
        token = self._next_subscriber_id
        self._next_subscriber_id += 1
        self._subscribers[token] = callback
        return token

    def unsubscribe(self, token: int) -> None:
        self._subscribers.pop(token, None)

    def snapshot(self, *, limit: int | None = None, name: str | None = None) -> list[FocusEvent]:
        events = list(self._events)
        if name is not None:
            events = [event for event in events if event.name == name]
        if limit is None or limit >= len(events):
            return events
        if limit <= 0:
            return []
        return events[-int(limit) :]
