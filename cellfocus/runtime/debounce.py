"""Scroll-settle debouncing driven by a host-advanced clock."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

SettleCallback = Callable[[float], object]


@dataclass(slots=True)
class _PendingSettle:
    due_seconds: float
    armed_offset: float
    latest_offset: float


class SettleDebouncer:
    """Fire `on_settle` once scroll offsets stop moving for `delay_seconds`.

    Offsets that stay within `epsilon` of the armed offset do not postpone
    the deadline. A larger move re-arms it, superseding the pending settle.
    """

    def __init__(
        self,
        delay_seconds: float,
        on_settle: SettleCallback,
        *,
        epsilon: float = 0.5,
    ) -> None:
        if delay_seconds < 0.0:
            raise ValueError("delay_seconds must be >= 0")
        if epsilon < 0.0:
            raise ValueError("epsilon must be >= 0")
        self._delay_seconds = float(delay_seconds)
        self._epsilon = float(epsilon)
        self._on_settle = on_settle
        self._now_seconds = 0.0
        self._pending: _PendingSettle | None = None

    @property
    def now_seconds(self) -> float:
        return self._now_seconds

    @property
    def is_scrolling(self) -> bool:
        """Return whether a settle is still pending."""
        return self._pending is not None

    def report(self, offset: float) -> None:
        """Record a raw scroll offset."""
        value = float(offset)
        pending = self._pending
        if pending is not None and abs(value - pending.armed_offset) < self._epsilon:
            pending.latest_offset = value
            return
        self._pending = _PendingSettle(
            due_seconds=self._now_seconds + self._delay_seconds,
            armed_offset=value,
            latest_offset=value,
        )

    def cancel(self) -> None:
        """Drop the pending settle, if any."""
        self._pending = None

    def advance(self, delta_seconds: float) -> int:
        """Advance the clock and fire a due settle."""
        if delta_seconds < 0.0:
            raise ValueError("delta_seconds must be >= 0")
        return self.run_due(self._now_seconds + delta_seconds)

    def run_due(self, now_seconds: float) -> int:
        """Fire the pending settle if due at or before `now_seconds`."""
        if now_seconds < self._now_seconds:
            raise ValueError("now_seconds cannot move backwards")
        self._now_seconds = now_seconds
        pending = self._pending
        if pending is None or pending.due_seconds > self._now_seconds:
            return 0
        self._pending = None
        self._on_settle(pending.latest_offset)
        return 1
