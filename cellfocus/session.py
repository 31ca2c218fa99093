"""Focus session wiring viewport batches, selection and rendering."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from cellfocus.api.focus import FocusRenderer, FocusState, FocusUpdate, RowVisibility
from cellfocus.diagnostics.event import (
    EVENT_BATCH,
    EVENT_EMPTY_BATCH,
    EVENT_SELECTED,
    EVENT_TRANSITION,
)
from cellfocus.diagnostics.hub import FocusDiagnosticHub
from cellfocus.runtime.config import FocusConfig, get_focus_config
from cellfocus.runtime.debounce import SettleDebouncer
from cellfocus.runtime.logging import focus_fields, get_logger
from cellfocus.ui_runtime.focus import select_focus_detailed, update_focus, validate_threshold

ViewportSource = Callable[[float], Sequence[RowVisibility]]

_LOG = get_logger("cellfocus.session")


class FocusSession:
    """Per-view owner of focus state.

    Hosts either push settled batches through `apply_batch`, or report raw
    scroll offsets through `on_scroll` and drive the settle clock with
    `tick`/`advance`, in which case batches are pulled from `source`.
    """

    def __init__(
        self,
        *,
        config: FocusConfig | None = None,
        source: ViewportSource | None = None,
        renderer: FocusRenderer | None = None,
        diagnostics: FocusDiagnosticHub | None = None,
    ) -> None:
        self._config = config if config is not None else get_focus_config()
        self._threshold = validate_threshold(self._config.selection.threshold)
        self._source = source
        self._renderer = renderer
        if diagnostics is None:
            diagnostics = FocusDiagnosticHub(
                capacity=self._config.diagnostics.capacity,
                enabled=self._config.diagnostics.enabled,
            )
        self._diagnostics = diagnostics
        self._debouncer = SettleDebouncer(
            self._config.settle.delay_seconds,
            self.on_settle,
            epsilon=self._config.settle.epsilon,
        )
        self._state = FocusState()

    @property
    def state(self) -> FocusState:
        return self._state

    @property
    def focused_index(self) -> int | None:
        return self._state.current

    @property
    def previous_index(self) -> int | None:
        return self._state.previous

    @property
    def threshold(self) -> float:
        return self._threshold

    @property
    def diagnostics(self) -> FocusDiagnosticHub:
        return self._diagnostics

    @property
    def is_scrolling(self) -> bool:
        return self._debouncer.is_scrolling

    def on_scroll(self, offset: float) -> None:
        """Record a raw scroll offset; selection waits for the settle."""
        if self._source is None:
            raise RuntimeError("on_scroll requires a viewport source")
        self._debouncer.report(offset)

    def tick(self, now_seconds: float) -> int:
        return self._debouncer.run_due(now_seconds)

    def advance(self, delta_seconds: float) -> int:
        return self._debouncer.advance(delta_seconds)

    def on_settle(self, offset: float) -> FocusUpdate | None:
        """Measure the viewport at `offset` and apply the resulting batch."""
        if self._source is None:
            raise RuntimeError("on_settle requires a viewport source")
        self._debouncer.cancel()
        return self.apply_batch(self._source(offset), offset=offset)

    def apply_batch(
        self,
        rows: Sequence[RowVisibility],
        *,
        offset: float | None = None,
    ) -> FocusUpdate | None:
        """Select focus from a settled batch and apply the transition.

        Returns None for an empty batch, leaving the focus state untouched.
        """
        self._diagnostics.emit_fast(
            name=EVENT_BATCH,
            value={
                "indices": [row.index for row in rows],
                "percentages": [row.visible_percentage for row in rows],
            },
            metadata={"offset": offset, "count": len(rows)},
        )
        if _LOG.isEnabledFor(logging.DEBUG):
            _LOG.debug(
                "visible_rows count=%d",
                len(rows),
                extra=focus_fields(
                    offset=offset,
                    rows=[(row.index, row.visible_percentage) for row in rows],
                ),
            )
        if not rows:
            self._diagnostics.emit_fast(name=EVENT_EMPTY_BATCH, metadata={"offset": offset})
            return None

        selection = select_focus_detailed(rows, self._threshold)
        self._diagnostics.emit_fast(
            name=EVENT_SELECTED,
            value=selection.index,
            metadata={"rate": selection.rate, "role": selection.role},
        )
        _LOG.debug(
            "focus_selected index=%s",
            selection.index,
            extra=focus_fields(index=selection.index, rate=selection.rate, role=selection.role),
        )

        update = update_focus(self._state, selection.index)
        self._state = update.state
        transition = update.transition
        if update.changed and transition is not None:
            # Rows are redrawn before observers hear about the change.
            if self._renderer is not None:
                self._renderer.apply_transition(transition)
            _LOG.info(
                "focus_changed current=%s",
                transition.current,
                extra=focus_fields(previous=transition.previous, current=transition.current),
            )
            self._diagnostics.emit_fast(
                name=EVENT_TRANSITION,
                value={"previous": transition.previous, "current": transition.current},
            )
        return update
