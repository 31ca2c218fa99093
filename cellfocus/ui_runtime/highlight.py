"""In-memory row decoration state driven by focus transitions."""

from __future__ import annotations

from dataclasses import dataclass

from cellfocus.api.focus import FOCUS_LABEL, UNFOCUSED_LABEL, FocusTransition


@dataclass(frozen=True, slots=True)
class RowDecoration:
    """Visual state of one row."""

    bordered: bool
    label: str


_UNFOCUSED = RowDecoration(bordered=False, label=UNFOCUSED_LABEL)
_FOCUSED = RowDecoration(bordered=True, label=FOCUS_LABEL)


class RowHighlightModel:
    """Renderer that records border and label state per row."""

    def __init__(self) -> None:
        self._decorations: dict[int, RowDecoration] = {}
        self._applied = 0

    @property
    def applied_count(self) -> int:
        """Return count of transitions applied so far."""
        return self._applied

    def apply_transition(self, transition: FocusTransition) -> None:
        if transition.previous is not None:
            self._decorations[transition.previous] = _UNFOCUSED
        if transition.current is not None:
            self._decorations[transition.current] = _FOCUSED
        self._applied += 1

    def decoration(self, index: int) -> RowDecoration:
        return self._decorations.get(index, _UNFOCUSED)

    def focused_rows(self) -> list[int]:
        return sorted(index for index, deco in self._decorations.items() if deco.bordered)
