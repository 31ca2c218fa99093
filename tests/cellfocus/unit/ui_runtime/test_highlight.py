from __future__ import annotations

from cellfocus.api.focus import FOCUS_LABEL, UNFOCUSED_LABEL, FocusTransition
from cellfocus.ui_runtime.highlight import RowHighlightModel


def test_highlight_model_defaults_to_unfocused() -> None:
    model = RowHighlightModel()
    decoration = model.decoration(3)
    assert decoration.bordered is False
    assert decoration.label == UNFOCUSED_LABEL
    assert model.focused_rows() == []


def test_highlight_model_moves_border_and_label() -> None:
    model = RowHighlightModel()
    model.apply_transition(FocusTransition(previous=None, current=2))
    assert model.decoration(2).bordered is True
    assert model.decoration(2).label == FOCUS_LABEL

    model.apply_transition(FocusTransition(previous=2, current=5))
    assert model.decoration(2).label == UNFOCUSED_LABEL
    assert model.decoration(5).label == FOCUS_LABEL
    assert model.focused_rows() == [5]
    assert model.applied_count == 2
