from __future__ import annotations

import math
from typing import get_args

import pytest

from cellfocus.api.focus import FocusRole, FocusState, FocusTransition, RowVisibility
from cellfocus.ui_runtime.focus import (
    ROLE_FIRST,
    ROLE_INTERIOR,
    ROLE_LAST,
    select_focus,
    select_focus_detailed,
    update_focus,
    validate_threshold,
)


def _rows(*pairs: tuple[int, float]) -> list[RowVisibility]:
    return [RowVisibility(index=index, visible_percentage=pct) for index, pct in pairs]


def test_select_focus_empty_batch_has_no_decision() -> None:
    assert select_focus([], 90) is None
    detailed = select_focus_detailed([], 90)
    assert detailed.index is None
    assert detailed.role is None


def test_select_focus_single_row_is_selected_regardless_of_percentage() -> None:
    assert select_focus(_rows((4, 3.0)), 90) == 4
    assert select_focus(_rows((7, 100.0)), 90) == 7
    assert select_focus_detailed(_rows((4, 3.0)), 90).role == ROLE_FIRST


def test_select_focus_cascades_to_first_interior_row() -> None:
    rows = _rows((0, 50.0), (1, 100.0), (2, 100.0), (3, 100.0))
    selection = select_focus_detailed(rows, 90)
    assert selection.index == 1
    assert selection.rate == 100.0
    assert selection.role == ROLE_INTERIOR


def test_select_focus_keeps_sufficiently_visible_top_row() -> None:
    rows = _rows((0, 95.0), (1, 100.0), (2, 40.0))
    selection = select_focus_detailed(rows, 90)
    assert selection.index == 0
    assert selection.rate == 95.0
    assert selection.role == ROLE_FIRST


def test_select_focus_cascade_stops_once_threshold_is_met() -> None:
    assert select_focus(_rows((0, 30.0), (1, 100.0), (2, 20.0)), 90) == 1


def test_select_focus_falls_back_to_last_row_when_top_is_clipped() -> None:
    selection = select_focus_detailed(_rows((5, 10.0), (6, 4.0)), 90)
    assert selection.index == 6
    assert selection.rate == 4.0
    assert selection.role == ROLE_LAST


def test_select_focus_sorts_rows_by_index() -> None:
    rows = _rows((3, 100.0), (1, 40.0), (2, 100.0))
    assert select_focus(rows, 90) == 2


def test_select_focus_clamps_out_of_range_percentages() -> None:
    assert select_focus_detailed(_rows((0, 150.0)), 90).rate == 100.0
    selection = select_focus_detailed(_rows((0, -5.0), (1, 30.0)), 90)
    assert selection.index == 1
    assert selection.rate == 30.0


def test_select_focus_threshold_is_strict_lower_bound() -> None:
    assert select_focus(_rows((0, 90.0), (1, 100.0)), 90) == 0
    assert select_focus(_rows((0, 99.5), (1, 100.0), (2, 100.0)), 100) == 1


def test_select_focus_tolerates_duplicate_indices() -> None:
    rows = _rows((2, 20.0), (2, 100.0), (3, 50.0))
    assert select_focus(rows, 90) in {2, 3}


def test_select_focus_is_deterministic() -> None:
    rows = _rows((10, 60.0), (11, 100.0), (12, 100.0), (13, 15.0))
    assert select_focus(rows, 90) == select_focus(list(rows), 90) == 11


def test_update_focus_reports_transition_only_on_change() -> None:
    state = FocusState(current=2)

    same = update_focus(state, 2)
    assert same.changed is False
    assert same.state is state
    assert same.transition is None

    moved = update_focus(state, 5)
    assert moved.changed is True
    assert moved.state == FocusState(current=5, previous=2)
    assert moved.transition == FocusTransition(previous=2, current=5)

    again = update_focus(moved.state, 5)
    assert again.changed is False
    assert again.state == FocusState(current=5, previous=2)


def test_update_focus_from_empty_state() -> None:
    update = update_focus(FocusState(), 0)
    assert update.changed is True
    assert update.state == FocusState(current=0, previous=None)
    assert update.transition == FocusTransition(previous=None, current=0)


def test_validate_threshold_bounds() -> None:
    assert validate_threshold(90) == 90.0
    assert validate_threshold(100) == 100.0
    with pytest.raises(ValueError):
        validate_threshold(0)
    with pytest.raises(ValueError):
        validate_threshold(100.5)


def test_select_focus_treats_nan_percentage_as_hidden() -> None:
    assert RowVisibility(index=0, visible_percentage=math.nan).clamped_percentage == 0.0
    rows = _rows((0, math.nan), (1, 100.0), (2, 100.0))
    assert select_focus(rows, 90) == 1
    selection = select_focus_detailed(_rows((0, 95.0), (1, math.nan)), 90)
    assert selection.index == 0


def test_selection_roles_match_declared_role_values() -> None:
    assert get_args(FocusRole) == (ROLE_FIRST, ROLE_INTERIOR, ROLE_LAST)
