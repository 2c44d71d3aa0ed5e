"""Keyboard selection reducer."""

from __future__ import annotations

from dataclasses import replace

import pytest

from geosuggest.widget.selection import NavKey, move_to, reduce_key
from geosuggest.widget.state import WidgetState


@pytest.fixture
def state(paris_results) -> WidgetState:
    return WidgetState(query="paris", results=tuple(paris_results))


def test_arrow_down_moves_forward_and_clamps(state):
    state = reduce_key(state, "ArrowDown").state
    assert state.selection_index == 0
    state = reduce_key(state, NavKey.ARROW_DOWN).state
    state = reduce_key(state, NavKey.ARROW_DOWN).state
    assert state.selection_index == 2

    state = reduce_key(state, NavKey.ARROW_DOWN).state
    assert state.selection_index == 2


def test_arrow_up_clamps_at_first_item(state):
    state = replace(state, selection_index=1)
    state = reduce_key(state, "ArrowUp").state
    assert state.selection_index == 0
    state = reduce_key(state, "ArrowUp").state
    assert state.selection_index == 0


def test_arrow_up_without_selection_stays_by_default(state):
    transition = reduce_key(state, "ArrowUp")
    assert transition.state.selection_index == -1
    assert transition.state is state


def test_arrow_up_without_selection_can_jump_to_last(state):
    transition = reduce_key(state, "ArrowUp", arrow_up_policy="last")
    assert transition.state.selection_index == 2


def test_enter_commits_selected_result(state, paris_results):
    state = reduce_key(state, "ArrowDown").state
    transition = reduce_key(state, "Enter")
    assert transition.commit == paris_results[0]


def test_enter_without_selection_is_noop(state):
    transition = reduce_key(state, "Enter")
    assert transition.commit is None
    assert transition.state is state


def test_escape_clears_results_and_keeps_query(state):
    state = reduce_key(state, "ArrowDown").state
    transition = reduce_key(state, "Escape")
    assert transition.dismissed
    assert transition.state.results == ()
    assert transition.state.selection_index == -1
    assert transition.state.query == "paris"


@pytest.mark.parametrize("key", ["ArrowDown", "ArrowUp", "Enter", "Escape"])
def test_every_key_is_noop_without_results(key):
    empty = WidgetState(query="zzz")
    transition = reduce_key(empty, key)
    assert transition.state is empty
    assert transition.commit is None
    assert not transition.dismissed


def test_unknown_keys_are_ignored(state):
    assert reduce_key(state, "Tab").state is state


def test_move_to_validates_index(state):
    assert move_to(state, 1).selection_index == 1
    assert move_to(state, 3) is None
    assert move_to(state, -1) is None
