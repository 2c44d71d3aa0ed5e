"""Keyboard selection over the current result list.

The transitions are pure: they take a :class:`WidgetState` and return the
next one, leaving side effects (calling back into the orchestrator) to the
caller.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Literal

from geosuggest.domain.models import SearchResult
from geosuggest.widget.state import NO_SELECTION, WidgetState

ArrowUpPolicy = Literal["stay", "last"]


class NavKey(str, Enum):
    ARROW_DOWN = "ArrowDown"
    ARROW_UP = "ArrowUp"
    ENTER = "Enter"
    ESCAPE = "Escape"

    @classmethod
    def parse(cls, key: str | NavKey) -> NavKey | None:
        try:
            return cls(key)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class KeyTransition:
    state: WidgetState
    commit: SearchResult | None = None
    dismissed: bool = False


def reduce_key(
    state: WidgetState,
    key: str | NavKey,
    *,
    arrow_up_policy: ArrowUpPolicy = "stay",
) -> KeyTransition:
    nav = NavKey.parse(key)
    count = len(state.results)
    if nav is None or count == 0:
        return KeyTransition(state)

    index = state.selection_index
    if nav is NavKey.ARROW_DOWN:
        return KeyTransition(_with_index(state, min(index + 1, count - 1)))

    if nav is NavKey.ARROW_UP:
        if index <= NO_SELECTION:
            if arrow_up_policy == "last":
                return KeyTransition(_with_index(state, count - 1))
            return KeyTransition(state)
        return KeyTransition(_with_index(state, max(index - 1, 0)))

    if nav is NavKey.ENTER:
        return KeyTransition(state, commit=state.selected)

    # Escape
    return KeyTransition(
        replace(state, results=(), selection_index=NO_SELECTION),
        dismissed=True,
    )


def move_to(state: WidgetState, index: int) -> WidgetState | None:
    """Select ``index`` directly; ``None`` when it points outside the list."""

    if not 0 <= index < len(state.results):
        return None
    return _with_index(state, index)


def _with_index(state: WidgetState, index: int) -> WidgetState:
    if index == state.selection_index:
        return state
    return replace(state, selection_index=index)


__all__ = ["ArrowUpPolicy", "KeyTransition", "NavKey", "move_to", "reduce_key"]
