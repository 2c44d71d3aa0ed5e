"""Combobox/listbox view model and event routing for a rendering surface."""

from __future__ import annotations

from dataclasses import dataclass

from geosuggest.config import WidgetSettings
from geosuggest.domain.models import SearchResult
from geosuggest.utils.text import Segment, decompose, flag_emoji, highlight
from geosuggest.widget.orchestrator import SearchOrchestrator
from geosuggest.widget.selection import NavKey
from geosuggest.widget.state import WidgetState


@dataclass(frozen=True, slots=True)
class OptionView:
    id: str
    index: int
    selected: bool
    flag: str
    main_text: list[Segment]
    secondary_text: list[Segment]
    postcode: list[Segment] | None
    result: SearchResult


@dataclass(frozen=True, slots=True)
class ComboboxView:
    query: str
    placeholder: str
    expanded: bool
    controls: str
    active_descendant: str | None
    loading: bool
    options: tuple[OptionView, ...]
    role: str = "combobox"
    listbox_role: str = "listbox"


def option_id(index: int) -> str:
    return f"result-{index}"


def render(
    state: WidgetState,
    *,
    placeholder: str = "Search for a location...",
    listbox_id: str = "search-results",
) -> ComboboxView:
    options = []
    for index, result in enumerate(state.results):
        details = decompose(result.display_name)
        postcode = result.postcode
        options.append(
            OptionView(
                id=option_id(index),
                index=index,
                selected=index == state.selection_index,
                flag=flag_emoji(result.country_code),
                main_text=highlight(details.main_text, state.query),
                secondary_text=highlight(details.secondary_text, state.query),
                postcode=highlight(postcode, state.query) if postcode else None,
                result=result,
            )
        )

    selected = state.selected
    return ComboboxView(
        query=state.query,
        placeholder=placeholder,
        expanded=state.has_results,
        controls=listbox_id,
        active_descendant=option_id(state.selection_index) if selected is not None else None,
        loading=state.loading,
        options=tuple(options),
    )


class SearchBar:
    """Routes ``input``, ``key_nav`` and ``click`` events into the orchestrator."""

    def __init__(self, orchestrator: SearchOrchestrator, settings: WidgetSettings | None = None) -> None:
        self.orchestrator = orchestrator
        self.settings = settings or orchestrator.settings

    def input(self, text: str) -> None:
        self.orchestrator.on_input(text)

    def key_nav(self, key: str | NavKey) -> None:
        self.orchestrator.key_nav(key)

    def click(self, index: int) -> None:
        self.orchestrator.select(index)

    def view(self) -> ComboboxView:
        return render(
            self.orchestrator.state,
            placeholder=self.settings.placeholder,
            listbox_id=self.settings.listbox_id,
        )

    def close(self) -> None:
        self.orchestrator.close()


__all__ = ["ComboboxView", "OptionView", "SearchBar", "option_id", "render"]
