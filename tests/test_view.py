"""Combobox view model and event routing."""

from __future__ import annotations

import asyncio
from dataclasses import replace

import pytest

from geosuggest.config import WidgetSettings
from geosuggest.utils.text import Segment
from geosuggest.widget.orchestrator import SearchOrchestrator
from geosuggest.widget.state import WidgetState
from geosuggest.widget.view import SearchBar, render


class DummyGeocoder:
    def __init__(self, results) -> None:
        self.results = list(results)

    async def search(self, query: str):
        await asyncio.sleep(0)
        return self.results


def test_render_empty_state_is_collapsed():
    view = render(WidgetState())
    assert view.role == "combobox"
    assert view.expanded is False
    assert view.active_descendant is None
    assert view.controls == "search-results"
    assert view.options == ()


def test_render_options(paris_results):
    state = WidgetState(query="paris", results=tuple(paris_results), selection_index=1)
    view = render(state, placeholder="Where to?", listbox_id="places")

    assert view.expanded is True
    assert view.controls == "places"
    assert view.placeholder == "Where to?"
    assert view.active_descendant == "result-1"
    assert [option.id for option in view.options] == ["result-0", "result-1", "result-2"]
    assert [option.selected for option in view.options] == [False, True, False]

    first = view.options[0]
    assert first.flag == "\U0001F1EB\U0001F1F7"
    assert first.main_text == [Segment("Paris", matched=True)]
    assert first.secondary_text == [Segment("Île-de-France, France")]
    assert first.postcode == [Segment("75000")]
    assert first.result is paris_results[0]

    assert view.options[2].postcode is None


def test_render_highlights_postcode(result_factory):
    result = result_factory("10 Downing Street, London, SW1A 2AA, United Kingdom", "gb", "SW1A 2AA")
    view = render(WidgetState(query="sw1a", results=(result,)))
    assert view.options[0].postcode == [Segment("SW1A", matched=True), Segment(" 2AA")]


def test_render_without_address(result_factory):
    view = render(WidgetState(query="x", results=(result_factory("Null Island"),)))
    assert view.options[0].flag == ""
    assert view.options[0].postcode is None


def test_render_ignores_out_of_range_selection(paris_results):
    state = replace(WidgetState(results=tuple(paris_results)), selection_index=7)
    assert render(state).active_descendant is None


@pytest.mark.asyncio
async def test_search_bar_routes_events(paris_results):
    selections: list = []
    orchestrator = SearchOrchestrator(
        DummyGeocoder(paris_results),
        selections.append,
        WidgetSettings(debounce_ms=0, placeholder="Find a place"),
    )
    bar = SearchBar(orchestrator)

    bar.input("par")
    await orchestrator.wait_idle()
    view = bar.view()
    assert view.query == "par"
    assert view.placeholder == "Find a place"
    assert len(view.options) == 3

    bar.key_nav("ArrowDown")
    assert bar.view().active_descendant == "result-0"

    bar.click(1)
    assert selections == [paris_results[1]]
    assert bar.view().expanded is False

    bar.close()
    assert orchestrator.closed


@pytest.mark.asyncio
async def test_search_bar_escape_collapses(paris_results):
    orchestrator = SearchOrchestrator(
        DummyGeocoder(paris_results), lambda result: None, WidgetSettings(debounce_ms=0)
    )
    bar = SearchBar(orchestrator)
    bar.input("paris")
    await orchestrator.wait_idle()

    bar.key_nav("Escape")
    view = bar.view()
    assert view.expanded is False
    assert view.query == "paris"
