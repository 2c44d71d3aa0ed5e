from geosuggest.widget.factory import create_search_bar
from geosuggest.widget.orchestrator import SearchOrchestrator
from geosuggest.widget.selection import KeyTransition, NavKey, move_to, reduce_key
from geosuggest.widget.state import NO_SELECTION, WidgetState
from geosuggest.widget.view import ComboboxView, OptionView, SearchBar, render

__all__ = [
    "ComboboxView",
    "KeyTransition",
    "NO_SELECTION",
    "NavKey",
    "OptionView",
    "SearchBar",
    "SearchOrchestrator",
    "WidgetState",
    "create_search_bar",
    "move_to",
    "reduce_key",
    "render",
]
