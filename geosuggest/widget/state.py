"""Widget state snapshot shared by the orchestrator and the view."""

from __future__ import annotations

from dataclasses import dataclass

from geosuggest.domain.models import SearchResult

NO_SELECTION = -1


@dataclass(frozen=True, slots=True)
class WidgetState:
    query: str = ""
    results: tuple[SearchResult, ...] = ()
    loading: bool = False
    selection_index: int = NO_SELECTION

    @property
    def has_results(self) -> bool:
        return bool(self.results)

    @property
    def selected(self) -> SearchResult | None:
        if 0 <= self.selection_index < len(self.results):
            return self.results[self.selection_index]
        return None


__all__ = ["NO_SELECTION", "WidgetState"]
