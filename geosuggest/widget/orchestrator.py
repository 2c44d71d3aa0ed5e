"""Search orchestration: debounced lookups, stale-response handling, commits."""

from __future__ import annotations

import asyncio
from dataclasses import replace
from typing import Callable, Sequence

from geosuggest.config import WidgetSettings
from geosuggest.domain.models import SearchResult
from geosuggest.logging import logger
from geosuggest.services.geocoding import Geocoder
from geosuggest.utils.debounce import debounce
from geosuggest.widget.selection import NavKey, move_to, reduce_key
from geosuggest.widget.state import NO_SELECTION, WidgetState

SelectCallback = Callable[[SearchResult], None]
StateListener = Callable[[WidgetState], None]


class SearchOrchestrator:
    """Owns the widget state and drives the geocoder from user input.

    Every lookup is tagged with an epoch taken when it starts; a response is
    applied only if no newer lookup, commit, dismissal or teardown has
    happened since. Lookup failures never escape: they are logged and show
    up as an empty result list.
    """

    def __init__(
        self,
        geocoder: Geocoder,
        on_select: SelectCallback,
        settings: WidgetSettings | None = None,
        *,
        on_change: StateListener | None = None,
    ) -> None:
        self._geocoder = geocoder
        self._on_select = on_select
        self._on_change = on_change
        self.settings = settings or WidgetSettings()
        self._state = WidgetState()
        self._epoch = 0
        self._lookup: asyncio.Task[Sequence[SearchResult]] | None = None
        self._debounced = debounce(self.run_search, self.settings.debounce_ms)
        self._closed = False

    @property
    def state(self) -> WidgetState:
        return self._state

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def closed(self) -> bool:
        return self._closed

    def on_input(self, text: str) -> None:
        if self._closed:
            logger.debug("input_after_close_ignored")
            return
        self._set_state(replace(self._state, query=text, selection_index=NO_SELECTION))
        self._debounced(text)

    async def run_search(self, text: str) -> None:
        if self._closed:
            return
        epoch = self._supersede()

        if not text.strip():
            self._set_state(
                replace(self._state, results=(), loading=False, selection_index=NO_SELECTION)
            )
            return

        self._set_state(replace(self._state, loading=True))
        lookup = asyncio.ensure_future(self._geocoder.search(text))
        self._lookup = lookup
        # A cancelled lookup must not propagate into this coroutine.
        await asyncio.wait((lookup,))

        if epoch != self._epoch:
            if not lookup.cancelled():
                lookup.exception()  # mark retrieved
            logger.debug("stale_response_discarded", query=text, epoch=epoch, current=self._epoch)
            return
        if self._lookup is lookup:
            self._lookup = None

        if lookup.cancelled():
            exc: BaseException | None = RuntimeError("lookup cancelled")
        else:
            exc = lookup.exception()
        if exc is not None:
            logger.warning(
                "geocoding_failed",
                query=text,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            results: tuple[SearchResult, ...] = ()
        else:
            results = tuple(lookup.result() or ())
            logger.debug("search_results_applied", query=text, count=len(results))

        self._set_state(
            replace(self._state, results=results, loading=False, selection_index=NO_SELECTION)
        )

    def key_nav(self, key: str | NavKey) -> None:
        if self._closed:
            logger.debug("key_after_close_ignored", key=str(key))
            return
        transition = reduce_key(
            self._state, key, arrow_up_policy=self.settings.arrow_up_from_none
        )
        if transition.commit is not None:
            self.commit(transition.commit)
            return
        if transition.dismissed:
            self._debounced.cancel()
            self._supersede()
            self._set_state(replace(transition.state, loading=False))
            return
        self._set_state(transition.state)

    def select(self, index: int) -> None:
        """Pointer activation: highlight ``index`` and commit it straight away."""

        if self._closed:
            logger.debug("select_after_close_ignored", index=index)
            return
        state = move_to(self._state, index)
        if state is None:
            logger.debug("select_out_of_range", index=index, count=len(self._state.results))
            return
        self._set_state(state)
        self.commit(state.results[index])

    def commit(self, result: SearchResult) -> None:
        self._debounced.cancel()
        self._supersede()
        try:
            self._on_select(result)
        finally:
            self._set_state(WidgetState())

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._debounced.close()
        self._supersede()
        logger.debug("search_orchestrator_closed")

    async def wait_idle(self) -> None:
        """Wait for pending debounced searches and the lookup they started."""

        await self._debounced.join()

    async def __aenter__(self) -> SearchOrchestrator:
        return self

    async def __aexit__(self, *exc: object) -> None:
        self.close()

    def _supersede(self) -> int:
        self._epoch += 1
        lookup, self._lookup = self._lookup, None
        if lookup is not None and not lookup.done() and (
            self.settings.cancel_superseded or self._closed
        ):
            lookup.cancel()
        return self._epoch

    def _set_state(self, state: WidgetState) -> None:
        if state == self._state:
            return
        self._state = state
        if self._on_change is not None:
            self._on_change(state)


__all__ = ["SearchOrchestrator", "SelectCallback", "StateListener"]
