"""Assemble a ready-to-use search bar from settings."""

from __future__ import annotations

import httpx

from geosuggest.config import AppSettings, get_settings
from geosuggest.logging import configure_logging, logger
from geosuggest.services.geocoding import NominatimGeocoder
from geosuggest.widget.orchestrator import SearchOrchestrator, SelectCallback, StateListener
from geosuggest.widget.view import SearchBar


def create_search_bar(
    http_client: httpx.AsyncClient,
    on_select: SelectCallback,
    settings: AppSettings | None = None,
    *,
    on_change: StateListener | None = None,
) -> SearchBar:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    geocoder = NominatimGeocoder(http_client, settings.geocoder)
    orchestrator = SearchOrchestrator(
        geocoder,
        on_select,
        settings.widget,
        on_change=on_change,
    )

    logger.info(
        "search_bar_created",
        environment=settings.environment,
        geocoder=str(settings.geocoder.base_url),
        debounce_ms=settings.widget.debounce_ms,
    )
    return SearchBar(orchestrator, settings.widget)


__all__ = ["create_search_bar"]
