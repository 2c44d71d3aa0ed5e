"""Geocoding clients consumed by the search widget."""

from __future__ import annotations

from typing import Any, Protocol, Sequence

import httpx
from pydantic import ValidationError

from geosuggest.config import GeocoderSettings
from geosuggest.domain.models import SearchResult
from geosuggest.logging import logger
from geosuggest.services.exceptions import GeocodingError
from geosuggest.utils.retry import retry_async


class Geocoder(Protocol):
    async def search(self, query: str) -> Sequence[SearchResult]: ...


class NominatimGeocoder:
    """Free-text search against a Nominatim-compatible ``/search`` endpoint.

    Results keep the order the service returns them in.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: GeocoderSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or GeocoderSettings()

    async def search(self, query: str) -> list[SearchResult]:
        query = (query or "").strip()
        if not query:
            return []

        url = f"{str(self._settings.base_url).rstrip('/')}/search"
        params = self._params(query)
        headers = {"User-Agent": self._settings.user_agent}

        async def _request():
            resp = await self._client.get(
                url,
                params=params,
                headers=headers,
                timeout=self._settings.request_timeout_seconds,
            )
            resp.raise_for_status()
            return resp

        try:
            response = await retry_async(
                _request,
                max_attempts=self._settings.max_attempts,
                base_delay=self._settings.retry_base_delay,
                retry_on=(httpx.TransportError,),
                logger=logger,
                operation_name="nominatim_search",
            )
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            detail = exc.response.text[:500]
            raise GeocodingError(
                f"Geocoding request failed ({status_code}): {detail}",
                status_code=status_code,
            ) from exc
        except httpx.RequestError as exc:
            raise GeocodingError(f"Geocoding request failed: {exc}") from exc

        return self._parse(response)

    def _params(self, query: str) -> dict[str, Any]:
        params: dict[str, Any] = {
            "q": query,
            "format": "jsonv2",
            "addressdetails": 1,
            "limit": self._settings.result_limit,
        }
        if self._settings.accept_language:
            params["accept-language"] = self._settings.accept_language
        if self._settings.country_codes:
            params["countrycodes"] = self._settings.country_codes
        return params

    @staticmethod
    def _parse(response: httpx.Response) -> list[SearchResult]:
        try:
            payload = response.json()
        except ValueError as exc:
            raise GeocodingError("Geocoding service returned invalid JSON") from exc
        if not isinstance(payload, list):
            raise GeocodingError(
                f"Unexpected geocoding payload: {type(payload).__name__}"
            )
        try:
            return [SearchResult.model_validate(item) for item in payload]
        except ValidationError as exc:
            raise GeocodingError(f"Malformed geocoding result: {exc}") from exc


__all__ = ["Geocoder", "NominatimGeocoder"]
