"""Pydantic models shared across the widget and geocoding layers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Address(BaseModel):
    """Structured address parts; only the fields the widget displays are typed."""

    model_config = ConfigDict(frozen=True, extra="allow")

    country_code: str | None = None
    postcode: str | None = None


class SearchResult(BaseModel):
    """One candidate location as returned by the geocoding service.

    Everything beyond ``display_name`` and ``address`` is carried through
    untouched to whoever receives the selection.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    display_name: str
    address: Address | None = None
    place_id: int | None = None
    lat: float | None = None
    lon: float | None = None
    osm_type: str | None = None
    osm_id: int | None = None
    type: str | None = None
    importance: float | None = None
    boundingbox: tuple[float, float, float, float] | None = None

    @property
    def country_code(self) -> str | None:
        return self.address.country_code if self.address else None

    @property
    def postcode(self) -> str | None:
        return self.address.postcode if self.address else None


__all__ = [
    "Address",
    "SearchResult",
]
