"""Shared fixtures: sample geocoding results."""

from __future__ import annotations

import pytest

from geosuggest.domain.models import SearchResult


def make_result(
    display_name: str,
    country_code: str | None = None,
    postcode: str | None = None,
    **extra,
) -> SearchResult:
    address = None
    if country_code is not None or postcode is not None:
        address = {"country_code": country_code, "postcode": postcode}
    return SearchResult.model_validate({"display_name": display_name, "address": address, **extra})


@pytest.fixture
def result_factory():
    return make_result


@pytest.fixture
def paris_results() -> list[SearchResult]:
    return [
        make_result("Paris, Île-de-France, France", "fr", "75000", place_id=1, lat="48.85", lon="2.35"),
        make_result("Paris, Lamar County, Texas, United States", "us", "75460", place_id=2),
        make_result("Paris, Henry County, Tennessee, United States", "us", place_id=3),
    ]
