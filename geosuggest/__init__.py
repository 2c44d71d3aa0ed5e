"""geosuggest: debounced, race-safe location search for combobox widgets."""

from geosuggest.domain.models import Address, SearchResult
from geosuggest.services.geocoding import Geocoder, NominatimGeocoder
from geosuggest.widget import SearchBar, SearchOrchestrator, WidgetState, create_search_bar

__all__ = [
    "Address",
    "Geocoder",
    "NominatimGeocoder",
    "SearchBar",
    "SearchOrchestrator",
    "SearchResult",
    "WidgetState",
    "create_search_bar",
]
