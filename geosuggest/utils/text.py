"""Text helpers for rendering location suggestions."""

from __future__ import annotations

import re
from dataclasses import dataclass

from geosuggest.logging import logger

REGIONAL_INDICATOR_OFFSET = 127397
DISPLAY_NAME_SEPARATOR = ", "


@dataclass(frozen=True, slots=True)
class Segment:
    text: str
    matched: bool = False


@dataclass(frozen=True, slots=True)
class LocationDetails:
    main_text: str
    secondary_text: str


def decompose(display_name: str) -> LocationDetails:
    """Split ``"Paris, Île-de-France, France"`` into its first part and the rest."""

    main_text, _, secondary_text = display_name.partition(DISPLAY_NAME_SEPARATOR)
    return LocationDetails(main_text=main_text, secondary_text=secondary_text)


def highlight(text: str, query: str) -> list[Segment]:
    """Split ``text`` around case-insensitive occurrences of ``query``.

    The query is matched literally. Segments keep the original casing and
    order; joining their text gives back ``text``. When there is nothing to
    highlight, or highlighting fails, the whole text comes back as one plain
    segment.
    """

    if not query or not query.strip() or not text:
        return [Segment(text)]

    try:
        pattern = re.compile(f"({re.escape(query)})", re.IGNORECASE)
        # With one capturing group, odd positions of the split are the matches.
        return [
            Segment(part, matched=position % 2 == 1)
            for position, part in enumerate(pattern.split(text))
            if part
        ]
    except Exception as exc:
        logger.warning("highlight_failed", query=query, error=str(exc))
        return [Segment(text)]


def flag_emoji(country_code: str | None) -> str:
    """Return the flag emoji for an ISO 3166-1 alpha-2 code (``"fr"`` -> 🇫🇷)."""

    if not country_code:
        return ""
    return "".join(
        chr(REGIONAL_INDICATOR_OFFSET + ord(char)) for char in country_code.upper()
    )


__all__ = [
    "LocationDetails",
    "Segment",
    "decompose",
    "flag_emoji",
    "highlight",
]
