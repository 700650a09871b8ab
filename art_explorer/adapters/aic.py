"""Art Institute of Chicago adapter."""

from __future__ import annotations

import random
from typing import Any

from . import register
from .base import FetchError, MuseumAdapter, NoArtworkAvailableError
from ..models import Artwork, Filters, PaginatedResult, Pagination, SourceInfo
from ..normalize import map_artwork
from ..query import (
    QueryMode,
    build_random_list_params,
    build_random_search_body,
    build_request,
)

# Random artwork sampling: one page range per attempt, narrowing each time
RANDOM_PAGE_RANGES = (50, 20, 10)
RANDOM_ATTEMPTS = len(RANDOM_PAGE_RANGES)
RANDOM_FALLBACK_PAGES = 100

# Types that make for a fair "guess the artist" round
RANDOM_ARTWORK_TYPES = [
    "Painting",
    "Drawing and Watercolor",
    "Miniature Painting",
]


@register
class AICAdapter(MuseumAdapter):
    """Adapter for the Art Institute of Chicago API."""

    name = "Art Institute of Chicago"
    short_name = "AIC"
    base_url = "https://api.artic.edu/api/v1/artworks"
    search_url = "https://api.artic.edu/api/v1/artworks/search"

    def _list(self, params: dict[str, str | int]) -> dict[str, Any]:
        return self._request_json("GET", self.base_url, params=params)

    def _search(self, body: dict[str, Any]) -> dict[str, Any]:
        return self._request_json("POST", self.search_url, json=body)

    def _parse_page(self, data: dict[str, Any]) -> PaginatedResult[Artwork]:
        """Map a raw response to a page of normalized artworks."""
        raw_artworks = data.get("data")
        if not isinstance(raw_artworks, list):
            self._log_error("Response has no 'data' list")
            raise FetchError(f"{self.name} sent a response we could not read.")

        artworks: list[Artwork] = []
        for item in raw_artworks:
            try:
                artworks.append(map_artwork(item))
            except (KeyError, TypeError, AttributeError) as e:
                self._log_warning(f"Failed to parse artwork: {e}")
                continue

        return PaginatedResult(
            data=artworks,
            pagination=Pagination.from_api(data.get("pagination") or {}),
            info=SourceInfo.from_api(data.get("info") or {}),
        )

    def fetch_artworks(self, filters: Filters | None = None) -> PaginatedResult[Artwork]:
        """
        Fetch one page of artworks.

        Uses the search endpoint when an artwork type, culture/style or year
        range filter is set, the listing endpoint otherwise. Artworks without
        an image are kept; the caller decides what to display.
        """
        request = build_request(filters)

        if request.mode is QueryMode.SEARCH:
            self._log_info(
                f"Searching (page={request.body['page']}, "
                f"limit={request.body['limit']}, "
                f"clauses={len(request.body['query']['bool']['must'])})"
            )
            data = self._search(request.body)
        else:
            self._log_info(
                f"Listing (page={request.params['page']}, "
                f"limit={request.params['limit']})"
            )
            data = self._list(request.params)

        result = self._parse_page(data)
        self._log_info(
            f"Received {len(result.data)} artworks "
            f"(page {result.pagination.current_page}/{result.pagination.total_pages})"
        )
        return result

    def fetch_random_artwork(self, rng: Any = None) -> Artwork:
        """
        Fetch one random, reasonably modern painting or drawing.

        Tries RANDOM_ATTEMPTS searches on narrowing page ranges; a failed
        request and an empty page both just use up an attempt. If none hits,
        falls back to a random page of the unfiltered listing.

        Args:
            rng: object with `randint` and `choice` (defaults to `random`)

        Raises:
            FetchError: the fallback request failed
            NoArtworkAvailableError: the fallback page was empty too
        """
        rng = rng or random

        for attempt, max_page in enumerate(RANDOM_PAGE_RANGES):
            page = rng.randint(1, max_page)
            artwork_type = rng.choice(RANDOM_ARTWORK_TYPES)

            try:
                data = self._search(build_random_search_body(artwork_type, page))
                result = self._parse_page(data)
            except FetchError as e:
                self._log_warning(f"Attempt {attempt + 1} failed: {e}")
                continue

            artwork = _first_with_image(result.data)
            if artwork is not None:
                return artwork

            self._log_info(
                f"Attempt {attempt + 1}: no artwork with an image for type "
                f'"{artwork_type}" on page {page}'
            )

        return self._fetch_random_fallback(rng)

    def _fetch_random_fallback(self, rng: Any) -> Artwork:
        """Random page of the listing endpoint, no type or date constraint."""
        page = rng.randint(1, RANDOM_FALLBACK_PAGES)
        self._log_info(f"Trying fallback strategy (page={page})")

        result = self._parse_page(self._list(build_random_list_params(page)))
        artwork = _first_with_image(result.data)
        if artwork is None:
            self._log_error("No artwork found even with fallback")
            raise NoArtworkAvailableError("No artwork available. Try again later.")

        return artwork


def _first_with_image(artworks: list[Artwork]) -> Artwork | None:
    return next((a for a in artworks if a.has_image), None)
