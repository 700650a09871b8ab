"""Paginated artwork feed for the explore page.

Accumulates pages from an adapter into one ordered list, skipping artworks
that cannot be displayed and artworks already loaded. The feed is a small
state machine; `load_more` only fetches from IDLE, which is what keeps a
second "load more" from firing while a page is in flight.
"""

from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import Any, Iterable

from .adapters.base import FetchError, MuseumAdapter
from .filters import decode, encode, with_defaults
from .models import Artwork, Filters


class FeedState(Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERRORED = "errored"
    EXHAUSTED = "exhausted"


def merge_artworks(existing: list[Artwork], incoming: Iterable[Artwork]) -> list[Artwork]:
    """Append displayable artworks whose id is not loaded yet.

    Order is preserved and the first occurrence of an id wins.
    """
    seen = {artwork.id for artwork in existing}
    merged = list(existing)
    for artwork in incoming:
        if not artwork.has_image or artwork.id in seen:
            continue
        seen.add(artwork.id)
        merged.append(artwork)
    return merged


class ArtworkFeed:
    """Infinite-scroll style accumulation of artwork pages."""

    def __init__(self, adapter: MuseumAdapter, filters: Filters | None = None) -> None:
        self.adapter = adapter
        self.filters = with_defaults(filters or Filters())
        self.artworks: list[Artwork] = []
        self.page = 0  # last page successfully loaded
        self.has_more = True
        self.state = FeedState.IDLE
        self.error: str | None = None

    @property
    def is_initial_error(self) -> bool:
        """True if the first page failed and nothing is shown yet."""
        return self.state is FeedState.ERRORED and self.page == 0

    def _load(self, page: int, append: bool) -> bool:
        self.state = FeedState.LOADING
        self.error = None

        try:
            result = self.adapter.fetch_artworks(replace(self.filters, page=page))
        except FetchError as e:
            self.state = FeedState.ERRORED
            self.error = str(e)
            return False

        if append:
            self.artworks = merge_artworks(self.artworks, result.data)
        else:
            self.artworks = merge_artworks([], result.data)

        self.page = page
        self.has_more = result.has_more
        self.state = FeedState.IDLE if self.has_more else FeedState.EXHAUSTED
        return True

    def load_first(self) -> bool:
        """(Re)load page 1, replacing anything loaded so far."""
        return self._load(1, append=False)

    def load_more(self) -> bool:
        """Load and append the next page.

        Does nothing (returns False) while loading, after an error or once
        the collection is exhausted.
        """
        if self.state is not FeedState.IDLE or not self.has_more:
            return False
        return self._load(self.page + 1, append=True)

    def retry(self) -> bool:
        """Retry the page that failed."""
        if self.state is not FeedState.ERRORED:
            return False
        if self.page == 0:
            return self.load_first()
        return self._load(self.page + 1, append=True)

    def to_snapshot(self) -> dict[str, Any]:
        """Plain-dict form for the session cache."""
        return {
            "filters": encode(replace(self.filters, page=None)),
            "artworks": [a.to_dict() for a in self.artworks],
            "page": self.page,
            "has_more": self.has_more,
            "error": self.error,
        }

    @classmethod
    def from_snapshot(cls, adapter: MuseumAdapter, snapshot: dict[str, Any]) -> "ArtworkFeed":
        """Restore a feed saved with `to_snapshot`."""
        feed = cls(adapter, decode(snapshot.get("filters") or {}))
        feed.artworks = [Artwork.from_dict(a) for a in snapshot.get("artworks", [])]
        feed.page = snapshot.get("page", 0)
        feed.has_more = snapshot.get("has_more", True)
        feed.error = snapshot.get("error")
        if feed.error:
            feed.state = FeedState.ERRORED
        else:
            feed.state = FeedState.IDLE if feed.has_more else FeedState.EXHAUSTED
        return feed
