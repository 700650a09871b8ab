"""Translate `Filters` into AIC API requests.

The plain listing endpoint (`/artworks`) only understands paging and a few
flags, so any artwork type, culture/style or year filter has to go through
the search endpoint (`/artworks/search`) as an Elasticsearch bool query.
Search is slower and stricter, so it is only used when a filter needs it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .models import Filters

# Keep payloads small: only request the fields the normalizer reads
REQUIRED_FIELDS = [
    "id",
    "image_id",
    "title",
    "artist_title",
    "date_display",
    "date_start",
    "date_end",
    "style_title",
    "department_title",
    "medium_display",
    "is_public_domain",
    "thumbnail",
]

# Search field names
FIELD_ARTWORK_TYPE = "artwork_type_title.keyword"
FIELD_STYLE = "style_title.keyword"
FIELD_DATE_START = "date_start"
FIELD_DATE_END = "date_end"

# Random artworks must be at least this recent
RANDOM_MIN_YEAR = 1860


class QueryMode(Enum):
    SIMPLE = "simple"
    SEARCH = "search"


@dataclass(frozen=True)
class RemoteRequest:
    """A request ready to send: GET params for SIMPLE, JSON body for SEARCH."""

    mode: QueryMode
    params: dict[str, str | int] = field(default_factory=dict)
    body: dict[str, Any] = field(default_factory=dict)


def _term(field_name: str, value: str) -> dict[str, Any]:
    return {"term": {field_name: value}}


def _range(field_name: str, op: str, value: int) -> dict[str, Any]:
    return {"range": {field_name: {op: value}}}


def build_list_params(filters: Filters | None = None) -> dict[str, str | int]:
    """Query parameters for the listing endpoint."""
    filters = filters or Filters()
    return {
        "has_image": 1,
        "fields": ",".join(REQUIRED_FIELDS),
        "page": filters.effective_page,
        "limit": filters.effective_limit,
    }


def build_must_clauses(filters: Filters) -> list[dict[str, Any]]:
    """Bool `must` clauses for the advanced filters that are set.

    The year range matches artworks whose date span overlaps the range
    (ends after its start and starts before its end), not only those
    entirely inside it.
    """
    clauses: list[dict[str, Any]] = []

    if filters.artwork_type is not None:
        clauses.append(_term(FIELD_ARTWORK_TYPE, filters.artwork_type.value))

    if filters.culture_or_style is not None:
        clauses.append(_term(FIELD_STYLE, filters.culture_or_style.value))

    if filters.year_range is not None:
        clauses.append(_range(FIELD_DATE_END, "gte", filters.year_range.start))
        clauses.append(_range(FIELD_DATE_START, "lte", filters.year_range.end))

    return clauses


def _search_body(must: list[dict[str, Any]], page: int, limit: int) -> dict[str, Any]:
    return {
        "query": {"bool": {"must": must}},
        "fields": list(REQUIRED_FIELDS),
        "page": page,
        "limit": limit,
    }


def build_search_body(filters: Filters) -> dict[str, Any]:
    """JSON body for the search endpoint."""
    return _search_body(
        build_must_clauses(filters),
        filters.effective_page,
        filters.effective_limit,
    )


def build_request(filters: Filters | None = None) -> RemoteRequest:
    """Pick SIMPLE or SEARCH mode depending on which filters are active."""
    filters = filters or Filters()
    if filters.has_advanced_filters:
        return RemoteRequest(mode=QueryMode.SEARCH, body=build_search_body(filters))
    return RemoteRequest(mode=QueryMode.SIMPLE, params=build_list_params(filters))


def build_random_search_body(artwork_type: str, page: int) -> dict[str, Any]:
    """Search body for one artwork of the given type made after RANDOM_MIN_YEAR."""
    must = [
        _term(FIELD_ARTWORK_TYPE, artwork_type),
        _range(FIELD_DATE_START, "gte", RANDOM_MIN_YEAR),
    ]
    return _search_body(must, page, 1)


def build_random_list_params(page: int) -> dict[str, str | int]:
    """Listing params for one arbitrary artwork with an image."""
    return build_list_params(Filters(page=page, limit=1))
