"""Filters <-> URL query parameters.

The explore page keeps its filter state in the URL so searches can be
bookmarked and shared. Decoding is lenient: anything that does not parse
is dropped instead of raising, so a stale or hand-edited link still opens.
"""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Mapping, Sequence, Union
from urllib.parse import parse_qsl, urlencode

from .mappings import parse_artwork_type, parse_culture_or_style
from .models import DEFAULT_LIMIT, DEFAULT_PAGE, Filters, YearRange

# Query parameter names
PARAM_ARTWORK_TYPE = "artworkType"
PARAM_CULTURE_OR_STYLE = "cultureOrStyle"
PARAM_YEAR_START = "yearStart"
PARAM_YEAR_END = "yearEnd"
PARAM_PAGE = "page"
PARAM_LIMIT = "limit"

DEFAULT_PATH = "/explore"

# Longer digit runs are not a page, limit or year
_INT_RE = re.compile(r"[+-]?\d{1,9}")

QueryValue = Union[str, Sequence[str]]


def encode(filters: Filters) -> dict[str, str]:
    """Convert filters to query parameters, leaving out defaults."""
    params: dict[str, str] = {}

    if filters.artwork_type is not None:
        params[PARAM_ARTWORK_TYPE] = filters.artwork_type.value

    if filters.culture_or_style is not None:
        params[PARAM_CULTURE_OR_STYLE] = filters.culture_or_style.value

    if filters.year_range is not None:
        params[PARAM_YEAR_START] = str(filters.year_range.start)
        params[PARAM_YEAR_END] = str(filters.year_range.end)

    if filters.page is not None and filters.page != DEFAULT_PAGE:
        params[PARAM_PAGE] = str(filters.page)

    if filters.limit is not None and filters.limit != DEFAULT_LIMIT:
        params[PARAM_LIMIT] = str(filters.limit)

    return params


def _first(params: Mapping[str, QueryValue], key: str) -> str | None:
    value = params.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    # parse_qs style: list of values, first one wins
    return value[0] if value else None


def _parse_int(value: str | None) -> int | None:
    if value is None:
        return None
    value = value.strip()
    if not _INT_RE.fullmatch(value):
        return None
    return int(value)


def _parse_positive_int(value: str | None) -> int | None:
    number = _parse_int(value)
    if number is None or number <= 0:
        return None
    return number


def decode(params: Mapping[str, QueryValue]) -> Filters:
    """Parse query parameters into filters, dropping invalid values."""
    artwork_type = parse_artwork_type(_first(params, PARAM_ARTWORK_TYPE))
    culture_or_style = parse_culture_or_style(_first(params, PARAM_CULTURE_OR_STYLE))

    # Both bounds or nothing
    year_range = None
    start = _parse_int(_first(params, PARAM_YEAR_START))
    end = _parse_int(_first(params, PARAM_YEAR_END))
    if start is not None and end is not None:
        year_range = YearRange(start=start, end=end)

    return Filters(
        artwork_type=artwork_type,
        culture_or_style=culture_or_style,
        year_range=year_range,
        page=_parse_positive_int(_first(params, PARAM_PAGE)),
        limit=_parse_positive_int(_first(params, PARAM_LIMIT)),
    )


def decode_query_string(query: str) -> Filters:
    """Parse a raw query string (with or without leading '?')."""
    return decode(dict(parse_qsl(query.lstrip("?"))))


def build_url(filters: Filters, base_path: str = DEFAULT_PATH) -> str:
    """Produce a navigable URL for the given filter state."""
    query = urlencode(encode(filters))
    return f"{base_path}?{query}" if query else base_path


def get_default_filters() -> Filters:
    """Default filters: page 1, limit 20, no constraints."""
    return Filters(page=DEFAULT_PAGE, limit=DEFAULT_LIMIT)


def with_defaults(filters: Filters) -> Filters:
    """Fill in page and limit when the URL left them out."""
    return replace(
        filters,
        page=filters.page or DEFAULT_PAGE,
        limit=filters.limit or DEFAULT_LIMIT,
    )


def is_default_filters(filters: Filters) -> bool:
    """True if the filters would not add anything to the URL."""
    return not encode(filters)
