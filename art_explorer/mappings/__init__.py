"""Closed filter vocabularies (artwork types, cultures/styles)."""

from .artwork_types import (
    ArtworkType,
    get_all_artwork_types,
    filter_artwork_types,
    is_artwork_type,
    parse_artwork_type,
)
from .cultures import (
    CultureOrStyle,
    get_all_cultures_or_styles,
    filter_cultures_or_styles,
    is_culture_or_style,
    parse_culture_or_style,
)

__all__ = [
    "ArtworkType",
    "get_all_artwork_types",
    "filter_artwork_types",
    "is_artwork_type",
    "parse_artwork_type",
    "CultureOrStyle",
    "get_all_cultures_or_styles",
    "filter_cultures_or_styles",
    "is_culture_or_style",
    "parse_culture_or_style",
]
