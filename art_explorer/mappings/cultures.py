"""Culture / style vocabulary.

Curated `style_title` values from the AIC collection. Casing is inconsistent
upstream ("19th century" next to "20th Century") and must be kept as-is
because the search endpoint matches the keyword field exactly.
"""

from __future__ import annotations

from enum import Enum


class CultureOrStyle(str, Enum):
    JAPANESE = "Japanese (culture or style)"
    CENTURY_21ST = "21st Century"
    CENTURY_19TH = "19th century"
    CENTURY_20TH = "20th Century"
    CHINESE = "Chinese (culture or style)"
    MODERNISM = "Modernism"
    ROMAN_ANCIENT = "roman (ancient, style or period)"
    POP_ART = "Pop Art"
    NINETEENTH_CENTURY = "nineteenth century"
    GREEK = "greek"
    CENTURY_18TH = "18th Century"
    NAZCA = "nazca"
    AVANT_GARDE = "avant-garde"
    MOCHE = "moche"
    CUBISM = "Cubism"
    CONTEMPORARY = "contemporary"
    ARTS_AND_CRAFTS = "Arts and Crafts Movement"
    PICTORIALISM = "Pictorialism"
    EGYPTIAN = "egyptian"
    BAUHAUS = "bauhaus"
    QING = "qing"
    SOUTH_ASIAN = "South Asian"
    CENTURY_17TH = "17th Century"
    HIMALAYAN = "Himalayan"
    IMPRESSIONISM = "Impressionism"
    MEDIEVAL = "medieval"
    FOLK_ART = "Folk Art"
    PHOTO_LEAGUE = "Photo League"
    NEW_KINGDOM = "new kingdom"
    ROMAN_PERIOD_EGYPTIAN = "roman period (egyptian)"
    SYRIAN = "syrian"
    SURREALISM = "Surrealism"
    ART_DECO = "Art Deco"
    NEW_BAUHAUS = "New Bauhaus (Institute of Design)"
    THIRD_INTERMEDIATE_PERIOD = "third intermediate period"
    IMPERIAL_ROMAN = "imperial (roman)"
    REALISM = "Realism"
    JAPANISM = "Japanism"
    EDO = "edo (japanese period)"
    CHIMU = "chimú"
    INDONESIAN = "indonesian"
    KOREAN = "Korean (culture or style)"
    MING = "ming"
    CENTURY_15TH = "15th century"


_BY_VALUE: dict[str, CultureOrStyle] = {
    member.value: member for member in CultureOrStyle
}


def get_all_cultures_or_styles() -> list[CultureOrStyle]:
    return list(_BY_VALUE.values())


def filter_cultures_or_styles(query: str) -> list[CultureOrStyle]:
    """Case-insensitive substring search over culture/style labels."""
    if not query:
        return get_all_cultures_or_styles()

    needle = query.lower()
    return [c for c in get_all_cultures_or_styles() if needle in c.value.lower()]


def is_culture_or_style(value: str | None) -> bool:
    return value is not None and value in _BY_VALUE


def parse_culture_or_style(value: str | None) -> CultureOrStyle | None:
    if value is None:
        return None
    return _BY_VALUE.get(value)
