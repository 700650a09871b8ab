"""Artwork type vocabulary.

Values are the `artwork_type_title` labels used by the Art Institute of
Chicago. The full list is published at
https://api.artic.edu/api/v1/artwork-types and is matched exactly (case and
punctuation included) by the search endpoint's `.keyword` fields.
"""

from __future__ import annotations

from enum import Enum


class ArtworkType(str, Enum):
    PRINT = "Print"
    PHOTOGRAPH = "Photograph"
    DRAWING_AND_WATERCOLOR = "Drawing and Watercolor"
    TEXTILE = "Textile"
    PAINTING = "Painting"
    ARCHITECTURAL_DRAWING = "Architectural Drawing"
    BOOK = "Book"
    CERAMICS = "Ceramics"
    VESSEL = "Vessel"
    COSTUME_AND_ACCESSORIES = "Costume and Accessories"
    SCULPTURE = "Sculpture"
    GLASS = "Glass"
    METALWORK = "Metalwork"
    COIN = "Coin"
    GRAPHIC_DESIGN = "Graphic Design"
    DECORATIVE_ARTS = "Decorative Arts"
    DESIGN = "Design"
    MEDALS = "Medals"
    FURNITURE = "Furniture"
    ARMS = "Arms"
    RELIGIOUS_RITUAL_OBJECT = "Religious/Ritual Object"
    ARMOR = "Armor"
    ARCHITECTURAL_FRAGMENT = "Architectural fragment"
    ARCHIVES_GROUPINGS = "Archives (groupings)"
    MIXED_MEDIA = "Mixed Media"
    MINIATURE_PAINTING = "Miniature Painting"
    MODEL = "Model"
    COVERINGS_AND_HANGINGS = "Coverings and Hangings"
    FILM_VIDEO_NEW_MEDIA = "Film, Video, New Media"
    NON_ART = "non-art"
    MASK = "Mask"
    MINIATURE_ROOM = "Miniature room"
    INSTALLATION = "Installation"
    FUNERARY_OBJECT = "Funerary Object"
    FURNISHINGS = "Furnishings"
    TIME_BASED_MEDIA = "Time Based Media"
    BASKETRY = "Basketry"
    AUDIO_VIDEO = "Audio-Video"
    EQUIPMENT = "Equipment"
    DIGITAL_ARTS = "Digital Arts"
    MATERIALS = "Materials"
    PROTOTYPES = "Prototypes"


# Explicit value -> member table used by the URL decoder
_BY_VALUE: dict[str, ArtworkType] = {
    member.value: member for member in ArtworkType
}


def get_all_artwork_types() -> list[ArtworkType]:
    """Return all artwork types in declaration order."""
    return list(_BY_VALUE.values())


def filter_artwork_types(query: str) -> list[ArtworkType]:
    """Case-insensitive substring search over artwork type labels."""
    if not query:
        return get_all_artwork_types()

    needle = query.lower()
    return [t for t in get_all_artwork_types() if needle in t.value.lower()]


def is_artwork_type(value: str | None) -> bool:
    return value is not None and value in _BY_VALUE


def parse_artwork_type(value: str | None) -> ArtworkType | None:
    """Return the member whose label is exactly `value`, or None."""
    if value is None:
        return None
    return _BY_VALUE.get(value)
