"""Normalize raw AIC records into `Artwork` objects.

Everything here is pure: no network access and no shared state, so the
same raw record always yields an equal `Artwork`.
"""

from __future__ import annotations

from typing import Any, Mapping

from .models import Artwork

IIIF_URL = "https://www.artic.edu/iiif/2"
IIIF_WIDTH = 600


def compute_decade(year: int) -> int:
    """Floor a year to its decade (-55 -> -60, 1859 -> 1850)."""
    return (year // 10) * 10


def generate_image_url(image_id: str) -> str:
    """Build the IIIF URL for an AIC image id at display width."""
    return f"{IIIF_URL}/{image_id}/full/{IIIF_WIDTH},/0/default.jpg"


def get_primary_year(raw: Mapping[str, Any]) -> int | None:
    """Pick the representative year of an artwork.

    `date_end` wins over `date_start`: for works produced over several
    years the completion date is the one people remember.
    """
    date_end = raw.get("date_end")
    if date_end is not None:
        return date_end
    return raw.get("date_start")


def map_artwork(raw: Mapping[str, Any]) -> Artwork:
    """Normalize a `RawArtwork` record."""
    image_id = raw.get("image_id") or ""
    primary_year = get_primary_year(raw)

    return Artwork(
        id=raw["id"],
        image_id=image_id,
        title=raw.get("title") or "Untitled",
        artist=raw.get("artist_title"),
        date_display=raw.get("date_display"),
        date_start=raw.get("date_start"),
        date_end=raw.get("date_end"),
        movement=raw.get("style_title"),
        department=raw.get("department_title"),
        medium=raw.get("medium_display"),
        image_url=generate_image_url(image_id) if image_id else "",
        primary_year=primary_year,
        decade=compute_decade(primary_year) if primary_year is not None else None,
    )


def format_year(year: int) -> str:
    """Display form of a year: 1889 -> "1889", -500 -> "500 BC"."""
    if year < 0:
        return f"{abs(year)} BC"
    return str(year)
