"""Data models for Art Explorer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypedDict, TypeVar

from .mappings import ArtworkType, CultureOrStyle

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20


class RawThumbnail(TypedDict):
    lqip: str
    width: int
    height: int
    alt_text: str


class RawArtwork(TypedDict):
    """Artwork record exactly as returned by the AIC API."""

    id: int
    image_id: Optional[str]
    title: str
    artist_title: Optional[str]
    date_display: Optional[str]
    date_start: Optional[int]
    date_end: Optional[int]
    style_title: Optional[str]
    department_title: Optional[str]
    medium_display: Optional[str]
    is_public_domain: bool
    thumbnail: Optional[RawThumbnail]


@dataclass(frozen=True)
class Artwork:
    """Normalized artwork used by the explore feed and the guessing game."""

    id: int
    image_id: str  # "" when the record has no image
    title: str
    artist: str | None = None
    date_display: str | None = None
    date_start: int | None = None
    date_end: int | None = None
    movement: str | None = None  # from style_title
    department: str | None = None
    medium: str | None = None

    # Derived fields
    image_url: str = ""
    primary_year: int | None = None
    decade: int | None = None

    @property
    def has_image(self) -> bool:
        """True if the artwork can be displayed."""
        return bool(self.image_id and self.image_url)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for session state storage."""
        return {
            "id": self.id,
            "image_id": self.image_id,
            "title": self.title,
            "artist": self.artist,
            "date_display": self.date_display,
            "date_start": self.date_start,
            "date_end": self.date_end,
            "movement": self.movement,
            "department": self.department,
            "medium": self.medium,
            "image_url": self.image_url,
            "primary_year": self.primary_year,
            "decade": self.decade,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Artwork":
        """Rebuild an artwork stored with `to_dict`."""
        return cls(
            id=data["id"],
            image_id=data.get("image_id") or "",
            title=data.get("title") or "Untitled",
            artist=data.get("artist"),
            date_display=data.get("date_display"),
            date_start=data.get("date_start"),
            date_end=data.get("date_end"),
            movement=data.get("movement"),
            department=data.get("department"),
            medium=data.get("medium"),
            image_url=data.get("image_url") or "",
            primary_year=data.get("primary_year"),
            decade=data.get("decade"),
        )


@dataclass(frozen=True)
class YearRange:
    """Inclusive year bounds. Negative years are BCE."""

    start: int
    end: int


@dataclass(frozen=True)
class Filters:
    """Filter state for the explore page.

    None means "not set": no constraint for the enum and range fields,
    the default for page and limit. Instances are replaced, never mutated.
    """

    artwork_type: ArtworkType | None = None
    culture_or_style: CultureOrStyle | None = None
    year_range: YearRange | None = None
    page: int | None = None
    limit: int | None = None

    def __post_init__(self) -> None:
        if self.page is not None and self.page <= 0:
            raise ValueError(f"page must be positive, got {self.page}")
        if self.limit is not None and self.limit <= 0:
            raise ValueError(f"limit must be positive, got {self.limit}")

    @property
    def has_advanced_filters(self) -> bool:
        """True if any filter requires the search endpoint."""
        return (
            self.artwork_type is not None
            or self.culture_or_style is not None
            or self.year_range is not None
        )

    @property
    def effective_page(self) -> int:
        return self.page or DEFAULT_PAGE

    @property
    def effective_limit(self) -> int:
        return self.limit or DEFAULT_LIMIT


@dataclass(frozen=True)
class Pagination:
    total: int = 0
    limit: int = 0
    offset: int = 0
    total_pages: int = 0
    current_page: int = 0
    next_url: str | None = None
    prev_url: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Pagination":
        return cls(
            total=data.get("total", 0),
            limit=data.get("limit", 0),
            offset=data.get("offset", 0),
            total_pages=data.get("total_pages", 0),
            current_page=data.get("current_page", 0),
            next_url=data.get("next_url"),
            prev_url=data.get("prev_url"),
        )


@dataclass(frozen=True)
class SourceInfo:
    """Attribution block returned with every AIC response."""

    license_text: str = ""
    license_links: list[str] = field(default_factory=list)
    version: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "SourceInfo":
        return cls(
            license_text=data.get("license_text", ""),
            license_links=list(data.get("license_links") or []),
            version=data.get("version", ""),
        )


T = TypeVar("T")


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """One page of results plus pagination and attribution metadata."""

    data: list[T] = field(default_factory=list)
    pagination: Pagination = field(default_factory=Pagination)
    info: SourceInfo = field(default_factory=SourceInfo)

    @property
    def has_more(self) -> bool:
        return self.pagination.current_page < self.pagination.total_pages
