"""Museum adapter registry and utilities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .base import MuseumAdapter

# Registry of available adapters
_ADAPTERS: dict[str, type[MuseumAdapter]] = {}


def register(cls: type["MuseumAdapter"]) -> type["MuseumAdapter"]:
    """Decorator to register an adapter class."""
    _ADAPTERS[cls.short_name] = cls
    return cls


def get_adapter(short_name: str, **kwargs: Any) -> "MuseumAdapter":
    """Get an adapter instance by short name (e.g., 'AIC')."""
    if short_name not in _ADAPTERS:
        available = ", ".join(_ADAPTERS.keys()) or "none"
        raise ValueError(f"Unknown adapter: {short_name}. Available: {available}")
    return _ADAPTERS[short_name](**kwargs)


# Import adapters to trigger registration
# These imports must come after the registry is defined
from . import aic  # noqa: E402, F401
from .base import FetchError, NoArtworkAvailableError  # noqa: E402, F401
