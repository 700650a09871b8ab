"""Abstract base class for museum adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

import requests

from ..models import Artwork, Filters, PaginatedResult


class FetchError(RuntimeError):
    """Raised when a museum API request fails.

    The message is safe to show to users; `status_code` is set for
    non-2xx responses.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NoArtworkAvailableError(FetchError):
    """Raised when a random artwork could not be found by any strategy."""


class MuseumAdapter(ABC):
    """
    Abstract base class for museum API adapters.

    Subclasses implement museum-specific queries and parsing while this base
    class owns the HTTP session, error translation and logging.
    """

    # Subclasses must define these
    name: str = "Unknown Museum"  # Full display name
    short_name: str = "UNK"  # Short identifier (e.g., "AIC")
    base_url: str = ""

    # Timeouts (can be overridden)
    fetch_timeout: int = 30

    # Logging callback - set by app to integrate with UI logging
    _log_callback: Callable[[str, str], None] | None = None

    def __init__(
        self,
        http_session: requests.Session | None = None,
        ssl_bypass: bool = False,
    ) -> None:
        self.http_session = http_session or requests.Session()
        self.ssl_bypass = ssl_bypass

    def set_logger(self, callback: Callable[[str, str], None]) -> None:
        """Set logging callback. Signature: callback(level, message)."""
        self._log_callback = callback

    def _log(self, level: str, message: str) -> None:
        """Log a message if callback is set."""
        if self._log_callback:
            self._log_callback(level, f"[{self.short_name}] {message}")

    def _log_info(self, message: str) -> None:
        self._log("INFO", message)

    def _log_warning(self, message: str) -> None:
        self._log("WARN", message)

    def _log_error(self, message: str) -> None:
        self._log("ERROR", message)

    def _request_json(self, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        """
        Send one request and return the decoded JSON object.

        Every failure (transport, HTTP status, bad payload) is raised as a
        FetchError with a user-friendly message. No retries.
        """
        try:
            response = self.http_session.request(
                method,
                url,
                timeout=self.fetch_timeout,
                verify=not self.ssl_bypass,
                **kwargs,
            )
            response.raise_for_status()
            data = response.json()

        except requests.Timeout:
            self._log_error(f"Timeout after {self.fetch_timeout}s")
            raise FetchError(f"{self.name} took too long to respond. Try again.")

        except requests.ConnectionError:
            self._log_error("Connection failed")
            raise FetchError(
                f"Could not connect to {self.name}. Check your internet connection."
            )

        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            self._log_error(f"HTTP error: {status or 'unknown'}")
            raise FetchError(
                f"{self.name} returned an error (status {status or 'unknown'}). "
                "Try again later.",
                status_code=status,
            )

        except requests.RequestException as e:
            self._log_error(f"Request error: {e}")
            raise FetchError(f"Error communicating with {self.name}. Try again.")

        except ValueError as e:
            # Body was not JSON
            self._log_error(f"Invalid JSON: {e}")
            raise FetchError(f"{self.name} sent a response we could not read.")

        if not isinstance(data, dict):
            self._log_error(f"Unexpected payload type: {type(data).__name__}")
            raise FetchError(f"{self.name} sent a response we could not read.")

        return data

    @abstractmethod
    def fetch_artworks(self, filters: Filters | None = None) -> PaginatedResult[Artwork]:
        """
        Fetch one page of artworks matching the filters.

        Raises:
            FetchError: the request failed; no partial page is returned.
        """

    @abstractmethod
    def fetch_random_artwork(self) -> Artwork:
        """
        Fetch a single artwork suitable for the guessing game.

        Raises:
            NoArtworkAvailableError: every strategy came back empty.
        """
