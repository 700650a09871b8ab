"""Session cache for the explore feed.

The cache is passed in explicitly; the adapters and the feed never read it
on their own. Entries older than `CACHE_MAX_AGE` are dropped on read so a
returning user gets fresh results.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from typing import Any, Callable, MutableMapping

import streamlit as st

CACHE_KEY = "art-explorer-feed"
CACHE_MAX_AGE = 10 * 60  # seconds


class SessionCache(ABC):
    """Key/value store that remembers when each value was written."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock

    @abstractmethod
    def _read(self, key: str) -> tuple[Any, float] | None:
        """Return (value, saved_at) or None."""

    @abstractmethod
    def _write(self, key: str, value: Any, saved_at: float) -> None:
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        pass

    def get(self, key: str) -> tuple[Any, float] | None:
        """Return (value, age in seconds), or None if nothing is stored."""
        entry = self._read(key)
        if entry is None:
            return None
        value, saved_at = entry
        return value, self._clock() - saved_at

    def put(self, key: str, value: Any) -> None:
        self._write(key, value, self._clock())


class MemoryCache(SessionCache):
    """Process-local cache, mostly for tests and scripts."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        super().__init__(clock)
        self._entries: dict[str, tuple[Any, float]] = {}

    def _read(self, key: str) -> tuple[Any, float] | None:
        return self._entries.get(key)

    def _write(self, key: str, value: Any, saved_at: float) -> None:
        self._entries[key] = (value, saved_at)

    def delete(self, key: str) -> None:
        self._entries.pop(key, None)


class StreamlitSessionCache(SessionCache):
    """Cache backed by Streamlit session state (or any mutable mapping)."""

    def __init__(
        self,
        state: MutableMapping[str, Any] | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        super().__init__(clock)
        self._state = state if state is not None else st.session_state

    def _read(self, key: str) -> tuple[Any, float] | None:
        entry = self._state.get(key)
        if not entry:
            return None
        return entry["value"], entry["saved_at"]

    def _write(self, key: str, value: Any, saved_at: float) -> None:
        self._state[key] = {"value": value, "saved_at": saved_at}

    def delete(self, key: str) -> None:
        if key in self._state:
            del self._state[key]


def load_fresh(cache: SessionCache, key: str = CACHE_KEY, max_age: float = CACHE_MAX_AGE) -> Any:
    """Return the cached value if it is fresh enough, discarding stale ones."""
    entry = cache.get(key)
    if entry is None:
        return None

    value, age = entry
    if age > max_age:
        cache.delete(key)
        return None
    return value
