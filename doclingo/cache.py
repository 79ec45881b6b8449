"""
In-memory translation cache.

Keyed by (source language, target language, text). Nothing is persisted:
the cache lives as long as the object that owns it. By default it is
unbounded and entries never expire; ``max_size`` turns it into an LRU and
``ttl_seconds`` adds expiry.
"""

from __future__ import annotations

import time
from collections import OrderedDict
from typing import Callable, NamedTuple


class CacheKey(NamedTuple):
    """Structured cache key. Tuples compare field by field, so no delimiter can collide."""

    source: str
    target: str
    text: str


class TranslationCache:
    """
    Memoization store for translations.

    Usage:
        cache = TranslationCache()
        cache.put(CacheKey("en", "hi", "Sunny"), "धूप")
        cache.get(CacheKey("en", "hi", "Sunny"))  # -> "धूप"
    """

    def __init__(
        self,
        max_size: int | None = None,
        ttl_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_size is not None and max_size <= 0:
            max_size = None
        if ttl_seconds is not None and ttl_seconds <= 0:
            ttl_seconds = None
        self.max_size = max_size
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: OrderedDict[CacheKey, tuple[str, float]] = OrderedDict()

    def get(self, key: CacheKey) -> str | None:
        """Get cached translation, or None on miss/expiry."""
        entry = self._entries.get(key)
        if entry is None:
            return None

        value, stored_at = entry
        if self.ttl_seconds is not None and self._clock() - stored_at > self.ttl_seconds:
            del self._entries[key]
            return None

        if self.max_size is not None:
            self._entries.move_to_end(key)
        return value

    def put(self, key: CacheKey, value: str) -> None:
        """Cache a translation. Re-putting a key overwrites it."""
        self._entries[key] = (value, self._clock())
        self._entries.move_to_end(key)

        if self.max_size is not None:
            while len(self._entries) > self.max_size:
                self._entries.popitem(last=False)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
