"""
In-memory response cache for the NBA Scores API proxy.

Design Pattern: Cache-Aside (the resolver reads, misses, fetches and sets)
Algorithm: Dictionary-based cache with timestamp expiration checked on read
Big O: O(1) for get/set operations

Entries live for the lifetime of the process; nothing is written to disk and
there is no background sweep. Expired entries are dropped when read.
"""

import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .logging_config import get_logger

logger = get_logger(__name__)

CACHE_CATEGORIES = ("scoreboard", "boxscore")


def cache_key(category: str, identifier: str) -> str:
    """Build a cache key such as 'scoreboard_today' or 'boxscore_0022300001'."""
    if category not in CACHE_CATEGORIES:
        raise ValueError(f"Unknown cache category: {category!r}")
    return f"{category}_{identifier}"


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    stored_at: float
    ttl: float

    def is_valid(self, now: float) -> bool:
        return now - self.stored_at < self.ttl


class SimpleCache:
    """
    Simple thread-safe in-memory cache with per-entry TTL (seconds).

    FastAPI runs sync endpoints in a thread pool, so every access to the entry
    map happens under a lock. Concurrent misses for the same key are not
    coalesced.
    """

    def __init__(
        self,
        default_ttl_seconds: float = 300,
        enabled: bool = True,
        clock: Callable[[], float] = time.time,
    ):
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._clock = clock
        self.default_ttl = default_ttl_seconds
        self.enabled = enabled
        if not enabled:
            logger.warning("[CACHE] Caching is disabled")

    def get(self, key: str) -> Optional[Any]:
        """
        Get value from cache if not expired.

        An expired entry is removed before returning None.
        """
        if not self.enabled:
            return None

        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                logger.debug(f"[CACHE] MISS: {key}")
                return None

            now = self._clock()
            age = now - entry.stored_at
            if not entry.is_valid(now):
                del self._entries[key]
                logger.debug(f"[CACHE] EXPIRED: {key} (age: {age:.1f}s, ttl: {entry.ttl}s)")
                return None

            logger.debug(f"[CACHE] HIT: {key} (age: {age:.1f}s, ttl: {entry.ttl}s)")
            return entry.value

    def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        """Store value with the current timestamp, replacing any existing entry."""
        if not self.enabled:
            return

        actual_ttl = ttl if ttl is not None else self.default_ttl
        with self._lock:
            self._entries[key] = CacheEntry(value=value, stored_at=self._clock(), ttl=actual_ttl)
        logger.debug(f"[CACHE] SET: {key} (ttl: {actual_ttl}s)")

    def clear(self) -> None:
        """Drop all cached entries."""
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        # Raw presence check; does not look at expiry
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
