# core/cache.py

"""
Time-boxed in-memory caches for the permission engine.

Each TimedCache holds one payload plus the time it was fetched. A payload is
fresh for `ttl_seconds`; the first access after that reloads it inline on the
calling request. There is no cross-process invalidation: every instance
keeps its own copy until its window expires or it is invalidated locally.
"""

import time
from threading import Lock
from typing import Callable, Generic, Optional, TypeVar

from core.logging_config import logger


T = TypeVar("T")


class CacheEntry(Generic[T]):
    """Represents a cached payload and when it was fetched."""

    def __init__(self, value: T, fetched_at: float):
        self.value = value
        self.fetched_at = fetched_at

    def is_fresh(self, now: float, ttl_seconds: float) -> bool:
        """Check if the entry is still inside its freshness window."""
        return now - self.fetched_at < ttl_seconds


class TimedCache(Generic[T]):
    """
    Single-slot cache with a freshness window.

    The lock only guards the slot itself. Loaders run outside it, so
    concurrent requests that observe a stale entry may each reload; the
    last writer wins and all converge on the same stored value.

    Every invalidate() bumps a generation counter. A reload that started
    before the bump is not stored, so a payload read before an admin write
    can never outlive that write's invalidation.
    """

    def __init__(
        self,
        name: str,
        ttl_seconds: float = 300,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.name = name
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entry: Optional[CacheEntry[T]] = None
        self._generation = 0
        self._lock = Lock()

    def get(self) -> Optional[CacheEntry[T]]:
        """
        Get the cached entry.

        Returns:
            The entry if present and fresh, otherwise None
        """
        with self._lock:
            entry = self._entry
        if entry is None or not entry.is_fresh(self._clock(), self.ttl_seconds):
            return None
        return entry

    def set(self, value: T):
        """Store a payload stamped with the current time."""
        with self._lock:
            self._entry = CacheEntry(value, self._clock())

    def invalidate(self):
        """Drop the payload; the next access reloads."""
        with self._lock:
            self._entry = None
            self._generation += 1
        logger.debug(f"Cache invalidated: {self.name}")

    def get_or_reload(self, loader: Callable[[], T]) -> T:
        """
        Return the fresh payload, or call `loader` and cache its result.

        Exceptions raised by the loader propagate and leave the cache
        untouched, so the next access retries. A result whose load overlapped
        an invalidate() is returned but not stored.
        """
        entry = self.get()
        if entry is not None:
            logger.debug(f"Cache hit: {self.name}")
            return entry.value

        with self._lock:
            generation = self._generation

        value = loader()

        with self._lock:
            if generation != self._generation:
                logger.debug(f"Cache invalidated during reload, not stored: {self.name}")
                return value
            self._entry = CacheEntry(value, self._clock())
        logger.debug(f"Cache miss, reloaded: {self.name}")
        return value

