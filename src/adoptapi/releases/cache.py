"""
Release List Cache

In-memory cache of upstream release lists with expiry. Expired entries are
kept so that a provider can fall back to them when a refresh fails.
"""

import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Hashable, List, Optional

from adoptapi.constants import RELEASES_CACHE_EXPIRY_SECONDS

from .interfaces import UpstreamRelease


@dataclass(frozen=True)
class _CacheEntry:
    releases: List[UpstreamRelease]
    cached_at: float


class ReleaseCache:
    """
    Thread-safe mapping of cache key -> release list with an expiry.

    Parameters:
        expiry_seconds (float): Age after which an entry is no longer fresh.
        clock (Callable[[], float]): Monotonic time source, injectable for tests.
    """

    def __init__(
        self,
        expiry_seconds: float = RELEASES_CACHE_EXPIRY_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.expiry_seconds = expiry_seconds
        self._clock = clock
        self._entries: Dict[Hashable, _CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> Optional[List[UpstreamRelease]]:
        """Return the cached releases for `key` if present and not expired."""
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.cached_at > self.expiry_seconds:
            return None
        return list(entry.releases)

    def get_stale(self, key: Hashable) -> Optional[List[UpstreamRelease]]:
        """Return the cached releases for `key` regardless of age."""
        with self._lock:
            entry = self._entries.get(key)
        return list(entry.releases) if entry is not None else None

    def put(self, key: Hashable, releases: List[UpstreamRelease]) -> None:
        with self._lock:
            self._entries[key] = _CacheEntry(list(releases), self._clock())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
