"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/inmemory.py.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from threading import Lock

from .base import DEFAULT_CACHE_TTL_S, CacheEntry, RequestCacheBackend

logger = logging.getLogger("lessongen.cache")


class InMemoryRequestCache(RequestCacheBackend):
    """
    Process-local TTL cache with lazy eviction.

    Entries are never mutated; a stale entry is dropped by the `get` that
    observes it. There is no size bound and no background sweep.
    """

    def __init__(
        self,
        ttl_s: float = DEFAULT_CACHE_TTL_S,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_s < 0:
            raise ValueError("ttl_s must be >= 0")
        self.ttl_s = float(ttl_s)
        self._clock = clock
        self._rows: dict[str, CacheEntry] = {}
        self._lock = Lock()

    async def get(self, key: str) -> str | None:
        with self._lock:
            row = self._rows.get(key)
            if row is None:
                return None
            if not row.is_fresh(self._clock(), self.ttl_s):
                self._rows.pop(key, None)
                logger.debug("Evicted stale cache entry %s", key)
                return None
            return row.value

    async def set(self, key: str, value: str) -> None:
        with self._lock:
            self._rows[key] = CacheEntry(value=value, created_at_s=self._clock())

    async def delete(self, key: str) -> None:
        with self._lock:
            self._rows.pop(key, None)

    async def clear(self) -> None:
        with self._lock:
            self._rows.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)
