"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/base.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ..types import RequestKind

DEFAULT_CACHE_TTL_S = 24 * 3600.0


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """One cached generation result with its creation timestamp."""
    value: str
    created_at_s: float

    def is_fresh(self, now_s: float, ttl_s: float) -> bool:
        return now_s - self.created_at_s <= ttl_s


class RequestCacheBackend(Protocol):
    """Protocol implemented by caches used by the content orchestrator."""
    ttl_s: float

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...

    async def delete(self, key: str) -> None: ...

    async def clear(self) -> None: ...


def cache_key(topic: str, kind: RequestKind | str) -> str:
    """Build the `topic::kind` key exactly as given; no normalization."""
    return f"{topic}::{RequestKind(kind).value}"
