"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/__init__.py.
"""

from .base import DEFAULT_CACHE_TTL_S, CacheEntry, RequestCacheBackend, cache_key
from .inmemory import InMemoryRequestCache

__all__ = [
    "DEFAULT_CACHE_TTL_S",
    "CacheEntry",
    "RequestCacheBackend",
    "InMemoryRequestCache",
    "cache_key",
]
