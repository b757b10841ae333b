"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Typed runtime policies for content generation.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..cache.base import DEFAULT_CACHE_TTL_S

RETRYABLE_STATUSES: frozenset[int] = frozenset({408, 429, 500, 502, 503, 504})


@dataclass(frozen=True, slots=True)
class RetryPolicy:
    """Bounded exponential backoff for one remote call."""

    max_attempts: int = 5
    base_delay_s: float = 2.0
    multiplier: float = 2.0
    max_delay_s: float = 20.0
    retryable_statuses: frozenset[int] = RETRYABLE_STATUSES

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if self.base_delay_s < 0 or self.max_delay_s < 0:
            raise ValueError("delays must be >= 0")
        if self.multiplier < 1:
            raise ValueError("multiplier must be >= 1")

    def delay_for(self, retry_index: int) -> float:
        """Delay before retry number `retry_index` (0 is the first retry)."""
        return min(self.base_delay_s * (self.multiplier**retry_index), self.max_delay_s)

    def is_retryable_status(self, status: int | None) -> bool:
        return status is not None and status in self.retryable_statuses


@dataclass(frozen=True, slots=True)
class CachePolicy:
    """Response cache controls."""

    ttl_s: float = DEFAULT_CACHE_TTL_S


@dataclass(frozen=True, slots=True)
class CoalescingPolicy:
    """In-flight request deduplication controls."""

    enabled: bool = False
