"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: runtime/__init__.py.
"""

from .coalescing import RequestCoalescer
from .contracts import RETRYABLE_STATUSES, CachePolicy, CoalescingPolicy, RetryPolicy
from .fetcher import ResilientFetcher
from .retry import as_remote_error, call_with_retry, is_retryable

__all__ = [
    "RETRYABLE_STATUSES",
    "CachePolicy",
    "CoalescingPolicy",
    "RetryPolicy",
    "RequestCoalescer",
    "ResilientFetcher",
    "as_remote_error",
    "call_with_retry",
    "is_retryable",
]
